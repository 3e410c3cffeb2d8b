#!/usr/bin/env python3
"""
Hybrid Ranking - Merge content and collaborative scores into one ordering.

hybrid_score = content_weight * content_score + collaborative_weight * collaborative_score

Ties on hybrid_score are broken by translator id ascending so repeated calls
over unchanged data return the same order.
"""

from typing import Any, Dict, List, Mapping, Sequence

from core.config_loader import HybridWeights
from core.recommender.models import RankedTranslator, ScoreRecord, TranslatorProfile

STRONG_THRESHOLD = 0.5
MODERATE_THRESHOLD = 0.3


def calculate_hybrid_score(
    content_score: float,
    collaborative_score: float,
    weights: HybridWeights
) -> float:
    return weights.content * content_score + weights.collaborative * collaborative_score


def build_score_records(
    candidates: Sequence[TranslatorProfile],
    content_scores: Mapping[str, float],
    collaborative_scores: Mapping[str, float],
    weights: HybridWeights
) -> List[ScoreRecord]:
    records = []
    for translator in candidates:
        content = content_scores.get(translator.id, 0.0)
        collaborative = collaborative_scores.get(translator.id, 0.0)
        records.append(ScoreRecord(
            translator_id=translator.id,
            content_score=content,
            collaborative_score=collaborative,
            hybrid_score=calculate_hybrid_score(content, collaborative, weights)
        ))
    return records


def rank_candidates(
    candidates: Sequence[TranslatorProfile],
    content_scores: Mapping[str, float],
    collaborative_scores: Mapping[str, float],
    weights: HybridWeights
) -> List[RankedTranslator]:
    """
    Rank every candidate by hybrid score, highest first.

    The full list is returned; truncation is left to callers.
    """
    by_id = {t.id: t for t in candidates}
    records = build_score_records(candidates, content_scores, collaborative_scores, weights)
    records.sort(key=lambda r: (-r.hybrid_score, str(r.translator_id)))

    return [
        RankedTranslator(
            translator=by_id[r.translator_id],
            content_score=r.content_score,
            collaborative_score=r.collaborative_score,
            hybrid_score=r.hybrid_score
        )
        for r in records
    ]


def summarize_quality(ranked: Sequence[RankedTranslator], has_collaborative_data: bool) -> Dict[str, Any]:
    """Summary metrics for a ranking, used for diagnostics and the API."""
    if not ranked:
        return {
            'has_collaborative_data': has_collaborative_data,
            'candidate_count': 0,
            'average_hybrid_score': 0.0,
            'top_score': 0.0,
            'score_spread': 0.0,
            'strength': 'Weak',
        }

    scores = [r.hybrid_score for r in ranked]
    top_score = scores[0]

    if top_score > STRONG_THRESHOLD:
        strength = 'Strong'
    elif top_score > MODERATE_THRESHOLD:
        strength = 'Moderate'
    else:
        strength = 'Weak'

    return {
        'has_collaborative_data': has_collaborative_data,
        'candidate_count': len(scores),
        'average_hybrid_score': sum(scores) / len(scores),
        'top_score': top_score,
        'score_spread': top_score - scores[-1],
        'strength': strength,
    }
