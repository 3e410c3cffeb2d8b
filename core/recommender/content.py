#!/usr/bin/env python3
"""
Content Scoring - Compatibility of one translator with one order.

Uses only the translator's own profile and the order's stated requirements:

    score = language_match                       (0.5, hard prerequisite)
          + tag_match * |matching| / |order.tags| (0.3)
          + rating * (rating_0_5 / 5)             (0.2)
    score *= unavailable_multiplier               (0.5, only if unavailable)
"""

from typing import Dict, Iterable
import logging

from core.config_loader import ContentWeights
from core.recommender.models import ContentBreakdown, Order, TranslatorProfile

logger = logging.getLogger(__name__)

MAX_RATING = 5.0


def normalize_rating(rating: float, rating_scale_max: float) -> float:
    """Convert a stored rating to the 0-5 scoring scale, clamped to [0, 5]."""
    if rating_scale_max <= 0:
        return 0.0
    normalized = float(rating) * MAX_RATING / rating_scale_max
    return max(0.0, min(MAX_RATING, normalized))


def calculate_content_breakdown(
    order: Order,
    translator: TranslatorProfile,
    weights: ContentWeights
) -> ContentBreakdown:
    """
    Break the content score into its additive terms.

    A translator missing either language of the pair gets an all-zero
    breakdown; no other attribute can compensate for it.
    """
    breakdown = ContentBreakdown()

    if not translator.speaks(order.source_language, order.target_language):
        return breakdown

    breakdown.language_match = weights.language_match

    if order.tags:
        matching = order.tags & translator.all_tags
        breakdown.matching_tags = sorted(matching)
        breakdown.tag_match = weights.tag_match * (len(matching) / len(order.tags))

    rating = normalize_rating(translator.rating, weights.rating_scale_max)
    breakdown.rating_factor = weights.rating * (rating / MAX_RATING)

    if not translator.availability:
        breakdown.availability_multiplier = weights.unavailable_multiplier

    return breakdown


def calculate_content_score(
    order: Order,
    translator: TranslatorProfile,
    weights: ContentWeights
) -> float:
    return calculate_content_breakdown(order, translator, weights).total


def score_candidates(
    order: Order,
    translators: Iterable[TranslatorProfile],
    weights: ContentWeights
) -> Dict[str, ContentBreakdown]:
    """
    Score every candidate against the order.

    Returns: translator_id -> ContentBreakdown
    """
    breakdowns = {
        t.id: calculate_content_breakdown(order, t, weights)
        for t in translators
    }

    mismatched = sum(1 for b in breakdowns.values() if b.language_match == 0)
    if mismatched:
        logger.debug(f"Order {order.id}: {mismatched} candidate(s) lack the language pair")

    logger.info(f"Content scoring complete for order {order.id}: {len(breakdowns)} candidates")
    return breakdowns
