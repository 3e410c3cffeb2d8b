"""
Fallback ranking for callers when the hybrid recommender fails.

Language-pair filtering only, ordered by rating then translator id, with
every score reported as 0.
"""

from typing import Iterable, List
import logging

from core.recommender.models import Order, RankedTranslator, TranslatorProfile

logger = logging.getLogger(__name__)


def language_filtered_ranking(order: Order, translators: Iterable[TranslatorProfile]) -> List[RankedTranslator]:
    eligible = [t for t in translators if t.speaks(order.source_language, order.target_language)]
    eligible.sort(key=lambda t: (-t.rating, str(t.id)))

    logger.warning(f"Serving language-filtered fallback for order {order.id}: {len(eligible)} translators")

    return [
        RankedTranslator(translator=t, content_score=0.0, collaborative_score=0.0, hybrid_score=0.0)
        for t in eligible
    ]
