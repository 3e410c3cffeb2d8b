#!/usr/bin/env python3
"""
Collaborative Scoring - Historical success per translator for a language pair.

Mines every completed order with the same (source, target) pair, across all
customers, and credits one completion to the translator of each assignment:

    collaborative_score(t) = completions(t) / total_assignments

This is a population-level relative frequency, not a personalized signal.
The requesting customer's own history is only inspected for diagnostics.
"""

from collections import Counter
from typing import Dict, Iterable
import logging

from core.recommender.interfaces import RecommendationStore
from core.recommender.models import CollaborativeEvidence, Order

logger = logging.getLogger(__name__)


def aggregate_evidence(completed_orders: Iterable[Order]) -> CollaborativeEvidence:
    """
    Count completed assignments per translator.

    Orders that are not completed are ignored even if the store returned
    them; assignments without a translator, and requests the translator
    never accepted, are counted as skipped.
    """
    frequencies: Counter = Counter()
    evidence = CollaborativeEvidence()

    for order in completed_orders:
        if not order.is_completed:
            logger.warning(f"Ignoring non-completed order {order.id} (status={order.status.value}) in evidence set")
            continue

        evidence.matching_orders += 1

        if not order.assignments:
            evidence.orders_without_assignments += 1
            logger.warning(f"Data anomaly: completed order {order.id} has no assignments")
            continue

        for assignment in order.assignments:
            if assignment.translator_id and not assignment.is_requested:
                frequencies[assignment.translator_id] += 1
                evidence.total_assignments += 1
            else:
                evidence.skipped_assignments += 1

    evidence.frequencies = dict(frequencies)
    return evidence


def calculate_collaborative_scores(evidence: CollaborativeEvidence) -> Dict[str, float]:
    """
    Relative frequency of each translator among counted completions.

    Returns an empty dict when there is no evidence; absent translators
    score 0 implicitly.
    """
    if evidence.total_assignments == 0:
        return {}

    total = evidence.total_assignments
    return {
        translator_id: count / total
        for translator_id, count in evidence.frequencies.items()
    }


def collect_evidence(
    order: Order,
    customer_id: str,
    store: RecommendationStore
) -> CollaborativeEvidence:
    """
    Fetch history for the order's language pair and aggregate it.

    Store errors propagate; a partial evidence set would bias the ranking.
    """
    customer_orders = store.find_customer_orders(customer_id)
    if not customer_orders:
        logger.info(f"Customer {customer_id} has no order history; using population evidence only")

    completed = store.find_completed_orders(order.source_language, order.target_language)
    evidence = aggregate_evidence(completed)
    evidence.customer_order_count = len(customer_orders)

    if not evidence.has_data:
        logger.info(
            f"No completed assignments for {order.source_language} -> {order.target_language}; "
            f"collaborative scores default to 0"
        )
    else:
        logger.info(
            f"Collaborative evidence for {order.source_language} -> {order.target_language}: "
            f"orders={evidence.matching_orders}, assignments={evidence.total_assignments}, "
            f"skipped={evidence.skipped_assignments}, translators={len(evidence.frequencies)}"
        )

    return evidence
