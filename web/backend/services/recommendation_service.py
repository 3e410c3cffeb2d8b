#!/usr/bin/env python3
"""
Recommendation service - order flow around the hybrid recommender.

Loads the order, runs the engine, and degrades to a language-filtered
list when the engine fails so the order can still proceed.
"""

import logging
from typing import List, Optional

from core.config_loader import RecommenderConfig
from core.recommender import Order, RankedTranslator, RecommendationEngine, RecommendationError
from core.recommender.fallback import language_filtered_ranking
from database.repository import MarketplaceRepository
from ..models.responses import (
    RecommendedTranslator,
    RecommendationsResponse,
    RecommendationExplanationResponse,
    ContentBreakdownResponse,
    CollaborativeEvidenceResponse,
    RecommendationQuality,
)
from ..exceptions import OrderNotFoundException

logger = logging.getLogger(__name__)


class RecommendationService:
    """Service for translator recommendations on an order."""

    def __init__(self, repo: MarketplaceRepository, config: RecommenderConfig):
        self.repo = repo
        self.config = config
        self.engine = RecommendationEngine(repo, config)

    def _load_order(self, order_id: str) -> Order:
        order = self.repo.get_order(order_id, default_complexity_score=self.config.default_complexity_score)
        if order is None:
            raise OrderNotFoundException(f"Order {order_id} not found")
        return order

    def _fallback(self, order: Order) -> List[RankedTranslator]:
        try:
            translators = self.repo.find_translators(order.source_language, order.target_language)
        except RecommendationError as e:
            logger.error(f"Fallback catalog read failed for order {order.id}: {e}")
            return []
        return language_filtered_ranking(order, translators)

    def get_recommendations(
        self,
        order_id: str,
        customer_id: str,
        top_k: Optional[int] = None
    ) -> RecommendationsResponse:
        """
        Rank translators for an order.

        Args:
            order_id: The order ID.
            customer_id: Customer requesting the recommendation.
            top_k: Optional truncation; defaults to config.top_k.

        Returns:
            Ranked translators, flagged as fallback if the recommender failed.

        Raises:
            OrderNotFoundException: If the order does not exist.
        """
        try:
            order = self._load_order(order_id)
        except RecommendationError as e:
            # Without the order there is no language pair to fall back on
            logger.error(f"Could not load order {order_id}: {e}")
            return RecommendationsResponse(
                order_id=order_id,
                recommendation_count=0,
                fallback=True,
                recommended_translators=[]
            )

        fallback = False
        try:
            ranked = self.engine.recommend(order, customer_id)
        except RecommendationError as e:
            logger.warning(f"Hybrid recommendation failed for order {order_id}, falling back: {e}")
            ranked = self._fallback(order)
            fallback = True

        limit = top_k if top_k is not None else self.config.top_k
        if limit is not None:
            ranked = ranked[:limit]

        return RecommendationsResponse(
            order_id=order_id,
            recommendation_count=len(ranked),
            fallback=fallback,
            recommended_translators=[self._to_recommended(r) for r in ranked]
        )

    def explain(self, order_id: str, customer_id: str) -> RecommendationExplanationResponse:
        """
        Ranking with per-translator breakdowns and evidence counts.

        Unlike get_recommendations, failures are not masked: this is a
        diagnostics endpoint.
        """
        order = self._load_order(order_id)
        report = self.engine.explain(order, customer_id)

        evidence = report.evidence
        return RecommendationExplanationResponse(
            order_id=order_id,
            recommended_translators=[self._to_recommended(r) for r in report.ranked],
            content_breakdown={
                tid: ContentBreakdownResponse(
                    language_match=b.language_match,
                    tag_match=b.tag_match,
                    rating_factor=b.rating_factor,
                    availability_multiplier=b.availability_multiplier,
                    matching_tags=b.matching_tags,
                    total=b.total
                )
                for tid, b in report.content_breakdown.items()
            },
            evidence=CollaborativeEvidenceResponse(
                frequencies=evidence.frequencies,
                total_assignments=evidence.total_assignments,
                skipped_assignments=evidence.skipped_assignments,
                matching_orders=evidence.matching_orders,
                orders_without_assignments=evidence.orders_without_assignments,
                customer_order_count=evidence.customer_order_count,
                first_time_customer=evidence.first_time_customer
            ),
            quality=RecommendationQuality(**report.quality)
        )

    @staticmethod
    def _to_recommended(ranked: RankedTranslator) -> RecommendedTranslator:
        return RecommendedTranslator(**ranked.to_dict())
