#!/usr/bin/env python3
"""
Recommendation endpoints - ranked translators for an order.
"""

import logging
from fastapi import APIRouter, Depends, Query

from core.config_loader import RecommenderConfig
from database.repository import MarketplaceRepository
from ..dependencies import get_repository, get_recommender_config
from ..services.recommendation_service import RecommendationService
from ..models.requests import RecommendationRequest
from ..models.responses import RecommendationsResponse, RecommendationExplanationResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/recommendations", tags=["recommendations"])


@router.post("", response_model=RecommendationsResponse)
def get_recommendations(
    request: RecommendationRequest,
    repo: MarketplaceRepository = Depends(get_repository),
    config: RecommenderConfig = Depends(get_recommender_config)
):
    """
    Rank translators for an order.

    Combines content-based compatibility with historical completions for
    the order's language pair. If the recommender fails, a language-filtered
    list is returned with fallback=true.
    """
    service = RecommendationService(repo, config)
    return service.get_recommendations(
        order_id=request.order_id,
        customer_id=request.customer_id,
        top_k=request.top_k
    )


@router.get("/{order_id}/explain", response_model=RecommendationExplanationResponse)
def explain_recommendations(
    order_id: str,
    customer_id: str = Query(..., description="Customer who created the order"),
    repo: MarketplaceRepository = Depends(get_repository),
    config: RecommenderConfig = Depends(get_recommender_config)
):
    """
    Explain a ranking: content score terms per translator, collaborative
    evidence counts and overall quality metrics.
    """
    service = RecommendationService(repo, config)
    return service.explain(order_id, customer_id)
