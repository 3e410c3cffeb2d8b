#!/usr/bin/env python3
"""
Response models for API endpoints.
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional, Dict


class RecommendedTranslator(BaseModel):
    """One ranked translator."""
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "translator_id": "6ba7b810-9dad-11d1-80b4-00c04fd430c8",
                "full_name": "Ana Ruiz",
                "languages": ["English", "Spanish"],
                "expertise": ["Legal"],
                "custom_tags": [],
                "rating": 100.0,
                "availability": True,
                "content_score": 1.0,
                "collaborative_score": 0.667,
                "hybrid_score": 0.867
            }
        }
    )

    translator_id: str
    full_name: Optional[str] = None
    languages: List[str] = Field(default_factory=list)
    expertise: List[str] = Field(default_factory=list)
    custom_tags: List[str] = Field(default_factory=list)
    rating: float = Field(ge=0)
    availability: bool = True

    content_score: float = Field(ge=0)
    collaborative_score: float = Field(ge=0, le=1)
    hybrid_score: float = Field(ge=0)


class RecommendationsResponse(BaseModel):
    """Ranked translators for an order."""
    success: bool = True
    order_id: str
    recommendation_count: int
    fallback: bool = False
    recommended_translators: List[RecommendedTranslator]


class ContentBreakdownResponse(BaseModel):
    language_match: float
    tag_match: float
    rating_factor: float
    availability_multiplier: float
    matching_tags: List[str] = Field(default_factory=list)
    total: float


class CollaborativeEvidenceResponse(BaseModel):
    frequencies: Dict[str, int] = Field(default_factory=dict)
    total_assignments: int = 0
    skipped_assignments: int = 0
    matching_orders: int = 0
    orders_without_assignments: int = 0
    customer_order_count: Optional[int] = None
    first_time_customer: Optional[bool] = None


class RecommendationQuality(BaseModel):
    has_collaborative_data: bool
    candidate_count: int
    average_hybrid_score: float
    top_score: float
    score_spread: float
    strength: str


class RecommendationExplanationResponse(BaseModel):
    """Ranking plus the diagnostics behind it."""
    success: bool = True
    order_id: str
    recommended_translators: List[RecommendedTranslator]
    content_breakdown: Dict[str, ContentBreakdownResponse]
    evidence: CollaborativeEvidenceResponse
    quality: RecommendationQuality
