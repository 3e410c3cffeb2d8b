#!/usr/bin/env python3
"""
Request models for API endpoints.
"""

from typing import Optional
from pydantic import BaseModel, Field


class RecommendationRequest(BaseModel):
    """Body of POST /api/recommendations."""
    order_id: str = Field(min_length=1)
    customer_id: str = Field(min_length=1)
    top_k: Optional[int] = Field(default=None, ge=1, le=500, description="Truncate the ranked list")
