#!/usr/bin/env python3
"""
Recommender Module - Hybrid translator recommendation.

Public API:
- RecommendationEngine: Orchestrates catalog read, scoring and ranking
- RankedTranslator: One scored entry of the ranked list

Modules:
- models.py: Order, TranslatorProfile, Assignment and score containers
- content.py: Content-based compatibility (languages, tags, rating, availability)
- collaborative.py: Relative completion frequency for the language pair
- hybrid.py: Weighted merge, ranking and quality summary
- fallback.py: Language-filtered ranking for callers when recommendation fails
- service.py: RecommendationEngine orchestrator
"""

from core.recommender.exceptions import RecommendationError, RecommendationTimeout, UpstreamReadError
from core.recommender.interfaces import RecommendationStore
from core.recommender.models import (
    Assignment, Order, OrderStatus, RankedTranslator, RecommendationReport, TranslatorProfile
)
from core.recommender.service import RecommendationEngine

__all__ = [
    'RecommendationEngine', 'RecommendationStore',
    'RecommendationError', 'RecommendationTimeout', 'UpstreamReadError',
    'Assignment', 'Order', 'OrderStatus', 'RankedTranslator',
    'RecommendationReport', 'TranslatorProfile',
]
