#!/usr/bin/env python3
"""
Recommender Models - Typed data structures shared by the scorers.

Rows coming out of the store are converted into these dataclasses at the
storage boundary, so the scorers never see ORM objects or loose dicts.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict, FrozenSet, Iterable, List, Optional


class OrderStatus(str, Enum):
    PENDING = "pending"
    ASSIGNED = "assigned"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


def as_tag_set(values: Optional[Iterable[Any]]) -> FrozenSet[str]:
    """Normalize a nullable list of tags/languages into a frozenset of strings."""
    if not values:
        return frozenset()
    if isinstance(values, str):
        return frozenset([values])
    return frozenset(str(v) for v in values if v is not None)


# Assignment row created when a customer asks a translator directly; it is
# left in place when a different translator accepts the job
REQUESTED_ASSIGNMENT_STATUS = "requested"


@dataclass(frozen=True)
class Assignment:
    """Link between one order and one translator."""
    order_id: str
    translator_id: Optional[str]
    assigned_at: Optional[datetime] = None
    status: Optional[str] = None

    @property
    def is_requested(self) -> bool:
        return self.status == REQUESTED_ASSIGNMENT_STATUS


@dataclass(frozen=True)
class Order:
    """A translation request."""
    id: str
    customer_id: str
    source_language: str
    target_language: str
    tags: FrozenSet[str] = frozenset()
    complexity_score: Optional[float] = None
    status: OrderStatus = OrderStatus.PENDING
    assignments: List[Assignment] = field(default_factory=list, compare=False, hash=False)

    def __post_init__(self):
        # Accept any iterable / raw status string from callers
        object.__setattr__(self, 'tags', as_tag_set(self.tags))
        object.__setattr__(self, 'status', OrderStatus(self.status))

    @property
    def is_completed(self) -> bool:
        return self.status == OrderStatus.COMPLETED


@dataclass(frozen=True)
class TranslatorProfile:
    """A candidate translator. Read-only to the recommender."""
    id: str
    languages: FrozenSet[str] = frozenset()
    expertise: FrozenSet[str] = frozenset()
    custom_tags: FrozenSet[str] = frozenset()
    rating: float = 0.0  # stored scale, 0-100 by default
    availability: bool = True
    full_name: Optional[str] = None
    total_orders: Optional[int] = None
    completed_orders: Optional[int] = None

    def __post_init__(self):
        object.__setattr__(self, 'languages', as_tag_set(self.languages))
        object.__setattr__(self, 'expertise', as_tag_set(self.expertise))
        object.__setattr__(self, 'custom_tags', as_tag_set(self.custom_tags))
        object.__setattr__(self, 'rating', float(self.rating or 0.0))
        # Only an explicit False marks a translator unavailable
        object.__setattr__(self, 'availability', self.availability is not False)

    @property
    def all_tags(self) -> FrozenSet[str]:
        return self.expertise | self.custom_tags

    def speaks(self, source_language: str, target_language: str) -> bool:
        return source_language in self.languages and target_language in self.languages


@dataclass
class ScoreRecord:
    """Ephemeral per-translator scores for one recommendation request."""
    translator_id: str
    content_score: float = 0.0
    collaborative_score: float = 0.0
    hybrid_score: float = 0.0


@dataclass
class RankedTranslator:
    """One entry of the ranked list returned to callers."""
    translator: TranslatorProfile
    content_score: float
    collaborative_score: float
    hybrid_score: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            'translator_id': self.translator.id,
            'full_name': self.translator.full_name,
            'languages': sorted(self.translator.languages),
            'expertise': sorted(self.translator.expertise),
            'custom_tags': sorted(self.translator.custom_tags),
            'rating': self.translator.rating,
            'availability': self.translator.availability,
            'content_score': self.content_score,
            'collaborative_score': self.collaborative_score,
            'hybrid_score': self.hybrid_score,
        }


@dataclass
class ContentBreakdown:
    """Additive terms behind one content score."""
    language_match: float = 0.0
    tag_match: float = 0.0
    rating_factor: float = 0.0
    availability_multiplier: float = 1.0
    matching_tags: List[str] = field(default_factory=list)

    @property
    def total(self) -> float:
        return (self.language_match + self.tag_match + self.rating_factor) * self.availability_multiplier


@dataclass
class CollaborativeEvidence:
    """Aggregated completion counts for one language pair."""
    frequencies: Dict[str, int] = field(default_factory=dict)
    total_assignments: int = 0
    skipped_assignments: int = 0
    matching_orders: int = 0
    orders_without_assignments: int = 0
    # None until the customer's history has been looked up
    customer_order_count: Optional[int] = None

    @property
    def first_time_customer(self) -> Optional[bool]:
        if self.customer_order_count is None:
            return None
        return self.customer_order_count == 0

    @property
    def has_data(self) -> bool:
        return self.total_assignments > 0


@dataclass
class RecommendationReport:
    """Ranked list plus the diagnostics behind it."""
    order_id: str
    ranked: List[RankedTranslator]
    content_breakdown: Dict[str, ContentBreakdown]
    evidence: CollaborativeEvidence
    quality: Dict[str, Any]
