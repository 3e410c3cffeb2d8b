import logging
from typing import List, Optional, Any, Callable, TypeVar

from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError

from core.recommender.exceptions import UpstreamReadError
from core.recommender.interfaces import RecommendationStore
from core.recommender.models import Assignment, Order, TranslatorProfile
from database.models import OrderRow, OrderAssignmentRow, TranslatorProfileRow
from database.repositories import OrderRepository, TranslatorRepository

logger = logging.getLogger(__name__)

T = TypeVar('T')


def _to_float(value: Any) -> Optional[float]:
    if value is None:
        return None
    return float(value)


def translator_from_row(row: TranslatorProfileRow) -> TranslatorProfile:
    return TranslatorProfile(
        id=str(row.id),
        languages=row.languages,
        expertise=row.expertise,
        custom_tags=row.custom_tags,
        rating=_to_float(row.rating) or 0.0,
        availability=row.availability,
        full_name=row.full_name,
        total_orders=row.total_orders,
        completed_orders=row.completed_orders,
    )


def assignment_from_row(row: OrderAssignmentRow) -> Assignment:
    return Assignment(
        order_id=str(row.order_id),
        translator_id=str(row.translator_id) if row.translator_id else None,
        assigned_at=row.assigned_at,
        status=row.status,
    )


def order_from_row(
    row: OrderRow,
    include_assignments: bool = False,
    complexity_score: Optional[float] = None
) -> Order:
    assignments = []
    if include_assignments:
        assignments = [assignment_from_row(a) for a in (row.assignments or [])]

    return Order(
        id=str(row.id),
        customer_id=str(row.customer_id),
        source_language=row.source_language,
        target_language=row.target_language,
        tags=row.tags,
        complexity_score=complexity_score,
        status=row.status,
        assignments=assignments,
    )


class MarketplaceRepository(RecommendationStore):
    """
    SQLAlchemy-backed store for the recommender.

    Converts ORM rows to typed DTOs at the boundary and reports any
    database or row-validation failure as UpstreamReadError.
    """

    def __init__(self, db: Session):
        self.db = db
        self.translators = TranslatorRepository(db)
        self.orders = OrderRepository(db)

    def _read(self, operation: str, fn: Callable[[], T]) -> T:
        try:
            return fn()
        except (SQLAlchemyError, ValueError) as e:
            logger.error(f"Store read {operation} failed: {e}")
            # A failed statement aborts the transaction; later reads on this
            # session (e.g. the caller's fallback) need a fresh one
            try:
                self.db.rollback()
            except SQLAlchemyError as rollback_error:
                logger.error(f"Rollback after {operation} failed: {rollback_error}")
            raise UpstreamReadError(operation, e) from e

    def find_translators(self, source_language: str, target_language: str) -> List[TranslatorProfile]:
        return self._read('find_translators', lambda: [
            translator_from_row(row)
            for row in self.translators.find_by_language_pair(source_language, target_language)
        ])

    def find_customer_orders(self, customer_id: str) -> List[Order]:
        return self._read('find_customer_orders', lambda: [
            order_from_row(row)
            for row in self.orders.find_by_customer(customer_id)
        ])

    def find_completed_orders(self, source_language: str, target_language: str) -> List[Order]:
        return self._read('find_completed_orders', lambda: [
            order_from_row(row, include_assignments=True)
            for row in self.orders.find_completed_by_language_pair(source_language, target_language)
        ])

    def get_order(self, order_id: Any, default_complexity_score: Optional[float] = None) -> Optional[Order]:
        """
        Load one order with its analysis complexity merged in.

        Falls back to default_complexity_score when no analysis exists.
        """
        def load():
            row = self.orders.get_by_id(order_id)
            if row is None:
                return None
            analysis = self.orders.get_analysis(row.id)
            complexity = _to_float(analysis.complexity_score) if analysis else None
            if complexity is None:
                complexity = default_complexity_score
            return order_from_row(row, complexity_score=complexity)

        return self._read('get_order', load)
