import logging
from typing import List, Optional, Any
from sqlalchemy import select
from sqlalchemy.orm import selectinload

from database.models import OrderRow, OrderAnalysisRow
from database.repositories.base import BaseRepository

logger = logging.getLogger(__name__)


class OrderRepository(BaseRepository):
    def get_by_id(self, order_id: Any) -> Optional[OrderRow]:
        stmt = select(OrderRow).where(OrderRow.id == order_id)
        return self.db.execute(stmt).scalar_one_or_none()

    def get_analysis(self, order_id: Any) -> Optional[OrderAnalysisRow]:
        stmt = select(OrderAnalysisRow).where(OrderAnalysisRow.order_id == order_id)
        return self.db.execute(stmt).scalar_one_or_none()

    def find_by_customer(self, customer_id: Any) -> List[OrderRow]:
        stmt = select(OrderRow).where(
            OrderRow.customer_id == customer_id
        ).order_by(OrderRow.created_at.desc())
        return self.db.execute(stmt).scalars().all()

    def find_completed_by_language_pair(
        self,
        source_language: str,
        target_language: str
    ) -> List[OrderRow]:
        # Assignments are loaded in one extra query instead of one per order
        stmt = (
            select(OrderRow)
            .options(selectinload(OrderRow.assignments))
            .where(
                OrderRow.status == 'completed',
                OrderRow.source_language == source_language,
                OrderRow.target_language == target_language
            )
            .order_by(OrderRow.id)
        )
        return self.db.execute(stmt).scalars().all()
