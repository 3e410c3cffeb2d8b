import contextlib
from typing import Callable, Optional

from sqlalchemy.orm import Session

from database.database import SessionLocal
from database.repository import MarketplaceRepository


@contextlib.contextmanager
def recommendation_uow(session_factory: Optional[Callable[[], Session]] = None):
    """Per-request read scope.

    Yields a MarketplaceRepository bound to a fresh Session. Rolls back
    on exit since recommendation never writes, always closes.

    Usage:
        with recommendation_uow() as repo:
            order = repo.get_order(order_id)
            ranked = RecommendationEngine(repo, config).recommend(order, customer_id)
    """
    session = (session_factory or SessionLocal)()
    try:
        yield MarketplaceRepository(session)
    finally:
        session.rollback()
        session.close()
