#!/usr/bin/env python3
"""
FastAPI dependencies for dependency injection.
"""

from typing import Generator
from sqlalchemy.orm import Session, sessionmaker

from core.config_loader import RecommenderConfig
from database.repository import MarketplaceRepository
from database.database import create_db_engine
from .config import get_config


class DatabaseManager:
    """Manages database connections and sessions."""

    def __init__(self):
        config = get_config()
        self.engine = create_db_engine(
            config.database.url,
            statement_timeout_ms=config.database.statement_timeout_ms,
            pool_size=10,
            max_overflow=20
        )
        self.SessionLocal = sessionmaker(
            autocommit=False,
            autoflush=False,
            bind=self.engine
        )

    def get_session(self) -> Generator[Session, None, None]:
        """
        Get a database session.

        Yields:
            Session: SQLAlchemy database session.
        """
        session = self.SessionLocal()
        try:
            yield session
        finally:
            session.close()


# Global database manager instance
_db_manager = DatabaseManager()


def get_repository() -> Generator[MarketplaceRepository, None, None]:
    """FastAPI dependency that yields a read-only marketplace repository."""
    for session in _db_manager.get_session():
        yield MarketplaceRepository(session)


def get_recommender_config() -> RecommenderConfig:
    return get_config().recommender
