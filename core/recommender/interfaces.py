"""
Recommendation Store Interface - Read-only queries the engine depends on.

The SQLAlchemy implementation lives in database.repository; tests use an
in-memory implementation.
"""
from abc import ABC, abstractmethod
from typing import List

from core.recommender.models import Order, TranslatorProfile


class RecommendationStore(ABC):
    """
    Abstract read interface over translators and order history.

    Implementations must raise UpstreamReadError when the backing store
    cannot be read.
    """

    @abstractmethod
    def find_translators(self, source_language: str, target_language: str) -> List[TranslatorProfile]:
        """
        Return every translator whose languages contain both the source and target language.
        """
        pass

    @abstractmethod
    def find_customer_orders(self, customer_id: str) -> List[Order]:
        """
        Return all orders placed by the customer, regardless of status.
        """
        pass

    @abstractmethod
    def find_completed_orders(self, source_language: str, target_language: str) -> List[Order]:
        """
        Return completed orders for the exact language pair, with assignments embedded.
        """
        pass
