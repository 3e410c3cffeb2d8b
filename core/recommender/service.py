#!/usr/bin/env python3
"""
Recommendation Service - Hybrid translator recommendation for one order.

Pipeline per request:
1. Catalog: translators speaking both languages of the order's pair
2. Content scoring and collaborative scoring, run concurrently
3. Hybrid ranking once both are done

Each request is stateless; no state is shared between calls. Any failed
store read aborts the request with UpstreamReadError rather than ranking
on a partial candidate pool or partial history.
"""

from concurrent.futures import ThreadPoolExecutor, wait, FIRST_EXCEPTION
from typing import Callable, List, Optional, Tuple, TypeVar
import logging
import time

from core.config_loader import RecommenderConfig
from core.recommender import collaborative, content, hybrid
from core.recommender.exceptions import RecommendationError, RecommendationTimeout, UpstreamReadError
from core.recommender.interfaces import RecommendationStore
from core.recommender.models import (
    CollaborativeEvidence, Order, RankedTranslator, RecommendationReport, TranslatorProfile
)

logger = logging.getLogger(__name__)

T = TypeVar('T')


def _read(operation: str, fn: Callable[[], T]) -> T:
    """Run a store read, normalizing any failure to UpstreamReadError."""
    try:
        return fn()
    except RecommendationError:
        raise
    except Exception as e:
        raise UpstreamReadError(operation, e) from e


class RecommendationEngine:
    """
    Hybrid recommender combining content-based and collaborative scores.

    The store is only touched by one thread at a time: the catalog read
    finishes before scoring starts, content scoring never reads the store,
    and the history read is joined before any call returns or raises, so a
    caller may reuse the store (e.g. for a fallback read) afterwards.
    """

    def __init__(
        self,
        store: RecommendationStore,
        config: Optional[RecommenderConfig] = None
    ):
        self.store = store
        self.config = config or RecommenderConfig()

    def recommend(self, order: Order, customer_id: str) -> List[RankedTranslator]:
        """
        Rank translator candidates for an order.

        Args:
            order: The order to staff
            customer_id: Customer who created the order

        Returns:
            Every candidate annotated with content, collaborative and hybrid
            scores, sorted by hybrid_score (highest first). Empty if no
            translator speaks the language pair.

        Raises:
            UpstreamReadError: If the store cannot be read
            RecommendationTimeout: If request_timeout_seconds is exceeded
        """
        return self.explain(order, customer_id).ranked

    def explain(self, order: Order, customer_id: str) -> RecommendationReport:
        """Rank candidates and return the diagnostics behind the ranking."""
        started = time.monotonic()
        deadline = None
        if self.config.request_timeout_seconds is not None:
            deadline = started + self.config.request_timeout_seconds

        candidates = self.fetch_candidates(order)

        if deadline is not None and time.monotonic() >= deadline:
            raise RecommendationTimeout(
                f"Catalog read for order {order.id} exceeded "
                f"{self.config.request_timeout_seconds}s"
            )

        if not candidates:
            logger.info(f"No translators found for {order.source_language} -> {order.target_language}")
            return RecommendationReport(
                order_id=order.id,
                ranked=[],
                content_breakdown={},
                evidence=CollaborativeEvidence(),
                quality=hybrid.summarize_quality([], has_collaborative_data=False)
            )

        breakdowns, evidence = self._score_concurrently(order, customer_id, candidates, deadline)

        content_scores = {tid: b.total for tid, b in breakdowns.items()}
        collaborative_scores = collaborative.calculate_collaborative_scores(evidence)

        ranked = hybrid.rank_candidates(
            candidates, content_scores, collaborative_scores, self.config.hybrid
        )
        quality = hybrid.summarize_quality(ranked, has_collaborative_data=evidence.has_data)

        elapsed = time.monotonic() - started
        logger.info(
            f"Ranked {len(ranked)} translators for order {order.id} in {elapsed:.3f}s "
            f"(top={quality['top_score']:.4f}, strength={quality['strength']}, "
            f"collaborative={'yes' if evidence.has_data else 'no'})"
        )

        return RecommendationReport(
            order_id=order.id,
            ranked=ranked,
            content_breakdown=breakdowns,
            evidence=evidence,
            quality=quality
        )

    def fetch_candidates(self, order: Order) -> List[TranslatorProfile]:
        candidates = _read(
            'find_translators',
            lambda: self.store.find_translators(order.source_language, order.target_language)
        )
        logger.info(
            f"Catalog returned {len(candidates)} translators for "
            f"{order.source_language} -> {order.target_language}"
        )
        return list(candidates)

    def _score_concurrently(
        self,
        order: Order,
        customer_id: str,
        candidates: List[TranslatorProfile],
        deadline: Optional[float]
    ) -> Tuple[dict, CollaborativeEvidence]:
        executor = ThreadPoolExecutor(
            max_workers=max(1, self.config.max_workers),
            thread_name_prefix='recommender'
        )
        try:
            content_future = executor.submit(
                content.score_candidates, order, candidates, self.config.content
            )
            evidence_future = executor.submit(
                _read, 'collaborative_history',
                lambda: collaborative.collect_evidence(order, customer_id, self.store)
            )

            timeout = None
            if deadline is not None:
                timeout = max(0.0, deadline - time.monotonic())

            done, not_done = wait(
                [content_future, evidence_future],
                timeout=timeout,
                return_when=FIRST_EXCEPTION
            )

            # Surface the first failure before checking for a timeout
            for future in done:
                if future.exception() is not None:
                    raise future.exception()

            if not_done:
                raise RecommendationTimeout(
                    f"Recommendation for order {order.id} exceeded "
                    f"{self.config.request_timeout_seconds}s"
                )

            return content_future.result(), evidence_future.result()
        finally:
            # Join the history read so no thread outlives the request;
            # the database statement_timeout bounds this wait
            executor.shutdown(wait=True, cancel_futures=True)
