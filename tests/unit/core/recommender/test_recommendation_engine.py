#!/usr/bin/env python3
"""
Test suite for RecommendationEngine end to end over an in-memory store.
"""

import threading
import unittest

from core.config_loader import RecommenderConfig
from core.recommender import (
    RecommendationEngine, RecommendationTimeout, UpstreamReadError
)
from tests.mocks.store_mocks import (
    FailingRecommendationStore, InMemoryRecommendationStore, SlowCatalogStore,
    make_order, make_translator
)


def _marketplace():
    translators = [
        make_translator("A", ["English", "Spanish"], expertise=["Legal"], rating=100),
        make_translator("B", ["English", "Spanish"], expertise=["Medical"], rating=60, availability=False),
        make_translator("E", ["English", "Spanish", "French"], custom_tags=["Legal"], rating=40),
        make_translator("C", ["French", "German"], expertise=["Legal"], rating=100),
        make_translator("J", ["Japanese", "Korean"], expertise=["Legal"], rating=80),
        make_translator("K", ["Japanese", "Korean"], rating=100, availability=False),
    ]
    history = [
        make_order("h1", "other", "English", "Spanish", status="completed", translator_ids=["A"]),
        make_order("h2", "other", "English", "Spanish", status="completed", translator_ids=["A"]),
        make_order("h3", "other", "English", "Spanish", status="completed", translator_ids=["B"]),
        make_order("h4", "other", "English", "Spanish", status="cancelled", translator_ids=["E"]),
    ]
    return translators, history


class TestRecommendationEngine(unittest.TestCase):

    def setUp(self):
        translators, history = _marketplace()
        self.store = InMemoryRecommendationStore(translators=translators, orders=history)
        self.engine = RecommendationEngine(self.store, RecommenderConfig())
        self.order = make_order("o1", "cust-1", "English", "Spanish", tags=["Legal"])

    def test_example_ranking(self):
        """A ranks first, then E, then B; C is not a candidate for the pair."""
        ranked = self.engine.recommend(self.order, "cust-1")

        by_id = {r.translator.id: r for r in ranked}
        self.assertEqual(set(by_id), {"A", "B", "E"})

        self.assertAlmostEqual(by_id["A"].content_score, 1.0, places=9)
        self.assertAlmostEqual(by_id["A"].collaborative_score, 2 / 3, places=9)
        self.assertAlmostEqual(by_id["A"].hybrid_score, 0.8667, places=4)

        self.assertAlmostEqual(by_id["B"].content_score, 0.31, places=9)
        self.assertAlmostEqual(by_id["B"].collaborative_score, 1 / 3, places=9)
        self.assertAlmostEqual(by_id["B"].hybrid_score, 0.3193, places=4)

        # Cancelled order assignment is not evidence
        self.assertEqual(by_id["E"].collaborative_score, 0.0)
        # 0.5 + 0.3 + 0.2 * (2/5) = 0.88 -> hybrid 0.528
        self.assertAlmostEqual(by_id["E"].hybrid_score, 0.528, places=9)

        self.assertEqual([r.translator.id for r in ranked], ["A", "E", "B"])

    def test_hybrid_formula_holds_for_every_entry(self):
        for r in self.engine.recommend(self.order, "cust-1"):
            self.assertEqual(r.hybrid_score, 0.6 * r.content_score + 0.4 * r.collaborative_score)

    def test_ranking_is_non_increasing(self):
        ranked = self.engine.recommend(self.order, "cust-1")
        scores = [r.hybrid_score for r in ranked]

        self.assertEqual(scores, sorted(scores, reverse=True))

    def test_idempotent(self):
        first = self.engine.recommend(self.order, "cust-1")
        second = self.engine.recommend(self.order, "cust-1")

        self.assertEqual(
            [(r.translator.id, r.hybrid_score) for r in first],
            [(r.translator.id, r.hybrid_score) for r in second]
        )

    def test_no_history_degenerates_to_content_ordering(self):
        order = make_order("o2", "cust-1", "Japanese", "Korean", tags=["Legal"])

        ranked = self.engine.recommend(order, "cust-1")

        self.assertEqual([r.translator.id for r in ranked], ["J", "K"])
        for r in ranked:
            self.assertEqual(r.collaborative_score, 0.0)
            self.assertEqual(r.hybrid_score, 0.6 * r.content_score)

    def test_empty_candidate_pool(self):
        order = make_order("o3", "cust-1", "Finnish", "Icelandic")

        self.assertEqual(self.engine.recommend(order, "cust-1"), [])
        # History is never queried without candidates
        self.assertNotIn('find_completed_orders', self.store.calls)

    def test_empty_candidate_pool_does_not_claim_first_time_customer(self):
        order = make_order("o3", "cust-1", "Finnish", "Icelandic")

        report = self.engine.explain(order, "cust-1")

        self.assertIsNone(report.evidence.customer_order_count)
        self.assertIsNone(report.evidence.first_time_customer)
        self.assertNotIn('find_customer_orders', self.store.calls)

    def test_store_is_used_by_one_thread_at_a_time(self):
        self.engine.recommend(self.order, "cust-1")

        self.assertEqual(self.store.max_active, 1)

    def test_unavailable_translator_stays_in_ranking(self):
        ranked = self.engine.recommend(self.order, "cust-1")

        self.assertIn("B", [r.translator.id for r in ranked])

    def test_explain_reports_diagnostics(self):
        report = self.engine.explain(self.order, "cust-1")

        self.assertEqual(report.order_id, "o1")
        self.assertEqual(report.evidence.total_assignments, 3)
        self.assertTrue(report.evidence.first_time_customer)
        self.assertEqual(report.content_breakdown["A"].matching_tags, ["Legal"])
        self.assertEqual(report.content_breakdown["B"].availability_multiplier, 0.5)
        self.assertTrue(report.quality['has_collaborative_data'])
        self.assertEqual(report.quality['strength'], 'Strong')


class TestRecommendationEngineFailures(unittest.TestCase):

    def setUp(self):
        self.translators, self.history = _marketplace()
        self.order = make_order("o1", "cust-1", "English", "Spanish", tags=["Legal"])

    def test_catalog_failure_is_fatal(self):
        store = FailingRecommendationStore('find_translators', translators=self.translators, orders=self.history)

        with self.assertRaises(UpstreamReadError) as ctx:
            RecommendationEngine(store).recommend(self.order, "cust-1")

        self.assertEqual(ctx.exception.operation, 'find_translators')

    def test_history_failure_is_fatal(self):
        store = FailingRecommendationStore(
            'find_completed_orders', translators=self.translators, orders=self.history
        )

        with self.assertRaises(UpstreamReadError):
            RecommendationEngine(store).recommend(self.order, "cust-1")

    def test_customer_history_failure_is_fatal(self):
        store = FailingRecommendationStore(
            'find_customer_orders', translators=self.translators, orders=self.history
        )

        with self.assertRaises(UpstreamReadError):
            RecommendationEngine(store).recommend(self.order, "cust-1")

    def test_unexpected_store_error_is_wrapped(self):
        store = FailingRecommendationStore(
            'find_translators', error=ConnectionError("refused"),
            translators=self.translators, orders=self.history
        )

        with self.assertRaises(UpstreamReadError) as ctx:
            RecommendationEngine(store).recommend(self.order, "cust-1")

        self.assertIsInstance(ctx.exception.cause, ConnectionError)

    def test_timeout(self):
        store = InMemoryRecommendationStore(
            translators=self.translators, orders=self.history, history_delay=0.3
        )
        engine = RecommendationEngine(store, RecommenderConfig(request_timeout_seconds=0.05))

        with self.assertRaises(RecommendationTimeout):
            engine.recommend(self.order, "cust-1")

    def test_timeout_leaves_no_reader_behind(self):
        """After a timeout the caller can read the store without sharing it with a worker."""
        store = InMemoryRecommendationStore(
            translators=self.translators, orders=self.history, history_delay=0.3
        )
        engine = RecommendationEngine(store, RecommenderConfig(request_timeout_seconds=0.1))

        with self.assertRaises(RecommendationTimeout):
            engine.recommend(self.order, "cust-1")

        self.assertEqual(store.active, 0)
        calls_before_fallback = len(store.call_threads)

        store.find_translators("English", "Spanish")

        self.assertEqual(store.max_active, 1)
        self.assertEqual(len(store.call_threads), calls_before_fallback + 1)
        self.assertEqual(store.call_threads[-1], ('find_translators', threading.current_thread().name))

    def test_slow_catalog_read_counts_against_timeout(self):
        store = SlowCatalogStore(0.2, translators=self.translators, orders=self.history)
        engine = RecommendationEngine(store, RecommenderConfig(request_timeout_seconds=0.05))

        with self.assertRaises(RecommendationTimeout):
            engine.recommend(self.order, "cust-1")

        # Scoring never starts once the deadline has passed
        self.assertNotIn('find_completed_orders', store.calls)

    def test_sequential_execution_with_single_worker(self):
        store = InMemoryRecommendationStore(translators=self.translators, orders=self.history)
        engine = RecommendationEngine(store, RecommenderConfig(max_workers=1))

        ranked = engine.recommend(self.order, "cust-1")

        self.assertEqual([r.translator.id for r in ranked], ["A", "E", "B"])


if __name__ == '__main__':
    unittest.main()
