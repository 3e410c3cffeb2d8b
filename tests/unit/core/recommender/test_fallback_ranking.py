#!/usr/bin/env python3
"""
Test suite for the language-filtered fallback ranking.
"""

import unittest

from core.recommender.fallback import language_filtered_ranking
from tests.mocks.store_mocks import make_order, make_translator


class TestFallbackRanking(unittest.TestCase):

    def test_filters_language_and_sorts_by_rating(self):
        order = make_order("o1", "c", "English", "Spanish")
        translators = [
            make_translator("B", ["English", "Spanish"], rating=60),
            make_translator("C", ["French", "German"], rating=100),
            make_translator("A", ["English", "Spanish"], rating=90),
            make_translator("D", ["English", "Spanish"], rating=60),
        ]

        ranked = language_filtered_ranking(order, translators)

        self.assertEqual([r.translator.id for r in ranked], ["A", "B", "D"])
        self.assertTrue(all(r.hybrid_score == 0.0 for r in ranked))

    def test_empty(self):
        order = make_order("o1", "c", "English", "Spanish")

        self.assertEqual(language_filtered_ranking(order, []), [])


if __name__ == '__main__':
    unittest.main()
