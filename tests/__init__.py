#!/usr/bin/env python3
"""
Test suite for the translator recommender.

    # Run all tests
    uv run python -m pytest tests/ -v

    # Using unittest
    uv run python -m unittest discover tests -v

No database is required: the engine is exercised against the in-memory
store in tests/mocks, and repository/API tests mock the SQLAlchemy session.
"""
