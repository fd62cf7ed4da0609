"""
Shared pytest fixtures for tablekit tests.

This file is automatically loaded by pytest. Fixtures defined here are
available to all test files without explicit imports.
"""

import os as _os
import unittest.mock as _mock

import pytest as _pytest

import tablekit.config as config

# Environment keys that should be cleared for isolated tests
ENV_KEYS_TO_CLEAR = [
    "TABLEKIT_ENV_FILE",
    "TABLEKIT_READONLY__DISABLE_NIL",
    "TABLEKIT_ORDERED_SET__CHECK_INVARIANTS",
]


@_pytest.fixture
def clean_env() -> dict[str, str]:
    """
    Return environment dict with tablekit keys removed.

    Use with mock.patch.dict to isolate tests from the actual environment.
    """
    return {
        k: v
        for k, v in _os.environ.items()
        if k not in ENV_KEYS_TO_CLEAR and not k.startswith("TABLEKIT_")
    }


@_pytest.fixture(autouse=True)
def isolated_settings(clean_env: dict[str, str]):
    """
    Run every test with default settings, isolated from the environment.

    The cached process-wide settings are dropped before and after each test.
    """
    config.reset_settings()
    with _mock.patch.dict(_os.environ, clean_env, clear=True):
        yield
    config.reset_settings()


@_pytest.fixture
def checked_ordered_sets():
    """
    Enable ordered set invariant checking after every mutation.

    Usage:
        def test_something(checked_ordered_sets):
            s = OrderedSet(["a"])  # check() runs after each mutation
    """
    with _mock.patch.dict(_os.environ, {"TABLEKIT_ORDERED_SET__CHECK_INVARIANTS": "true"}):
        config.reset_settings()
        yield
    config.reset_settings()


@_pytest.fixture
def nested_data() -> dict:
    """Nested container used by clone and read-only view tests."""
    return {
        "name": "root",
        "config": {"level": 1, "tags": ["a", "b"]},
        "items": [{"id": 1}, {"id": 2}],
        "flags": {"x", "y"},
    }
