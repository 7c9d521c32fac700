# tests/conftest.py
from __future__ import annotations

import pytest

from engine.runner import project_cash_flows
from tests.utils import TODAY, make_params


@pytest.fixture
def today():
    return TODAY


@pytest.fixture
def bond_params():
    """Factory for the baseline bond (overridable)."""

    def _factory(**overrides):
        return make_params(**overrides)

    return _factory


@pytest.fixture
def projection():
    """Factory to project a baseline bond with optional overrides, at the fixed reference date."""

    def _factory(*, language: str = "en", **overrides):
        return project_cash_flows(make_params(**overrides), today=TODAY, language=language)

    return _factory
