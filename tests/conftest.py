"""Shared fixtures."""

from collections.abc import Callable

import pytest
from transit_fakes import FakeTransitProvider


@pytest.fixture
def provider() -> FakeTransitProvider:
    """Provider serving Flinders Street with the Sandringham and Frankston lines."""
    return FakeTransitProvider()


@pytest.fixture
def make_provider() -> Callable[..., FakeTransitProvider]:
    """Factory for providers with custom canned data."""
    return FakeTransitProvider
