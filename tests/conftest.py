"""Shared fixtures for sphgeom tests."""

import pytest

from sphgeom.core import PrecisionContext

TEST_EPS = 1e-10


@pytest.fixture
def precision() -> PrecisionContext:
    """Precision context used by most geometric tests."""
    return PrecisionContext(TEST_EPS)
