"""Root pytest configuration for all tests.

Import paths (project root and src/) are configured in pyproject.toml.
Fixtures here wire the published static table into the query service so
tests at every layer share one way of building it.
"""

import pytest

from domain.codec_quality.services import CoefficientQueryService
from infrastructure.codec_quality import StaticCoefficientStore


@pytest.fixture(scope="session")
def store() -> StaticCoefficientStore:
    """Store over the published Opus table (read-only, safe to share)."""
    return StaticCoefficientStore()


@pytest.fixture(scope="session")
def service(store: StaticCoefficientStore) -> CoefficientQueryService:
    """Query service over the published Opus table."""
    return CoefficientQueryService(store)
