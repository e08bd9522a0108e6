"""Shared fixtures: a temporary trust directory populated with real roots and CRLs."""

import pytest

from helpers import NOW, TrustStore


@pytest.fixture
def now() -> int:
    return int(NOW.timestamp())


@pytest.fixture
def trust_store(tmp_path) -> TrustStore:
    return TrustStore(tmp_path)
