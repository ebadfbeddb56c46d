"""
Pytest configuration and shared fixtures for border compliance tests.

Testing Standards:
- Async tests run under pytest-asyncio (auto mode enabled in pyproject.toml)
- Use AsyncMock for async function mocking
- HTTP adapters are tested against httpx.MockTransport, never the network
- Stubs are built with warn_on_init=False to keep output clean
"""

from datetime import datetime, timezone

import pytest

from border_compliance.infrastructure.stubs import (
    CargoManifestVerifierStub,
    IdentityVerifierStub,
    InMemoryAnchorAdapterStub,
    SemanticEngineStub,
    VehicleCertificateVerifierStub,
)
from tests.helpers import FakeTimeAuthority

FROZEN_AT = datetime(2026, 1, 15, 10, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def project_version() -> str:
    """Provide the current project version for tests."""
    from border_compliance import __version__

    return __version__


@pytest.fixture
def fake_time_authority() -> FakeTimeAuthority:
    """Time authority frozen at 2026-01-15T10:00:00Z."""
    return FakeTimeAuthority(frozen_at=FROZEN_AT)


@pytest.fixture
def semantic_engine() -> SemanticEngineStub:
    return SemanticEngineStub(warn_on_init=False)


@pytest.fixture
def identity_verifier() -> IdentityVerifierStub:
    return IdentityVerifierStub(warn_on_init=False)


@pytest.fixture
def vehicle_verifier() -> VehicleCertificateVerifierStub:
    return VehicleCertificateVerifierStub(warn_on_init=False)


@pytest.fixture
def cargo_verifier() -> CargoManifestVerifierStub:
    return CargoManifestVerifierStub(warn_on_init=False)


@pytest.fixture
def anchor_adapter(fake_time_authority: FakeTimeAuthority) -> InMemoryAnchorAdapterStub:
    return InMemoryAnchorAdapterStub(fake_time_authority, warn_on_init=False)
