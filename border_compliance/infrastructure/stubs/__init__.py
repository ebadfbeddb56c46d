"""In-memory stubs for development and testing.

WARNING: Nothing in this package is for production use.
"""

from border_compliance.infrastructure.stubs.anchor_adapter_stub import (
    InMemoryAnchorAdapterStub,
    MockBundleAnchorStub,
)
from border_compliance.infrastructure.stubs.semantic_engine_stub import (
    SemanticEngineStub,
)
from border_compliance.infrastructure.stubs.verifier_stubs import (
    CargoManifestVerifierStub,
    IdentityVerifierStub,
    VehicleCertificateVerifierStub,
)

__all__ = [
    "CargoManifestVerifierStub",
    "IdentityVerifierStub",
    "InMemoryAnchorAdapterStub",
    "MockBundleAnchorStub",
    "SemanticEngineStub",
    "VehicleCertificateVerifierStub",
]
