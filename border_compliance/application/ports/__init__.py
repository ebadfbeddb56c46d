"""Application ports (abstract interfaces to external collaborators)."""

from border_compliance.application.ports.anchor_adapter import (
    ComplianceAnchorAdapterProtocol,
)
from border_compliance.application.ports.bundle_anchor import BundleAnchorProtocol
from border_compliance.application.ports.cargo_manifest_verifier import (
    CargoManifestVerifierProtocol,
)
from border_compliance.application.ports.event_source import EventSourceProtocol
from border_compliance.application.ports.identity_verifier import (
    IdentityVerifierProtocol,
)
from border_compliance.application.ports.operator_console import (
    OperatorConsoleProtocol,
)
from border_compliance.application.ports.semantic_engine import SemanticEngineProtocol
from border_compliance.application.ports.time_authority import TimeAuthorityProtocol
from border_compliance.application.ports.vehicle_certificate_verifier import (
    VehicleCertificateVerifierProtocol,
)

__all__: list[str] = [
    "BundleAnchorProtocol",
    "CargoManifestVerifierProtocol",
    "ComplianceAnchorAdapterProtocol",
    "EventSourceProtocol",
    "IdentityVerifierProtocol",
    "OperatorConsoleProtocol",
    "SemanticEngineProtocol",
    "TimeAuthorityProtocol",
    "VehicleCertificateVerifierProtocol",
]
