"""Infrastructure adapters: concrete implementations of application ports."""

from border_compliance.infrastructure.adapters.http_identity_verifier import (
    HttpIdentityVerifier,
)
from border_compliance.infrastructure.adapters.http_notarization_anchor_adapter import (
    HttpNotarizationAnchorAdapter,
)
from border_compliance.infrastructure.adapters.json_event_source import (
    CanonicalEventRecord,
    JsonEventSource,
    parse_events,
)
from border_compliance.infrastructure.adapters.ledger_cargo_manifest_verifier import (
    LedgerCargoManifestVerifier,
)
from border_compliance.infrastructure.adapters.ledger_object_reader import (
    LedgerObjectReader,
    MalformedLedgerResponseError,
)
from border_compliance.infrastructure.adapters.ledger_vehicle_certificate_verifier import (
    LedgerVehicleCertificateVerifier,
)
from border_compliance.infrastructure.adapters.rich_operator_console import (
    RichOperatorConsole,
)
from border_compliance.infrastructure.adapters.shared_secret_authenticator import (
    SharedSecretAuthenticator,
)
from border_compliance.infrastructure.adapters.system_time_authority import (
    SystemTimeAuthority,
)

__all__ = [
    "CanonicalEventRecord",
    "HttpIdentityVerifier",
    "HttpNotarizationAnchorAdapter",
    "JsonEventSource",
    "LedgerCargoManifestVerifier",
    "LedgerObjectReader",
    "LedgerVehicleCertificateVerifier",
    "MalformedLedgerResponseError",
    "RichOperatorConsole",
    "SharedSecretAuthenticator",
    "SystemTimeAuthority",
    "parse_events",
]
