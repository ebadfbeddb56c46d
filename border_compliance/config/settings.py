"""Runtime configuration for the border compliance engine.

Values come from environment variables (a `.env` file is loaded by the
CLI at startup) with defaults matching the public testnet demo.

Environment Variables (services):
- IDENTITY_SERVICE_URL: Driver identity backend (default: http://localhost:3002)
- IOTA_RPC_URL: Ledger JSON-RPC endpoint (default: https://api.testnet.iota.cafe)
- VEHICLE_CERTIFICATE_OBJECT_ID: Ledger object holding the vehicle certificate
- CARGO_MANIFEST_OBJECT_ID: Ledger object holding the cargo manifest
- ANCHOR_GATEWAY_URL: Notarization gateway for compliance proofs
- REQUEST_TIMEOUT_SECONDS: Timeout for every external call (default: 30.0)

Environment Variables (decision):
- ANCHOR_PROFILE_ID: Compliance profile id (default: bordertest-v1)
- ANCHOR_DEFAULT_PLATE: Plate used when the certificate carries none
- ANCHOR_HASH_ALGORITHM: sha256 or blake3 (default: sha256)
- OVERRIDE_SECRET: Placeholder secret for manual overrides (default: 1234)
- HOLD_ENTRY_POLICY: collapse_to_reject or enter_hold
- MISSING_DOMAIN_POLICY: non_blocking or fail_closed
- RESTART_DELAY_SECONDS: Pause before a restarted cycle (default: 2.0)

Environment Variables (logging):
- LOG_LEVEL: structlog level (default: WARNING)
- LOG_ENVIRONMENT: production (JSON) or development (console)
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum
from typing import TypeVar

from border_compliance.domain.errors.configuration import ConfigurationError
from border_compliance.domain.models.anchor_record import DigestAlgorithm
from border_compliance.domain.models.compliance_verdict import MissingDomainPolicy
from border_compliance.domain.models.compliance_workflow import HoldEntryPolicy

E = TypeVar("E", bound=Enum)

DEFAULT_VEHICLE_CERTIFICATE_OBJECT_ID = (
    "0xa099c94a8ee9b7bca40eda065170ec48e836967c6712d5349509af5987e5d226"
)
DEFAULT_CARGO_MANIFEST_OBJECT_ID = (
    "0x69e29715734c4944137bb4548e6d2b4ee379d1101f5603fb6d8ebb5e249e4c91"
)


def _get_str_env(key: str, default: str) -> str:
    """Get string environment variable, treating empty as unset."""
    value = os.environ.get(key)
    return value if value else default


def _get_float_env(key: str, default: float) -> float:
    """Get float environment variable with default.

    Args:
        key: Environment variable name.
        default: Default value if not set or invalid.

    Returns:
        Parsed float value or default.
    """
    value = os.environ.get(key)
    if value is None:
        return default
    try:
        return float(value)
    except ValueError:
        return default


def _get_enum_env(key: str, enum_type: type[E], default: E) -> E:
    """Get enum environment variable by value.

    Raises:
        ConfigurationError: If the value is set but not a member value.
    """
    value = os.environ.get(key)
    if not value:
        return default
    try:
        return enum_type(value.strip().lower())
    except ValueError:
        allowed = ", ".join(member.value for member in enum_type)
        raise ConfigurationError(key, f"expected one of {allowed}, got {value!r}") from None


@dataclass(frozen=True)
class BorderComplianceConfig:
    """Configuration for one run of the engine.

    Attributes:
        identity_service_url: Base URL of the driver identity backend.
        ledger_rpc_url: Ledger JSON-RPC endpoint used by the verifiers.
        vehicle_certificate_object_id: Ledger object of the certificate.
        cargo_manifest_object_id: Ledger object of the manifest.
        anchor_gateway_url: Notarization gateway; None uses the in-memory
            adapter.
        profile_id: Compliance profile proofs are filed under.
        default_plate: Plate used when the certificate reports none.
        hash_algorithm: Digest for the bundle hash.
        override_secret: Placeholder shared secret for overrides. Not a
            security boundary.
        hold_entry_policy: How a hold verdict enters the workflow.
        missing_domain_policy: How absent domains are evaluated.
        restart_delay_seconds: Pause before a restarted cycle.
        request_timeout_seconds: Timeout for external calls.
        log_level: structlog level name.
        log_environment: "production" or "development".
    """

    identity_service_url: str = "http://localhost:3002"
    ledger_rpc_url: str = "https://api.testnet.iota.cafe"
    vehicle_certificate_object_id: str = DEFAULT_VEHICLE_CERTIFICATE_OBJECT_ID
    cargo_manifest_object_id: str = DEFAULT_CARGO_MANIFEST_OBJECT_ID
    anchor_gateway_url: str | None = None
    profile_id: str = "bordertest-v1"
    default_plate: str = "TRUCK-BorderTest"
    hash_algorithm: DigestAlgorithm = DigestAlgorithm.SHA256
    override_secret: str = "1234"
    hold_entry_policy: HoldEntryPolicy = HoldEntryPolicy.COLLAPSE_TO_REJECT
    missing_domain_policy: MissingDomainPolicy = MissingDomainPolicy.NON_BLOCKING
    restart_delay_seconds: float = 2.0
    request_timeout_seconds: float = 30.0
    log_level: str = "WARNING"
    log_environment: str = "development"

    def __post_init__(self) -> None:
        """Validate configuration values."""
        if not self.override_secret:
            raise ConfigurationError("OVERRIDE_SECRET", "must not be empty")
        if not self.profile_id:
            raise ConfigurationError("ANCHOR_PROFILE_ID", "must not be empty")
        if self.restart_delay_seconds < 0:
            raise ConfigurationError(
                "RESTART_DELAY_SECONDS",
                f"must be non-negative, got {self.restart_delay_seconds}",
            )
        if self.request_timeout_seconds <= 0:
            raise ConfigurationError(
                "REQUEST_TIMEOUT_SECONDS",
                f"must be positive, got {self.request_timeout_seconds}",
            )
        if self.log_environment not in ("production", "development"):
            raise ConfigurationError(
                "LOG_ENVIRONMENT",
                f"expected production or development, got {self.log_environment!r}",
            )

    @classmethod
    def from_environment(cls) -> BorderComplianceConfig:
        """Create config from environment variables with defaults.

        Raises:
            ConfigurationError: If a value is present but invalid.
        """
        return cls(
            identity_service_url=_get_str_env("IDENTITY_SERVICE_URL", cls.identity_service_url),
            ledger_rpc_url=_get_str_env("IOTA_RPC_URL", cls.ledger_rpc_url),
            vehicle_certificate_object_id=_get_str_env(
                "VEHICLE_CERTIFICATE_OBJECT_ID", DEFAULT_VEHICLE_CERTIFICATE_OBJECT_ID
            ),
            cargo_manifest_object_id=_get_str_env(
                "CARGO_MANIFEST_OBJECT_ID", DEFAULT_CARGO_MANIFEST_OBJECT_ID
            ),
            anchor_gateway_url=os.environ.get("ANCHOR_GATEWAY_URL") or None,
            profile_id=_get_str_env("ANCHOR_PROFILE_ID", cls.profile_id),
            default_plate=_get_str_env("ANCHOR_DEFAULT_PLATE", cls.default_plate),
            hash_algorithm=_get_enum_env(
                "ANCHOR_HASH_ALGORITHM", DigestAlgorithm, DigestAlgorithm.SHA256
            ),
            override_secret=_get_str_env("OVERRIDE_SECRET", cls.override_secret),
            hold_entry_policy=_get_enum_env(
                "HOLD_ENTRY_POLICY", HoldEntryPolicy, HoldEntryPolicy.COLLAPSE_TO_REJECT
            ),
            missing_domain_policy=_get_enum_env(
                "MISSING_DOMAIN_POLICY",
                MissingDomainPolicy,
                MissingDomainPolicy.NON_BLOCKING,
            ),
            restart_delay_seconds=_get_float_env(
                "RESTART_DELAY_SECONDS", cls.restart_delay_seconds
            ),
            request_timeout_seconds=_get_float_env(
                "REQUEST_TIMEOUT_SECONDS", cls.request_timeout_seconds
            ),
            log_level=_get_str_env("LOG_LEVEL", cls.log_level).upper(),
            log_environment=_get_str_env("LOG_ENVIRONMENT", cls.log_environment).lower(),
        )


# Testing config: in-memory anchoring, no restart pause
TEST_BORDER_COMPLIANCE_CONFIG = BorderComplianceConfig(
    identity_service_url="http://identity.test",
    ledger_rpc_url="http://ledger.test",
    restart_delay_seconds=0.0,
    request_timeout_seconds=1.0,
)
