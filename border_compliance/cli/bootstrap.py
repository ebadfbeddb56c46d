"""Wiring of ports to adapters for the interactive workflow."""

from __future__ import annotations

from contextlib import AsyncExitStack
from pathlib import Path

import structlog

from border_compliance.application.ports.anchor_adapter import (
    ComplianceAnchorAdapterProtocol,
)
from border_compliance.application.ports.operator_console import (
    OperatorConsoleProtocol,
)
from border_compliance.application.ports.time_authority import TimeAuthorityProtocol
from border_compliance.application.services import (
    BorderTestService,
    BorderVerificationService,
    ComplianceWorkflowService,
    ProofAnchoringService,
)
from border_compliance.config import BorderComplianceConfig
from border_compliance.domain.services import ComplianceStateMachine
from border_compliance.infrastructure.adapters import (
    HttpIdentityVerifier,
    HttpNotarizationAnchorAdapter,
    JsonEventSource,
    LedgerCargoManifestVerifier,
    LedgerObjectReader,
    LedgerVehicleCertificateVerifier,
    SharedSecretAuthenticator,
    SystemTimeAuthority,
)
from border_compliance.infrastructure.stubs import (
    CargoManifestVerifierStub,
    IdentityVerifierStub,
    InMemoryAnchorAdapterStub,
    SemanticEngineStub,
    VehicleCertificateVerifierStub,
)

logger = structlog.get_logger(__name__)


async def build_verification(
    config: BorderComplianceConfig, use_stubs: bool, stack: AsyncExitStack
) -> BorderVerificationService:
    """Build the verification service with live or in-memory verifiers."""
    if use_stubs:
        identity = IdentityVerifierStub(warn_on_init=False)
        vehicle = VehicleCertificateVerifierStub(warn_on_init=False)
        cargo = CargoManifestVerifierStub(warn_on_init=False)
    else:
        identity = await stack.enter_async_context(
            HttpIdentityVerifier(
                config.identity_service_url, timeout=config.request_timeout_seconds
            )
        )
        reader = await stack.enter_async_context(
            LedgerObjectReader(config.ledger_rpc_url, timeout=config.request_timeout_seconds)
        )
        vehicle = LedgerVehicleCertificateVerifier(reader)
        cargo = LedgerCargoManifestVerifier(reader)

    return BorderVerificationService(
        identity,
        vehicle,
        cargo,
        vehicle_object_id=config.vehicle_certificate_object_id,
        cargo_object_id=config.cargo_manifest_object_id,
    )


async def build_anchor_adapter(
    config: BorderComplianceConfig,
    use_stubs: bool,
    time_authority: TimeAuthorityProtocol,
    stack: AsyncExitStack,
) -> ComplianceAnchorAdapterProtocol:
    """Use the notarization gateway when one is configured.

    A live run without a gateway falls back to in-memory anchoring and
    emits the DEV MODE warning.
    """
    if config.anchor_gateway_url and not use_stubs:
        return await stack.enter_async_context(
            HttpNotarizationAnchorAdapter(
                config.anchor_gateway_url, timeout=config.request_timeout_seconds
            )
        )
    if use_stubs:
        return InMemoryAnchorAdapterStub(time_authority, warn_on_init=False)
    logger.warning("anchor_gateway_not_configured", fallback="in-memory")
    return InMemoryAnchorAdapterStub(time_authority, warn_on_init=True)


async def build_workflow(
    config: BorderComplianceConfig,
    *,
    events_path: str | Path,
    use_stubs: bool,
    console: OperatorConsoleProtocol,
    stack: AsyncExitStack,
) -> ComplianceWorkflowService:
    """Assemble the interactive workflow.

    HTTP clients are registered on ``stack`` and closed when it exits.
    """
    time_authority = SystemTimeAuthority()
    verification = await build_verification(config, use_stubs, stack)
    adapter = await build_anchor_adapter(config, use_stubs, time_authority, stack)
    if not use_stubs and not config.anchor_gateway_url:
        console.show_message(
            "No anchor gateway configured (ANCHOR_GATEWAY_URL): proofs stay in memory only",
            level="warning",
        )

    return ComplianceWorkflowService(
        JsonEventSource(events_path),
        verification,
        BorderTestService(
            SemanticEngineStub(warn_on_init=False),
            missing_domain_policy=config.missing_domain_policy,
        ),
        ComplianceStateMachine(
            SharedSecretAuthenticator(config.override_secret),
            hold_entry_policy=config.hold_entry_policy,
        ),
        ProofAnchoringService(
            adapter,
            time_authority,
            profile_id=config.profile_id,
            algorithm=config.hash_algorithm,
        ),
        console,
        default_plate=config.default_plate,
        restart_delay_seconds=config.restart_delay_seconds,
    )
