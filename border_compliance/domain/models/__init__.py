"""Domain models for the border compliance engine."""

from border_compliance.domain.models.anchor_record import (
    AnchorRecord,
    AnchorRequest,
    BundleAnchorReceipt,
    ComplianceAnchorInput,
    CompliancePayload,
    DigestAlgorithm,
    vehicle_subject_ref,
)
from border_compliance.domain.models.border_context import BorderContext
from border_compliance.domain.models.compliance_state import (
    DOMAIN_LABELS,
    IDENTITY_DOMAIN,
    REQUIRED_DOMAINS,
    SUPPLY_DOMAIN,
    TOKEN_DOMAIN,
    UNKNOWN_DOMAIN,
    ComplianceState,
)
from border_compliance.domain.models.compliance_verdict import (
    ComplianceVerdict,
    MissingDomainPolicy,
)
from border_compliance.domain.models.compliance_workflow import (
    ACTION_LABELS,
    HoldEntryPolicy,
    OperatorAction,
    OverrideRecord,
    StepOutcome,
    StepResult,
    WorkflowPhase,
    WorkflowSnapshot,
    available_actions,
    is_terminal_phase,
    is_valid_transition,
)
from border_compliance.domain.models.semantic_bundle import (
    InterpretationResult,
    SchemaFailure,
    SemanticBundle,
    StructuralFailure,
)
from border_compliance.domain.models.verification import (
    CargoManifestResult,
    DriverIdentityResult,
    VehicleCertificateResult,
    VerificationSummary,
)

__all__: list[str] = [
    "ACTION_LABELS",
    "AnchorRecord",
    "AnchorRequest",
    "BorderContext",
    "BundleAnchorReceipt",
    "CargoManifestResult",
    "ComplianceAnchorInput",
    "CompliancePayload",
    "ComplianceState",
    "ComplianceVerdict",
    "DOMAIN_LABELS",
    "DigestAlgorithm",
    "DriverIdentityResult",
    "HoldEntryPolicy",
    "IDENTITY_DOMAIN",
    "InterpretationResult",
    "MissingDomainPolicy",
    "OperatorAction",
    "OverrideRecord",
    "REQUIRED_DOMAINS",
    "SUPPLY_DOMAIN",
    "SchemaFailure",
    "SemanticBundle",
    "StepOutcome",
    "StepResult",
    "StructuralFailure",
    "TOKEN_DOMAIN",
    "UNKNOWN_DOMAIN",
    "VehicleCertificateResult",
    "VerificationSummary",
    "WorkflowPhase",
    "WorkflowSnapshot",
    "available_actions",
    "is_terminal_phase",
    "is_valid_transition",
    "vehicle_subject_ref",
]
