"""Application services orchestrating the compliance pipeline."""

from border_compliance.application.services.border_test_service import (
    BorderTestResult,
    BorderTestService,
)
from border_compliance.application.services.border_verification_service import (
    BorderVerificationService,
)
from border_compliance.application.services.bundle_interpretation_service import (
    BundleInterpretationService,
    InterpretedBundle,
    normalize_previous_bundle_ref,
)
from border_compliance.application.services.compliance_workflow_service import (
    ComplianceWorkflowService,
    CycleReport,
    CycleStatus,
    WorkflowReport,
)
from border_compliance.application.services.proof_anchoring_service import (
    ProofAnchoringService,
    canonicalize,
    compute_bundle_hash,
)

__all__: list[str] = [
    "BorderTestResult",
    "BorderTestService",
    "BorderVerificationService",
    "BundleInterpretationService",
    "ComplianceWorkflowService",
    "CycleReport",
    "CycleStatus",
    "InterpretedBundle",
    "ProofAnchoringService",
    "WorkflowReport",
    "canonicalize",
    "compute_bundle_hash",
    "normalize_previous_bundle_ref",
]
