"""Domain errors for the border compliance engine.

All exceptions inherit from BorderComplianceError.
"""

from border_compliance.domain.errors.anchoring import (
    AnchoringError,
    AnchoringNotPermittedError,
)
from border_compliance.domain.errors.configuration import ConfigurationError
from border_compliance.domain.errors.evaluation import EvaluationInconsistencyError
from border_compliance.domain.errors.input import (
    EventSourceError,
    InterpretationFailedError,
)
from border_compliance.domain.errors.verification import (
    VerificationFailureError,
    VerifierUnavailableError,
)
from border_compliance.domain.errors.workflow import (
    AuthorizationFailedError,
    InvalidTransitionError,
)

__all__: list[str] = [
    "AnchoringError",
    "AnchoringNotPermittedError",
    "AuthorizationFailedError",
    "ConfigurationError",
    "EvaluationInconsistencyError",
    "EventSourceError",
    "InterpretationFailedError",
    "InvalidTransitionError",
    "VerificationFailureError",
    "VerifierUnavailableError",
]
