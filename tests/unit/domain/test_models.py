"""Unit tests for domain models."""

import pytest

from border_compliance.domain.errors import (
    AnchoringNotPermittedError,
    EventSourceError,
    InterpretationFailedError,
    VerificationFailureError,
    VerifierUnavailableError,
)
from border_compliance.domain.exceptions import BorderComplianceError
from border_compliance.domain.models import (
    AnchorRecord,
    ComplianceAnchorInput,
    CompliancePayload,
    ComplianceState,
    SchemaFailure,
    SemanticBundle,
    StructuralFailure,
    vehicle_subject_ref,
)


class TestComplianceState:
    def test_parse_known_values(self) -> None:
        assert ComplianceState.parse("valid") is ComplianceState.VALID
        assert ComplianceState.parse("hold") is ComplianceState.HOLD
        assert ComplianceState.parse("reject") is ComplianceState.REJECT

    def test_parse_is_case_sensitive(self) -> None:
        assert ComplianceState.parse("VALID") is None

    def test_parse_member(self) -> None:
        assert ComplianceState.parse(ComplianceState.HOLD) is ComplianceState.HOLD


class TestSemanticBundle:
    def test_event_is_read_only_copy(self) -> None:
        event = {"event_id": "bt-001"}
        bundle = SemanticBundle(
            domain="identity", aggregated_state="valid", bundle_ref="r", event=event
        )

        event["event_id"] = "changed"

        assert bundle.event["event_id"] == "bt-001"
        with pytest.raises(TypeError):
            bundle.event["event_id"] = "x"  # type: ignore[index]

    def test_failure_kinds(self) -> None:
        assert StructuralFailure(event_id=None, errors=()).kind == "structural_fail"
        assert SchemaFailure(event_id="e", errors=()).kind == "core_schema_fail"


class TestAnchorModels:
    def test_subject_ref(self) -> None:
        assert vehicle_subject_ref("TRUCK-1") == "vehicle:plate:TRUCK-1"

    def test_payload_key_order(self) -> None:
        payload = CompliancePayload(
            bundle_refs=("a",), result=True, state="valid", manual_override=False, timestamp=1
        )

        assert list(payload.to_dict()) == [
            "bundle_refs",
            "result",
            "state",
            "manual_override",
            "timestamp",
        ]

    def test_record_echoes_input(self) -> None:
        anchor_input = ComplianceAnchorInput(
            subject_ref="vehicle:plate:X", profile_id="p", result=False, bundle_hash="h"
        )

        record = AnchorRecord.from_input(
            anchor_input,
            transaction_id="tx",
            anchored_at="2026-01-01T00:00:00+00:00",
            status="confirmed",
            network="net",
        )

        assert record.subject_ref == "vehicle:plate:X"
        assert record.bundle_hash == "h"
        assert record.result is False
        assert record.to_dict()["transaction_id"] == "tx"


class TestErrors:
    def test_all_errors_share_base(self) -> None:
        assert issubclass(VerifierUnavailableError, BorderComplianceError)
        assert issubclass(AnchoringNotPermittedError, BorderComplianceError)

    def test_verification_failure_message(self) -> None:
        exc = VerificationFailureError("token", "certificate_revoked")

        assert str(exc) == "token verification failed: certificate_revoked"

    def test_unavailable_is_a_verification_failure(self) -> None:
        exc = VerifierUnavailableError("identity", "http://x/driver/verify", "refused")

        assert isinstance(exc, VerificationFailureError)
        assert exc.domain == "identity"
        assert "http://x/driver/verify" in exc.reason

    def test_event_source_error(self) -> None:
        exc = EventSourceError("-", "Input file is empty.")

        assert exc.message == "Input file is empty."
        assert str(exc) == "-: Input file is empty."

    def test_interpretation_failed(self) -> None:
        exc = InterpretationFailedError(3, "core_schema_fail", ("bad state",))

        assert str(exc) == "[3] core_schema_fail"
        assert exc.errors == ("bad state",)
