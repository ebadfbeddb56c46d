"""Unit tests for evaluate_border_compliance.

Rule precedence:
1. identity/token/supply reject, or supply hold -> reject
2. identity hold -> hold
3. otherwise -> valid
"""

from itertools import product

import pytest

from border_compliance.domain.errors import EvaluationInconsistencyError
from border_compliance.domain.models import (
    ComplianceState,
    MissingDomainPolicy,
    SemanticBundle,
)
from border_compliance.domain.services import (
    compose_bundles,
    ensure_consistent_states,
    evaluate_border_compliance,
    find_inconsistent_domains,
)

STATES = ("valid", "hold", "reject")


def _expected(identity: str, token: str, supply: str) -> ComplianceState:
    if "reject" in (identity, token, supply) or supply == "hold":
        return ComplianceState.REJECT
    if identity == "hold":
        return ComplianceState.HOLD
    return ComplianceState.VALID


class TestScenarios:
    """Named checkpoint scenarios."""

    def test_all_valid_passes(self) -> None:
        """Scenario A: every domain valid."""
        verdict = evaluate_border_compliance(
            {"identity": "valid", "token": "valid", "supply": "valid"}
        )

        assert verdict.result is ComplianceState.VALID
        assert verdict.is_valid

    def test_identity_hold_holds(self) -> None:
        """Scenario B: identity ambiguity is resolved administratively."""
        verdict = evaluate_border_compliance(
            {"identity": "hold", "token": "valid", "supply": "valid"}
        )

        assert verdict.result is ComplianceState.HOLD

    def test_supply_hold_rejects(self) -> None:
        """Scenario C: cargo hold is a physical-safety risk."""
        verdict = evaluate_border_compliance(
            {"identity": "valid", "token": "valid", "supply": "hold"}
        )

        assert verdict.result is ComplianceState.REJECT

    def test_token_reject_rejects(self) -> None:
        """Scenario D: revoked vehicle certificate."""
        verdict = evaluate_border_compliance(
            {"identity": "valid", "token": "reject", "supply": "valid"}
        )

        assert verdict.result is ComplianceState.REJECT

    def test_supply_hold_beats_identity_hold(self) -> None:
        """Reject rule is checked before hold rule."""
        verdict = evaluate_border_compliance(
            {"identity": "hold", "token": "valid", "supply": "hold"}
        )

        assert verdict.result is ComplianceState.REJECT

    def test_token_hold_alone_is_valid(self) -> None:
        """Vehicle hold is not in the rule set."""
        verdict = evaluate_border_compliance(
            {"identity": "valid", "token": "hold", "supply": "valid"}
        )

        assert verdict.result is ComplianceState.VALID


class TestRuleTable:
    """Every combination of the three required domains."""

    @pytest.mark.parametrize("identity,token,supply", list(product(STATES, repeat=3)))
    def test_combination(self, identity: str, token: str, supply: str) -> None:
        verdict = evaluate_border_compliance(
            {"identity": identity, "token": token, "supply": supply}
        )

        assert verdict.result is _expected(identity, token, supply)


class TestMissingDomains:
    """Absent required domains."""

    def test_empty_map_is_valid_by_default(self) -> None:
        """Non-blocking policy: nothing to reject or hold."""
        verdict = evaluate_border_compliance({})

        assert verdict.result is ComplianceState.VALID
        assert verdict.missing_domains == ("identity", "token", "supply")

    def test_missing_domains_reported(self) -> None:
        verdict = evaluate_border_compliance({"identity": "valid"})

        assert verdict.missing_domains == ("token", "supply")

    def test_fail_closed_rejects_missing_domain(self) -> None:
        verdict = evaluate_border_compliance(
            {"identity": "valid", "token": "valid"},
            missing_domain_policy=MissingDomainPolicy.FAIL_CLOSED,
        )

        assert verdict.result is ComplianceState.REJECT
        assert verdict.missing_domains == ("supply",)

    def test_fail_closed_with_all_domains_is_unaffected(self) -> None:
        verdict = evaluate_border_compliance(
            {"identity": "hold", "token": "valid", "supply": "valid"},
            missing_domain_policy=MissingDomainPolicy.FAIL_CLOSED,
        )

        assert verdict.result is ComplianceState.HOLD

    def test_extra_domains_are_ignored_by_rules(self) -> None:
        """Unknown domain tags are kept in the snapshot but not evaluated."""
        verdict = evaluate_border_compliance(
            {"identity": "valid", "token": "valid", "supply": "valid", "unknown": "reject"}
        )

        assert verdict.result is ComplianceState.VALID
        assert verdict.evaluated_domains["unknown"] == "reject"


class TestInconsistentStates:
    """States outside {valid, hold, reject} fail closed."""

    def test_unknown_state_rejects(self) -> None:
        verdict = evaluate_border_compliance(
            {"identity": "maybe", "token": "valid", "supply": "valid"}
        )

        assert verdict.result is ComplianceState.REJECT
        assert verdict.inconsistent_domains == ("identity",)

    def test_unknown_state_in_extra_domain_rejects(self) -> None:
        verdict = evaluate_border_compliance(
            {"identity": "valid", "token": "valid", "supply": "valid", "unknown": "VALID"}
        )

        assert verdict.result is ComplianceState.REJECT
        assert verdict.inconsistent_domains == ("unknown",)

    def test_never_valid_with_inconsistent_state(self) -> None:
        for bad in ("", "passed", None, 1):
            verdict = evaluate_border_compliance({"identity": bad})  # type: ignore[dict-item]
            assert verdict.result is not ComplianceState.VALID

    def test_find_inconsistent_domains(self) -> None:
        assert find_inconsistent_domains({"a": "valid", "b": "nope", "c": "hold"}) == ("b",)

    def test_ensure_consistent_states_raises(self) -> None:
        with pytest.raises(EvaluationInconsistencyError) as exc_info:
            ensure_consistent_states({"identity": "valid", "supply": "unclear"})

        assert exc_info.value.domain == "supply"
        assert exc_info.value.state == "unclear"

    def test_ensure_consistent_states_passes(self) -> None:
        ensure_consistent_states({"identity": "valid", "token": "hold"})


class TestEnumStates:
    """ComplianceState members are evaluated like their string values."""

    def test_enum_identity_reject_rejects(self) -> None:
        verdict = evaluate_border_compliance({"identity": ComplianceState.REJECT})

        assert verdict.result is ComplianceState.REJECT
        assert verdict.inconsistent_domains == ()

    def test_enum_supply_hold_rejects(self) -> None:
        verdict = evaluate_border_compliance({"supply": ComplianceState.HOLD})

        assert verdict.result is ComplianceState.REJECT

    def test_enum_identity_hold_holds(self) -> None:
        verdict = evaluate_border_compliance(
            {"identity": ComplianceState.HOLD, "token": "valid", "supply": "valid"}
        )

        assert verdict.result is ComplianceState.HOLD

    @pytest.mark.parametrize("identity,token,supply", list(product(STATES, repeat=3)))
    def test_enum_and_string_inputs_agree(self, identity: str, token: str, supply: str) -> None:
        as_enum = evaluate_border_compliance(
            {
                "identity": ComplianceState(identity),
                "token": ComplianceState(token),
                "supply": ComplianceState(supply),
            }
        )

        assert as_enum.result is _expected(identity, token, supply)

    def test_snapshot_stores_string_values(self) -> None:
        verdict = evaluate_border_compliance({"identity": ComplianceState.REJECT})

        assert verdict.evaluated_domains["identity"] == "reject"
        assert type(verdict.evaluated_domains["identity"]) is str


class TestVerdictContents:
    """Verdict snapshots its inputs."""

    def test_bundle_refs_copied_from_context(self) -> None:
        context = compose_bundles(
            [
                SemanticBundle(domain="identity", aggregated_state="valid", bundle_ref="r1"),
                SemanticBundle(domain="supply", aggregated_state="valid", bundle_ref="r2"),
            ]
        )

        verdict = evaluate_border_compliance(context)

        assert verdict.bundle_refs == ("r1", "r2")
        assert dict(verdict.evaluated_domains) == {"identity": "valid", "supply": "valid"}

    def test_bare_map_has_no_bundle_refs(self) -> None:
        verdict = evaluate_border_compliance({"identity": "valid"})

        assert verdict.bundle_refs == ()

    def test_deterministic(self) -> None:
        """Same input, equal verdicts."""
        states = {"identity": "hold", "token": "valid", "supply": "valid"}

        assert evaluate_border_compliance(states) == evaluate_border_compliance(states)

    def test_snapshot_independent_of_input(self) -> None:
        states = {"identity": "valid"}
        verdict = evaluate_border_compliance(states)

        states["identity"] = "reject"

        assert verdict.evaluated_domains["identity"] == "valid"

    def test_to_dict(self) -> None:
        verdict = evaluate_border_compliance({"identity": "hold"})

        assert verdict.to_dict() == {
            "result": "hold",
            "evaluated_domains": {"identity": "hold"},
            "bundle_refs": [],
            "inconsistent_domains": [],
            "missing_domains": ["token", "supply"],
        }
