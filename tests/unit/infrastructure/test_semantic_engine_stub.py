"""Unit tests for SemanticEngineStub."""

import pytest

from border_compliance.domain.models import (
    SchemaFailure,
    SemanticBundle,
    StructuralFailure,
)
from border_compliance.infrastructure.stubs import SemanticEngineStub
from border_compliance.infrastructure.stubs.semantic_engine_stub import DEV_MODE_WARNING
from tests.helpers import make_event


class TestDevModeWarning:
    def test_warns_on_init(self) -> None:
        with pytest.warns(UserWarning, match="DEV MODE"):
            SemanticEngineStub()

    def test_warning_text(self) -> None:
        assert "NOT FOR PRODUCTION" in DEV_MODE_WARNING


class TestDerivedState:
    @pytest.mark.parametrize(
        "attributes,expected",
        [
            ({}, "valid"),
            ({"vp_verified": True}, "valid"),
            ({"certified": False}, "reject"),
            ({"pending": True}, "hold"),
            ({"hold": True}, "hold"),
            ({"hold": True, "seal_intact": False}, "reject"),
            ({"count": 0, "label": ""}, "valid"),
        ],
    )
    def test_from_attributes(
        self, semantic_engine: SemanticEngineStub, attributes: dict, expected: str
    ) -> None:
        result = semantic_engine.interpret(make_event("e-1", "identity", **attributes))

        assert isinstance(result, SemanticBundle)
        assert result.aggregated_state == expected

    def test_explicit_state_wins(self, semantic_engine: SemanticEngineStub) -> None:
        event = {**make_event("e-1", "token", certified=False), "state": "hold"}

        result = semantic_engine.interpret(event)

        assert result.aggregated_state == "hold"

    def test_domain_is_optional(self, semantic_engine: SemanticEngineStub) -> None:
        result = semantic_engine.interpret({"event_id": "e-1"})

        assert isinstance(result, SemanticBundle)
        assert result.domain is None

    def test_records_interpreted_ids(self, semantic_engine: SemanticEngineStub) -> None:
        semantic_engine.interpret(make_event("e-1", "identity"))
        semantic_engine.interpret({"event_id": ""})

        assert semantic_engine.interpreted == ["e-1"]


class TestFailures:
    @pytest.mark.parametrize(
        "event",
        [
            ["not", "an", "object"],
            {},
            {"event_id": "   "},
            {"event_id": 7},
            {"event_id": "e-1", "domain": 3},
            {"event_id": "e-1", "attributes": ["certified"]},
        ],
    )
    def test_structural_failure(self, semantic_engine: SemanticEngineStub, event) -> None:
        result = semantic_engine.interpret(event)

        assert isinstance(result, StructuralFailure)
        assert result.kind == "structural_fail"
        assert result.errors

    def test_structural_failure_keeps_event_id(
        self, semantic_engine: SemanticEngineStub
    ) -> None:
        result = semantic_engine.interpret({"event_id": "e-9", "domain": 3})

        assert result.event_id == "e-9"

    @pytest.mark.parametrize(
        "event",
        [
            {"event_id": "e-1", "state": "maybe"},
            {"event_id": "e-1", "state": None},
            {"event_id": "e-1", "attributes": {"seals": [1, 2]}},
            {"event_id": "e-1", "attributes": {"scan": {"ok": True}}},
        ],
    )
    def test_schema_failure(self, semantic_engine: SemanticEngineStub, event) -> None:
        result = semantic_engine.interpret(event)

        assert isinstance(result, SchemaFailure)
        assert result.kind == "core_schema_fail"
        assert result.event_id == "e-1"


class TestBundleRef:
    def test_is_deterministic(self) -> None:
        event = make_event("e-1", "supply", seal_intact=True)
        first = SemanticEngineStub(warn_on_init=False).interpret(event)
        second = SemanticEngineStub(warn_on_init=False).interpret(dict(event))

        assert first.bundle_ref == second.bundle_ref
        assert len(first.bundle_ref) == 64

    def test_key_order_does_not_matter(self, semantic_engine: SemanticEngineStub) -> None:
        a = semantic_engine.interpret({"event_id": "e-1", "domain": "token"})
        b = semantic_engine.interpret({"domain": "token", "event_id": "e-1"})

        assert a.bundle_ref == b.bundle_ref

    def test_chains_previous_ref(self, semantic_engine: SemanticEngineStub) -> None:
        event = make_event("e-1", "token")
        unchained = semantic_engine.interpret(event)
        chained = semantic_engine.interpret(event, "f" * 64)

        assert chained.previous_bundle_ref == "f" * 64
        assert chained.bundle_ref != unchained.bundle_ref
        assert chained.bundle_ref == SemanticEngineStub.bundle_ref_for(event, "f" * 64)
