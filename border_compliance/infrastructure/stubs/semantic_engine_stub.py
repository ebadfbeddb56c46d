"""Semantic engine stub for development and testing.

Deterministic, rule-based stand-in for the external semantic engine.

WARNING: This stub is NOT for production use. It understands only the
small event vocabulary used by the demo event files.

Rules:
- Structural: the event is an object with a non-empty string event_id;
  domain, when present, is a string; attributes, when present, is an
  object.
- Schema: an explicit state is one of valid, hold, reject; attribute
  values are JSON scalars.
- State: explicit state wins; otherwise any attribute that is false
  yields reject, any hold flag that is true yields hold, else valid.
- bundle_ref: SHA-256 of the canonical event together with the previous
  bundle_ref, so identical input always gives the identical ref.
"""

from __future__ import annotations

import hashlib
import json
import warnings
from collections.abc import Mapping
from typing import Any

from border_compliance.domain.models.compliance_state import ComplianceState
from border_compliance.domain.models.semantic_bundle import (
    InterpretationResult,
    SchemaFailure,
    SemanticBundle,
    StructuralFailure,
)

DEV_MODE_WARNING = "[DEV MODE] SemanticEngineStub in use - NOT FOR PRODUCTION"

HOLD_FLAGS = ("hold", "pending")
_SCALARS = (str, int, float, bool, type(None))


class SemanticEngineStub:
    """Rule-based interpreter returning tagged results.

    Example:
        engine = SemanticEngineStub(warn_on_init=False)
        result = engine.interpret({"event_id": "bt-001", "domain": "identity"})
        assert isinstance(result, SemanticBundle)
    """

    def __init__(self, warn_on_init: bool = True) -> None:
        if warn_on_init:
            warnings.warn(DEV_MODE_WARNING, UserWarning, stacklevel=2)
        self.interpreted: list[str] = []

    def interpret(
        self,
        event: Mapping[str, Any],
        previous_bundle_ref: str | None = None,
    ) -> InterpretationResult:
        if not isinstance(event, Mapping):
            return StructuralFailure(event_id=None, errors=("event must be an object",))

        event_id = event.get("event_id")
        structural = self._structural_errors(event)
        if structural:
            return StructuralFailure(
                event_id=event_id if isinstance(event_id, str) else None,
                errors=tuple(structural),
            )

        schema = self._schema_errors(event)
        if schema:
            return SchemaFailure(event_id=event_id, errors=tuple(schema))

        self.interpreted.append(event_id)
        return SemanticBundle(
            domain=event.get("domain"),
            aggregated_state=self._derive_state(event),
            bundle_ref=self.bundle_ref_for(event, previous_bundle_ref),
            event=event,
            previous_bundle_ref=previous_bundle_ref,
        )

    @staticmethod
    def bundle_ref_for(event: Mapping[str, Any], previous_bundle_ref: str | None) -> str:
        canonical = json.dumps(
            {"event": event, "previous_bundle_ref": previous_bundle_ref},
            sort_keys=True,
            separators=(",", ":"),
            ensure_ascii=False,
        )
        return hashlib.sha256(canonical.encode("utf-8")).hexdigest()

    @staticmethod
    def _structural_errors(event: Mapping[str, Any]) -> list[str]:
        errors = []
        event_id = event.get("event_id")
        if not isinstance(event_id, str) or not event_id.strip():
            errors.append("event_id must be a non-empty string")
        if "domain" in event and not isinstance(event["domain"], str):
            errors.append("domain must be a string")
        if "attributes" in event and not isinstance(event["attributes"], Mapping):
            errors.append("attributes must be an object")
        return errors

    @staticmethod
    def _schema_errors(event: Mapping[str, Any]) -> list[str]:
        errors = []
        if "state" in event and ComplianceState.parse(event["state"]) is None:
            errors.append(f"state must be one of valid, hold, reject (got {event['state']!r})")
        for name, value in (event.get("attributes") or {}).items():
            if not isinstance(value, _SCALARS):
                errors.append(f"attribute '{name}' must be a scalar")
        return errors

    @staticmethod
    def _derive_state(event: Mapping[str, Any]) -> str:
        if "state" in event:
            return event["state"]
        attributes = event.get("attributes") or {}
        if any(value is False for value in attributes.values()):
            return ComplianceState.REJECT.value
        if any(attributes.get(flag) is True for flag in HOLD_FLAGS):
            return ComplianceState.HOLD.value
        return ComplianceState.VALID.value
