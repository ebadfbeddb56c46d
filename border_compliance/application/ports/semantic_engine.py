"""Semantic engine port.

The semantic engine is an external capability that turns one canonical
event into a tagged InterpretationResult. Failures are returned, not
raised, so callers decide how to report them.
"""

from __future__ import annotations

from typing import Any, Mapping, Protocol

from border_compliance.domain.models.semantic_bundle import InterpretationResult


class SemanticEngineProtocol(Protocol):
    """Interprets canonical events into semantic bundles."""

    def interpret(
        self,
        event: Mapping[str, Any],
        previous_bundle_ref: str | None = None,
    ) -> InterpretationResult:
        """Interpret one canonical event.

        Args:
            event: Canonical event record.
            previous_bundle_ref: Bundle ref to chain the new bundle from.

        Returns:
            SemanticBundle, StructuralFailure or SchemaFailure.
        """
        ...
