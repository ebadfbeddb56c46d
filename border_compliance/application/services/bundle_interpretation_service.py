"""Stand-alone interpretation of canonical events.

Interprets events one by one, chaining each bundle to the previous
bundle_ref, and optionally anchors every bundle. The first event the
engine rejects stops the run.
"""

from __future__ import annotations

import re
from collections.abc import AsyncIterator, Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from border_compliance.application.ports.bundle_anchor import BundleAnchorProtocol
from border_compliance.application.ports.semantic_engine import SemanticEngineProtocol
from border_compliance.application.services.base import LoggingMixin
from border_compliance.domain.errors.input import InterpretationFailedError
from border_compliance.domain.models.anchor_record import BundleAnchorReceipt
from border_compliance.domain.models.semantic_bundle import SemanticBundle

BUNDLE_REF_HEX_REGEX = re.compile(r"^[a-f0-9]{64}$")
BUNDLE_REF_URI_REGEX = re.compile(r"^noema:bundle:sha256:([a-f0-9]{64})$")


def normalize_previous_bundle_ref(value: str) -> str | None:
    """Accept a 64-char hex ref or a noema:bundle:sha256:<hex> URI.

    Returns:
        The bare hex ref, or None if the value matches neither form.
    """
    trimmed = value.strip()
    if BUNDLE_REF_HEX_REGEX.match(trimmed):
        return trimmed
    match = BUNDLE_REF_URI_REGEX.match(trimmed)
    if match:
        return match.group(1)
    return None


@dataclass(frozen=True)
class InterpretedBundle:
    """One successfully interpreted event."""

    index: int  # 1-based position in the input
    bundle: SemanticBundle
    receipt: BundleAnchorReceipt | None = None


class BundleInterpretationService(LoggingMixin):
    """Interprets events in order, chaining bundle refs."""

    def __init__(
        self,
        engine: SemanticEngineProtocol,
        bundle_anchor: BundleAnchorProtocol | None = None,
    ) -> None:
        self._engine = engine
        self._bundle_anchor = bundle_anchor
        self._init_logger(component="interpretation")

    async def interpret(
        self,
        events: Sequence[Mapping[str, Any]],
        previous_bundle_ref: str | None = None,
    ) -> AsyncIterator[InterpretedBundle]:
        """Yield interpreted bundles as they are produced.

        Args:
            events: Canonical events in order.
            previous_bundle_ref: Ref the first bundle chains from.

        Raises:
            InterpretationFailedError: On the first structural or schema
                failure; bundles yielded before it stand.
            AnchoringError: If anchoring is enabled and fails.
        """
        log = self._log_operation("interpret", event_count=len(events))
        for index, event in enumerate(events, start=1):
            result = self._engine.interpret(event, previous_bundle_ref)
            if not isinstance(result, SemanticBundle):
                log.warning("interpretation_failed", index=index, kind=result.kind)
                raise InterpretationFailedError(index, result.kind, result.errors)

            receipt = None
            if self._bundle_anchor is not None:
                receipt = await self._bundle_anchor.anchor(result)
            log.debug("bundle_interpreted", index=index, bundle_ref=result.bundle_ref)
            yield InterpretedBundle(index=index, bundle=result, receipt=receipt)
            previous_bundle_ref = result.bundle_ref
