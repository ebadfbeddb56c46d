"""Per-bundle anchoring port used by the interpret command."""

from __future__ import annotations

from abc import ABC, abstractmethod

from border_compliance.domain.models.anchor_record import BundleAnchorReceipt
from border_compliance.domain.models.semantic_bundle import SemanticBundle


class BundleAnchorProtocol(ABC):
    """Anchors the bundle_ref of a single semantic bundle."""

    @abstractmethod
    async def anchor(self, bundle: SemanticBundle) -> BundleAnchorReceipt:
        """Anchor a bundle.

        Raises:
            AnchoringError: If the anchor could not be recorded.
        """
        ...
