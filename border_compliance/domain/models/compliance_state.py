"""Compliance states and trust domain names."""

from __future__ import annotations

from enum import Enum


class ComplianceState(Enum):
    """Three-valued state of a domain or of a whole verdict."""

    VALID = "valid"
    HOLD = "hold"
    REJECT = "reject"

    @classmethod
    def parse(cls, value: object) -> ComplianceState | None:
        """Return the matching state, or None if value is outside the set."""
        if isinstance(value, cls):
            return value
        for state in cls:
            if state.value == value:
                return state
        return None


# Trust domains evaluated at the checkpoint
IDENTITY_DOMAIN = "identity"
TOKEN_DOMAIN = "token"  # vehicle
SUPPLY_DOMAIN = "supply"  # cargo

REQUIRED_DOMAINS: tuple[str, ...] = (IDENTITY_DOMAIN, TOKEN_DOMAIN, SUPPLY_DOMAIN)

# Tag used when a bundle carries no domain
UNKNOWN_DOMAIN = "unknown"

DOMAIN_LABELS: dict[str, str] = {
    IDENTITY_DOMAIN: "Driver",
    TOKEN_DOMAIN: "Vehicle",
    SUPPLY_DOMAIN: "Cargo",
}
