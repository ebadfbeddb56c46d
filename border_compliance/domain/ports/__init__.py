"""Domain-level ports used by pure domain services."""

from border_compliance.domain.ports.authenticator import AuthenticatorProtocol

__all__: list[str] = ["AuthenticatorProtocol"]
