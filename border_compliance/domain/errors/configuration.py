"""Configuration errors."""

from border_compliance.domain.exceptions import BorderComplianceError


class ConfigurationError(BorderComplianceError):
    """Environment configuration is missing or invalid."""

    def __init__(self, key: str, message: str) -> None:
        self.key = key
        super().__init__(f"{key}: {message}")
