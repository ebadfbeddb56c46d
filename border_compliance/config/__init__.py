"""Configuration module for the border compliance engine.

Available Configurations:
- BorderComplianceConfig: services, decision policies and logging
"""

from border_compliance.config.settings import (
    TEST_BORDER_COMPLIANCE_CONFIG,
    BorderComplianceConfig,
)

__all__ = [
    "BorderComplianceConfig",
    "TEST_BORDER_COMPLIANCE_CONFIG",
]
