"""Time Authority Protocol - interface for timestamp provisioning.

Services that need timestamps inject a TimeAuthorityProtocol
implementation instead of reading the system clock directly, so proof
payloads can be hashed deterministically in tests.
"""

from abc import ABC, abstractmethod
from datetime import datetime


class TimeAuthorityProtocol(ABC):
    """Abstract interface for time authority.

    For production:
        Use SystemTimeAuthority from infrastructure/adapters/

    For testing:
        Use FakeTimeAuthority from tests/helpers/fake_time_authority.py
    """

    @abstractmethod
    def now(self) -> datetime:
        """Return current time with timezone awareness (UTC)."""
        ...

    @abstractmethod
    def monotonic(self) -> float:
        """Return monotonic clock value for measuring elapsed time.

        Only differences between values are meaningful.
        """
        ...

    def epoch_millis(self) -> int:
        """Return now() as integer milliseconds since the Unix epoch."""
        return int(self.now().timestamp() * 1000)
