"""Test helpers for border compliance tests.

Helpers:
    FakeTimeAuthority: Controllable time authority for deterministic tests
    ScriptedOperatorConsole: Operator console answering from a script

Usage:
    from tests.helpers import FakeTimeAuthority, ScriptedOperatorConsole
"""

from tests.helpers.events import make_event, passing_events
from tests.helpers.fake_time_authority import FakeTimeAuthority
from tests.helpers.scripted_operator_console import ScriptedOperatorConsole

__all__ = [
    "FakeTimeAuthority",
    "ScriptedOperatorConsole",
    "make_event",
    "passing_events",
]
