"""Mock providers for testing."""

from .clock import MockClockProvider, TickingClock
from .hooks import MockHooksProvider
from .persistence import MockPersistenceProvider
from .container import build_test_container

__all__ = [
    "MockClockProvider",
    "MockHooksProvider",
    "MockPersistenceProvider",
    "TickingClock",
    "build_test_container",
]
