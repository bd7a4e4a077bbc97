"""Mock clock providers for testing."""

from datetime import datetime, timedelta, timezone

from dishka import Scope, provide

from discuss.domain.service import Clock
from discuss.util.di.infrastructure.clock import ClockProvider


class TickingClock(Clock):
    """Deterministic clock advancing one second on every read.

    Keeps creation order and timestamp order identical in tests.
    """

    def __init__(self, start: datetime | None = None) -> None:
        self.current = start or datetime(2024, 1, 15, 12, 0, tzinfo=timezone.utc)

    def now(self) -> datetime:
        self.current += timedelta(seconds=1)
        return self.current


class MockClockProvider(ClockProvider):
    """Mock clock provider."""

    __is_mock__ = True

    @provide(scope=Scope.REQUEST)
    def get_ticking_clock(self) -> TickingClock:
        """Provide the deterministic clock."""
        return TickingClock()

    @provide(scope=Scope.REQUEST)
    def get_clock(self, clock: TickingClock) -> Clock:
        """Expose the deterministic clock through the domain interface."""
        return clock
