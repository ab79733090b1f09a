import time
from datetime import UTC, datetime

from local_time_core.application.ports import TimeProvider
from local_time_core.domain.value_objects.resolved_time import UNIX_EPOCH


class SystemTimeProvider(TimeProvider):
    """Production time provider using the system clock.

    Whatever set the system clock (NTP, an RTC) is outside this package.
    """

    def now(self) -> int:
        return int(time.time())


class FixedTimeProvider(TimeProvider):
    """Test time provider with controllable fixed instant.

    Note: This implementation is NOT thread-safe. It is intended for
    single-threaded unit tests only.
    """

    def __init__(self, instant: int) -> None:
        self._validate_instant(instant)
        self._instant = instant

    @classmethod
    def at(cls, moment: datetime) -> "FixedTimeProvider":
        """Build a provider frozen at an aware UTC datetime."""
        if moment.tzinfo is not UTC:
            raise ValueError(f"datetime must have tzinfo=UTC, got tzinfo={moment.tzinfo}")
        return cls(int((moment - UNIX_EPOCH).total_seconds()))

    def now(self) -> int:
        return self._instant

    def set_time(self, instant: int) -> None:
        """Explicitly change the fixed instant for testing scenarios."""
        self._validate_instant(instant)
        self._instant = instant

    def advance(self, seconds: int) -> None:
        self.set_time(self._instant + seconds)

    def _validate_instant(self, instant: int) -> None:
        if isinstance(instant, bool) or not isinstance(instant, int):
            raise ValueError(f"instant must be whole epoch seconds, got {instant!r}")
