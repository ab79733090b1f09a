from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime, timedelta, timezone
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from local_time_core.domain.value_objects.civil_time import CivilTime

UNIX_EPOCH = datetime(1970, 1, 1, tzinfo=UTC)

DISPLAY_FORMAT = "%Y-%m-%d %H:%M:%S %z"


@dataclass(frozen=True, slots=True)
class ResolvedTime:
    """A wall-clock reading pinned to one absolute instant.

    absolute_instant is in seconds since the Unix epoch.
    normalized_civil_time is the reading after any calendar rollover or
    gap skip, so it may differ from what the caller asked for.
    """

    absolute_instant: int
    normalized_civil_time: CivilTime
    utc_offset_seconds: int
    is_dst: bool

    @property
    def utc_offset(self) -> timedelta:
        return timedelta(seconds=self.utc_offset_seconds)

    def as_datetime(self) -> datetime:
        """Return an aware datetime carrying the resolved fixed offset."""
        fixed = timezone(self.utc_offset)
        return (UNIX_EPOCH + timedelta(seconds=self.absolute_instant)).astimezone(fixed)

    def format(self) -> str:
        """Render as "YYYY-MM-DD HH:MM:SS +HHMM"."""
        return self.as_datetime().strftime(DISPLAY_FORMAT)
