from __future__ import annotations

import re
from dataclasses import dataclass, replace
from enum import Enum
from typing import TYPE_CHECKING

from local_time_core.domain.exceptions import InvalidCivilTimeError

if TYPE_CHECKING:
    from datetime import datetime

_CIVIL_TEXT = re.compile(
    r"^(?P<year>\d{4})-(?P<month>\d{1,2})-(?P<day>\d{1,2})"
    r"(?:[T ](?P<hour>\d{1,2}):(?P<minute>\d{1,2})(?::(?P<second>\d{1,2}))?)?$"
)

_WALL_FIELDS = ("year", "month", "day", "hour", "minute", "second")


class DstHint(Enum):
    """Caller's DST assumption for a wall-clock reading."""

    UNKNOWN = "unknown"
    STANDARD = "standard"
    DAYLIGHT = "daylight"


@dataclass(frozen=True, slots=True)
class CivilTime:
    """A wall-clock reading with no absolute meaning until resolved.

    Fields are NOT range-checked: day=29 in a non-leap February, month=13
    or hour=-1 are all legal here. The conversion primitive rolls them
    over into a real calendar date, and the resolver reports that
    normalized reading back to the caller.

    second may be 60 (leap-second pass-through); it rolls into the next
    minute like any other overflow.
    """

    year: int
    month: int
    day: int
    hour: int = 0
    minute: int = 0
    second: int = 0
    dst_hint: DstHint = DstHint.UNKNOWN

    def __post_init__(self) -> None:
        for name in _WALL_FIELDS:
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidCivilTimeError(f"{name} must be an integer, got {value!r}")

        if not isinstance(self.dst_hint, DstHint):
            raise InvalidCivilTimeError(f"dst_hint must be a DstHint, got {self.dst_hint!r}")

    @classmethod
    def parse(cls, text: str, dst_hint: DstHint = DstHint.UNKNOWN) -> CivilTime:
        """Parse "YYYY-MM-DD[ HH:MM[:SS]]" (a "T" separator also works).

        Only the shape is checked, so "2023-02-29" parses fine and is
        normalized to March 1st on resolution.

        Raises:
            InvalidCivilTimeError: If the text does not have that shape.
        """
        match = _CIVIL_TEXT.match(text.strip())
        if match is None:
            raise InvalidCivilTimeError(f"Invalid civil time: {text!r}")

        fields = {name: int(match.group(name) or 0) for name in _WALL_FIELDS}
        return cls(**fields, dst_hint=dst_hint)

    @classmethod
    def from_datetime(cls, dt: datetime) -> CivilTime:
        """Take the wall-clock fields of dt; any tzinfo is ignored."""
        return cls(
            year=dt.year,
            month=dt.month,
            day=dt.day,
            hour=dt.hour,
            minute=dt.minute,
            second=dt.second,
        )

    @property
    def wall_clock(self) -> tuple[int, int, int, int, int, int]:
        return (self.year, self.month, self.day, self.hour, self.minute, self.second)

    def same_wall_clock(self, other: CivilTime) -> bool:
        """Compare readings field by field, ignoring the DST hint."""
        return self.wall_clock == other.wall_clock

    def with_dst_hint(self, dst_hint: DstHint) -> CivilTime:
        return replace(self, dst_hint=dst_hint)

    def earlier_by(self, seconds: int) -> CivilTime:
        """Subtract seconds from the time fields WITHOUT calendar rollover.

        The result may hold hour=-1 or minute=-30. It is only ever fed
        back into the conversion primitive, which normalizes it.
        """
        hours, remainder = divmod(seconds, 3600)
        minutes, secs = divmod(remainder, 60)
        return replace(
            self,
            hour=self.hour - hours,
            minute=self.minute - minutes,
            second=self.second - secs,
        )

    def isoformat(self) -> str:
        return (
            f"{self.year:04d}-{self.month:02d}-{self.day:02d} "
            f"{self.hour:02d}:{self.minute:02d}:{self.second:02d}"
        )
