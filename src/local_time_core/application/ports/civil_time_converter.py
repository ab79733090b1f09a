from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from local_time_core.domain.value_objects import DstHint

if TYPE_CHECKING:
    from local_time_core.domain.value_objects import CivilTime, ResolvedTime, TimezoneRule


class CivilTimeConverter(ABC):
    """Port for the civil <-> absolute conversion primitive.

    This is the "mktime"/"localtime" pair, parameterized by an explicit
    rule instead of process-wide state.

    Contract:
    - to_absolute() MUST accept out-of-range fields and roll them over
    - to_absolute() with an UNKNOWN bias MUST prefer standard time for an
      overlap reading and skip forward for a gap reading
    - to_civil() MUST report the offset and DST flag actually in effect
    - All methods are pure: no state is read except the rule argument
    """

    @abstractmethod
    def to_absolute(
        self,
        civil: CivilTime,
        rule: TimezoneRule,
        dst_bias: DstHint = DstHint.UNKNOWN,
    ) -> int:
        """Convert a wall-clock reading to epoch seconds under rule.

        Args:
            civil: The reading; fields may be out of natural range.
            rule: The timezone rule to interpret the reading with.
            dst_bias: Preferred side when the reading is ambiguous or
                      falls in a gap. Ignored for ordinary readings.

        Returns:
            Seconds since the Unix epoch.
        """

    @abstractmethod
    def to_civil(self, instant: int, rule: TimezoneRule) -> ResolvedTime:
        """Convert epoch seconds to the wall-clock reading under rule."""

    @abstractmethod
    def dst_delta(self, instant: int, rule: TimezoneRule) -> int:
        """Seconds between the DST and standard offsets around instant.

        Returns the conventional one hour (3600) when the rule has no DST
        in that year.
        """
