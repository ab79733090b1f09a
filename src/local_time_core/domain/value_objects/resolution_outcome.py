"""Outcomes of resolving a wall-clock reading.

A resolution is either Resolved (one instant) or Ambiguous (two
instants sharing the same wall-clock label, one on each side of a
fall-back transition). Spring-forward gap readings are skipped forward
by the conversion primitive and come back as Resolved.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from local_time_core.domain.exceptions import InvalidOutcomeError
from local_time_core.domain.value_objects.civil_time import DstHint

if TYPE_CHECKING:
    from local_time_core.domain.value_objects.civil_time import CivilTime
    from local_time_core.domain.value_objects.resolved_time import ResolvedTime


@dataclass(frozen=True, slots=True)
class Resolved:
    """The reading maps to exactly one instant."""

    requested: CivilTime
    time: ResolvedTime

    @property
    def input_adjusted(self) -> bool:
        """True when rollover or a gap skip changed the wall-clock reading."""
        return not self.requested.same_wall_clock(self.time.normalized_civil_time)


@dataclass(frozen=True, slots=True)
class Ambiguous:
    """The reading occurs twice; the caller has to choose.

    daylight is the earlier occurrence (tail of DST), standard the later
    one (start of standard time). They are exactly one DST delta apart.
    """

    requested: CivilTime
    daylight: ResolvedTime
    standard: ResolvedTime

    def __post_init__(self) -> None:
        if not self.daylight.is_dst or self.standard.is_dst:
            raise InvalidOutcomeError(
                "Ambiguous candidates must be one DST and one standard reading"
            )
        if self.daylight.absolute_instant >= self.standard.absolute_instant:
            raise InvalidOutcomeError("The DST candidate must precede the standard candidate")

    @property
    def candidates(self) -> tuple[ResolvedTime, ResolvedTime]:
        """Both readings, earlier first."""
        return (self.daylight, self.standard)

    @property
    def input_adjusted(self) -> bool:
        return not self.requested.same_wall_clock(self.standard.normalized_civil_time)

    def pick(self, dst_hint: DstHint = DstHint.UNKNOWN) -> ResolvedTime:
        """Choose a candidate; UNKNOWN falls back to standard time."""
        if dst_hint is DstHint.DAYLIGHT:
            return self.daylight
        return self.standard


ResolutionOutcome = Resolved | Ambiguous
