"""Value objects - Immutable objects defined by their attributes."""

from local_time_core.domain.value_objects.civil_time import CivilTime, DstHint
from local_time_core.domain.value_objects.resolution_outcome import (
    Ambiguous,
    Resolved,
    ResolutionOutcome,
)
from local_time_core.domain.value_objects.resolved_time import ResolvedTime
from local_time_core.domain.value_objects.timezone_rule import TimezoneRule

__all__ = [
    "Ambiguous",
    "CivilTime",
    "DstHint",
    "ResolutionOutcome",
    "Resolved",
    "ResolvedTime",
    "TimezoneRule",
]
