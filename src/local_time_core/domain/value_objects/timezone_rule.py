from __future__ import annotations

from dataclasses import dataclass, field
from datetime import tzinfo

from local_time_core.domain.exceptions import InvalidTimezoneRuleError


@dataclass(frozen=True, slots=True)
class TimezoneRule:
    """An explicit timezone rule, read-only for everything that uses it.

    source is the text the rule was built from ("Europe/Paris",
    "CET-1CEST,M3.5.0,M10.5.0/3", "UTC+01:00"); two rules are equal when
    their sources are. zone is the tzinfo that answers offset and DST
    questions for UTC instants.

    Build rules through infrastructure.timezone_rules rather than by hand.
    """

    source: str
    zone: tzinfo = field(compare=False, repr=False)

    def __post_init__(self) -> None:
        if not isinstance(self.source, str) or not self.source.strip():
            raise InvalidTimezoneRuleError("Timezone rule source cannot be empty")

        if not isinstance(self.zone, tzinfo):
            raise InvalidTimezoneRuleError(
                f"Timezone rule {self.source!r} needs a tzinfo, got {type(self.zone).__name__}"
            )
