from __future__ import annotations

from typing import TYPE_CHECKING

from local_time_core.domain.value_objects import (
    Ambiguous,
    DstHint,
    Resolved,
    ResolvedTime,
)

if TYPE_CHECKING:
    from local_time_core.application.ports import CivilTimeConverter, TimezoneRuleProvider
    from local_time_core.domain.value_objects import CivilTime, ResolutionOutcome, TimezoneRule


class LocalTimeResolver:
    """Turns a wall-clock reading into one instant, or flags it ambiguous.

    Responsibilities:
    - Read the active rule once per call
    - Let the conversion primitive normalize the calendar fields
    - Probe one DST delta earlier to detect a fall-back overlap
    - Report both candidates when the reading occurs twice

    Known limitation: a reading inside a spring-forward gap is not
    detected. It goes through the primitive's default skip-forward and
    is reported as Resolved with the adjusted wall-clock reading.

    Known limitation: ambiguity is read from is_dst alone. Zones with
    negative DST (Europe/Dublin, where winter GMT is the DST side) have
    their fall-back overlap reported as Resolved in standard time.

    Pure apart from reading the rule provider; safe to share between
    threads as long as its collaborators are.
    """

    def __init__(
        self,
        rule_provider: TimezoneRuleProvider,
        converter: CivilTimeConverter,
    ) -> None:
        self._rule_provider = rule_provider
        self._converter = converter

    def resolve(self, civil: CivilTime) -> ResolutionOutcome:
        """Resolve a wall-clock reading under the active rule.

        Args:
            civil: The reading. Fields may be out of natural range. When
                   dst_hint is STANDARD or DAYLIGHT the caller has already
                   chosen a side and no ambiguity check is made.

        Returns:
            Resolved with the normalized reading, or Ambiguous with the
            DST and standard candidates.

        Raises:
            NoActiveRuleError: No timezone rule is configured.
        """
        rule = self._rule_provider.active_rule()

        if civil.dst_hint is not DstHint.UNKNOWN:
            return self._resolve_committed(civil, rule)

        # Step 1: default conversion (standard time wins an overlap)
        t0 = self._converter.to_absolute(civil, rule)

        # Step 2: probe the same label one DST delta earlier, no rollover
        delta = self._converter.dst_delta(t0, rule)
        t1 = self._converter.to_absolute(civil.earlier_by(delta), rule)

        # Steps 3-4: read back both instants
        at_t0 = self._converter.to_civil(t0, rule)
        dst_before = self._converter.to_civil(t1, rule).is_dst

        # Step 5: DST just before, standard now -> the label occurs twice
        if dst_before and not at_t0.is_dst:
            daylight = ResolvedTime(
                absolute_instant=t0 - delta,
                normalized_civil_time=at_t0.normalized_civil_time,
                utc_offset_seconds=at_t0.utc_offset_seconds + delta,
                is_dst=True,
            )
            return Ambiguous(requested=civil, daylight=daylight, standard=at_t0)

        return Resolved(requested=civil, time=at_t0)

    def _resolve_committed(self, civil: CivilTime, rule: TimezoneRule) -> Resolved:
        instant = self._converter.to_absolute(civil, rule, civil.dst_hint)
        return Resolved(requested=civil, time=self._converter.to_civil(instant, rule))
