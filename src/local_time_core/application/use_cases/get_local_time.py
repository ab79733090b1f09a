from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from local_time_core.application.ports import (
        CivilTimeConverter,
        TimeProvider,
        TimezoneRuleProvider,
    )
    from local_time_core.domain.value_objects import ResolvedTime


class GetLocalTimeUseCase:
    """Reads the clock and expresses "now" under the active rule.

    An instant always has exactly one local reading, so there is no
    ambiguity to report here.
    """

    def __init__(
        self,
        time_provider: TimeProvider,
        rule_provider: TimezoneRuleProvider,
        converter: CivilTimeConverter,
    ) -> None:
        self._time_provider = time_provider
        self._rule_provider = rule_provider
        self._converter = converter

    def execute(self) -> ResolvedTime:
        """Return the current local reading.

        Raises:
            NoActiveRuleError: No timezone rule is configured.
        """
        rule = self._rule_provider.active_rule()
        return self._converter.to_civil(self._time_provider.now(), rule)
