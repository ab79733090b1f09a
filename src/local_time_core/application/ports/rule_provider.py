from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from local_time_core.domain.value_objects import TimezoneRule


class TimezoneRuleProvider(ABC):
    """Port for the currently active timezone rule.

    Contract:
    - active_rule() MUST return the rule in force at the moment of the call
    - active_rule() MUST raise NoActiveRuleError when none is configured
    - Readers never mutate the rule; changing it is the provider's concern

    Callers that switch rules while resolutions are running are
    responsible for ordering those switches. Each resolution reads the
    rule once, so a switch never splits a single resolution across two
    rules.
    """

    @abstractmethod
    def active_rule(self) -> TimezoneRule:
        """Return the active rule.

        Raises:
            NoActiveRuleError: If no rule is configured.
        """
