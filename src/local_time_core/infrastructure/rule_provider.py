from __future__ import annotations

import logging
import os
from functools import lru_cache
from threading import Lock
from typing import TYPE_CHECKING

from local_time_core.application.ports import TimezoneRuleProvider
from local_time_core.domain.exceptions import NoActiveRuleError
from local_time_core.infrastructure.timezone_rules import parse_rule

if TYPE_CHECKING:
    from collections.abc import Mapping

    from local_time_core.domain.value_objects import TimezoneRule

logger = logging.getLogger(__name__)

RULE_CACHE_SIZE = 32


class InMemoryTimezoneRuleProvider(TimezoneRuleProvider):
    """Holds the active rule in memory; switch it with activate().

    The lock only guards the swap itself. Ordering a switch against
    resolutions already running is left to the caller.
    """

    def __init__(self, rule: TimezoneRule | None = None) -> None:
        self._rule = rule
        self._lock = Lock()

    def active_rule(self) -> TimezoneRule:
        with self._lock:
            rule = self._rule
        if rule is None:
            raise NoActiveRuleError("No timezone rule has been activated")
        return rule

    def activate(self, rule: TimezoneRule) -> None:
        """Make rule the active one, replacing any previous rule."""
        with self._lock:
            previous, self._rule = self._rule, rule
        logger.info(
            "Activated timezone rule %s (was %s)",
            rule.source,
            previous.source if previous else None,
        )

    def deactivate(self) -> None:
        with self._lock:
            self._rule = None
        logger.info("Deactivated timezone rule")


class EnvironmentTimezoneRuleProvider(TimezoneRuleProvider):
    """Reads the rule from an environment variable on every call.

    The variable defaults to TZ, the same place the C library looks.
    Parsed rules are cached for the last RULE_CACHE_SIZE distinct values,
    shared by all instances. Changing the variable takes effect on the
    next call.
    """

    def __init__(self, variable: str = "TZ", environ: Mapping[str, str] | None = None) -> None:
        self._variable = variable
        self._environ = os.environ if environ is None else environ

    def active_rule(self) -> TimezoneRule:
        value = self._environ.get(self._variable, "").strip()
        if not value:
            raise NoActiveRuleError(f"Environment variable {self._variable} is not set")

        return _cached_rule(value)


@lru_cache(maxsize=RULE_CACHE_SIZE)
def _cached_rule(text: str) -> TimezoneRule:
    rule = parse_rule(text)
    logger.debug("Parsed %r into a timezone rule", text)
    return rule
