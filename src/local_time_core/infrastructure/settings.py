from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping

RULE_VARIABLES = ("LOCAL_TIME_RULE", "TZ")
LOG_LEVEL_VARIABLE = "LOCAL_TIME_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True, slots=True)
class Settings:
    """Process configuration read from the environment.

    rule_variable names the variable the rule came from, so a
    provider can keep re-reading the same place.
    """

    rule_text: str | None
    rule_variable: str
    log_level: str

    @classmethod
    def from_environ(cls, environ: Mapping[str, str] | None = None) -> Settings:
        env = os.environ if environ is None else environ

        rule_text = None
        rule_variable = RULE_VARIABLES[-1]
        for variable in RULE_VARIABLES:
            value = env.get(variable, "").strip()
            if value:
                rule_text, rule_variable = value, variable
                break

        log_level = env.get(LOG_LEVEL_VARIABLE, DEFAULT_LOG_LEVEL).strip().upper() or DEFAULT_LOG_LEVEL
        if not isinstance(logging.getLevelName(log_level), int):
            raise ValueError(f"{LOG_LEVEL_VARIABLE} must be a logging level name, got {log_level!r}")

        return cls(rule_text=rule_text, rule_variable=rule_variable, log_level=log_level)
