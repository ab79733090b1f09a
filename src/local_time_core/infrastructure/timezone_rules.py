"""Factories turning rule text into TimezoneRule values.

Two spellings are understood:
- IANA keys ("Europe/Paris"), loaded with zoneinfo; the tzdata package
  provides the database on hosts without one
- POSIX TZ strings ("CET-1CEST,M3.5.0,M10.5.0/3"), parsed by
  dateutil.tz.tzstr

Rule strings are never parsed here; both libraries do that work and
their failures are reported as InvalidTimezoneRuleError.
"""

from __future__ import annotations

import logging
import re
from datetime import timedelta, timezone
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from dateutil.tz import tzstr

from local_time_core.domain.exceptions import InvalidTimezoneRuleError
from local_time_core.domain.value_objects import TimezoneRule

logger = logging.getLogger(__name__)

MAX_FIXED_OFFSET_SECONDS = 24 * 3600 - 1

# std name followed by its offset, e.g. "CET-1" or "<+0330>-3:30"
_POSIX_HEAD = re.compile(r"^(?:[A-Za-z]{3,}|<[A-Za-z0-9+-]{3,}>)[+-]?\d")


def iana_rule(key: str) -> TimezoneRule:
    """Build a rule from an IANA database key.

    Raises:
        InvalidTimezoneRuleError: If the key is empty or unknown.
    """
    text = _require_text(key)
    try:
        zone = ZoneInfo(text)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise InvalidTimezoneRuleError(f"Unknown IANA timezone: {text!r}") from e
    return TimezoneRule(source=text, zone=zone)


def posix_rule(rule: str) -> TimezoneRule:
    """Build a rule from a POSIX TZ string such as "EST5EDT,M3.2.0,M11.1.0".

    Offsets follow POSIX sign rules: "CET-1" is one hour EAST of UTC.

    Raises:
        InvalidTimezoneRuleError: If the string does not start with a
            zone name and offset, or dateutil cannot parse it.
    """
    text = _require_text(rule)
    if not _POSIX_HEAD.match(text):
        raise InvalidTimezoneRuleError(f"Invalid POSIX timezone rule: {text!r}")
    try:
        zone = tzstr(text, posix_offset=True)
    except ValueError as e:
        raise InvalidTimezoneRuleError(f"Invalid POSIX timezone rule: {text!r}") from e
    return TimezoneRule(source=text, zone=zone)


def fixed_rule(offset_seconds: int) -> TimezoneRule:
    """Build a DST-free rule at a constant offset east of UTC."""
    if abs(offset_seconds) > MAX_FIXED_OFFSET_SECONDS:
        raise InvalidTimezoneRuleError(
            f"Fixed offset must be within +/-{MAX_FIXED_OFFSET_SECONDS}s, got {offset_seconds}"
        )
    zone = timezone(timedelta(seconds=offset_seconds))
    return TimezoneRule(source=zone.tzname(None), zone=zone)


def parse_rule(text: str) -> TimezoneRule:
    """Build a rule from either spelling, trying the IANA key first.

    Raises:
        InvalidTimezoneRuleError: If neither spelling applies.
    """
    text = _require_text(text)
    try:
        return iana_rule(text)
    except InvalidTimezoneRuleError:
        logger.debug("%r is not an IANA key, trying POSIX form", text)

    try:
        return posix_rule(text)
    except InvalidTimezoneRuleError as e:
        raise InvalidTimezoneRuleError(
            f"Not an IANA key or POSIX TZ rule: {text!r}"
        ) from e


def _require_text(text: str) -> str:
    if not isinstance(text, str) or not text.strip():
        raise InvalidTimezoneRuleError("Timezone rule cannot be empty")
    return text.strip()
