"""Domain exceptions for local-time-core.

Exception hierarchy:
    DomainException (base)
    ├── Context Errors
    │   └── NoActiveRuleError
    └── Validation Errors
        ├── InvalidTimezoneRuleError
        ├── InvalidCivilTimeError
        └── InvalidOutcomeError

An ambiguous wall-clock reading is NOT an error: it is reported as an
Ambiguous outcome. Calendar normalization (Feb 29 -> Mar 1) is not an
error either; callers compare the requested and normalized readings.
"""

from __future__ import annotations


class DomainException(Exception):
    """Base exception for all domain-level errors.

    All domain exceptions inherit from this class to enable
    catching domain errors distinctly from library errors.
    """


# =============================================================================
# Context Errors
# =============================================================================


class NoActiveRuleError(DomainException):
    """Raised when no timezone rule is active for the conversion.

    Fatal to the call. Retrying cannot succeed until a rule is
    configured, so nothing in this package retries it.
    """


# =============================================================================
# Validation Errors
# =============================================================================


class InvalidTimezoneRuleError(DomainException):
    """Raised when a rule string is neither an IANA key nor a POSIX TZ rule.

    Examples: empty text, "Mars/Olympus_Mons", "CET-1CEST,M13.5.0".
    """


class InvalidCivilTimeError(DomainException):
    """Raised when a civil time cannot be built at all.

    Out-of-range fields (day=32, month=13, hour=-1) are accepted and
    normalized later. This error covers non-integer fields and text
    that does not look like a date.
    """


class InvalidOutcomeError(DomainException):
    """Raised when an Ambiguous outcome is built from mismatched candidates.

    The resolver never does this; it guards hand-built outcomes.
    """
