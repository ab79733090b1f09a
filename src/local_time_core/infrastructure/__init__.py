"""Infrastructure layer - Concrete implementations of ports.

This layer contains:
- Conversion: mktime/localtime semantics over zoneinfo and dateutil zones
- Timezone Rules: Factories for IANA keys and POSIX TZ strings
- Rule Providers: In-memory and environment-backed active rule
- Time Provider: Clock abstraction for testability
- Settings: Environment configuration

Infrastructure adapters implement the ports defined in the application layer.
"""

from local_time_core.infrastructure.civil_time_converter import TzinfoCivilTimeConverter
from local_time_core.infrastructure.rule_provider import (
    EnvironmentTimezoneRuleProvider,
    InMemoryTimezoneRuleProvider,
)
from local_time_core.infrastructure.time_provider import FixedTimeProvider, SystemTimeProvider
from local_time_core.infrastructure.timezone_rules import (
    fixed_rule,
    iana_rule,
    parse_rule,
    posix_rule,
)

__all__ = [
    "EnvironmentTimezoneRuleProvider",
    "FixedTimeProvider",
    "InMemoryTimezoneRuleProvider",
    "SystemTimeProvider",
    "TzinfoCivilTimeConverter",
    "fixed_rule",
    "iana_rule",
    "parse_rule",
    "posix_rule",
]
