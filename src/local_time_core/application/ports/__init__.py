"""Ports - Abstract interfaces for external dependencies.

Ports define the contracts that infrastructure adapters must implement.
This allows the application layer to remain decoupled from concrete implementations.
"""

from local_time_core.application.ports.civil_time_converter import CivilTimeConverter
from local_time_core.application.ports.rule_provider import TimezoneRuleProvider
from local_time_core.application.ports.time_provider import TimeProvider

__all__ = [
    "CivilTimeConverter",
    "TimeProvider",
    "TimezoneRuleProvider",
]
