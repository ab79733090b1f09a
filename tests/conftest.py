"""Shared pytest fixtures for the test suite."""

import pytest

from local_time_core.application.use_cases.resolve_local_time import LocalTimeResolver
from local_time_core.domain.value_objects import TimezoneRule
from local_time_core.infrastructure.civil_time_converter import TzinfoCivilTimeConverter
from local_time_core.infrastructure.rule_provider import InMemoryTimezoneRuleProvider
from local_time_core.infrastructure.timezone_rules import iana_rule, posix_rule

CET_RULE = "CET-1CEST,M3.5.0,M10.5.0/3"


@pytest.fixture
def cet_rule() -> TimezoneRule:
    """Central European Time as a POSIX rule string."""
    return posix_rule(CET_RULE)


@pytest.fixture
def paris_rule() -> TimezoneRule:
    """Central European Time from the IANA database."""
    return iana_rule("Europe/Paris")


@pytest.fixture(params=["posix", "iana"])
def central_european_rule(request: pytest.FixtureRequest) -> TimezoneRule:
    """The same CET/CEST rule in both spellings."""
    if request.param == "posix":
        return posix_rule(CET_RULE)
    return iana_rule("Europe/Paris")


@pytest.fixture
def converter() -> TzinfoCivilTimeConverter:
    return TzinfoCivilTimeConverter()


@pytest.fixture
def rule_provider(central_european_rule: TimezoneRule) -> InMemoryTimezoneRuleProvider:
    return InMemoryTimezoneRuleProvider(central_european_rule)


@pytest.fixture
def resolver(
    rule_provider: InMemoryTimezoneRuleProvider,
    converter: TzinfoCivilTimeConverter,
) -> LocalTimeResolver:
    return LocalTimeResolver(rule_provider=rule_provider, converter=converter)
