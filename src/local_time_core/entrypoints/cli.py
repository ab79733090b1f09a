"""Command-line entrypoint: ``local-time``.

Usage:
    local-time resolve "2024-10-27 02:30" --tz "CET-1CEST,M3.5.0,M10.5.0/3"
    local-time resolve 2023-02-29 --tz Europe/Paris --prefer daylight
    local-time now --tz America/New_York
    local-time demo

Without --tz the rule comes from LOCAL_TIME_RULE, then TZ.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import TYPE_CHECKING

from local_time_core.application.use_cases.get_local_time import GetLocalTimeUseCase
from local_time_core.application.use_cases.resolve_local_time import LocalTimeResolver
from local_time_core.domain.exceptions import DomainException
from local_time_core.domain.value_objects import Ambiguous, CivilTime, DstHint
from local_time_core.infrastructure import (
    EnvironmentTimezoneRuleProvider,
    InMemoryTimezoneRuleProvider,
    SystemTimeProvider,
    TzinfoCivilTimeConverter,
    parse_rule,
)
from local_time_core.infrastructure.settings import Settings

if TYPE_CHECKING:
    from collections.abc import Sequence

    from local_time_core.application.ports import TimezoneRuleProvider
    from local_time_core.domain.value_objects import ResolutionOutcome

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_USAGE = 2

DEMO_RULE = "CET-1CEST,M3.5.0,M10.5.0/3"

DEMO_SAMPLES: tuple[tuple[str, tuple[CivilTime, ...]], ...] = (
    (
        "Summer time ON",
        (
            CivilTime(2024, 3, 31, 1, 59, 59),
            CivilTime(2024, 3, 31, 2, 0, 0),
            CivilTime(2024, 3, 31, 2, 59, 59),
            CivilTime(2024, 3, 31, 3, 0, 0),
            CivilTime(2024, 3, 31, 3, 59, 59),
            CivilTime(2024, 3, 31, 4, 0, 0),
        ),
    ),
    (
        "Summer time OFF",
        (
            CivilTime(2024, 10, 27, 1, 59, 59),
            CivilTime(2024, 10, 27, 2, 0, 0),
            CivilTime(2024, 10, 27, 2, 59, 59),
            CivilTime(2024, 10, 27, 3, 0, 0),
        ),
    ),
    (
        "Automatic correction",
        (CivilTime(2023, 2, 29, 0, 0, 0),),
    ),
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="local-time",
        description="Resolve wall-clock times across DST transitions.",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (default: LOCAL_TIME_LOG_LEVEL or WARNING)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    resolve = subparsers.add_parser("resolve", help="Resolve one or more wall-clock times")
    resolve.add_argument("times", nargs="+", metavar="DATETIME", help='e.g. "2024-10-27 02:30:00"')
    resolve.add_argument("--tz", help="IANA key or POSIX TZ rule")
    resolve.add_argument(
        "--prefer",
        choices=[DstHint.STANDARD.value, DstHint.DAYLIGHT.value],
        help="Commit to one side instead of reporting ambiguity",
    )

    now = subparsers.add_parser("now", help="Show the current local time")
    now.add_argument("--tz", help="IANA key or POSIX TZ rule")

    demo = subparsers.add_parser("demo", help="Resolve the transition samples")
    demo.add_argument("--tz", help=f"IANA key or POSIX TZ rule (default: {DEMO_RULE})")

    return parser


def render(outcome: ResolutionOutcome) -> str:
    """Format an outcome the way the reports print it."""
    if isinstance(outcome, Ambiguous):
        daylight, standard = outcome.candidates
        return f"is ambiguous ({daylight.format()} | {standard.format()})"
    return outcome.time.format()


def _rule_provider(tz: str | None, settings: Settings) -> TimezoneRuleProvider:
    if tz:
        return InMemoryTimezoneRuleProvider(parse_rule(tz))
    return EnvironmentTimezoneRuleProvider(variable=settings.rule_variable)


def _run_resolve(args: argparse.Namespace, settings: Settings) -> int:
    hint = DstHint(args.prefer) if args.prefer else DstHint.UNKNOWN
    requests = [CivilTime.parse(text, dst_hint=hint) for text in args.times]

    resolver = LocalTimeResolver(_rule_provider(args.tz, settings), TzinfoCivilTimeConverter())
    for civil in requests:
        print(f"{civil.isoformat()} : {render(resolver.resolve(civil))}")
    return EXIT_OK


def _run_now(args: argparse.Namespace, settings: Settings) -> int:
    use_case = GetLocalTimeUseCase(
        time_provider=SystemTimeProvider(),
        rule_provider=_rule_provider(args.tz, settings),
        converter=TzinfoCivilTimeConverter(),
    )
    print(f"now : {use_case.execute().format()}")
    return EXIT_OK


def _run_demo(args: argparse.Namespace, settings: Settings) -> int:
    rule_text = args.tz or settings.rule_text or DEMO_RULE
    resolver = LocalTimeResolver(
        InMemoryTimezoneRuleProvider(parse_rule(rule_text)),
        TzinfoCivilTimeConverter(),
    )

    print(f"Rule: {rule_text}")
    for title, samples in DEMO_SAMPLES:
        print(title)
        for civil in samples:
            print(f"  {civil.isoformat()} : {render(resolver.resolve(civil))}")
    return EXIT_OK


_COMMANDS = {
    "resolve": _run_resolve,
    "now": _run_now,
    "demo": _run_demo,
}


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        settings = Settings.from_environ()
        level = (args.log_level or settings.log_level).upper()
        logging.basicConfig(
            level=level,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        )
        logger.debug("Running %s", args.command)
        return _COMMANDS[args.command](args, settings)
    except (DomainException, ValueError) as e:
        print(f"error: {e}", file=sys.stderr)
        return EXIT_USAGE


if __name__ == "__main__":
    sys.exit(main())
