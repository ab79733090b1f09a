from __future__ import annotations

import logging
from datetime import UTC, date, datetime, timedelta
from typing import TYPE_CHECKING

from local_time_core.application.ports import CivilTimeConverter
from local_time_core.domain.exceptions import InvalidCivilTimeError
from local_time_core.domain.value_objects import CivilTime, DstHint, ResolvedTime
from local_time_core.domain.value_objects.resolved_time import UNIX_EPOCH

if TYPE_CHECKING:
    from datetime import tzinfo

    from local_time_core.domain.value_objects import TimezoneRule

logger = logging.getLogger(__name__)

SECONDS_PER_DAY = 86_400
DEFAULT_DST_DELTA = 3_600

_EPOCH_ORDINAL = UNIX_EPOCH.date().toordinal()


class TzinfoCivilTimeConverter(CivilTimeConverter):
    """mktime/localtime semantics on top of any tzinfo.

    Only UTC -> local conversions are asked of the tzinfo (through
    astimezone), so zoneinfo and dateutil zones behave identically even
    though they disagree on how a naive gap reading should be read.

    Local -> UTC works on the "naive seconds" of the reading, i.e. the
    wall clock counted as if it were UTC:
    1. Roll the calendar fields over (months into years, the rest into days)
    2. Collect the offsets in effect one day before and one day after
    3. Keep each offset that reproduces itself at the instant it yields
    4. Two survivors = overlap, none = gap, one = ordinary reading

    Transitions closer together than a day are outside this model.
    """

    def to_absolute(
        self,
        civil: CivilTime,
        rule: TimezoneRule,
        dst_bias: DstHint = DstHint.UNKNOWN,
    ) -> int:
        naive = naive_seconds(civil)
        before = self._offset_and_dst(naive - SECONDS_PER_DAY, rule.zone)
        after = self._offset_and_dst(naive + SECONDS_PER_DAY, rule.zone)

        valid = [
            (offset, is_dst)
            for offset, is_dst in dict.fromkeys((before, after))
            if self._offset_and_dst(naive - offset, rule.zone)[0] == offset
        ]

        if len(valid) == 1:
            return naive - valid[0][0]

        if len(valid) == 2:
            offset, _ = self._choose(valid, dst_bias, fallback=valid[-1], want_standard=True)
            logger.debug(
                "Overlap reading %s under %s resolved with offset %+d (bias=%s)",
                civil.isoformat(),
                rule.source,
                offset,
                dst_bias.value,
            )
            return naive - offset

        offset, _ = self._choose([before, after], dst_bias, fallback=before, want_standard=False)
        logger.debug(
            "Gap reading %s under %s shifted with offset %+d (bias=%s)",
            civil.isoformat(),
            rule.source,
            offset,
            dst_bias.value,
        )
        return naive - offset

    def to_civil(self, instant: int, rule: TimezoneRule) -> ResolvedTime:
        local = self._local(instant, rule.zone)
        offset = local.utcoffset() or timedelta(0)
        dst = local.dst() or timedelta(0)
        return ResolvedTime(
            absolute_instant=instant,
            normalized_civil_time=CivilTime.from_datetime(local),
            utc_offset_seconds=int(offset.total_seconds()),
            is_dst=bool(dst),
        )

    def dst_delta(self, instant: int, rule: TimezoneRule) -> int:
        year = self._local(instant, rule.zone).year
        for month in range(1, 13):
            sample = datetime(year, month, 15, tzinfo=UTC).astimezone(rule.zone)
            dst = sample.dst()
            if dst:
                return abs(int(dst.total_seconds()))
        return DEFAULT_DST_DELTA

    @staticmethod
    def _choose(
        candidates: list[tuple[int, bool]],
        dst_bias: DstHint,
        fallback: tuple[int, bool],
        want_standard: bool,
    ) -> tuple[int, bool]:
        """Pick the candidate matching the bias, else the fallback.

        want_standard says whether an UNKNOWN bias asks for the standard
        side (overlap) or just takes the fallback (gap).
        """
        if dst_bias is DstHint.DAYLIGHT:
            wanted = True
        elif dst_bias is DstHint.STANDARD or want_standard:
            wanted = False
        else:
            return fallback

        for candidate in candidates:
            if candidate[1] is wanted:
                return candidate
        return fallback

    @staticmethod
    def _local(instant: int, zone: tzinfo) -> datetime:
        return (UNIX_EPOCH + timedelta(seconds=instant)).astimezone(zone)

    def _offset_and_dst(self, instant: int, zone: tzinfo) -> tuple[int, bool]:
        local = self._local(instant, zone)
        offset = local.utcoffset() or timedelta(0)
        return int(offset.total_seconds()), bool(local.dst())


def naive_seconds(civil: CivilTime) -> int:
    """Count the wall-clock reading in seconds as if it were UTC.

    Applies the usual mktime rollover: month 13 is January of the next
    year, day 0 is the last day of the previous month, hour -1 is 23:00
    the day before, second 60 is the next minute.
    """
    years, month_index = divmod(civil.month - 1, 12)
    try:
        first_of_month = date(civil.year + years, month_index + 1, 1)
    except ValueError as e:
        raise InvalidCivilTimeError(f"Year out of range: {civil.isoformat()}") from e
    days = first_of_month.toordinal() - _EPOCH_ORDINAL + civil.day - 1
    return days * SECONDS_PER_DAY + civil.hour * 3600 + civil.minute * 60 + civil.second
