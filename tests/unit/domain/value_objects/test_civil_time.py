from datetime import UTC, datetime

import pytest

from local_time_core.domain.exceptions import InvalidCivilTimeError
from local_time_core.domain.value_objects import CivilTime, DstHint


class TestCivilTimeCreation:
    def test_creates_civil_time_with_defaults(self) -> None:
        civil = CivilTime(2024, 3, 31)

        assert civil.wall_clock == (2024, 3, 31, 0, 0, 0)
        assert civil.dst_hint is DstHint.UNKNOWN

    def test_accepts_out_of_range_fields(self) -> None:
        civil = CivilTime(2023, 13, 32, 25, -1, 60)

        assert civil.wall_clock == (2023, 13, 32, 25, -1, 60)

    def test_raises_for_float_field(self) -> None:
        with pytest.raises(InvalidCivilTimeError, match="hour"):
            CivilTime(2024, 1, 1, 1.5)  # type: ignore[arg-type]

    def test_raises_for_string_field(self) -> None:
        with pytest.raises(InvalidCivilTimeError, match="month"):
            CivilTime(2024, "3", 1)  # type: ignore[arg-type]

    def test_raises_for_bool_field(self) -> None:
        with pytest.raises(InvalidCivilTimeError, match="day"):
            CivilTime(2024, 3, True)  # type: ignore[arg-type]

    def test_raises_for_invalid_hint(self) -> None:
        with pytest.raises(InvalidCivilTimeError, match="dst_hint"):
            CivilTime(2024, 3, 1, dst_hint="daylight")  # type: ignore[arg-type]


class TestCivilTimeParse:
    def test_parses_date_and_time_with_space(self) -> None:
        civil = CivilTime.parse("2024-10-27 02:30:00")

        assert civil == CivilTime(2024, 10, 27, 2, 30, 0)

    def test_parses_date_and_time_with_t_separator(self) -> None:
        civil = CivilTime.parse("2024-10-27T02:30:15")

        assert civil == CivilTime(2024, 10, 27, 2, 30, 15)

    def test_seconds_are_optional(self) -> None:
        assert CivilTime.parse("2024-10-27 02:30") == CivilTime(2024, 10, 27, 2, 30, 0)

    def test_date_only_means_midnight(self) -> None:
        assert CivilTime.parse("2024-10-27") == CivilTime(2024, 10, 27)

    def test_accepts_non_existent_calendar_date(self) -> None:
        assert CivilTime.parse("2023-02-29") == CivilTime(2023, 2, 29)

    def test_carries_requested_hint(self) -> None:
        civil = CivilTime.parse("2024-10-27 02:30", dst_hint=DstHint.DAYLIGHT)

        assert civil.dst_hint is DstHint.DAYLIGHT

    def test_strips_surrounding_whitespace(self) -> None:
        assert CivilTime.parse("  2024-01-01 00:00  ") == CivilTime(2024, 1, 1)

    @pytest.mark.parametrize(
        "text",
        ["", "yesterday", "2024/10/27", "2024-10-27 02", "24-10-27", "2024-10-27 02:30:00+01:00"],
    )
    def test_raises_for_malformed_text(self, text: str) -> None:
        with pytest.raises(InvalidCivilTimeError, match="Invalid civil time"):
            CivilTime.parse(text)


class TestCivilTimeHelpers:
    def test_from_datetime_keeps_wall_clock_only(self) -> None:
        dt = datetime(2024, 7, 1, 12, 30, 45, 999999, tzinfo=UTC)

        assert CivilTime.from_datetime(dt) == CivilTime(2024, 7, 1, 12, 30, 45)

    def test_same_wall_clock_ignores_hint(self) -> None:
        plain = CivilTime(2024, 10, 27, 2, 30)
        hinted = plain.with_dst_hint(DstHint.STANDARD)

        assert plain != hinted
        assert plain.same_wall_clock(hinted)

    def test_earlier_by_one_hour_does_not_roll_over(self) -> None:
        civil = CivilTime(2024, 1, 1, 0, 30, 0)

        assert civil.earlier_by(3600) == CivilTime(2024, 1, 1, -1, 30, 0)

    def test_earlier_by_half_hour(self) -> None:
        civil = CivilTime(2024, 4, 7, 1, 45, 0)

        assert civil.earlier_by(1800) == CivilTime(2024, 4, 7, 1, 15, 0)

    def test_earlier_by_keeps_hint(self) -> None:
        civil = CivilTime(2024, 4, 7, 1, 45, 0, dst_hint=DstHint.DAYLIGHT)

        assert civil.earlier_by(3600).dst_hint is DstHint.DAYLIGHT

    def test_isoformat_pads_fields(self) -> None:
        assert CivilTime(2024, 3, 1, 2, 3, 4).isoformat() == "2024-03-01 02:03:04"


class TestCivilTimeImmutability:
    def test_civil_time_is_frozen(self) -> None:
        civil = CivilTime(2024, 1, 1)

        with pytest.raises(AttributeError):
            civil.hour = 5  # type: ignore[misc]
