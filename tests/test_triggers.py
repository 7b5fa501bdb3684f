"""Tests for the APScheduler bridge."""

from datetime import UTC, datetime

import pytest
from apscheduler.triggers.cron import CronTrigger

from cronify import Converted, FailureReason, Unsupported, convert
from cronify.scheduler import next_fire_times, to_trigger, to_triggers
from cronify.scheduler.triggers import day_of_week_names

# Monday
START = datetime(2025, 1, 6, 0, 0, tzinfo=UTC)


class TestDayOfWeekNames:
    """Tests for day_of_week_names function."""

    @pytest.mark.parametrize(
        "field,expected",
        [
            ("*", "*"),
            ("0", "sun"),
            ("7", "sun"),
            ("1", "mon"),
            ("1-5", "mon,tue,wed,thu,fri"),
            ("0,6", "sun,sat"),
            ("5-1", "fri,sat,sun,mon"),
            ("1,3,5", "mon,wed,fri"),
        ],
    )
    def test_rewrite(self, field: str, expected: str) -> None:
        assert day_of_week_names(field) == expected

    @pytest.mark.parametrize("field", ["8", "mon", "1-x", ""])
    def test_invalid(self, field: str) -> None:
        with pytest.raises(ValueError):
            day_of_week_names(field)


class TestToTrigger:
    """Tests for to_trigger function."""

    def test_builds_cron_trigger(self) -> None:
        trigger = to_trigger("0 9 * * 1", timezone="UTC")
        assert isinstance(trigger, CronTrigger)

    def test_timezone(self) -> None:
        trigger = to_trigger("0 9 * * *", timezone="America/New_York")
        assert str(trigger.timezone) == "America/New_York"

    def test_monday_is_monday(self) -> None:
        """Cron's 1 is Monday even though APScheduler counts from Monday=0."""
        trigger = to_trigger("0 9 * * 1", timezone="UTC")
        fire_time = trigger.get_next_fire_time(None, datetime(2025, 1, 5, tzinfo=UTC))
        assert fire_time == datetime(2025, 1, 6, 9, 0, tzinfo=UTC)

    def test_zero_is_sunday(self) -> None:
        trigger = to_trigger("0 10 * * 0", timezone="UTC")
        fire_time = trigger.get_next_fire_time(None, START)
        assert fire_time == datetime(2025, 1, 12, 10, 0, tzinfo=UTC)

    def test_wrong_field_count(self) -> None:
        with pytest.raises(ValueError, match="Expected 5 fields"):
            to_trigger("0 9 * *")

    def test_out_of_range_value(self) -> None:
        with pytest.raises(ValueError):
            to_trigger("99 9 * * *", timezone="UTC")


class TestToTriggers:
    """Tests for to_triggers function."""

    def test_from_result(self) -> None:
        triggers = to_triggers(convert("at 9am and 5pm on weekdays"), timezone="UTC")
        assert len(triggers) == 2

    def test_from_lines(self) -> None:
        assert len(to_triggers(["0 9 * * *"], timezone="UTC")) == 1

    def test_unsupported_result(self) -> None:
        result = Unsupported(message="nope", reason=FailureReason.NO_SIGNAL)
        with pytest.raises(ValueError, match="nope"):
            to_triggers(result)


class TestNextFireTimes:
    """Tests for next_fire_times function."""

    def test_merged_and_sorted(self) -> None:
        result = Converted(crons=["0 17 * * 1-5", "0 9 * * 1-5"])
        times = next_fire_times(result, count=4, now=START, timezone="UTC")
        assert times == [
            datetime(2025, 1, 6, 9, 0, tzinfo=UTC),
            datetime(2025, 1, 6, 17, 0, tzinfo=UTC),
            datetime(2025, 1, 7, 9, 0, tzinfo=UTC),
            datetime(2025, 1, 7, 17, 0, tzinfo=UTC),
        ]

    def test_count(self) -> None:
        times = next_fire_times(["*/15 * * * *"], count=3, now=START, timezone="UTC")
        assert times == [
            datetime(2025, 1, 6, 0, 0, tzinfo=UTC),
            datetime(2025, 1, 6, 0, 15, tzinfo=UTC),
            datetime(2025, 1, 6, 0, 30, tzinfo=UTC),
        ]

    def test_weekend(self) -> None:
        times = next_fire_times(convert("every weekend at 10am"), count=2, now=START, timezone="UTC")
        assert times == [
            datetime(2025, 1, 11, 10, 0, tzinfo=UTC),
            datetime(2025, 1, 12, 10, 0, tzinfo=UTC),
        ]

    def test_duplicate_lines_collapse(self) -> None:
        times = next_fire_times(["0 9 * * *", "0 9 * * *"], count=2, now=START, timezone="UTC")
        assert times == [
            datetime(2025, 1, 6, 9, 0, tzinfo=UTC),
            datetime(2025, 1, 7, 9, 0, tzinfo=UTC),
        ]

    def test_default_now(self) -> None:
        times = next_fire_times(["* * * * *"], count=2, timezone="UTC")
        assert len(times) == 2
        assert times[0] < times[1]
