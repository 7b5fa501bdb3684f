"""Tests for scheduling cue extraction."""

import pytest

from cronify.engine import extract, normalize
from cronify.engine.extractor import clamp_digits, expand_weekday_range
from cronify.locales import load_bundle
from cronify.models import ExtractedSignals, LocaleBundle, ParsedTime


def signals_for(text: str, locale: LocaleBundle) -> ExtractedSignals:
    return extract(normalize(text), locale)


class TestHelpers:
    """Tests for extractor helpers."""

    def test_expand_weekday_range(self) -> None:
        assert expand_weekday_range(1, 5) == [1, 2, 3, 4, 5]
        assert expand_weekday_range(3, 3) == [3]

    def test_expand_weekday_range_wraps(self) -> None:
        assert expand_weekday_range(5, 1) == [5, 6, 0, 1]

    def test_clamp_digits(self) -> None:
        assert clamp_digits("15", 1, 59) == 15
        assert clamp_digits("0", 1, 59) == 1
        assert clamp_digits("90", 1, 59) == 59
        assert clamp_digits("0007", 1, 59) == 7

    def test_clamp_huge_run(self) -> None:
        """Very long digit runs clamp without building a huge integer."""
        assert clamp_digits("9" * 10_000, 1, 23) == 23


class TestDates:
    """Tests for month, weekday and day-of-month extraction."""

    def test_weekdays(self, en: LocaleBundle) -> None:
        assert signals_for("every Monday and Friday", en).weekdays == {1, 5}

    def test_weekday_abbreviations(self, en: LocaleBundle) -> None:
        assert signals_for("mon, wed, fri", en).weekdays == {1, 3, 5}

    def test_months(self, en: LocaleBundle) -> None:
        assert signals_for("in January and March", en).months == {1, 3}

    def test_quarterly_injects_months(self, en: LocaleBundle) -> None:
        assert signals_for("quarterly", en).months == {1, 4, 7, 10}

    def test_monthly_is_not_monday(self, en: LocaleBundle) -> None:
        """Abbreviations inside longer words do not count."""
        signals = signals_for("monthly", en)
        assert signals.months == set()
        assert signals.weekdays == set()

    def test_month_days(self, en: LocaleBundle) -> None:
        assert signals_for("on the 1st and 15th", en).month_days == {1, 15}

    def test_month_day_out_of_range_ignored(self, en: LocaleBundle) -> None:
        assert signals_for("on the 45th", en).month_days == set()

    def test_spanish_weekday_range(self, es: LocaleBundle) -> None:
        assert signals_for("de lunes a viernes", es).weekdays == {1, 2, 3, 4, 5}

    def test_spanish_weekday_range_wraps(self, es: LocaleBundle) -> None:
        assert signals_for("de viernes a lunes", es).weekdays == {5, 6, 0, 1}

    def test_spanish_month_day(self, es: LocaleBundle) -> None:
        assert signals_for("el día 15", es).month_days == {15}

    def test_chinese_weekday_inside_every_week(self, zh: LocaleBundle) -> None:
        assert signals_for("每周一", zh).weekdays == {1}

    def test_chinese_month_day(self, zh: LocaleBundle) -> None:
        assert signals_for("每月1号和15号", zh).month_days == {1, 15}


class TestIntervals:
    """Tests for interval and minute-past-hour extraction."""

    def test_every_n_minutes(self, en: LocaleBundle) -> None:
        assert signals_for("every 15 minutes", en).every_n_minutes == 15

    def test_every_n_hours(self, en: LocaleBundle) -> None:
        assert signals_for("every 2 hours", en).every_n_hours == 2

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("every 90 minutes", 59),
            ("every 0 minutes", 1),
            ("every 000000000005 minutes", 5),
        ],
    )
    def test_minute_interval_clamped(self, en: LocaleBundle, text: str, expected: int) -> None:
        assert signals_for(text, en).every_n_minutes == expected

    def test_hour_interval_clamped(self, en: LocaleBundle) -> None:
        assert signals_for("every 30 hours", en).every_n_hours == 23

    def test_minute_past_hour(self, en: LocaleBundle) -> None:
        assert signals_for("at :30 past every hour", en).minute_past_hour == 30

    def test_chinese_interval(self, zh: LocaleBundle) -> None:
        assert signals_for("每15分钟", zh).every_n_minutes == 15
        assert signals_for("每隔2小时", zh).every_n_hours == 2


class TestWindow:
    """Tests for hour window extraction."""

    def test_window(self, en: LocaleBundle) -> None:
        assert signals_for("between 9am and 5pm", en).window == (9, 17)

    def test_window_is_ordered(self, en: LocaleBundle) -> None:
        assert signals_for("between 5pm and 9am", en).window == (9, 17)

    def test_window_with_invalid_bound(self, en: LocaleBundle) -> None:
        assert signals_for("between 25 and 3", en).window is None

    def test_spanish_window_with_article_on_both_bounds(self, es: LocaleBundle) -> None:
        assert signals_for("cada 15 minutos entre las 9 y las 17", es).window == (9, 17)

    def test_chinese_window(self, zh: LocaleBundle) -> None:
        signals = signals_for("从9点到17点", zh)
        assert signals.window == (9, 17)
        assert signals.times == []


class TestTimes:
    """Tests for explicit time extraction."""

    def test_single_time(self, en: LocaleBundle) -> None:
        assert signals_for("every day at 6:30pm", en).times == [ParsedTime(18, 30)]

    def test_chained_times_keep_order(self, en: LocaleBundle) -> None:
        assert signals_for("at 5pm and 9am", en).times == [
            ParsedTime(17, 0),
            ParsedTime(9, 0),
        ]

    def test_comma_separated_times(self, en: LocaleBundle) -> None:
        assert signals_for("at 9am, 1pm and 5pm", en).times == [
            ParsedTime(9, 0),
            ParsedTime(13, 0),
            ParsedTime(17, 0),
        ]

    def test_repeated_time_kept_once(self, en: LocaleBundle) -> None:
        assert signals_for("at 9am and 5pm and 9am", en).times == [
            ParsedTime(9, 0),
            ParsedTime(17, 0),
        ]

    def test_invalid_time_dropped(self, en: LocaleBundle) -> None:
        assert signals_for("at 25:00", en).times == []

    def test_no_lead_in_no_time(self, en: LocaleBundle) -> None:
        """English times need "at" in front of them."""
        assert signals_for("every monday 9am", en).times == []

    def test_chinese_compact_times(self, zh: LocaleBundle) -> None:
        assert signals_for("每天9点和17点", zh).times == [ParsedTime(9, 0), ParsedTime(17, 0)]

    def test_chinese_duplicate_phrase_collapsed(self, zh: LocaleBundle) -> None:
        """"中午" and "12点" next to each other are one time."""
        assert signals_for("每天中午12点", zh).times == [ParsedTime(12, 0)]

    def test_chinese_period_prefix(self, zh: LocaleBundle) -> None:
        assert signals_for("每天下午3点半", zh).times == [ParsedTime(15, 30)]

    def test_spanish_time(self, es: LocaleBundle) -> None:
        assert signals_for("todos los días a las 5 de la tarde", es).times == [ParsedTime(17, 0)]


class TestCustomBundle:
    """Extraction runs purely off bundle data."""

    def test_unregistered_bundle(self) -> None:
        bundle = load_bundle(
            """
code: xx
name: Test
weekdays:
  lundi: 1
  mardi: 2
  mercredi: 3
  jeudi: 4
  vendredi: 5
  samedi: 6
  dimanche: 0
months:
  janvier: 1
keywords:
  every: [chaque]
  at: [à]
"""
        )
        signals = extract("chaque lundi à 9", bundle)
        assert signals.weekdays == {1}
        assert signals.times == [ParsedTime(9, 0)]

    def test_nothing_found(self, en: LocaleBundle) -> None:
        assert not signals_for("hello world", en).has_any_signal()
