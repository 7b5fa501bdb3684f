"""Field resolution: merge extracted cues into five cron fields.

Several cues can target the same field, so precedence is spelled out as an
ordered table of rules. Rules run top to bottom and a later rule may
overwrite what an earlier one set. Reordering ``RULES`` changes behaviour.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field

from cronify.models import CronFields, ExtractedSignals, LocaleBundle

from .formatter import format_cron
from .patterns import LocalePatterns, get_patterns


def list_to_cron(values: Iterable[int], domain_size: int) -> str:
    """Render a set of values as a cron list.

    Empty selections and selections covering the whole domain become ``*``.

    Examples:
        >>> list_to_cron([5, 1, 5], 7)
        '1,5'
        >>> list_to_cron(range(1, 13), 12)
        '*'
    """
    unique = sorted(set(values))
    if not unique or len(unique) == domain_size:
        return "*"
    return ",".join(str(v) for v in unique)


@dataclass
class Resolution:
    """Working state while the rule table runs."""

    text: str
    signals: ExtractedSignals
    patterns: LocalePatterns
    fields: CronFields = field(default_factory=CronFields)
    scan: str = ""

    def __post_init__(self) -> None:
        # Keyword rules look at text with weekday names blanked out.
        self.scan = self.patterns.mask_day_names(self.text)

    def says(self, pattern_name: str) -> bool:
        """Whether the keyword pattern ``pattern_name`` occurs in the text."""
        return getattr(self.patterns, pattern_name).search(self.scan) is not None

    @property
    def clock_is_default(self) -> bool:
        return self.fields.minute == "*" and self.fields.hour == "*"

    @property
    def window(self) -> str:
        low, high = self.signals.window or (0, 0)
        return f"{low}-{high}"


@dataclass(frozen=True)
class Rule:
    """One precedence step: when ``applies`` holds, ``apply`` edits the fields."""

    name: str
    applies: Callable[[Resolution], bool]
    apply: Callable[[Resolution], None]


def _set(**values: str) -> Callable[[Resolution], None]:
    def apply(r: Resolution) -> None:
        for name, value in values.items():
            setattr(r.fields, name, value)

    return apply


def _midnight_if_clock_default(r: Resolution) -> None:
    if r.clock_is_default:
        r.fields.minute = "0"
        r.fields.hour = "0"


def _top_of_hour_if_minute_default(r: Resolution) -> None:
    if r.fields.minute == "*":
        r.fields.minute = "0"
        r.fields.hour = "*"


def _weekly(r: Resolution) -> None:
    _midnight_if_clock_default(r)
    r.fields.day_of_week = "0"


def _monthly(r: Resolution) -> None:
    _midnight_if_clock_default(r)
    r.fields.day_of_month = "1"


def _every_n_hours(r: Resolution) -> None:
    r.fields.hour = f"*/{r.signals.every_n_hours}"
    if r.fields.minute == "*":
        r.fields.minute = "0"


def _single_time(r: Resolution) -> None:
    (time,) = r.signals.times
    r.fields.minute = time.minute_field
    r.fields.hour = time.hour_field


def _window_hours(r: Resolution) -> None:
    r.fields.hour = r.window


def _window_every_minute(r: Resolution) -> None:
    r.fields.hour = r.window
    r.fields.minute = "*"


def _hourly_cadence(r: Resolution) -> bool:
    return r.says("every_hour") or r.says("hourly")


RULES: tuple[Rule, ...] = (
    # 1. month
    Rule(
        "months",
        lambda r: bool(r.signals.months),
        lambda r: _set(month=list_to_cron(r.signals.months, 12))(r),
    ),
    # 2. day of week: generic keywords, then explicit weekdays
    Rule(
        "weekday-keyword",
        lambda r: r.patterns.weekday_keyword.search(r.text) is not None,
        _set(day_of_week="1-5"),
    ),
    Rule(
        "weekend-keyword",
        lambda r: r.patterns.weekend_keyword.search(r.text) is not None,
        _set(day_of_week="0,6"),
    ),
    Rule(
        "weekdays",
        lambda r: bool(r.signals.weekdays),
        lambda r: _set(day_of_week=list_to_cron(r.signals.weekdays, 7))(r),
    ),
    # 3. day of month
    Rule(
        "month-days",
        lambda r: bool(r.signals.month_days),
        lambda r: _set(day_of_month=list_to_cron(r.signals.month_days, 31))(r),
    ),
    # 4. intervals
    Rule(
        "every-n-minutes",
        lambda r: r.signals.every_n_minutes is not None,
        lambda r: _set(minute=f"*/{r.signals.every_n_minutes}")(r),
    ),
    Rule("every-n-hours", lambda r: r.signals.every_n_hours is not None, _every_n_hours),
    # 5. bare recurrence phrases
    Rule(
        "every-minute",
        lambda r: r.says("every_minute") and r.clock_is_default,
        _set(minute="*", hour="*"),
    ),
    Rule("every-hour", lambda r: r.says("every_hour"), _top_of_hour_if_minute_default),
    Rule("every-day", lambda r: r.says("every_day"), _midnight_if_clock_default),
    Rule("every-week", lambda r: r.says("every_week"), _weekly),
    Rule("every-month", lambda r: r.says("every_month"), _monthly),
    # 6. frequency words, same effects as step 5
    Rule("hourly", lambda r: r.says("hourly"), _top_of_hour_if_minute_default),
    Rule("daily", lambda r: r.says("daily"), _midnight_if_clock_default),
    Rule("weekly", lambda r: r.says("weekly"), _weekly),
    Rule("monthly", lambda r: r.says("monthly"), _monthly),
    # 7. ":MM past every hour"
    Rule(
        "minute-past-hour",
        lambda r: r.signals.minute_past_hour is not None,
        lambda r: _set(minute=str(r.signals.minute_past_hour), hour="*")(r),
    ),
    # 8. one explicit time
    Rule("single-time", lambda r: len(r.signals.times) == 1, _single_time),
    # 9. midnight / noon
    Rule("midnight", lambda r: r.says("midnight"), _set(minute="0", hour="0")),
    Rule("noon", lambda r: r.says("noon"), _set(minute="0", hour="12")),
    # 10. hour window, three exclusive cases
    Rule(
        "window-with-minute-interval",
        lambda r: r.signals.window is not None and r.signals.every_n_minutes is not None,
        _window_hours,
    ),
    Rule(
        "window-with-hourly",
        lambda r: (
            r.signals.window is not None
            and r.signals.every_n_minutes is None
            and _hourly_cadence(r)
        ),
        _window_hours,
    ),
    Rule(
        "window-alone",
        lambda r: (
            r.signals.window is not None
            and r.signals.every_n_minutes is None
            and not _hourly_cadence(r)
            and not r.signals.times
        ),
        _window_every_minute,
    ),
    # 11. an explicit date is not narrowed by an incidental weekday
    Rule(
        "date-clears-weekday",
        lambda r: (
            r.fields.day_of_month != "*"
            and bool(r.signals.month_days)
            and not r.signals.weekdays
        ),
        _set(day_of_week="*"),
    ),
)


def resolve_fields(text: str, signals: ExtractedSignals, locale: LocaleBundle) -> CronFields:
    """Run the rule table over ``signals``.

    Args:
        text: Normalized input text (keyword rules consult it directly).
        signals: Cues from the extractor.
        locale: Active locale bundle.

    Returns:
        The resolved CronFields.
    """
    resolution = Resolution(text=text, signals=signals, patterns=get_patterns(locale))
    for rule in RULES:
        if rule.applies(resolution):
            rule.apply(resolution)
    return resolution.fields


def expand_times(text: str, signals: ExtractedSignals, locale: LocaleBundle) -> list[str]:
    """One cron line per explicit time, sharing the date fields.

    The date fields come from a resolution run with the times removed; each
    time then supplies its own minute and hour, in extraction order.
    """
    base = resolve_fields(text, dataclasses.replace(signals, times=[]), locale)
    return [
        format_cron(
            dataclasses.replace(base, minute=time.minute_field, hour=time.hour_field)
        )
        for time in signals.times
    ]
