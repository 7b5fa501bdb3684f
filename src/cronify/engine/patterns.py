"""Compiled per-locale regular expressions.

Every pattern here is built from literal keyword alternations and bounded or
single-level quantifiers only: no backreferences and no quantified groups that
themselves contain unbounded quantifiers. That keeps matching close to linear
in the input length even for long, repetitive text.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass
from functools import lru_cache

from cronify.locales import resolve
from cronify.models import LocaleBundle

# Matches nothing; used when a locale has no words for a category.
NEVER = r"(?!)"

TWO_DIGITS = r"\d{2}"
ONE_OR_TWO_DIGITS = r"\d{1,2}"

SIGNAL_CATEGORIES = (
    "every",
    "hourly",
    "daily",
    "weekly",
    "monthly",
    "weekday",
    "weekend",
    "midnight",
    "noon",
    "minute",
    "hour",
    "day",
    "week",
    "month",
)


def alternation(words: Iterable[str]) -> str:
    """Escaped alternation of ``words``, longest first so prefixes lose."""
    unique = sorted({w for w in words if w}, key=lambda w: (-len(w), w))
    if not unique:
        return NEVER
    return "|".join(re.escape(w) for w in unique)


@dataclass(frozen=True)
class LocalePatterns:
    """All regular expressions the engine needs for one locale."""

    locale: LocaleBundle
    sep: str
    weekday: re.Pattern[str]
    weekday_range: re.Pattern[str] | None
    month: re.Pattern[str]
    quarterly: re.Pattern[str]
    day_of_month: re.Pattern[str]
    day_chain: re.Pattern[str]
    every_n_minutes: re.Pattern[str]
    every_n_hours: re.Pattern[str]
    minute_past_hour: re.Pattern[str]
    window: re.Pattern[str]
    lead_in: re.Pattern[str]
    time_chain: re.Pattern[str]
    time: re.Pattern[str]
    compact_time: re.Pattern[str] | None
    fixed_time: re.Pattern[str] | None
    nth_weekday: re.Pattern[str]
    business_day: re.Pattern[str]
    last_day: re.Pattern[str]
    weekday_keyword: re.Pattern[str]
    weekend_keyword: re.Pattern[str]
    every_minute: re.Pattern[str]
    every_hour: re.Pattern[str]
    every_day: re.Pattern[str]
    every_week: re.Pattern[str]
    every_month: re.Pattern[str]
    hourly: re.Pattern[str]
    daily: re.Pattern[str]
    weekly: re.Pattern[str]
    monthly: re.Pattern[str]
    midnight: re.Pattern[str]
    noon: re.Pattern[str]
    signal_keyword: re.Pattern[str]
    day_names: re.Pattern[str] | None

    @property
    def segmented(self) -> bool:
        return self.locale.segmented

    def mask_day_names(self, text: str) -> str:
        """Blank out weekday names so "每周一" is not read as "每周".

        Only unsegmented locales need this; word boundaries do the job
        elsewhere. The text keeps its length so positions stay valid.
        """
        if self.day_names is None:
            return text
        return self.day_names.sub(lambda m: " " * len(m.group()), text)


def time_source(locale: LocaleBundle, *, named: bool = True, compact: bool = False) -> str:
    """Regex source for a single time phrase.

    Args:
        locale: Bundle providing suffixes, half-past markers and periods.
        named: Use named groups (only valid once per compiled pattern).
        compact: Require an hour suffix or a colon, for scanning text without
            a lead-in word.
    """
    # The compact form repeats the minute group.
    named = named and not compact

    def group(name: str, body: str) -> str:
        return f"(?P<{name}>{body})" if named else f"(?:{body})"

    periods = alternation(locale.periods)
    hour_suffix = alternation(locale.hour_suffixes)
    minute_suffix = alternation(locale.minute_suffixes)
    half = alternation(locale.half_past)

    prefix = f"(?:{group('pre', periods)}\\s?)?" if locale.periods else ""

    minute_parts = [f"[:：]{group('minute', TWO_DIGITS)}"]
    if locale.half_past:
        minute_parts.append(f"\\s?{group('half', half)}")
    if locale.minute_suffixes:
        minute_parts.append(f"{group('minutes', ONE_OR_TWO_DIGITS)}(?:{minute_suffix})")
    minute_tail = "(?:" + "|".join(minute_parts) + ")"

    hour = group("hour", ONE_OR_TWO_DIGITS)
    if compact:
        # Colon form, or suffix form with an optional minute part.
        suffix_tail = "(?:" + "|".join(minute_parts[1:]) + ")?" if minute_parts[1:] else ""
        if locale.hour_suffixes:
            hour_form = (
                f"{hour}(?:[:：]{group('minute', TWO_DIGITS)}"
                f"|\\s?(?:{hour_suffix}){suffix_tail})"
            )
        else:
            hour_form = f"{hour}[:：]{group('minute', TWO_DIGITS)}"
        core = f"(?<!\\d){hour_form}(?!\\d)"
    else:
        suffix = f"(?:\\s?(?:{hour_suffix}))?" if locale.hour_suffixes else ""
        core = (
            f"(?:{hour}{suffix}{minute_tail}?"
            f"|[:：]{group('only', TWO_DIGITS)})(?!\\d)"
        )

    meridiem = f"(?:\\s?{group('mer', 'am|pm')}\\b)?"
    postfix = f"(?:\\s{group('post', periods)})?" if locale.periods else ""
    return f"{prefix}{core}{meridiem}{postfix}"


def _kw(words: Iterable[str], segmented: bool) -> str:
    """Keyword alternation, with word boundaries where words are spaced."""
    alt = alternation(words)
    return f"\\b(?:{alt})\\b" if segmented else f"(?:{alt})"


def build_patterns(locale: LocaleBundle) -> LocalePatterns:
    """Compile every pattern for ``locale``."""
    seg = locale.segmented
    sep = r"\s" if seg else r"\s?"
    end = r"\b" if seg else ""
    start = r"\b" if seg else ""

    def words(category: str) -> str:
        return alternation(locale.words(category))

    def kw(category: str) -> re.Pattern[str]:
        return re.compile(_kw(locale.words(category), seg))

    def every(unit: str) -> re.Pattern[str]:
        return re.compile(f"{start}(?:{words('every')}){sep}(?:{words(unit)}){end}")

    weekday_alt = alternation(locale.weekdays)
    weekday = re.compile(f"\\b({weekday_alt})\\b" if seg else f"({weekday_alt})")

    weekday_range = None
    if locale.weekday_range is not None:
        weekday_range = re.compile(
            f"{start}(?:{alternation(locale.weekday_range.start)}){sep}({weekday_alt})"
            f"{sep}(?:{alternation(locale.weekday_range.end)}){sep}({weekday_alt}){end}"
        )

    month_alt = alternation(locale.months)
    if seg:
        month = re.compile(f"(?:^|(?<= ))({month_alt})(?= |$)")
    else:
        month = re.compile(f"(?<!\\d)({month_alt})")

    day_suffix = alternation(locale.day_suffixes)
    optional = "" if locale.day_suffix_required else "?"
    suffix = f"(?:{day_suffix}){optional}" if locale.day_suffixes else ""
    if locale.day_prefixes:
        day_lead = f"{start}(?:{alternation(locale.day_prefixes)}){sep}"
    else:
        day_lead = r"(?<!\d)"
    day_of_month = re.compile(f"{day_lead}(\\d{{1,2}}){suffix}{end}")
    day_chain = re.compile(f"{sep}(?:{words('and')}){sep}(\\d{{1,2}}){suffix}{end}")

    every_n_minutes = re.compile(
        f"{start}(?:{words('every')}){sep}(\\d+)\\s?(?:{words('minute')}){end}"
    )
    every_n_hours = re.compile(
        f"{start}(?:{words('every')}){sep}(\\d+)\\s?(?:{words('hour')}){end}"
    )

    past = f"(?:(?:{words('past')}){sep})?" if locale.words("past") else ""
    minute_past_hour = re.compile(
        f"{start}(?:{words('at')})\\s?[:：](\\d{{2}})\\s?{past}"
        f"(?:{words('each')}){sep}(?:{words('hour')}){end}"
    )

    bound = time_source(locale, named=False)
    # "y las 17": the second bound may carry its own article
    window_and = alternation([*locale.words("and"), *locale.words("window_and")])
    window = re.compile(
        f"{start}(?:{words('between')}){sep}({bound})\\s?(?:{window_and}){sep}({bound})"
    )

    lead_in = re.compile(f"{start}(?:{words('at')}){sep}")
    # "9am and 5pm", and "9am 1pm" once commas are blanked out
    time_chain = re.compile(f"{sep}(?:(?:{words('and')}){sep})?")
    time = re.compile(time_source(locale))

    compact_time = None
    fixed_time = None
    if not seg:
        compact_time = re.compile(time_source(locale, named=False, compact=True))
        if locale.fixed_times:
            fixed_time = re.compile(f"({alternation(locale.fixed_times)})")

    nth_weekday = re.compile(f"{start}(?:{words('ordinal')}){sep}(?:{weekday_alt}){end}")

    signal_words = [w for category in SIGNAL_CATEGORIES for w in locale.words(category)]

    day_names = None
    if not seg:
        day_names = re.compile(
            alternation(
                [*locale.weekdays, *locale.words("weekday"), *locale.words("weekend")]
            )
        )

    return LocalePatterns(
        locale=locale,
        sep=sep,
        weekday=weekday,
        weekday_range=weekday_range,
        month=month,
        quarterly=kw("quarterly"),
        day_of_month=day_of_month,
        day_chain=day_chain,
        every_n_minutes=every_n_minutes,
        every_n_hours=every_n_hours,
        minute_past_hour=minute_past_hour,
        window=window,
        lead_in=lead_in,
        time_chain=time_chain,
        time=time,
        compact_time=compact_time,
        fixed_time=fixed_time,
        nth_weekday=nth_weekday,
        business_day=kw("business_day"),
        last_day=kw("last_day"),
        weekday_keyword=kw("weekday"),
        weekend_keyword=kw("weekend"),
        every_minute=every("minute"),
        every_hour=every("hour"),
        every_day=every("day"),
        every_week=every("week"),
        every_month=every("month"),
        hourly=kw("hourly"),
        daily=kw("daily"),
        weekly=kw("weekly"),
        monthly=kw("monthly"),
        midnight=kw("midnight"),
        noon=kw("noon"),
        signal_keyword=re.compile(_kw(signal_words, seg)),
        day_names=day_names,
    )


@lru_cache(maxsize=None)
def _patterns_for_code(code: str) -> LocalePatterns:
    return build_patterns(resolve(code))


def get_patterns(locale: LocaleBundle) -> LocalePatterns:
    """Compiled patterns for ``locale``.

    Registered bundles are compiled once per process; any other bundle (for
    example one built in a test) is compiled on every call.
    """
    patterns = _patterns_for_code(locale.code)
    if patterns.locale is locale:
        return patterns
    return build_patterns(locale)
