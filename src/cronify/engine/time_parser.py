"""Time phrase parsing.

Turns a single time-like phrase ("5pm", "9:30 am", "17:00", ":05", "3点半",
"5 de la tarde") into a ParsedTime. Anything that does not describe a real
clock time yields None; nothing in here raises for bad input.
"""

from __future__ import annotations

import re

from cronify.locales import resolve
from cronify.models import LocaleBundle, ParsedTime

from .normalizer import normalize
from .patterns import get_patterns


def to_24_hour(hour: int, meridiem: str | None = None, period: str | None = None) -> int:
    """Convert a clock hour to 24-hour form.

    ``meridiem`` is an explicit am/pm; ``period`` is a time-of-day marker such
    as "in the afternoon" already mapped to "am" or "pm".

    Examples:
        >>> to_24_hour(12, "am")
        0
        >>> to_24_hour(5, "pm")
        17
        >>> to_24_hour(17, period="pm")
        17
        >>> to_24_hour(12, period="am")
        0
    """
    if meridiem == "am":
        hour = hour % 12
    elif meridiem == "pm":
        hour = hour % 12 + 12

    if period == "pm" and hour < 12:
        hour += 12
    elif period == "am" and hour == 12:
        hour = 0
    return hour


def time_from_match(match: re.Match[str], locale: LocaleBundle) -> ParsedTime | None:
    """Build a ParsedTime from a match of the locale's time pattern."""
    groups = match.groupdict()

    if groups.get("only") is not None:
        minute = int(groups["only"])
        return ParsedTime(hour=None, minute=minute) if minute <= 59 else None

    raw_hour = int(groups["hour"])
    if groups.get("minute") is not None:
        minute = int(groups["minute"])
    elif groups.get("minutes") is not None:
        minute = int(groups["minutes"])
    elif groups.get("half") is not None:
        minute = 30
    else:
        minute = 0

    # 24 is only valid once am/pm folds it back ("24am" is midnight)
    if raw_hour > 24 or minute > 59:
        return None

    marker = groups.get("pre") or groups.get("post")
    period = locale.periods.get(marker) if marker else None
    hour = to_24_hour(raw_hour, groups.get("mer"), period)
    if not 0 <= hour <= 23:
        return None
    return ParsedTime(hour=hour, minute=minute)


def match_time(text: str, pos: int, locale: LocaleBundle) -> tuple[ParsedTime | None, int] | None:
    """Match a time phrase starting exactly at ``pos``.

    Returns:
        ``(time, end)`` when time-shaped text starts at ``pos``; ``time`` is
        None if the text is time-shaped but not a valid time ("25:00").
        None when nothing time-shaped starts there.
    """
    match = get_patterns(locale).time.match(text, pos)
    if match is None:
        return None
    return time_from_match(match, locale), match.end()


def parse_time(phrase: str, locale: LocaleBundle | None = None) -> ParsedTime | None:
    """Parse a whole phrase as one time.

    Args:
        phrase: Short time phrase, e.g. "5pm", "9:30am", ":05", "零点".
        locale: Bundle with locale-specific forms. Defaults to English.

    Returns:
        ParsedTime, or None if the phrase is not a valid time.
    """
    locale = locale or resolve()
    text = normalize(phrase)
    if text in locale.fixed_times:
        hour, minute = locale.fixed_times[text]
        return ParsedTime(hour=hour, minute=minute)

    match = get_patterns(locale).time.fullmatch(text)
    if match is None:
        return None
    return time_from_match(match, locale)
