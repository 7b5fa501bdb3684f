"""Scheduling cue extraction.

Each category (months, weekdays, dates, intervals, windows, times) is scanned
independently over the normalized text. Nothing here decides precedence; the
resolver does that.
"""

from __future__ import annotations

import logging
import re

from cronify.models import ExtractedSignals, LocaleBundle, ParsedTime

from .patterns import LocalePatterns, get_patterns
from .time_parser import match_time, parse_time

logger = logging.getLogger(__name__)

QUARTER_MONTHS = frozenset({1, 4, 7, 10})
MINUTE_INTERVAL = (1, 59)
HOUR_INTERVAL = (1, 23)

# Two time candidates this close, with only whitespace between them, are
# one phrase seen twice ("中午12点").
DEDUP_WINDOW = 2

Span = tuple[int, int]
Candidate = tuple[int, int, ParsedTime]


def clamp_digits(digits: str, low: int, high: int) -> int:
    """Clamp a run of digits into ``[low, high]`` without parsing huge runs."""
    significant = digits.lstrip("0")
    if len(significant) > len(str(high)):
        return high
    return max(low, min(high, int(significant or "0")))


def expand_weekday_range(start: int, end: int) -> list[int]:
    """Inclusive weekday range, wrapping past Saturday.

    Example:
        >>> expand_weekday_range(5, 1)
        [5, 6, 0, 1]
    """
    return [(start + offset) % 7 for offset in range((end - start) % 7 + 1)]


def extract(text: str, locale: LocaleBundle) -> ExtractedSignals:
    """Scan normalized ``text`` for every kind of scheduling cue.

    Args:
        text: Normalized input text.
        locale: Active locale bundle.

    Returns:
        ExtractedSignals with each category filled independently.
    """
    patterns = get_patterns(locale)

    window, window_span = _extract_window(text, patterns)
    signals = ExtractedSignals(
        months=_extract_months(text, patterns),
        weekdays=_extract_weekdays(text, patterns),
        month_days=_extract_month_days(text, patterns),
        times=_extract_times(text, patterns, window_span),
        window=window,
        every_n_minutes=_extract_interval(patterns.every_n_minutes, text, *MINUTE_INTERVAL),
        every_n_hours=_extract_interval(patterns.every_n_hours, text, *HOUR_INTERVAL),
        minute_past_hour=_extract_minute_past_hour(text, patterns),
    )
    logger.debug(f"Extracted from {text[:80]!r}: {signals}")
    return signals


def _extract_months(text: str, patterns: LocalePatterns) -> set[int]:
    months = {patterns.locale.months[m.group(1)] for m in patterns.month.finditer(text)}
    if patterns.quarterly.search(text):
        months |= QUARTER_MONTHS
    return months


def _extract_weekdays(text: str, patterns: LocalePatterns) -> set[int]:
    names = patterns.locale.weekdays
    weekdays = {names[m.group(1)] for m in patterns.weekday.finditer(text)}
    if patterns.weekday_range is not None:
        for m in patterns.weekday_range.finditer(text):
            weekdays.update(expand_weekday_range(names[m.group(1)], names[m.group(2)]))
    return weekdays


def _extract_month_days(text: str, patterns: LocalePatterns) -> set[int]:
    days: list[int] = []
    for m in patterns.day_of_month.finditer(text):
        days.append(int(m.group(1)))
        # "on the 1st and 15th"
        pos = m.end()
        while (chained := patterns.day_chain.match(text, pos)) is not None:
            days.append(int(chained.group(1)))
            pos = chained.end()
    return {day for day in days if 1 <= day <= 31}


def _extract_interval(pattern: re.Pattern[str], text: str, low: int, high: int) -> int | None:
    match = pattern.search(text)
    if match is None:
        return None
    return clamp_digits(match.group(1), low, high)


def _extract_minute_past_hour(text: str, patterns: LocalePatterns) -> int | None:
    match = patterns.minute_past_hour.search(text)
    if match is None:
        return None
    minute = int(match.group(1))
    return minute if minute <= 59 else None


def _extract_window(text: str, patterns: LocalePatterns) -> tuple[tuple[int, int] | None, Span | None]:
    """Hour window from "between A and B", always ordered low to high."""
    match = patterns.window.search(text)
    if match is None:
        return None, None

    start = parse_time(match.group(1), patterns.locale)
    end = parse_time(match.group(2), patterns.locale)
    if start is None or end is None or start.hour is None or end.hour is None:
        return None, None

    low, high = sorted((start.hour, end.hour))
    return (low, high), match.span()


def _extract_times(text: str, patterns: LocalePatterns, excluded: Span | None) -> list[ParsedTime]:
    """Distinct explicit times in first-occurrence order.

    Times inside the window phrase belong to the window and are skipped.
    """
    candidates = _lead_in_times(text, patterns)
    if patterns.compact_time is not None:
        candidates.extend(_compact_times(text, patterns))

    if excluded is not None:
        low, high = excluded
        candidates = [c for c in candidates if not (c[0] >= low and c[1] <= high)]

    candidates.sort(key=lambda c: (c[0], -c[1]))
    kept: list[Candidate] = []
    seen: set[ParsedTime] = set()
    for candidate in candidates:
        if kept and _same_phrase(text, kept[-1], candidate):
            continue
        # one line per distinct time
        if candidate[2] in seen:
            continue
        seen.add(candidate[2])
        kept.append(candidate)
    return [time for _, _, time in kept]


def _same_phrase(text: str, previous: Candidate, current: Candidate) -> bool:
    _, previous_end, _ = previous
    start, _, _ = current
    if start < previous_end:
        return True
    return start - previous_end <= DEDUP_WINDOW and not text[previous_end:start].strip()


def _lead_in_times(text: str, patterns: LocalePatterns) -> list[Candidate]:
    """Times introduced by "at", plus "and <time>" continuations."""
    locale = patterns.locale
    candidates: list[Candidate] = []
    consumed = 0
    for lead in patterns.lead_in.finditer(text):
        if lead.start() < consumed:
            continue
        start = lead.end()
        found = match_time(text, start, locale)
        while found is not None:
            time, end = found
            consumed = end
            if time is None:
                break
            candidates.append((start, end, time))
            chain = patterns.time_chain.match(text, end)
            if chain is None:
                break
            start = chain.end()
            found = match_time(text, start, locale)
    return candidates


def _compact_times(text: str, patterns: LocalePatterns) -> list[Candidate]:
    """Times written without a lead-in word ("9点", "3点半", "零点")."""
    locale = patterns.locale
    candidates: list[Candidate] = []
    if patterns.compact_time is not None:
        for m in patterns.compact_time.finditer(text):
            time = parse_time(m.group(), locale)
            if time is not None:
                candidates.append((m.start(), m.end(), time))
    if patterns.fixed_time is not None:
        for m in patterns.fixed_time.finditer(text):
            hour, minute = locale.fixed_times[m.group(1)]
            candidates.append((m.start(), m.end(), ParsedTime(hour=hour, minute=minute)))
    return candidates
