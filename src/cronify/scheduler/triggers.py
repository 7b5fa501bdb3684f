"""Trigger building utilities for APScheduler integration."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime, timedelta, tzinfo

from apscheduler.triggers.cron import CronTrigger

from cronify.models import Converted, Unsupported

# Cron counts weekdays from Sunday; APScheduler numbers them from Monday, so
# day-of-week values are handed over as names.
DAY_NAMES = ("sun", "mon", "tue", "wed", "thu", "fri", "sat")


def _day_name(value: str) -> str:
    if not value.isdigit() or int(value) > 7:
        raise ValueError(f"Invalid day-of-week value: {value!r}")
    return DAY_NAMES[int(value) % 7]


def day_of_week_names(field: str) -> str:
    """Rewrite a numeric cron day-of-week field with day names.

    Ranges are expanded into lists so that wrapping ranges ("5-1") survive.

    Examples:
        >>> day_of_week_names("1-5")
        'mon,tue,wed,thu,fri'
        >>> day_of_week_names("0,6")
        'sun,sat'
    """
    if field == "*":
        return field

    names: list[str] = []
    for part in field.split(","):
        if "-" in part:
            first, last = part.split("-", 1)
            start = DAY_NAMES.index(_day_name(first))
            end = DAY_NAMES.index(_day_name(last))
            names.extend(DAY_NAMES[(start + i) % 7] for i in range((end - start) % 7 + 1))
        else:
            names.append(_day_name(part))
    return ",".join(names)


def to_trigger(expression: str, timezone: str | tzinfo | None = None) -> CronTrigger:
    """Build an APScheduler CronTrigger from a five-field cron line.

    Args:
        expression: Cron line as emitted by cronify.
        timezone: Timezone for the trigger; None uses the local zone.

    Returns:
        APScheduler CronTrigger instance.

    Raises:
        ValueError: If the expression is not a valid five-field cron line.
    """
    parts = expression.split()
    if len(parts) != 5:
        msg = f"Invalid cron expression: {expression}. Expected 5 fields."
        raise ValueError(msg)

    minute, hour, day, month, day_of_week = parts
    return CronTrigger(
        minute=minute,
        hour=hour,
        day=day,
        month=month,
        day_of_week=day_of_week_names(day_of_week),
        timezone=timezone,
    )


def to_triggers(
    result: Converted | Unsupported | Iterable[str],
    timezone: str | tzinfo | None = None,
) -> list[CronTrigger]:
    """Build one trigger per cron line of a conversion result.

    Raises:
        ValueError: If ``result`` is Unsupported or holds an invalid line.
    """
    if isinstance(result, Unsupported):
        raise ValueError(result.message)
    lines = result.crons if isinstance(result, Converted) else list(result)
    return [to_trigger(line, timezone) for line in lines]


def next_fire_times(
    crons: Converted | Iterable[str],
    count: int = 5,
    now: datetime | None = None,
    timezone: str | tzinfo | None = None,
) -> list[datetime]:
    """Upcoming fire times across all cron lines, merged and sorted.

    Args:
        crons: Conversion result or cron lines.
        count: How many fire times to return.
        now: Start of the search (inclusive). Defaults to the current time.
        timezone: Timezone for the triggers; None uses the local zone.

    Returns:
        Up to ``count`` distinct datetimes in ascending order.
    """
    triggers = to_triggers(crons, timezone)
    times: set[datetime] = set()
    for trigger in triggers:
        cursor = now or datetime.now(trigger.timezone)
        for _ in range(count):
            fire_time = trigger.get_next_fire_time(None, cursor)
            if fire_time is None:
                break
            times.add(fire_time)
            cursor = fire_time + timedelta(microseconds=1)
    return sorted(times)[:count]
