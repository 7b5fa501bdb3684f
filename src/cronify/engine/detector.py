"""Detection of schedules that standard cron cannot express."""

from __future__ import annotations

import logging

from cronify.errors import FailureReason, UnsupportedPatternError
from cronify.models import LocaleBundle

from .patterns import get_patterns

logger = logging.getLogger(__name__)

NTH_WEEKDAY_MESSAGE = (
    "Cron (standard) cannot express 'nth/last weekday of month'. Use RRULE or Quartz."
)
BUSINESS_DAYS_MESSAGE = (
    "'Business days' and holiday calendars are beyond plain cron. "
    "Use RRULE + calendar exceptions."
)
LAST_DAY_MESSAGE = (
    "'Last day of month' is not in standard cron. "
    "Use Quartz L or emit 28-31 with guard logic."
)


def detect_unsupported(text: str, locale: LocaleBundle) -> UnsupportedPatternError | None:
    """Find the first cron-incapable phrasing in normalized ``text``.

    Checks run in a fixed order and the first hit wins:

    1. an ordinal or "last" right before a weekday name ("last friday");
    2. business-day phrasing;
    3. last-day / end-of-month phrasing.

    Args:
        text: Normalized input text.
        locale: Active locale bundle.

    Returns:
        The error describing the gap, or None if nothing unsupported was found.
    """
    patterns = get_patterns(locale)

    if patterns.nth_weekday.search(text):
        return UnsupportedPatternError(NTH_WEEKDAY_MESSAGE, FailureReason.NTH_WEEKDAY)
    if patterns.business_day.search(text):
        return UnsupportedPatternError(BUSINESS_DAYS_MESSAGE, FailureReason.BUSINESS_DAYS)
    if patterns.last_day.search(text):
        return UnsupportedPatternError(LAST_DAY_MESSAGE, FailureReason.LAST_DAY_OF_MONTH)
    return None


def check_supported(text: str, locale: LocaleBundle) -> None:
    """Raise if ``text`` asks for something standard cron cannot express.

    Raises:
        UnsupportedPatternError: With a capability-specific message.
    """
    error = detect_unsupported(text, locale)
    if error is not None:
        logger.debug(f"Refusing {text!r}: {error.reason.value}")
        raise error
