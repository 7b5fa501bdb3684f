"""Error classification for cronify conversions."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class FailureReason(str, Enum):
    """Why a schedule could not be turned into cron."""

    NTH_WEEKDAY = "nth_weekday"  # "last friday of the month"
    BUSINESS_DAYS = "business_days"  # holiday calendars
    LAST_DAY_OF_MONTH = "last_day_of_month"  # "end of month"
    NO_SIGNAL = "no_signal"  # nothing recognisable in the text
    INVALID_CRON = "invalid_cron"  # resolver produced something malformed


@dataclass
class CronifyError(Exception):
    """Base error with a diagnostic message and a failure reason."""

    message: str
    reason: FailureReason

    def __str__(self) -> str:
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class UnsupportedPatternError(CronifyError):
    """The text asks for something standard cron cannot express."""

    pass


class UnrecognizedInputError(CronifyError):
    """No scheduling signal was found in the text."""

    def __init__(self, text: str = "") -> None:
        self.text = text
        super().__init__(
            message=(
                "Could not understand the input: no recognized signal. "
                "Please use natural language like 'every monday at 9am'."
            ),
            reason=FailureReason.NO_SIGNAL,
        )


class InvalidCronError(CronifyError):
    """The assembled expression failed the final grammar check."""

    def __init__(self, expression: str) -> None:
        self.expression = expression
        super().__init__(
            message="Could not construct a valid cron from the given text.",
            reason=FailureReason.INVALID_CRON,
        )
