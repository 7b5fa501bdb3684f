"""Schedule models: extracted cues, cron fields and conversion results."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Annotated, Literal

from pydantic import BaseModel, Field

from cronify.errors import FailureReason


@dataclass(frozen=True)
class ParsedTime:
    """A clock time. ``hour`` is None when only the minute was given (":05")."""

    hour: int | None
    minute: int

    @property
    def hour_field(self) -> str:
        """Hour as a cron field."""
        return "*" if self.hour is None else str(self.hour)

    @property
    def minute_field(self) -> str:
        """Minute as a cron field."""
        return str(self.minute)


@dataclass
class ExtractedSignals:
    """Scheduling cues found in a piece of text.

    Every category is filled independently, so several may be present at once
    and they may disagree; the resolver decides which one wins.
    """

    months: set[int] = field(default_factory=set)
    weekdays: set[int] = field(default_factory=set)
    month_days: set[int] = field(default_factory=set)
    times: list[ParsedTime] = field(default_factory=list)
    window: tuple[int, int] | None = None
    every_n_minutes: int | None = None
    every_n_hours: int | None = None
    minute_past_hour: int | None = None

    def has_any_signal(self) -> bool:
        """Check whether any cue at all was extracted."""
        return bool(
            self.months
            or self.weekdays
            or self.month_days
            or self.times
            or self.window is not None
            or self.every_n_minutes is not None
            or self.every_n_hours is not None
            or self.minute_past_hour is not None
        )


@dataclass
class CronFields:
    """The five fields of a standard cron expression."""

    minute: str = "*"
    hour: str = "*"
    day_of_month: str = "*"
    month: str = "*"
    day_of_week: str = "*"

    def as_tuple(self) -> tuple[str, str, str, str, str]:
        return (self.minute, self.hour, self.day_of_month, self.month, self.day_of_week)


class Converted(BaseModel):
    """Successful conversion: one cron line per distinct time."""

    status: Literal["ok"] = "ok"
    crons: list[str] = Field(..., min_length=1, description="Cron expressions in order")

    @property
    def ok(self) -> bool:
        return True


class Unsupported(BaseModel):
    """Failed conversion with a capability-specific diagnostic."""

    status: Literal["unsupported"] = "unsupported"
    message: str = Field(..., description="Why the text could not be converted")
    reason: FailureReason

    @property
    def ok(self) -> bool:
        return False


ConversionResult = Annotated[Converted | Unsupported, Field(discriminator="status")]
