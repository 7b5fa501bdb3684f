"""Locale bundle model for cronify."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

KEYWORD_CATEGORIES = (
    "every",
    "each",
    "at",
    "and",
    "between",
    "window_and",
    "past",
    "hourly",
    "daily",
    "weekly",
    "monthly",
    "quarterly",
    "weekday",
    "weekend",
    "midnight",
    "noon",
    "minute",
    "hour",
    "day",
    "week",
    "month",
    "ordinal",
    "business_day",
    "last_day",
)


class WeekdayRange(BaseModel):
    """Connector words for a "from X to Y" weekday range."""

    model_config = ConfigDict(frozen=True)

    start: list[str] = Field(..., min_length=1, alias="from")
    end: list[str] = Field(..., min_length=1, alias="to")


class LocaleBundle(BaseModel):
    """Read-only name tables and keyword variants for one language."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    code: str = Field(..., pattern=r"^[a-z]{2,3}$")
    name: str
    segmented: bool = Field(default=True, description="Words are separated by spaces")
    weekdays: dict[str, int]
    months: dict[str, int]
    keywords: dict[str, list[str]]
    periods: dict[str, Literal["am", "pm"]] = Field(default_factory=dict)
    fixed_times: dict[str, tuple[int, int]] = Field(default_factory=dict)
    hour_suffixes: list[str] = Field(default_factory=list)
    minute_suffixes: list[str] = Field(default_factory=list)
    half_past: list[str] = Field(default_factory=list)
    day_prefixes: list[str] = Field(default_factory=list)
    day_suffixes: list[str] = Field(default_factory=list)
    day_suffix_required: bool = False
    weekday_range: WeekdayRange | None = None

    @field_validator("weekdays")
    @classmethod
    def validate_weekdays(cls, v: dict[str, int]) -> dict[str, int]:
        """Weekday numbers follow cron: 0=Sunday through 6=Saturday."""
        bad = {name: n for name, n in v.items() if not 0 <= n <= 6}
        if bad:
            msg = f"Weekday numbers must be 0-6, got {bad}"
            raise ValueError(msg)
        return v

    @field_validator("months")
    @classmethod
    def validate_months(cls, v: dict[str, int]) -> dict[str, int]:
        """Month numbers must be 1-12."""
        bad = {name: n for name, n in v.items() if not 1 <= n <= 12}
        if bad:
            msg = f"Month numbers must be 1-12, got {bad}"
            raise ValueError(msg)
        return v

    @field_validator("keywords")
    @classmethod
    def fill_keyword_categories(cls, v: dict[str, list[str]]) -> dict[str, list[str]]:
        """Make sure every keyword category exists, possibly empty."""
        unknown = set(v) - set(KEYWORD_CATEGORIES)
        if unknown:
            msg = f"Unknown keyword categories: {sorted(unknown)}"
            raise ValueError(msg)
        return {category: list(v.get(category, [])) for category in KEYWORD_CATEGORIES}

    @field_validator("fixed_times")
    @classmethod
    def validate_fixed_times(cls, v: dict[str, tuple[int, int]]) -> dict[str, tuple[int, int]]:
        """Fixed keyword times must be real clock times."""
        for word, (hour, minute) in v.items():
            if not (0 <= hour <= 23 and 0 <= minute <= 59):
                msg = f"Invalid fixed time for {word!r}: {hour}:{minute}"
                raise ValueError(msg)
        return v

    def words(self, category: str) -> list[str]:
        """Surface forms for a keyword category."""
        return self.keywords[category]
