"""cronify data models."""

from .locale import KEYWORD_CATEGORIES, LocaleBundle, WeekdayRange
from .schedule import (
    ConversionResult,
    Converted,
    CronFields,
    ExtractedSignals,
    ParsedTime,
    Unsupported,
)

__all__ = [
    "KEYWORD_CATEGORIES",
    "ConversionResult",
    "Converted",
    "CronFields",
    "ExtractedSignals",
    "LocaleBundle",
    "ParsedTime",
    "Unsupported",
    "WeekdayRange",
]
