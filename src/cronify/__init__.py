"""cronify: turn natural-language schedules into cron expressions."""

__version__ = "0.1.0"

from cronify.converter import convert, parse, to_cron  # noqa: E402
from cronify.errors import (  # noqa: E402
    CronifyError,
    FailureReason,
    InvalidCronError,
    UnrecognizedInputError,
    UnsupportedPatternError,
)
from cronify.locales import available_locales  # noqa: E402
from cronify.models import ConversionResult, Converted, Unsupported  # noqa: E402

__all__ = [
    "ConversionResult",
    "Converted",
    "CronifyError",
    "FailureReason",
    "InvalidCronError",
    "UnrecognizedInputError",
    "Unsupported",
    "UnsupportedPatternError",
    "__version__",
    "available_locales",
    "convert",
    "parse",
    "to_cron",
]
