"""Public conversion entry points."""

from __future__ import annotations

import logging

from cronify.engine import (
    check_supported,
    expand_times,
    extract,
    format_cron,
    get_patterns,
    normalize,
    resolve_fields,
    validate_cron,
)
from cronify.errors import CronifyError, UnrecognizedInputError
from cronify.locales import resolve
from cronify.models import Converted, Unsupported

logger = logging.getLogger(__name__)


def parse(text: str, locale: str | None = None) -> list[str]:
    """Convert natural-language ``text`` into cron lines.

    Args:
        text: Free-form scheduling phrase, e.g. "every monday at 9am".
        locale: Locale code ("en", "es-MX", "zh"). Unknown codes fall back
            to English.

    Returns:
        One cron line per distinct time, in the order the times appear.

    Raises:
        UnsupportedPatternError: If the text asks for something standard
            cron cannot express.
        UnrecognizedInputError: If nothing in the text looks like a schedule.
        InvalidCronError: If the assembled line fails the grammar check.
    """
    bundle = resolve(locale)
    normalized = normalize(text)

    check_supported(normalized, bundle)

    signals = extract(normalized, bundle)
    if not signals.has_any_signal() and not get_patterns(bundle).signal_keyword.search(normalized):
        logger.debug(f"No schedule signal in {normalized[:80]!r}")
        raise UnrecognizedInputError(text)

    if len(signals.times) > 1:
        return expand_times(normalized, signals, bundle)

    fields = resolve_fields(normalized, signals, bundle)
    return [validate_cron(format_cron(fields))]


def convert(text: str, locale: str | None = None) -> Converted | Unsupported:
    """Convert ``text`` without raising.

    Returns:
        Converted with the cron lines, or Unsupported carrying the
        diagnostic message and a FailureReason.
    """
    try:
        crons = parse(text, locale)
    except CronifyError as e:
        return Unsupported(message=e.message, reason=e.reason)
    return Converted(crons=crons)


def to_cron(text: str, locale: str | None = None) -> str | None:
    """First cron line for ``text``, or None if it cannot be converted."""
    result = convert(text, locale)
    if isinstance(result, Converted):
        return result.crons[0]
    return None
