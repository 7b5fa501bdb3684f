"""Cron line assembly and the final grammar check."""

from __future__ import annotations

import re

from cronify.errors import InvalidCronError
from cronify.models import CronFields

CRON_FIELD = r"[*\d/,\-]+"
CRON_LINE = re.compile(rf"^{CRON_FIELD}(?: {CRON_FIELD}){{4}}$")


def format_cron(fields: CronFields) -> str:
    """Join the fields as ``minute hour day-of-month month day-of-week``."""
    return " ".join(fields.as_tuple())


def validate_cron(expression: str) -> str:
    """Check that ``expression`` is five well-formed cron fields.

    Returns:
        The expression unchanged.

    Raises:
        InvalidCronError: If any field holds characters outside digits,
            ``*``, ``/``, ``,`` and ``-``, or the field count is wrong.
    """
    if CRON_LINE.match(expression) is None:
        raise InvalidCronError(expression)
    return expression
