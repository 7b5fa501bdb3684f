"""Input normalization."""

from __future__ import annotations

import re

_WHITESPACE = re.compile(r"\s+")


def normalize(text: str) -> str:
    """Lowercase, blank out commas, collapse whitespace and trim.

    Both ASCII and full-width commas become spaces.

    Total and idempotent: ``normalize(normalize(s)) == normalize(s)``.

    Example:
        >>> normalize("Every  Monday, Wednesday")
        'every monday wednesday'
    """
    lowered = text.lower().replace(",", " ").replace("，", " ")
    return _WHITESPACE.sub(" ", lowered).strip()
