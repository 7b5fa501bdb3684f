"""Locale registry.

Bundles ship as YAML files next to this module and are loaded and validated
once per process. They are frozen pydantic models, so the registry can hand
the same instance to any number of concurrent callers.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from importlib import resources
from typing import Any

import yaml
from pydantic import ValidationError

from cronify.models import LocaleBundle

logger = logging.getLogger(__name__)

DEFAULT_LOCALE = "en"


class LocaleLoadError(Exception):
    """A packaged locale file could not be loaded."""

    def __init__(self, message: str, errors: list[dict[str, Any]] | None = None) -> None:
        super().__init__(message)
        self.errors = errors or []


def load_bundle(content: str, source: str = "<string>") -> LocaleBundle:
    """Parse and validate one locale bundle from YAML text.

    Args:
        content: YAML document describing the bundle.
        source: Source identifier for error messages.

    Returns:
        Validated, frozen LocaleBundle.

    Raises:
        LocaleLoadError: If the YAML is malformed or fails validation.
    """
    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise LocaleLoadError(f"Invalid YAML in locale {source}: {e}") from e

    if not isinstance(data, dict):
        raise LocaleLoadError(f"Empty or malformed locale file: {source}")

    try:
        return LocaleBundle.model_validate(data)
    except ValidationError as e:
        errors = [
            {
                "location": " -> ".join(str(part) for part in error["loc"]),
                "message": error["msg"],
            }
            for error in e.errors()
        ]
        lines = [f"  {err['location']}: {err['message']}" for err in errors]
        msg = f"Locale validation failed ({source}):\n" + "\n".join(lines)
        raise LocaleLoadError(msg, errors=errors) from e


@lru_cache(maxsize=1)
def _registry() -> dict[str, LocaleBundle]:
    bundles: dict[str, LocaleBundle] = {}
    for entry in sorted(resources.files(__name__).iterdir(), key=lambda p: p.name):
        if not entry.name.endswith(".yaml"):
            continue
        bundle = load_bundle(entry.read_text(encoding="utf-8"), source=entry.name)
        bundles[bundle.code] = bundle
    logger.debug(f"Loaded locales: {', '.join(sorted(bundles))}")
    return bundles


def normalize_code(code: str | None) -> str:
    """Reduce a locale code to its language part: "es-MX" -> "es"."""
    if not code:
        return DEFAULT_LOCALE
    return code.strip().lower().replace("_", "-").split("-")[0]


def resolve(code: str | None = None) -> LocaleBundle:
    """Return the bundle for ``code``, falling back to the default language.

    Args:
        code: Locale code such as "en", "es-MX" or "zh_CN". None means default.

    Returns:
        The registered LocaleBundle.
    """
    registry = _registry()
    language = normalize_code(code)
    bundle = registry.get(language)
    if bundle is None:
        logger.debug(f"Unknown locale {code!r}, falling back to {DEFAULT_LOCALE!r}")
        return registry[DEFAULT_LOCALE]
    return bundle


def available_locales() -> list[str]:
    """Codes of every registered locale."""
    return sorted(_registry())


__all__ = [
    "DEFAULT_LOCALE",
    "LocaleLoadError",
    "available_locales",
    "load_bundle",
    "normalize_code",
    "resolve",
]
