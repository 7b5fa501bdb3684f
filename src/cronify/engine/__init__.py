"""Conversion engine: normalize, detect, extract, resolve, format."""

from .detector import check_supported, detect_unsupported
from .extractor import extract
from .formatter import format_cron, validate_cron
from .normalizer import normalize
from .patterns import LocalePatterns, build_patterns, get_patterns
from .resolver import RULES, Rule, expand_times, list_to_cron, resolve_fields
from .time_parser import parse_time, to_24_hour

__all__ = [
    "LocalePatterns",
    "RULES",
    "Rule",
    "build_patterns",
    "check_supported",
    "detect_unsupported",
    "expand_times",
    "extract",
    "format_cron",
    "get_patterns",
    "list_to_cron",
    "normalize",
    "parse_time",
    "resolve_fields",
    "to_24_hour",
    "validate_cron",
]
