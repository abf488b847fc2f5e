"""Runtime configuration for the resume pipeline.

Validation limits default to the values below and can be overridden through
environment variables, one per limit:

- ``ATS_RESUME_MAX_JSON_SIZE``: maximum serialized payload size in bytes
- ``ATS_RESUME_MAX_OBJECT_DEPTH``: maximum dict/list nesting depth
- ``ATS_RESUME_MAX_STRING_LENGTH``: maximum length of a string field
- ``ATS_RESUME_MAX_SUMMARY_LENGTH``: maximum length of the summary text

``ATS_RESUME_LOG_LEVEL`` sets the level used by the CLI and API entry points.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, replace

logger = logging.getLogger(__name__)

__all__ = [
    "DEFAULT_VALIDATION_LIMITS",
    "ValidationLimits",
    "get_log_level",
    "get_validation_limits",
]

_ENV_PREFIX = "ATS_RESUME_"

# Limits that may be overridden from the environment, keyed by attribute name.
_ENV_OVERRIDES = (
    "max_json_size",
    "max_object_depth",
    "max_string_length",
    "max_summary_length",
)


@dataclass(frozen=True, slots=True)
class ValidationLimits:
    """Size, depth and cardinality limits applied to untrusted resume JSON."""

    max_string_length: int = 1000
    max_summary_length: int = 500

    max_array_length: int = 50
    max_description_points: int = 10
    max_skills_count: int = 100

    max_experience_entries: int = 20
    max_education_entries: int = 10
    max_project_entries: int = 15

    max_object_depth: int = 5
    max_json_size: int = 1024 * 1024


DEFAULT_VALIDATION_LIMITS = ValidationLimits()


def _read_positive_int(name: str) -> int | None:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return None
    try:
        value = int(raw)
    except ValueError:
        logger.warning("Ignoring %s=%r: not an integer", name, raw)
        return None
    if value <= 0:
        logger.warning("Ignoring %s=%r: must be positive", name, raw)
        return None
    return value


def get_validation_limits() -> ValidationLimits:
    """Return validation limits, applying any environment overrides."""
    overrides: dict[str, int] = {}
    for attr in _ENV_OVERRIDES:
        value = _read_positive_int(f"{_ENV_PREFIX}{attr.upper()}")
        if value is not None:
            overrides[attr] = value

    if not overrides:
        return DEFAULT_VALIDATION_LIMITS
    return replace(DEFAULT_VALIDATION_LIMITS, **overrides)


def get_log_level() -> int:
    """Return the configured log level, defaulting to ``INFO``."""
    name = os.getenv(f"{_ENV_PREFIX}LOG_LEVEL", "INFO").strip().upper()
    level = logging.getLevelName(name)
    if isinstance(level, int):
        return level
    return logging.INFO
