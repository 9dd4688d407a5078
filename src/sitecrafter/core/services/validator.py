from __future__ import annotations

"""
Configuration Validation Service.

Normalizes untrusted configuration (CLI overrides, hand-edited JSON) into
strictly typed values, filling gaps with domain defaults.
"""

import logging
from typing import Any, Dict, List, Tuple

from sitecrafter.domain.config import get_default_config
from sitecrafter.domain.constants import COMPLETION_POLICIES, LOG_LEVELS

logger = logging.getLogger(__name__)

_STRING_FIELDS = ("backend_url", "output_dir")
_BOOL_FIELDS = ("print_tree",)
_INT_FIELDS = ("request_timeout",)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def validate_config(
        config: Any,
        *,
        strict: bool = False,
) -> Tuple[Dict[str, Any], List[str]]:
    """
    Validate and normalize a configuration dictionary.

    Args:
        config: Raw configuration data.
        strict: Raise on invalid values instead of falling back.

    Returns:
        Tuple[Dict[str, Any], List[str]]: Normalized configuration and
                                          warnings.

    Raises:
        TypeError: In strict mode, on type mismatch.
        ValueError: In strict mode, on out-of-range values.
    """
    warnings: List[str] = []
    defaults = get_default_config()

    if not isinstance(config, dict):
        msg = f"Invalid config type: expected dict, received {type(config).__name__}."
        if strict:
            raise TypeError(msg)
        warnings.append(f"{msg} Using defaults.")
        logger.warning(msg)
        return defaults, warnings

    merged: Dict[str, Any] = dict(defaults)
    merged.update(config)

    for field in _STRING_FIELDS:
        merged[field] = _as_str(merged.get(field), defaults[field], field, warnings, strict)

    for field in _BOOL_FIELDS:
        merged[field] = _as_bool(merged.get(field), defaults[field], field, warnings, strict)

    for field in _INT_FIELDS:
        merged[field] = _as_positive_int(merged.get(field), defaults[field], field, warnings, strict)

    merged["completion_policy"] = _as_choice(
        merged.get("completion_policy"), COMPLETION_POLICIES,
        defaults["completion_policy"], "completion_policy", warnings, strict,
        transform=str.lower,
    )
    merged["log_level"] = _as_choice(
        merged.get("log_level"), LOG_LEVELS,
        defaults["log_level"], "log_level", warnings, strict,
        transform=str.upper,
    )

    return merged, warnings

# -----------------------------------------------------------------------------
# PRIVATE HELPERS: TYPE COERCION
# -----------------------------------------------------------------------------

def _fail(msg: str, warnings: List[str], strict: bool, exc: type = TypeError) -> None:
    if strict:
        raise exc(msg)
    warnings.append(f"{msg} Using fallback.")


def _as_str(value: Any, fallback: str, field: str, warnings: List[str], strict: bool) -> str:
    if value is None:
        return fallback
    if isinstance(value, str):
        return value.strip()
    _fail(f"Invalid field '{field}': expected str, received {type(value).__name__}.", warnings, strict)
    return fallback


def _as_bool(value: Any, fallback: bool, field: str, warnings: List[str], strict: bool) -> bool:
    if isinstance(value, bool):
        return value
    if value is None:
        return fallback

    if not strict:
        if isinstance(value, (int, float)) and value in (0, 1):
            warnings.append(f"Field '{field}' converted from number {value} to bool.")
            return bool(value)
        if isinstance(value, str):
            s = value.strip().lower()
            if s in ("true", "1", "yes", "y"):
                warnings.append(f"Field '{field}' converted from '{value}' to True.")
                return True
            if s in ("false", "0", "no", "n"):
                warnings.append(f"Field '{field}' converted from '{value}' to False.")
                return False

    _fail(f"Invalid field '{field}': expected bool, received {type(value).__name__}.", warnings, strict)
    return fallback


def _as_positive_int(value: Any, fallback: int, field: str, warnings: List[str], strict: bool) -> int:
    if value is None:
        return fallback
    if isinstance(value, bool):
        _fail(f"Invalid field '{field}': expected int, received bool.", warnings, strict)
        return fallback

    try:
        number = int(value)
    except (TypeError, ValueError):
        _fail(f"Invalid field '{field}': expected int, received {type(value).__name__}.", warnings, strict)
        return fallback

    if number <= 0:
        _fail(f"Invalid field '{field}': must be positive, received {number}.", warnings, strict, ValueError)
        return fallback
    return number


def _as_choice(
        value: Any,
        choices: Tuple[str, ...],
        fallback: str,
        field: str,
        warnings: List[str],
        strict: bool,
        transform: Any = None,
) -> str:
    if value is None:
        return fallback
    if not isinstance(value, str):
        _fail(f"Invalid field '{field}': expected str, received {type(value).__name__}.", warnings, strict)
        return fallback

    candidate = value.strip()
    if transform is not None:
        candidate = transform(candidate)
    if candidate not in choices:
        _fail(f"Invalid field '{field}': '{value}' not in {list(choices)}.", warnings, strict, ValueError)
        return fallback
    return candidate
