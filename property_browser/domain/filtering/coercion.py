"""Numeric input coercion for range filters.

Range bounds arrive as raw widget text. Anything that does not parse to a
finite number falls back to the bound's default, which leaves that side of
the range unconstrained. No validation error is ever surfaced.
"""

from __future__ import annotations

from math import isfinite
from typing import Any

from property_browser.core.logging import get_logger
from property_browser.domain.models.filters import (
    DEFAULT_PRICE_MAX,
    DEFAULT_PRICE_MIN,
    DEFAULT_ROI_MAX,
    DEFAULT_ROI_MIN,
)

log = get_logger(__name__)


def coerce_number(raw: Any, default: float) -> float:
    """Parse a number from user input, falling back to ``default``.

    Args:
        raw: Text, number or None as received from the input widget
        default: Value used when ``raw`` is empty or malformed

    Returns:
        Parsed finite float, or ``default``
    """
    if raw is None or isinstance(raw, bool):
        return default

    if isinstance(raw, str):
        text = raw.strip().replace(",", "").replace("_", "")
        if not text:
            return default
    else:
        text = raw

    try:
        value = float(text)
    except (TypeError, ValueError):
        log.debug("numeric_input_coerced", raw=str(raw), default=default)
        return default

    if not isfinite(value):
        log.debug("numeric_input_coerced", raw=str(raw), default=default)
        return default
    return value


def coerce_price_range(raw_min: Any, raw_max: Any) -> tuple[float, float]:
    """Coerce price bounds (0 and 1,000,000 fallbacks)."""
    return (
        coerce_number(raw_min, DEFAULT_PRICE_MIN),
        coerce_number(raw_max, DEFAULT_PRICE_MAX),
    )


def coerce_roi_range(raw_min: Any, raw_max: Any) -> tuple[float, float]:
    """Coerce ROI bounds (0 and 10 fallbacks)."""
    return (
        coerce_number(raw_min, DEFAULT_ROI_MIN),
        coerce_number(raw_max, DEFAULT_ROI_MAX),
    )
