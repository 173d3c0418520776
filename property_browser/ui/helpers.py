"""UI helper functions for Streamlit.

Common formatting utilities.
"""

from __future__ import annotations

from pathlib import Path


def format_currency(value: float | None, symbol: str = "$") -> str:
    """Format a number as a currency amount.

    Args:
        value: Amount to format
        symbol: Currency symbol prefix

    Returns:
        Formatted string like "$1,234,567"
    """
    if value is None:
        return "—"
    if float(value).is_integer():
        return f"{symbol}{int(value):,}"
    return f"{symbol}{value:,.2f}"


def format_roi(value: float | None) -> str:
    """Format an ROI percentage like "7.5%" or "8%"."""
    if value is None:
        return "—"
    return f"{value:g}%"


def resolve_image(ref: str, assets_dir: str | Path | None = None) -> str | None:
    """Resolve an opaque image reference to something st.image can load.

    Remote URLs pass through. Other references are looked up under
    ``assets_dir``; unresolvable ones give None and the card shows no image.
    """
    if not ref:
        return None
    if ref.startswith(("http://", "https://")):
        return ref
    if assets_dir is None:
        return None
    path = Path(assets_dir) / ref.lstrip("/")
    return str(path) if path.is_file() else None
