"""Application layer: view state controller and navigation intents."""

from .navigation import DetailIntent, detail_path
from .view_state import FilterOutcome, ResultStatus, ViewState

__all__ = [
    "DetailIntent",
    "FilterOutcome",
    "ResultStatus",
    "ViewState",
    "detail_path",
]
