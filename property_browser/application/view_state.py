"""View state controller.

Owns the filter specification, search text and layout mode of one browser
view. Each action replaces a single field and re-runs the full filter/sort
pipeline synchronously.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any

from property_browser.application.navigation import DetailIntent, Navigator
from property_browser.core.exceptions import PropertyNotFoundError
from property_browser.core.logging import get_logger
from property_browser.domain.filtering.coercion import coerce_price_range, coerce_roi_range
from property_browser.domain.filtering.engine import apply_filters
from property_browser.domain.models.filters import FilterSpec, SortKey, ViewMode
from property_browser.domain.models.listing import Property

log = get_logger(__name__)


class ResultStatus(str, Enum):
    """Where the result list stands."""

    PENDING = "pending"  # filters not yet applied
    MATCHES = "matches"
    NO_MATCHES = "no_matches"


@dataclass(frozen=True)
class FilterOutcome:
    """Result of one pipeline run, ready for rendering."""

    status: ResultStatus
    properties: tuple[Property, ...]
    catalog_size: int

    @classmethod
    def pending(cls, catalog_size: int) -> FilterOutcome:
        return cls(status=ResultStatus.PENDING, properties=(), catalog_size=catalog_size)

    @classmethod
    def from_results(cls, properties: Sequence[Property], catalog_size: int) -> FilterOutcome:
        status = ResultStatus.MATCHES if properties else ResultStatus.NO_MATCHES
        return cls(status=status, properties=tuple(properties), catalog_size=catalog_size)

    @property
    def count(self) -> int:
        return len(self.properties)

    @property
    def is_empty(self) -> bool:
        """True only for an applied filter that matched nothing."""
        return self.status is ResultStatus.NO_MATCHES

    @property
    def summary(self) -> str:
        return f"Showing {self.count} of {self.catalog_size} properties"


class ViewState:
    """Mutable controller around an immutable FilterSpec.

    Args:
        catalog: Read-only property catalog in source order
        view_mode: Initial layout
        spec: Initial filter specification (defaults when omitted)
        navigator: Receives detail intents from ``open_detail``
    """

    def __init__(
        self,
        catalog: Sequence[Property],
        view_mode: ViewMode | str = ViewMode.GRID,
        spec: FilterSpec | None = None,
        navigator: Navigator | None = None,
    ):
        self._catalog: tuple[Property, ...] = tuple(catalog)
        self._spec = spec if spec is not None else FilterSpec()
        self._view_mode = ViewMode(view_mode)
        self._navigator = navigator
        self._outcome = FilterOutcome.pending(len(self._catalog))

    # --- Read access ---

    @property
    def catalog(self) -> tuple[Property, ...]:
        return self._catalog

    @property
    def spec(self) -> FilterSpec:
        return self._spec

    @property
    def search_text(self) -> str:
        return self._spec.search_text

    @property
    def view_mode(self) -> ViewMode:
        return self._view_mode

    @property
    def outcome(self) -> FilterOutcome:
        return self._outcome

    @property
    def results(self) -> tuple[Property, ...]:
        return self._outcome.properties

    # --- Actions ---

    def set_search(self, text: str | None) -> FilterOutcome:
        return self._update(search_text=text or "")

    def set_price_range(self, minimum: Any, maximum: Any) -> FilterOutcome:
        """Replace the price window; malformed bounds fall back to defaults."""
        return self._update(price_range=coerce_price_range(minimum, maximum))

    def set_roi_range(self, minimum: Any, maximum: Any) -> FilterOutcome:
        """Replace the ROI window; malformed bounds fall back to defaults."""
        return self._update(roi_range=coerce_roi_range(minimum, maximum))

    def set_property_type(self, property_type: Any) -> FilterOutcome:
        return self._update(property_type=property_type)

    def set_sort_key(self, sort_key: SortKey | str) -> FilterOutcome:
        return self._update(sort_key=SortKey.parse(sort_key))

    def set_view_mode(self, view_mode: ViewMode | str) -> FilterOutcome:
        """Switch layout. Filtering is unaffected."""
        self._view_mode = ViewMode(view_mode)
        return self._outcome

    def reset(self) -> FilterOutcome:
        """Restore default filters and clear the search. View mode is kept."""
        self._spec = FilterSpec()
        log.info("filters_reset", view_mode=self._view_mode.value)
        return self.refresh()

    def refresh(self) -> FilterOutcome:
        """Re-run the pipeline for the current specification."""
        results = apply_filters(self._catalog, self._spec)
        self._outcome = FilterOutcome.from_results(results, len(self._catalog))
        log.debug(
            "filters_applied",
            search=self._spec.search_text,
            price_range=self._spec.price_range,
            roi_range=self._spec.roi_range,
            property_type=self._spec.property_type,
            sort_key=self._spec.sort_key.value,
            matched=self._outcome.count,
            total=self._outcome.catalog_size,
        )
        return self._outcome

    def open_detail(self, property_id: int) -> DetailIntent:
        """Emit a navigation intent for one catalog property.

        Raises:
            PropertyNotFoundError: If the id is not in the catalog
        """
        if not any(p.id == property_id for p in self._catalog):
            raise PropertyNotFoundError(property_id)
        intent = DetailIntent.for_property(property_id)
        log.info("detail_navigation_requested", property_id=property_id, path=intent.path)
        if self._navigator is not None:
            self._navigator(intent)
        return intent

    # --- Internals ---

    def _update(self, **changes: Any) -> FilterOutcome:
        self._spec = self._spec.replace(**changes)
        return self.refresh()
