"""Detail navigation intents.

The browser does not render property details itself; it only emits an
intent naming the target. Whoever hosts the browser decides how to follow it.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

DETAIL_ROUTE = "/property/{property_id}"


@dataclass(frozen=True)
class DetailIntent:
    """Request to open the detail view of one property."""

    property_id: int
    path: str

    @classmethod
    def for_property(cls, property_id: int) -> DetailIntent:
        return cls(property_id=property_id, path=detail_path(property_id))


def detail_path(property_id: int) -> str:
    """Build the detail route for a property id."""
    return DETAIL_ROUTE.format(property_id=property_id)


Navigator = Callable[[DetailIntent], None]
