"""Pytest fixtures for property_browser tests."""

import os
import sys

import pytest

# Add project root to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from property_browser.domain.models.listing import Property


@pytest.fixture
def sample_property_data():
    """Raw record for a single property."""
    return {
        "id": 42,
        "title": "Harbour View Apartment",
        "location": "San Diego, California",
        "price": 410000,
        "roi": 6.8,
        "type": "apartment",
        "image": "/images/harbour.jpg",
    }


@pytest.fixture
def two_property_catalog():
    """Lake House / Downtown Loft catalog."""
    return [
        Property(id=1, title="Lake House", location="X", price=100000, roi=5, type="villa"),
        Property(id=2, title="Downtown Loft", location="Y", price=50000, roi=8, type="apartment"),
    ]


@pytest.fixture
def mixed_catalog():
    """Six properties covering every type, with price and ROI ties."""
    return [
        Property(id=1, title="Sunset Villa", location="Malibu", price=800000, roi=6.0, type="villa"),
        Property(id=2, title="City Studio", location="Austin", price=150000, roi=9.0, type="apartment"),
        Property(id=3, title="Corner Office", location="Seattle", price=450000, roi=6.0, type="office"),
        Property(id=4, title="Garden Flat", location="Austin Heights", price=150000, roi=7.5, type="apartment"),
        Property(id=5, title="Tower Office", location="Denver", price=950000, roi=4.0, type="office"),
        Property(id=6, title="Hillside Villa", location="Napa", price=620000, roi=9.0, type="villa"),
    ]
