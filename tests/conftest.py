"""Pytest configuration and fixtures."""

from datetime import date
from typing import Any

import pytest

from property_registry.registry import Registry

TODAY = date(2025, 6, 1)


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def today() -> date:
    """Fixed calendar date used as the registry clock."""
    return TODAY


@pytest.fixture
def registry() -> Registry:
    """Fresh empty in-memory registry with a fixed clock."""
    return Registry(today=lambda: TODAY)


@pytest.fixture
def property_data() -> dict[str, Any]:
    """Sample property payload."""
    return {
        "name": "P1",
        "address": "Parkstraße 12",
        "city": "Berlin",
        "postal_code": "10115",
        "construction_year": 2010,
        "total_apartments": 1,
    }


@pytest.fixture
def apartment_data() -> dict[str, Any]:
    """Sample apartment payload (property_id filled in by tests)."""
    return {
        "number": "A1",
        "floor": 1,
        "size": 65.0,
        "rooms": 2,
        "bathrooms": 1,
        "price": 850.0,
        "amenities": ["Balkon", "Keller"],
    }


@pytest.fixture
def tenant_data() -> dict[str, Any]:
    """Sample tenant payload."""
    return {
        "first_name": "Max",
        "last_name": "Mustermann",
        "email": "max.mustermann@example.com",
        "phone": "0170 1234567",
        "date_of_birth": "1985-05-15",
        "id_number": "DE123456789",
    }


@pytest.fixture
def contract_data() -> dict[str, Any]:
    """Sample open-ended contract payload (ids filled in by tests)."""
    return {
        "start_date": "2024-01-01",
        "rental_price": 850.0,
        "deposit": 1700.0,
        "is_paid": True,
    }
