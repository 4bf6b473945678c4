"""Standard seed data for an in-memory registry."""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING

from property_registry.models import Apartment, Contract, Property, Tenant

if TYPE_CHECKING:
    from property_registry.registry import Registry


def fixture_properties() -> list[Property]:
    return [
        Property("prop-1", "Stadtpark Residenz", "Parkstraße 12", "Berlin", "10115", 8, 2010),
        Property("prop-2", "Sonnenhof", "Sonnenallee 45", "München", "80331", 12, 2005),
        Property("prop-3", "Rheinblick", "Rheinuferstraße 78", "Köln", "50667", 6, 2015),
    ]


def fixture_apartments() -> list[Apartment]:
    return [
        Apartment("apt-1", "prop-1", "101", 1, 65.0, 2, 1, 850.0, True,
                  ["Balkon", "Keller", "Aufzug"]),
        Apartment("apt-2", "prop-1", "102", 1, 45.0, 1, 1, 650.0, False, ["Keller"]),
        Apartment("apt-3", "prop-1", "201", 2, 85.0, 3, 2, 1200.0, True,
                  ["Balkon", "Keller", "Aufzug", "Einbauküche"]),
        Apartment("apt-4", "prop-2", "101", 1, 70.0, 2, 1, 900.0, True,
                  ["Balkon", "Keller", "Einbauküche"]),
        Apartment("apt-5", "prop-2", "102", 1, 50.0, 1, 1, 700.0, True, ["Keller"]),
        Apartment("apt-6", "prop-3", "101", 1, 90.0, 3, 2, 1300.0, False,
                  ["Terrasse", "Keller", "Aufzug", "Einbauküche", "Garten"]),
    ]


def fixture_tenants() -> list[Tenant]:
    return [
        Tenant("tenant-1", "Max", "Mustermann", "max.mustermann@example.com",
               "0170 1234567", date(1985, 5, 15), "DE123456789"),
        Tenant("tenant-2", "Anna", "Schmidt", "anna.schmidt@example.com",
               "0160 9876543", date(1990, 8, 21), "DE987654321"),
        Tenant("tenant-3", "Thomas", "Meyer", "thomas.meyer@example.com",
               "0151 5554433", date(1978, 12, 3), "DE555444333"),
        Tenant("tenant-4", "Julia", "Wagner", "julia.wagner@example.com",
               "0176 1122334", date(1995, 3, 28), "DE112233445"),
    ]


def fixture_contracts() -> list[Contract]:
    return [
        Contract("contract-1", "apt-1", "tenant-1", date(2022, 1, 1), 850.0, 1700.0, True,
                 end_date=date(2024, 12, 31), notes="Langzeitmieter mit guter Zahlungsmoral"),
        Contract("contract-2", "apt-3", "tenant-2", date(2023, 3, 15), 1200.0, 2400.0, True,
                 end_date=date(2025, 3, 14), notes="Mietvertrag mit Option auf Verlängerung"),
        Contract("contract-3", "apt-4", "tenant-3", date(2021, 6, 1), 900.0, 1800.0, True,
                 end_date=date(2023, 5, 31), notes="Vertrag wurde bereits einmal verlängert"),
        Contract("contract-4", "apt-5", "tenant-4", date(2023, 9, 1), 700.0, 1400.0, True,
                 notes="Unbefristeter Mietvertrag"),
    ]


def seed_registry(registry: Registry) -> None:
    """Insert the fixture set into a registry's store, keeping fixture ids.

    Records go straight to the store, so stored occupancy flags are kept
    as-is rather than re-derived from the fixture contracts.
    """
    for collection, records in (
        ("properties", fixture_properties()),
        ("apartments", fixture_apartments()),
        ("tenants", fixture_tenants()),
        ("contracts", fixture_contracts()),
    ):
        for record in records:
            registry.store.insert(collection, record)
