"""Synthetic data generators for registry entities."""

from property_registry.generators.contract import ContractGenerator
from property_registry.generators.portfolio import populate_registry
from property_registry.generators.property import ApartmentGenerator, PropertyGenerator
from property_registry.generators.tenant import TenantGenerator

__all__ = [
    "ApartmentGenerator",
    "ContractGenerator",
    "PropertyGenerator",
    "TenantGenerator",
    "populate_registry",
]
