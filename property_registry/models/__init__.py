"""Domain models for the property registry."""

from property_registry.models.apartment import Apartment
from property_registry.models.base import ID, coerce_date, generate_id
from property_registry.models.contract import Contract
from property_registry.models.enums import ContractStatus
from property_registry.models.property import Property
from property_registry.models.tenant import Tenant

__all__ = [
    "Apartment",
    "Contract",
    "ContractStatus",
    "ID",
    "Property",
    "Tenant",
    "coerce_date",
    "generate_id",
]
