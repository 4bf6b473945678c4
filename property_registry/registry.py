"""Property registry with referential integrity and contract-driven occupancy."""

from __future__ import annotations

import logging
from dataclasses import replace
from datetime import date, timedelta
from typing import Any, Callable, Mapping

from property_registry.exceptions import ReferentialIntegrityError
from property_registry.models import (
    ID,
    Apartment,
    Contract,
    ContractStatus,
    Property,
    Tenant,
    generate_id,
)
from property_registry.store.base import RegistryStore
from property_registry.store.memory import MemoryStore

logger = logging.getLogger(__name__)


class Registry:
    """Owns properties, apartments, tenants and contracts.

    The registry is the only place where cross-entity rules are enforced:

    - a property, apartment or tenant that is still referenced cannot be
      deleted (``delete_*`` returns ``False``);
    - adding a contract marks its apartment occupied, deleting the last
      active contract of an apartment marks it vacant.

    Expected business outcomes are signalled with sentinels: lookups and
    updates return ``None`` for unknown ids, blocked deletes return
    ``False``. Only infrastructure failures raised by the store propagate
    as exceptions.

    Contract updates never re-derive occupancy, even when ``apartment_id``
    or ``end_date`` change; occupancy follows contract add/delete only.
    ``is_occupied`` is not writable through :meth:`add_apartment` or
    :meth:`update_apartment`.

    Parameters
    ----------
    store : RegistryStore | None
        Storage binding (default: an empty :class:`MemoryStore`).
    strict_references : bool
        If True, ``add_apartment`` and ``add_contract`` raise
        :class:`ReferentialIntegrityError` when the referenced parent does
        not exist. The default trusts callers to pass valid references.
    today : Callable[[], date]
        Clock used for the "active contract" predicate.
    """

    def __init__(
        self,
        store: RegistryStore | None = None,
        strict_references: bool = False,
        today: Callable[[], date] = date.today,
    ) -> None:
        self.store = store if store is not None else MemoryStore()
        self.strict_references = strict_references
        self._today = today

    @classmethod
    def with_fixtures(cls, **kwargs: Any) -> Registry:
        """Create an in-memory registry seeded with the standard fixture set."""
        from property_registry.fixtures import seed_registry

        registry = cls(**kwargs)
        seed_registry(registry)
        return registry

    # Collections
    @property
    def properties(self) -> list[Property]:
        return self.store.all("properties")

    @property
    def apartments(self) -> list[Apartment]:
        return self.store.all("apartments")

    @property
    def tenants(self) -> list[Tenant]:
        return self.store.all("tenants")

    @property
    def contracts(self) -> list[Contract]:
        return self.store.all("contracts")

    # Properties
    def add_property(self, data: Mapping[str, Any]) -> Property:
        """Create a property with a fresh id."""
        return self._add("properties", Property, "prop", data)

    def update_property(self, property_id: ID, patch: Mapping[str, Any]) -> Property | None:
        """Merge ``patch`` onto a property; None if it does not exist."""
        return self._update("properties", property_id, patch)

    def delete_property(self, property_id: ID) -> bool:
        """Delete a property unless apartments still belong to it."""
        if self.store.exists("apartments", property_id=property_id):
            logger.info(
                "Property %s still has apartments, not deleted",
                property_id,
                extra={"extra": {"property_id": property_id}},
            )
            return False
        self.store.remove("properties", property_id)
        return True

    def get_property_by_id(self, property_id: ID) -> Property | None:
        return self.store.get("properties", property_id)

    # Apartments
    def add_apartment(self, data: Mapping[str, Any]) -> Apartment:
        """Create an apartment under ``data["property_id"]``.

        New apartments start vacant; an ``is_occupied`` key in ``data`` is
        dropped.

        Raises
        ------
        ReferentialIntegrityError
            If strict references are enabled and the property is missing.
        """
        if self.strict_references:
            self._require("properties", data.get("property_id"), "Property")
        data = self._without_occupancy(data, "new apartment")
        return self._add("apartments", Apartment, "apt", data)

    def update_apartment(self, apartment_id: ID, patch: Mapping[str, Any]) -> Apartment | None:
        """Merge ``patch`` onto an apartment; None if it does not exist.

        Occupancy is owned by the contract lifecycle, so an ``is_occupied``
        key in the patch is dropped.
        """
        patch = self._without_occupancy(patch, f"update of apartment {apartment_id}")
        return self._update("apartments", apartment_id, patch)

    def delete_apartment(self, apartment_id: ID) -> bool:
        """Delete an apartment unless contracts still reference it."""
        if self.store.exists("contracts", apartment_id=apartment_id):
            logger.info(
                "Apartment %s still has contracts, not deleted",
                apartment_id,
                extra={"extra": {"apartment_id": apartment_id}},
            )
            return False
        self.store.remove("apartments", apartment_id)
        return True

    def get_apartment_by_id(self, apartment_id: ID) -> Apartment | None:
        return self.store.get("apartments", apartment_id)

    def get_apartments_by_property_id(self, property_id: ID) -> list[Apartment]:
        return self.store.find("apartments", property_id=property_id)

    def get_vacant_apartments(self) -> list[Apartment]:
        return self.store.find("apartments", is_occupied=False)

    # Tenants
    def add_tenant(self, data: Mapping[str, Any]) -> Tenant:
        return self._add("tenants", Tenant, "tenant", data)

    def update_tenant(self, tenant_id: ID, patch: Mapping[str, Any]) -> Tenant | None:
        return self._update("tenants", tenant_id, patch)

    def delete_tenant(self, tenant_id: ID) -> bool:
        """Delete a tenant unless contracts still reference them."""
        if self.store.exists("contracts", tenant_id=tenant_id):
            logger.info(
                "Tenant %s still has contracts, not deleted",
                tenant_id,
                extra={"extra": {"tenant_id": tenant_id}},
            )
            return False
        self.store.remove("tenants", tenant_id)
        return True

    def get_tenant_by_id(self, tenant_id: ID) -> Tenant | None:
        return self.store.get("tenants", tenant_id)

    # Contracts
    def add_contract(self, data: Mapping[str, Any]) -> Contract:
        """Create a contract and mark its apartment occupied.

        A missing apartment is silently skipped for the occupancy update
        unless strict references are enabled.

        Raises
        ------
        ReferentialIntegrityError
            If strict references are enabled and the apartment or tenant
            is missing.
        """
        if self.strict_references:
            self._require("apartments", data.get("apartment_id"), "Apartment")
            self._require("tenants", data.get("tenant_id"), "Tenant")

        contract = self._add("contracts", Contract, "contract", data)
        self._set_occupied(contract.apartment_id, True)
        return contract

    def update_contract(self, contract_id: ID, patch: Mapping[str, Any]) -> Contract | None:
        """Merge ``patch`` onto a contract without touching apartment occupancy."""
        return self._update("contracts", contract_id, patch)

    def delete_contract(self, contract_id: ID) -> bool:
        """Delete a contract, releasing its apartment if no other contract is active."""
        contract = self.store.get("contracts", contract_id)
        if contract is None:
            return False

        today = self._today()
        others_active = any(
            other.id != contract_id and other.is_active(today)
            for other in self.store.find("contracts", apartment_id=contract.apartment_id)
        )
        if not others_active:
            self._set_occupied(contract.apartment_id, False)

        self.store.remove("contracts", contract_id)
        return True

    def get_contract_by_id(self, contract_id: ID) -> Contract | None:
        return self.store.get("contracts", contract_id)

    def get_contracts_by_apartment_id(self, apartment_id: ID) -> list[Contract]:
        return self.store.find("contracts", apartment_id=apartment_id)

    def get_contracts_by_tenant_id(self, tenant_id: ID) -> list[Contract]:
        return self.store.find("contracts", tenant_id=tenant_id)

    def get_active_contracts(self) -> list[Contract]:
        """Return contracts without end date or ending today or later."""
        today = self._today()
        return [c for c in self.contracts if c.is_active(today)]

    def get_expiring_contracts(self, days: int = 30) -> list[Contract]:
        """Return contracts whose end date falls within the next ``days`` days."""
        today = self._today()
        horizon = today + timedelta(days=days)
        return [
            c for c in self.contracts
            if c.end_date is not None and today <= c.end_date <= horizon
        ]

    def get_contracts_by_status(self, status: ContractStatus | str) -> list[Contract]:
        """Filter contracts by :class:`ContractStatus`."""
        status = ContractStatus(status)
        if status == ContractStatus.ACTIVE:
            return self.get_active_contracts()
        if status == ContractStatus.TERMINATING:
            return self.get_expiring_contracts()
        if status == ContractStatus.EXPIRED:
            today = self._today()
            return [c for c in self.contracts if not c.is_active(today)]
        return self.contracts

    def summary(self) -> dict[str, int]:
        """Return entity counts and occupancy statistics."""
        return {
            "properties": self.store.count("properties"),
            "apartments": self.store.count("apartments"),
            "tenants": self.store.count("tenants"),
            "contracts": self.store.count("contracts"),
            "vacant_apartments": len(self.get_vacant_apartments()),
            "active_contracts": len(self.get_active_contracts()),
            "expiring_contracts": len(self.get_expiring_contracts()),
        }

    def close(self) -> None:
        """Release the underlying store."""
        self.store.close()

    def __enter__(self) -> Registry:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    @staticmethod
    def _without_occupancy(data: Mapping[str, Any], context: str) -> Mapping[str, Any]:
        if "is_occupied" not in data:
            return data
        logger.warning("Ignoring is_occupied in %s; occupancy follows contracts", context)
        return {k: v for k, v in data.items() if k != "is_occupied"}

    def _add(self, collection: str, cls: type, prefix: str, data: Mapping[str, Any]) -> Any:
        fields = {k: v for k, v in data.items() if k != "id"}
        record = cls(id=generate_id(prefix), **fields)
        self.store.insert(collection, record)
        logger.debug("Added %s %s", collection, record.id)
        return record

    def _update(self, collection: str, record_id: ID, patch: Mapping[str, Any]) -> Any | None:
        existing = self.store.get(collection, record_id)
        if existing is None:
            return None
        changes = {k: v for k, v in patch.items() if k != "id"}
        updated = replace(existing, **changes)
        self.store.replace(collection, updated)
        return updated

    def _set_occupied(self, apartment_id: ID, occupied: bool) -> None:
        apartment = self.store.get("apartments", apartment_id)
        if apartment is None:
            logger.debug("Apartment %s not found, occupancy unchanged", apartment_id)
            return
        self.store.replace("apartments", replace(apartment, is_occupied=occupied))
        logger.debug("Apartment %s occupied=%s", apartment_id, occupied)

    def _require(self, collection: str, record_id: ID | None, label: str) -> None:
        if record_id is None or self.store.get(collection, record_id) is None:
            raise ReferentialIntegrityError(f"{label} {record_id} not found")
