"""Storage binding interface shared by all registry backends."""

from abc import ABC, abstractmethod
from typing import Any, TypeVar

from property_registry.models import Apartment, Contract, Property, Tenant

T = TypeVar("T")

# Collection name -> entity class, in foreign-key order
ENTITY_TYPES: dict[str, type] = {
    "properties": Property,
    "apartments": Apartment,
    "tenants": Tenant,
    "contracts": Contract,
}


class RegistryStore(ABC):
    """Synchronous record storage used by :class:`Registry`.

    A store knows nothing about cross-entity rules; it inserts, replaces,
    removes and looks up whole records in named collections. Every call
    completes before returning, regardless of backend.
    """

    ENTITY_ORDER = list(ENTITY_TYPES)

    @abstractmethod
    def insert(self, collection: str, record: Any) -> None:
        """Append a record to a collection."""

    @abstractmethod
    def replace(self, collection: str, record: Any) -> None:
        """Replace the record with the same id, keeping its position."""

    @abstractmethod
    def remove(self, collection: str, record_id: str) -> None:
        """Remove the record with the given id (no-op if absent)."""

    @abstractmethod
    def get(self, collection: str, record_id: str) -> Any | None:
        """Return the record with the given id, or None."""

    @abstractmethod
    def all(self, collection: str) -> list[Any]:
        """Return every record of a collection in insertion order."""

    @abstractmethod
    def find(self, collection: str, **criteria: Any) -> list[Any]:
        """Return records whose attributes equal all ``criteria``, in insertion order."""

    def exists(self, collection: str, **criteria: Any) -> bool:
        """Return True if at least one record matches ``criteria``."""
        return bool(self.find(collection, **criteria))

    def count(self, collection: str) -> int:
        """Return the number of records in a collection."""
        return len(self.all(collection))

    def close(self) -> None:
        """Release backend resources."""

    def __enter__(self: T) -> T:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


def check_collection(collection: str) -> type:
    """Return the entity class for a collection name.

    Raises
    ------
    KeyError
        If the collection is unknown.
    """
    try:
        return ENTITY_TYPES[collection]
    except KeyError:
        raise KeyError(f"Unknown collection: {collection}") from None
