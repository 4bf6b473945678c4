"""In-memory storage binding."""

from copy import deepcopy
from dataclasses import dataclass, field
from typing import Any

from property_registry.store.base import RegistryStore, check_collection


@dataclass
class MemoryStore(RegistryStore):
    """In-memory store; records live in insertion-ordered dicts keyed by id.

    Reads return deep copies, like rows freshly decoded by
    :class:`PostgresStore`, so mutating a returned record (or its
    ``amenities``/``documents`` list) never changes stored state. Writes go
    through :meth:`insert` and :meth:`replace` only.

    Contents are lost when the process exits.
    """

    properties: dict[str, Any] = field(default_factory=dict)
    apartments: dict[str, Any] = field(default_factory=dict)
    tenants: dict[str, Any] = field(default_factory=dict)
    contracts: dict[str, Any] = field(default_factory=dict)

    def _table(self, collection: str) -> dict[str, Any]:
        check_collection(collection)
        return getattr(self, collection)

    def insert(self, collection: str, record: Any) -> None:
        self._table(collection)[record.id] = deepcopy(record)

    def replace(self, collection: str, record: Any) -> None:
        # Assigning to an existing key keeps its insertion position
        table = self._table(collection)
        if record.id in table:
            table[record.id] = deepcopy(record)

    def remove(self, collection: str, record_id: str) -> None:
        self._table(collection).pop(record_id, None)

    def get(self, collection: str, record_id: str) -> Any | None:
        record = self._table(collection).get(record_id)
        return deepcopy(record) if record is not None else None

    def all(self, collection: str) -> list[Any]:
        return [deepcopy(record) for record in self._table(collection).values()]

    def find(self, collection: str, **criteria: Any) -> list[Any]:
        return [
            deepcopy(record)
            for record in self._table(collection).values()
            if all(getattr(record, key) == value for key, value in criteria.items())
        ]

    def count(self, collection: str) -> int:
        return len(self._table(collection))
