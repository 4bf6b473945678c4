"""Storage bindings for registry entities."""

from property_registry.store.base import ENTITY_TYPES, RegistryStore
from property_registry.store.memory import MemoryStore
from property_registry.store.postgres import PostgresStore

__all__ = ["ENTITY_TYPES", "MemoryStore", "PostgresStore", "RegistryStore"]
