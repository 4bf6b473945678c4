"""Property registry: properties, apartments, tenants and rental contracts."""

from property_registry.registry import Registry

__all__ = ["Registry"]
