"""Custom exception hierarchy for property-registry."""


class RegistryError(Exception):
    """Base exception for all property-registry errors."""


class EntityNotFoundError(RegistryError):
    """Raised when a referenced entity does not exist."""


class ReferentialIntegrityError(EntityNotFoundError):
    """Raised when a foreign key reference is violated."""


class ValidationError(RegistryError):
    """Raised by the input validators when a field is malformed."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(message)
        self.field = field


class ConfigurationError(RegistryError):
    """Raised when configuration is invalid or missing."""


class StorageError(RegistryError):
    """Raised when a storage binding fails."""
