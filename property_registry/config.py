"""Configuration management for property-registry."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

from property_registry.exceptions import ConfigurationError
from property_registry.logging import LOG_FORMATS

if TYPE_CHECKING:
    from property_registry.registry import Registry

BACKENDS = ("memory", "postgres")


@dataclass
class PostgresConfig:
    """PostgreSQL connection configuration."""

    host: str = "localhost"
    port: int = 5432
    database: str = "registry"
    user: str = "postgres"
    password: str = "postgres"

    @property
    def connection_string(self) -> str:
        """Get connection string."""
        return f"postgresql://{self.user}:{self.password}@{self.host}:{self.port}/{self.database}"


@dataclass
class OutputConfig:
    """Snapshot export configuration."""

    json_output_dir: Path = field(default_factory=lambda: Path("output"))
    pretty_json: bool = False


@dataclass
class RegistryConfig:
    """Main configuration for property-registry."""

    backend: str = "memory"
    postgres: PostgresConfig = field(default_factory=PostgresConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    strict_references: bool = False
    seed_fixtures: bool = True  # Memory backend only
    seed: int | None = None
    log_level: str = "INFO"
    log_format: str = "standard"

    def __post_init__(self) -> None:
        if self.backend not in BACKENDS:
            raise ConfigurationError(
                f"Unknown backend {self.backend!r}, expected one of {', '.join(BACKENDS)}"
            )
        if self.log_format not in LOG_FORMATS:
            raise ConfigurationError(
                f"Unknown log format {self.log_format!r}, expected one of {', '.join(LOG_FORMATS)}"
            )

    @classmethod
    def from_env(cls) -> RegistryConfig:
        """Create config from environment variables."""
        import os

        postgres = PostgresConfig(
            host=os.getenv("POSTGRES_HOST", "localhost"),
            port=int(os.getenv("POSTGRES_PORT", "5432")),
            database=os.getenv("POSTGRES_DB", "registry"),
            user=os.getenv("POSTGRES_USER", "postgres"),
            password=os.getenv("POSTGRES_PASSWORD", "postgres"),
        )

        output = OutputConfig(
            json_output_dir=Path(os.getenv("OUTPUT_DIR", "output")),
            pretty_json=os.getenv("PRETTY_JSON", "false").lower() == "true",
        )

        return cls(
            backend=os.getenv("REGISTRY_BACKEND", "memory").lower(),
            postgres=postgres,
            output=output,
            strict_references=os.getenv("REGISTRY_STRICT_REFERENCES", "false").lower() == "true",
            seed_fixtures=os.getenv("REGISTRY_SEED_FIXTURES", "true").lower() == "true",
            seed=int(os.getenv("SEED")) if os.getenv("SEED") else None,
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_format=os.getenv("LOG_FORMAT", "standard").lower(),
        )


def build_registry(config: RegistryConfig) -> Registry:
    """Construct a registry for the configured backend.

    Parameters
    ----------
    config : RegistryConfig
        Registry configuration.

    Returns
    -------
    Registry
        A memory-backed registry (optionally seeded with fixtures) or a
        registry over PostgreSQL tables, which are created if missing.
    """
    from property_registry.registry import Registry
    from property_registry.store import PostgresStore

    if config.backend == "postgres":
        store = PostgresStore(config.postgres.connection_string)
        store.create_tables()
        return Registry(store, strict_references=config.strict_references)

    if config.seed_fixtures:
        return Registry.with_fixtures(strict_references=config.strict_references)
    return Registry(strict_references=config.strict_references)
