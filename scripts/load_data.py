#!/usr/bin/env python3
"""Build a property registry and load it to PostgreSQL or JSON files.

The registry is assembled in memory from the standard fixture set and/or a
generated portfolio, then written out:
- postgres: one table per entity (created if missing)
- json: one file per entity in the output directory
"""

import argparse
import logging
import sys
import time

from property_registry.config import RegistryConfig
from property_registry.exceptions import RegistryError
from property_registry.generators import populate_registry
from property_registry.logging import LOG_FORMATS, setup_logging
from property_registry.registry import Registry
from property_registry.sinks import JsonFileSink
from property_registry.store import PostgresStore

logger = logging.getLogger(__name__)


def build_source_registry(num_properties: int, fixtures: bool, seed: int | None) -> Registry:
    """Assemble the in-memory registry to export.

    Parameters
    ----------
    num_properties : int
        Number of generated properties (0 for fixtures only).
    fixtures : bool
        Include the standard fixture set.
    seed : int | None
        Random seed for reproducibility.

    Returns
    -------
    Registry
        Populated in-memory registry.
    """
    registry = Registry.with_fixtures() if fixtures else Registry()
    if num_properties > 0:
        t0 = time.perf_counter()
        populate_registry(registry, num_properties, seed=seed)
        logger.info("Generated portfolio in %.1fs", time.perf_counter() - t0)
    return registry


def load_to_postgres(registry: Registry, connection_string: str, truncate: bool = False) -> None:
    """Copy every record of ``registry`` into PostgreSQL tables in FK order."""
    with PostgresStore(connection_string) as store:
        store.create_tables()
        if truncate:
            store.truncate_tables()

        t0 = time.perf_counter()
        total = 0
        for collection in store.ENTITY_ORDER:
            records = registry.store.all(collection)
            for record in records:
                store.insert(collection, record)
            total += len(records)
            logger.info("  %s: %d rows", collection, len(records))

        elapsed = time.perf_counter() - t0
        logger.info("PostgreSQL load complete: %d rows in %.1fs", total, elapsed)


def load_to_json(registry: Registry, output_dir: str, pretty: bool = False) -> None:
    """Write a JSON snapshot of ``registry``."""
    sink = JsonFileSink(output_dir, pretty=pretty)
    sink.write_registry(registry)
    sink.close()


def print_summary(registry: Registry) -> None:
    """Print registry statistics and the contracts ending within 30 days."""
    print("\nRegistry summary")
    print("=" * 40)
    for key, value in registry.summary().items():
        print(f"  {key:<20} {value:>8}")

    expiring = registry.get_expiring_contracts()
    if expiring:
        print("\nExpiring contracts")
        print("-" * 40)
    for contract in expiring:
        tenant = registry.get_tenant_by_id(contract.tenant_id)
        name = tenant.full_name if tenant is not None else contract.tenant_id
        print(f"  {contract.end_date}  {contract.apartment_id:<12} {name}")


def main() -> None:
    config = RegistryConfig.from_env()

    parser = argparse.ArgumentParser(description="Load a property registry to PostgreSQL or JSON")
    parser.add_argument("--target", choices=["postgres", "json"], default="json")
    parser.add_argument("--properties", type=int, default=0,
                        help="Number of generated properties (default: 0)")
    parser.add_argument("--no-fixtures", action="store_true",
                        help="Do not include the standard fixture set")
    parser.add_argument("--seed", type=int, default=config.seed)
    parser.add_argument("--postgres-url", default=config.postgres.connection_string)
    parser.add_argument("--truncate", action="store_true",
                        help="Truncate tables before loading")
    parser.add_argument("--output-dir", default=str(config.output.json_output_dir))
    parser.add_argument("--pretty", action="store_true", default=config.output.pretty_json)
    parser.add_argument("--log-level", default=config.log_level)
    parser.add_argument("--log-format", choices=LOG_FORMATS, default=config.log_format)
    args = parser.parse_args()

    setup_logging(args.log_level, format_type=args.log_format)

    with build_source_registry(args.properties, not args.no_fixtures, args.seed) as registry:
        try:
            if args.target == "postgres":
                load_to_postgres(registry, args.postgres_url, truncate=args.truncate)
            else:
                load_to_json(registry, args.output_dir, pretty=args.pretty)
        except RegistryError as e:
            logger.error("Load failed: %s", e)
            sys.exit(1)

        print_summary(registry)


if __name__ == "__main__":
    main()
