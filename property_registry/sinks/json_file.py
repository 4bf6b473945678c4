"""JSON file sink for exporting registry snapshots."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

from property_registry.serialization import to_dict

if TYPE_CHECKING:
    from property_registry.registry import Registry

logger = logging.getLogger(__name__)


class JsonFileSink:
    """Write registry collections to JSON files, one file per entity type."""

    def __init__(self, output_dir: str | Path, pretty: bool = False) -> None:
        """Initialize JSON file sink.

        Parameters
        ----------
        output_dir : str | Path
            Directory to write JSON files.
        pretty : bool
            Pretty-print JSON output.
        """
        self.output_dir = Path(output_dir)
        self.output_dir.mkdir(parents=True, exist_ok=True)
        self.pretty = pretty
        self._counts: dict[str, int] = {}

    def write_batch(self, entity_type: str, records: list[Any]) -> Path:
        """Write a batch of records to ``<entity_type>.json``."""
        file_path = self.output_dir / f"{entity_type}.json"

        data = [to_dict(record) for record in records]

        with open(file_path, "w", encoding="utf-8") as f:
            if self.pretty:
                json.dump(data, f, indent=2, ensure_ascii=False, default=str)
            else:
                json.dump(data, f, ensure_ascii=False, default=str)

        self._counts[entity_type] = len(records)
        return file_path

    def write_registry(self, registry: Registry) -> None:
        """Write all four collections of a registry."""
        self.write_batch("properties", registry.properties)
        self.write_batch("apartments", registry.apartments)
        self.write_batch("tenants", registry.tenants)
        self.write_batch("contracts", registry.contracts)

    def close(self) -> None:
        """Log a summary of written files."""
        logger.info("JSON files written to: %s", self.output_dir)
        for entity_type, count in self._counts.items():
            logger.info("  %s: %d records", entity_type, count)
