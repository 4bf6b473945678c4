"""Tests for the JSON snapshot sink."""

import json
from pathlib import Path

from property_registry.registry import Registry
from property_registry.sinks import JsonFileSink


class TestJsonFileSink:
    """Tests for JsonFileSink."""

    def test_creates_output_dir(self, tmp_path: Path) -> None:
        target = tmp_path / "nested" / "out"
        JsonFileSink(target)
        assert target.is_dir()

    def test_write_batch(self, tmp_path: Path) -> None:
        registry = Registry.with_fixtures()
        sink = JsonFileSink(tmp_path)

        path = sink.write_batch("contracts", registry.contracts)

        data = json.loads(path.read_text(encoding="utf-8"))
        assert path.name == "contracts.json"
        assert len(data) == 4
        assert data[0]["id"] == "contract-1"
        assert data[0]["start_date"] == "2022-01-01"
        assert data[3]["end_date"] is None

    def test_write_registry(self, tmp_path: Path) -> None:
        JsonFileSink(tmp_path, pretty=True).write_registry(Registry.with_fixtures())

        assert sorted(p.name for p in tmp_path.iterdir()) == [
            "apartments.json",
            "contracts.json",
            "properties.json",
            "tenants.json",
        ]
        apartments = json.loads((tmp_path / "apartments.json").read_text(encoding="utf-8"))
        assert apartments[0]["amenities"] == ["Balkon", "Keller", "Aufzug"]
        assert "\n  " in (tmp_path / "tenants.json").read_text(encoding="utf-8")

    def test_non_ascii_preserved(self, tmp_path: Path) -> None:
        sink = JsonFileSink(tmp_path)
        sink.write_batch("properties", Registry.with_fixtures().properties)

        assert "Parkstraße" in (tmp_path / "properties.json").read_text(encoding="utf-8")

    def test_close_logs_counts(self, tmp_path: Path, caplog) -> None:
        caplog.set_level("INFO", logger="property_registry.sinks.json_file")
        sink = JsonFileSink(tmp_path)
        sink.write_batch("tenants", Registry.with_fixtures().tenants)
        sink.close()

        assert "tenants: 4 records" in caplog.text
