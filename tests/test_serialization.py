"""Tests for serialization helpers."""

from datetime import date, datetime
from decimal import Decimal

from property_registry.models import Apartment, Contract, ContractStatus
from property_registry.serialization import (
    decode_list,
    encode_list,
    serialize_value,
    to_dict,
    to_row,
)


class TestSerializeValue:
    """Tests for serialize_value."""

    def test_scalars(self) -> None:
        assert serialize_value(date(2024, 1, 1)) == "2024-01-01"
        assert serialize_value(datetime(2024, 1, 1, 12, 30)) == "2024-01-01T12:30:00"
        assert serialize_value(Decimal("850.50")) == "850.50"
        assert serialize_value(ContractStatus.ACTIVE) == "active"
        assert serialize_value(None) is None

    def test_nested(self) -> None:
        value = {"dates": [date(2024, 1, 1)], "status": ContractStatus.ALL}
        assert serialize_value(value) == {"dates": ["2024-01-01"], "status": "all"}


class TestToDict:
    """Tests for to_dict."""

    def test_contract(self) -> None:
        contract = Contract("contract-4", "apt-5", "tenant-4", "2023-09-01", 700.0, 1400.0, True)
        data = to_dict(contract)

        assert data["start_date"] == "2023-09-01"
        assert data["end_date"] is None
        assert data["documents"] == []
        assert data["is_paid"] is True

    def test_dict_passthrough(self) -> None:
        assert to_dict({"a": 1}) == {"a": 1}

    def test_other(self) -> None:
        assert to_dict(42) == {"value": "42"}


class TestListColumns:
    """Tests for list column encoding used by the table binding."""

    def test_encode(self) -> None:
        assert encode_list(["Balkon", "Einbauküche"]) == '["Balkon", "Einbauküche"]'
        assert encode_list(None) == "[]"

    def test_decode(self) -> None:
        assert decode_list('["Balkon", "Keller"]') == ["Balkon", "Keller"]
        assert decode_list("") == []
        assert decode_list(None) == []

    def test_to_row(self) -> None:
        apt = Apartment("apt-1", "prop-1", "101", 1, 65.0, 2, 1, 850.0, True, ["Aufzug"])
        row = to_row(apt)

        assert row["amenities"] == '["Aufzug"]'
        assert row["is_occupied"] is True
        assert row["size"] == 65.0

    def test_to_row_keeps_dates(self) -> None:
        contract = Contract("contract-1", "apt-1", "tenant-1", "2022-01-01", 850.0, 1700.0)
        assert to_row(contract)["start_date"] == date(2022, 1, 1)
