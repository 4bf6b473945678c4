"""Shared serialization utilities for storage bindings and sinks."""

import json
from dataclasses import asdict, fields, is_dataclass
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Any


def to_dict(obj: Any) -> dict:
    """Convert object to dictionary."""
    if is_dataclass(obj):
        return dataclass_to_dict(obj)
    elif isinstance(obj, dict):
        return obj
    else:
        return {"value": str(obj)}


def dataclass_to_dict(obj: Any) -> dict:
    """Convert dataclass to dict with proper serialization."""
    result = {}
    for key, value in asdict(obj).items():
        result[key] = serialize_value(value)
    return result


def to_row(obj: Any) -> dict[str, Any]:
    """Convert an entity to a table row without deep-copying.

    Dates stay as ``date`` objects (the database driver adapts them) while
    list fields are encoded with :func:`encode_list`, since the tables have
    no list-typed columns.

    Parameters
    ----------
    obj : Any
        An entity dataclass instance.

    Returns
    -------
    dict[str, Any]
        Column name to value mapping.
    """
    row = {}
    for f in fields(obj):
        value = getattr(obj, f.name)
        row[f.name] = encode_list(value) if isinstance(value, list) else value
    return row


def encode_list(values: list[str] | None) -> str:
    """Encode a list of strings as JSON text for a scalar column."""
    return json.dumps(list(values or []), ensure_ascii=False)


def decode_list(text: str | None) -> list[str]:
    """Decode a JSON text column back into a list of strings."""
    if not text:
        return []
    return list(json.loads(text))


def serialize_value(value: Any) -> Any:
    """Serialize a value for JSON output."""
    if isinstance(value, Decimal):
        return str(value)
    elif isinstance(value, Enum):
        return value.value
    elif isinstance(value, datetime):
        return value.isoformat()
    elif isinstance(value, date):
        return value.isoformat()
    elif isinstance(value, dict):
        return {k: serialize_value(v) for k, v in value.items()}
    elif isinstance(value, list):
        return [serialize_value(v) for v in value]
    return value
