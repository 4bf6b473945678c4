"""Base helpers shared by all registry entities."""

import uuid as _uuid
from datetime import date, datetime

# Opaque identifier for every entity (e.g. ``apt-3f2c9a...``)
ID = str


def generate_id(prefix: str) -> ID:
    """Generate a fresh entity id with a type prefix.

    Parameters
    ----------
    prefix : str
        Entity prefix: ``prop``, ``apt``, ``tenant`` or ``contract``.

    Returns
    -------
    str
        Identifier of the form ``<prefix>-<12 hex chars>``.
    """
    return f"{prefix}-{_uuid.uuid4().hex[:12]}"


def coerce_date(value: date | str | None) -> date | None:
    """Convert an ISO ``YYYY-MM-DD`` string to a date; pass dates and None through."""
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return date.fromisoformat(value)
