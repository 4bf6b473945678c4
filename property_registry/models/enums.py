"""Enumeration types for registry entities."""

from enum import Enum


class ContractStatus(str, Enum):
    ACTIVE = "active"
    EXPIRED = "expired"
    TERMINATING = "terminating"  # active, ending within the next 30 days
    ALL = "all"
