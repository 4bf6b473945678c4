"""Populate a registry with a synthetic property portfolio."""

from __future__ import annotations

import logging
import random
from typing import TYPE_CHECKING

from property_registry.generators.contract import ContractGenerator
from property_registry.generators.property import ApartmentGenerator, PropertyGenerator
from property_registry.generators.tenant import TenantGenerator

if TYPE_CHECKING:
    from property_registry.registry import Registry

logger = logging.getLogger(__name__)


def populate_registry(
    registry: Registry,
    num_properties: int,
    occupancy_rate: float = 0.8,
    seed: int | None = None,
) -> dict[str, int]:
    """Add generated properties, apartments, tenants and contracts.

    Every entity goes through the registry's add operations, so apartment
    occupancy is derived from the generated contracts.

    Parameters
    ----------
    registry : Registry
        Target registry.
    num_properties : int
        Number of properties to generate.
    occupancy_rate : float
        Probability that an apartment gets a tenant and a contract.
    seed : int | None
        Random seed for reproducibility.

    Returns
    -------
    dict[str, int]
        Number of generated entities per collection.
    """
    property_gen = PropertyGenerator(seed=seed)
    apartment_gen = ApartmentGenerator(seed=seed)
    tenant_gen = TenantGenerator(seed=seed)
    contract_gen = ContractGenerator(seed=seed)

    counts = {"properties": 0, "apartments": 0, "tenants": 0, "contracts": 0}

    for payload in property_gen.generate_batch(num_properties):
        prop = registry.add_property(payload)
        counts["properties"] += 1

        for apt_payload in apartment_gen.generate_for_property(prop.id, prop.total_apartments):
            apartment = registry.add_apartment(apt_payload)
            counts["apartments"] += 1

            if random.random() >= occupancy_rate:
                continue

            tenant = registry.add_tenant(tenant_gen.generate())
            registry.add_contract(contract_gen.generate(apartment, tenant.id))
            counts["tenants"] += 1
            counts["contracts"] += 1

    logger.info(
        "Generated %d properties, %d apartments, %d tenants, %d contracts",
        counts["properties"], counts["apartments"], counts["tenants"], counts["contracts"],
    )
    return counts
