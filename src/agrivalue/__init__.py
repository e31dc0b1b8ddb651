# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

import importlib
import logging

"""
Agrivalue - Agricultural Land Valuation Engine

Derives yield, costs, income, break-even status and a discounted value for
each planted block of a parcel, and aggregates them into a parcel-level
valuation with a data-quality confidence tier.

Key Entry Points:
- agrivalue.valuation.value_block() - Single block valuation
- agrivalue.valuation.value_parcel() - Parcel valuation with aggregation
- agrivalue.core.* - Input contracts (blocks, parcels, lookup tables)
- agrivalue.reporting.* - Flat records and report tables

Example Usage:
    ```python
    from datetime import date

    from agrivalue.core import BlockData, CalculationLookups, ParcelData
    from agrivalue.valuation import value_parcel

    parcel = ParcelData(
        valuation_asof_date=date(2024, 6, 30),
        parcel_id="P-001",
        region="Meta",
        blocks=[block_a, block_b],
    )

    result = value_parcel(parcel, lookups)
    print(f"Parcel value: {result.parcel_value_cop:,.0f} COP ({result.overall_tier.value})")
    ```
"""

# Add a NullHandler to the root logger to prevent "No handlers could be found" warnings
# when the library is used in applications that don't configure logging.
# Applications using this library can configure their own logging handlers as needed.
logging.getLogger(__name__).addHandler(logging.NullHandler())


# Public API surface (lazy-loaded on first attribute access)
__all__ = [  # noqa: F822 - lazy loading
    "core",
    "reporting",
    "valuation",
]


_LAZY_MODULES = {
    "core": "agrivalue.core",
    "reporting": "agrivalue.reporting",
    "valuation": "agrivalue.valuation",
}


def __getattr__(name: str):
    module_path = _LAZY_MODULES.get(name)
    if module_path is None:
        raise AttributeError(f"module 'agrivalue' has no attribute '{name}'")
    module = importlib.import_module(module_path)
    globals()[name] = module
    return module
