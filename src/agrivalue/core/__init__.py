# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Agrivalue Core

Input contracts consumed by the valuation engine: blocks, parcels,
itemized costs and the caller-supplied lookup tables.
"""

from .block import BlockData
from .costs import ItemizedCosts
from .lookups import CalculationLookups
from .parcel import ParcelData

__all__ = [
    "BlockData",
    "CalculationLookups",
    "ItemizedCosts",
    "ParcelData",
]
