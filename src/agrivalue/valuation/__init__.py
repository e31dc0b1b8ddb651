# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Agrivalue Valuation Module

The valuation engine: curve resolution, per-block valuation and parcel
aggregation, with the result contracts they produce.
"""

from .api import value_block, value_parcel
from .block import BlockValuator
from .curves import CostLookup, CurveResolver, ResolvedCurve
from .metrics import ValuationMetrics
from .parcel import ParcelAggregator
from .results import BlockValuationResult, ParcelValuationResult
from .trace import CalculationTrace

__all__ = [
    # Entry points
    "value_block",
    "value_parcel",
    # Engine components
    "BlockValuator",
    "ParcelAggregator",
    "CurveResolver",
    "ValuationMetrics",
    "CalculationTrace",
    # Results
    "BlockValuationResult",
    "ParcelValuationResult",
    "CostLookup",
    "ResolvedCurve",
]
