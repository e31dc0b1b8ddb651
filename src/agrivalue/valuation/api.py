# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Valuation API

Public entry points for valuing a single block or a whole parcel. Both
are pure functions of their inputs: repeated calls with the same inputs
return identical results.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from .block import BlockValuator
from .parcel import ParcelAggregator

if TYPE_CHECKING:
    from datetime import date

    from ..core import BlockData, CalculationLookups, ParcelData
    from ..core.primitives import GlobalSettings
    from .results import BlockValuationResult, ParcelValuationResult


def value_block(
    block: "BlockData",
    valuation_date: "date",
    lookups: Optional["CalculationLookups"] = None,
    settings: Optional["GlobalSettings"] = None,
) -> "BlockValuationResult":
    """
    Value one block as of ``valuation_date``.

    Args:
        block: Block inputs.
        valuation_date: Valuation as-of date.
        lookups: Yield curves, cost templates and cost curves; empty when omitted.
        settings: Engine settings; defaults when omitted.

    Returns:
        BlockValuationResult with figures, confidence tier, QA flags and
        the calculation trace.
    """
    return BlockValuator(settings).value(block, valuation_date, lookups)


def value_parcel(
    parcel: "ParcelData",
    lookups: Optional["CalculationLookups"] = None,
    settings: Optional["GlobalSettings"] = None,
) -> "ParcelValuationResult":
    """
    Value every block of a parcel and aggregate to the parcel level.

    Workflow:
      1) Value each block independently as of the parcel's valuation date
      2) Sum block values and divide by the summed block area
      3) Take the worst block tier and concatenate all QA flags

    Args:
        parcel: Parcel header and blocks.
        lookups: Reference tables shared by all blocks; empty when omitted.
        settings: Engine settings; defaults when omitted.

    Returns:
        ParcelValuationResult with block results in input order.
    """
    return ParcelAggregator(settings).value(parcel, lookups)
