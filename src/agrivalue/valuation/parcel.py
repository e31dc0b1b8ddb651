# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Parcel Aggregator - Parcel-Level Valuation

Values each block independently and combines the block results into a
parcel total, a per-hectare figure and the worst-case confidence tier.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from ..core import CalculationLookups, ParcelData
from ..core.primitives import ConfidenceTier, GlobalSettings
from .block import BlockValuator
from .results import BlockValuationResult, ParcelValuationResult

logger = logging.getLogger(__name__)


class ParcelAggregator:
    """
    Runs the block valuator once per block and aggregates the results.

    Blocks share nothing but the read-only lookups, so results do not
    depend on block order.
    """

    def __init__(self, settings: Optional[GlobalSettings] = None):
        self.settings = settings or GlobalSettings()
        self.block_valuator = BlockValuator(self.settings)

    def value(
        self,
        parcel: ParcelData,
        lookups: Optional[CalculationLookups] = None,
    ) -> ParcelValuationResult:
        """
        Value every block of ``parcel`` and aggregate.

        Args:
            parcel: Parcel header and blocks
            lookups: Reference curves and templates shared by all blocks

        Returns:
            ParcelValuationResult with blocks in input order
        """
        block_results = [
            self.block_valuator.value(block, parcel.valuation_asof_date, lookups)
            for block in parcel.blocks
        ]
        result = self.aggregate(parcel, block_results)
        logger.debug(
            f"Parcel {parcel.parcel_id}: {len(block_results)} blocks, value "
            f"{result.parcel_value_cop:,.0f} COP, tier {result.overall_tier.value}"
        )
        return result

    @staticmethod
    def aggregate(
        parcel: ParcelData, block_results: List[BlockValuationResult]
    ) -> ParcelValuationResult:
        """
        Combine block results into the parcel result.

        Per-hectare value divides by the summed block areas (0 when that
        sum is not positive). Summary flags keep duplicates: the same flag
        on several blocks points at a systemic data gap.
        """
        parcel_value = sum(block.value_block_cop for block in block_results)
        total_area = sum(block.block_area_ha for block in block_results)
        value_per_ha = parcel_value / total_area if total_area > 0 else 0.0

        overall_tier = ConfidenceTier.worst(block.tier for block in block_results)
        summary_flags = [flag for block in block_results for flag in block.qa_flags]

        return ParcelValuationResult(
            parcel_id=parcel.parcel_id,
            valuation_asof_date=parcel.valuation_asof_date,
            parcel_value_cop=parcel_value,
            parcel_value_cop_per_ha=value_per_ha,
            blocks=block_results,
            overall_tier=overall_tier,
            summary_flags=summary_flags,
        )
