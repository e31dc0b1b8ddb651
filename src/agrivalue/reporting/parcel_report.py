# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Parcel Valuation Report

Tabular views of a parcel valuation for report rendering: one row per
block plus a parcel-level summary of totals.
"""

from __future__ import annotations

import pandas as pd

from ..core.primitives import BlockPhase, ConfidenceTier
from .base import BaseReport
from .records import block_record, parcel_record


class ParcelValuationReport(BaseReport):
    """
    Block table and parcel totals built from a ParcelValuationResult.

    Example:
        ```python
        result = value_parcel(parcel, lookups)
        report = ParcelValuationReport(result)
        table = report.generate()
        totals = report.summary()
        ```
    """

    def generate(self) -> pd.DataFrame:
        """
        Generate the block table.

        Returns:
            DataFrame with one flat record per block, indexed by block id,
            in parcel block order
        """
        records = [
            block_record(block, self._settings) for block in self._results.blocks
        ]
        if not records:
            return pd.DataFrame()
        return pd.DataFrame.from_records(records).set_index("block_id")

    def summary(self) -> pd.Series:
        """
        Parcel totals.

        Returns:
            Series with the parcel record plus total gross income, total net
            income, total investment, area-weighted average yield and block
            counts by phase and by tier
        """
        blocks = self._results.blocks
        total_area = sum(block.block_area_ha for block in blocks)
        weighted_yield = sum(block.yield_t_ha * block.block_area_ha for block in blocks)

        summary = parcel_record(self._results, self._settings)
        summary.update(
            {
                "total_gross_income_cop": sum(b.gross_income_cop for b in blocks),
                "total_net_income_cop": sum(b.net_income_cop for b in blocks),
                "total_invest_cop": sum(b.total_invest_cop for b in blocks),
                "average_yield_kg_per_ha": (
                    weighted_yield / total_area if total_area > 0 else 0.0
                ),
            }
        )
        for phase in BlockPhase:
            summary[f"blocks_{phase.value}"] = sum(1 for b in blocks if b.phase == phase)
        for tier in ConfidenceTier:
            summary[f"blocks_tier_{tier.value}"] = sum(
                1 for b in blocks if b.tier == tier
            )
        return pd.Series(summary, name=self._results.parcel_id)
