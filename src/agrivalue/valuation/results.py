# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Valuation result models.

Pure data contracts produced by the block valuator and the parcel
aggregator. Every numeric field is a finite, already-computed value;
degraded inputs yield zeros plus QA flags rather than NaN or infinity.
"""

from __future__ import annotations

from datetime import date
from typing import List, Optional

from pydantic import Field

from ..core.primitives import BlockPhase, ConfidenceTier, Model, PEFlag


class BlockValuationResult(Model):
    """
    Full valuation of one block.

    Attributes:
        block_id: Echo of the block identifier
        block_area_ha: Echo of the block area
        age_years_t: Whole years from planting to the valuation date
        yield_t_ha: Yield in kg/ha at the current age
        direct_costs_cop_per_ha: Direct cost per hectare at the current age
        gross_income_cop: Yield x price x area
        fin_cost_cop: Financed amount x effective annual rate
        total_invest_cop: Direct costs x area + financial cost
        net_income_cop: Gross income - total investment
        cum_inflows_to_t: Cumulative inflows (current period gross income)
        cum_outflows_to_t: Total investment + prior cumulative outlays
        breakeven_reached: Whether inflows cover outflows
        phase: Improductive or productive
        pe_flag: PE+ or PE-
        value_block_cop: Block value (sunk cost or discounted cash flows)
        value_block_cop_per_ha: Block value per hectare
        npv: Net present value (same figure as the block value)
        irr: Internal rate of return of the projected cash flows, when computable
        break_even_year: Age at which break-even is first reached, if ever
        inp_compensation_cop: INP compensation for improductive blocks
        tier: Confidence tier
        qa_flags: Data-quality flags raised for this block
        calculation_steps: Ordered, human-readable audit trail
    """

    # === INPUT ECHO ===
    block_id: str
    block_area_ha: float

    # === DERIVED FUNDAMENTALS ===
    age_years_t: int
    yield_t_ha: float
    direct_costs_cop_per_ha: float
    gross_income_cop: float
    fin_cost_cop: float
    total_invest_cop: float
    net_income_cop: float

    # === BREAK-EVEN & PHASE ===
    cum_inflows_to_t: float
    cum_outflows_to_t: float
    breakeven_reached: bool
    phase: BlockPhase
    pe_flag: PEFlag

    # === VALUATION ===
    value_block_cop: float
    value_block_cop_per_ha: float

    # === BUSINESS INDICATORS ===
    npv: float
    irr: Optional[float] = None
    break_even_year: Optional[int] = None
    inp_compensation_cop: float = 0.0

    # === QUALITY ===
    tier: ConfidenceTier
    qa_flags: List[str] = Field(default_factory=list)
    calculation_steps: List[str] = Field(default_factory=list)

    @property
    def tier_explanation(self) -> str:
        return self.tier.explanation


class ParcelValuationResult(Model):
    """
    Parcel-level valuation assembled from independent block results.

    ``overall_tier`` is the worst block tier and ``summary_flags`` is the
    flat concatenation of every block's flags in block order, duplicates
    preserved.
    """

    parcel_id: str
    valuation_asof_date: date
    parcel_value_cop: float
    parcel_value_cop_per_ha: float
    blocks: List[BlockValuationResult] = Field(default_factory=list)
    overall_tier: ConfidenceTier
    summary_flags: List[str] = Field(default_factory=list)

    @property
    def total_area_ha(self) -> float:
        return sum(block.block_area_ha for block in self.blocks)

    @property
    def tier_explanation(self) -> str:
        return self.overall_tier.explanation
