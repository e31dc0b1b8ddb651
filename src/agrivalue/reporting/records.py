# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Flat persistence records.

Turns block and parcel results into flat dictionaries (one per block plus
one summary per parcel) that a persistence layer can store as relational
rows. Only scalar values are emitted; list fields are joined into text.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from ..core.primitives import GlobalSettings
from ..valuation.results import BlockValuationResult, ParcelValuationResult

FLAG_SEPARATOR = "; "


def block_record(
    result: BlockValuationResult, settings: Optional[GlobalSettings] = None
) -> Dict[str, Any]:
    """
    Flatten a block result into a valuation-results row.

    Args:
        result: Block valuation result
        settings: Engine settings (version tag and trace options)

    Returns:
        Dictionary of scalar column values
    """
    settings = settings or GlobalSettings()
    record: Dict[str, Any] = {
        "block_id": result.block_id,
        "block_area_ha": result.block_area_ha,
        "age_years": result.age_years_t,
        "yield_kg_per_ha": result.yield_t_ha,
        "gross_income_cop": result.gross_income_cop,
        "direct_costs_cop_per_ha": result.direct_costs_cop_per_ha,
        "fin_cost_cop": result.fin_cost_cop,
        "total_invest_cop": result.total_invest_cop,
        "net_income_cop": result.net_income_cop,
        "cum_inflows_to_date": result.cum_inflows_to_t,
        "cum_outflows_to_date": result.cum_outflows_to_t,
        "breakeven_reached": result.breakeven_reached,
        "phase": result.phase.value,
        "pe_flag": result.pe_flag.value,
        "value_block_cop": result.value_block_cop,
        "value_block_cop_per_ha": result.value_block_cop_per_ha,
        "npv": result.npv,
        "irr": result.irr,
        "break_even_year": result.break_even_year,
        "inp_compensation_cop": result.inp_compensation_cop,
        "confidence_tier": result.tier.value,
        "tier_explanation": result.tier_explanation,
        "qa_flags": FLAG_SEPARATOR.join(result.qa_flags),
        "calculation_version": settings.valuation.calculation_version,
    }
    if settings.reporting.include_calculation_steps:
        record["calculation_steps"] = settings.reporting.steps_separator.join(
            result.calculation_steps
        )
    return record


def parcel_record(
    result: ParcelValuationResult, settings: Optional[GlobalSettings] = None
) -> Dict[str, Any]:
    """Flatten a parcel result into its one-row summary."""
    settings = settings or GlobalSettings()
    return {
        "parcel_id": result.parcel_id,
        "valuation_asof_date": result.valuation_asof_date.isoformat(),
        "parcel_value_cop": result.parcel_value_cop,
        "parcel_value_cop_per_ha": result.parcel_value_cop_per_ha,
        "total_area_ha": result.total_area_ha,
        "block_count": len(result.blocks),
        "overall_tier": result.overall_tier.value,
        "tier_explanation": result.tier_explanation,
        "summary_flags": FLAG_SEPARATOR.join(result.summary_flags),
        "calculation_version": settings.valuation.calculation_version,
    }
