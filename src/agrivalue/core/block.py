# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Block input contract.

A block is one planted management unit within a parcel. The model only
checks structure (types and enum values); numeric domain gaps such as a
zero area or a missing price are tolerated here and surfaced as QA flags
by the valuation engine.
"""

from __future__ import annotations

from datetime import date
from typing import List, Optional

from pydantic import Field

from .costs import ItemizedCosts
from .primitives import CostCategoryEnum, CostSource, Model, YieldSource


class BlockData(Model):
    """
    Agronomic and financial inputs for a single block.

    Attributes:
        block_id: Identifier, unique within the parcel
        block_area_ha: Planted area in hectares
        crop: Crop name
        variety: Optional crop variety
        planting_date: Date the block was planted
        density_spacing: Optional planting density or spacing note
        yield_source: Measured production or modeled from an age-yield curve
        production_tons_period: Production (tons) over the measured period
        period_days: Length of the measured period in days
        evidence_uploads: References to uploaded production evidence
        age_yield_curve_id: Age-yield curve reference (modeled yield)
        realization_factor: Multiplier on the modeled curve (default 1.0)
        price_farmgate_cop_per_kg: Farmgate price in COP per kg
        price_source_note: Where the price came from
        cost_source: Standard template/curve or custom-entered costs
        cost_template_id: Cost template (and fallback cost curve) reference
        financed_amount_cop: Amount financed in COP
        ea_rate: Effective annual interest rate (decimal)
        cumulative_outlays_to_date_cop: Outlays accumulated before the valuation date
        inp_factor: INP factor for improductive plantings (typically 0.30-0.50)
        improductive_years: Explicit age at which the block becomes productive
        dnp_discount_rate: DNP discount rate (decimal)
        notes: Free-form notes

    Example:
        ```python
        block = BlockData(
            block_id="B1",
            block_area_ha=10.0,
            crop="Oil palm",
            planting_date=date(2015, 3, 1),
            yield_source=YieldSource.MODELED,
            age_yield_curve_id="oil_palm_oxg",
            price_farmgate_cop_per_kg=850.0,
            cost_source=CostSource.STANDARD_TEMPLATE,
            cost_template_id="oil_palm_standard",
            dnp_discount_rate=0.12,
        )
        ```
    """

    # === IDENTITY ===
    block_id: str = Field(...)
    block_area_ha: Optional[float] = Field(
        default=None, description="Planted area in hectares (expected > 0)"
    )
    crop: str = Field(...)
    variety: Optional[str] = None
    planting_date: date = Field(...)
    density_spacing: Optional[str] = None

    # === YIELD ===
    yield_source: YieldSource = Field(...)
    production_tons_period: Optional[float] = None
    period_days: Optional[int] = None
    evidence_uploads: List[str] = Field(default_factory=list)
    age_yield_curve_id: Optional[str] = None
    realization_factor: Optional[float] = None

    # === PRICE ===
    price_farmgate_cop_per_kg: Optional[float] = None
    price_source_note: Optional[str] = None

    # === COSTS ===
    cost_source: CostSource = Field(...)
    cost_template_id: Optional[str] = None
    land_rent_cop_per_ha: Optional[float] = None
    fertilizers_cop_per_ha: Optional[float] = None
    crop_protection_cop_per_ha: Optional[float] = None
    propagation_material_cop_per_ha: Optional[float] = None
    labor_cop_per_ha: Optional[float] = None
    irrigation_energy_cop_per_ha: Optional[float] = None
    maintenance_upkeep_cop_per_ha: Optional[float] = None
    harvest_cop_per_ha: Optional[float] = None
    transport_logistics_cop_per_ha: Optional[float] = None
    services_contracts_cop_per_ha: Optional[float] = None
    admin_overheads_cop_per_ha: Optional[float] = None

    # === FINANCING ===
    financed_amount_cop: float = 0.0
    ea_rate: float = 0.0

    # === IMPRODUCTIVE PHASE ===
    cumulative_outlays_to_date_cop: Optional[float] = None
    inp_factor: Optional[float] = None
    improductive_years: Optional[int] = None

    # === DISCOUNTING ===
    dnp_discount_rate: float = 0.0
    notes: Optional[str] = None

    @property
    def custom_costs(self) -> ItemizedCosts:
        """The block's custom-entered cost fields as an itemized record."""
        return ItemizedCosts(
            **{
                category.value: getattr(self, category.value)
                for category in CostCategoryEnum
            }
        )

    @property
    def area_ha(self) -> float:
        """Block area with a missing value read as 0."""
        return self.block_area_ha or 0.0
