# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Test utilities and fixtures for Agrivalue testing.

This module provides convenient builders for blocks, parcels and lookup
tables so tests only spell out the fields they care about.

Reference scenario used throughout the suite:
- Valuation date 2024-01-01, default planting date 2016-01-01 (age 8)
- Yield curve "palm_oxg": ages 0-10, 10,000 kg/ha at age 8, 9,000 at age 10
- Cost curve "oil_palm_cost_oxg" (reached through the "oxg" alias):
  ages 0, 5 and 10 only, so age 8 resolves to the nearest age (10)
- Cost template "palm_template": labor 1,000,000 + fertilizers 500,000 COP/ha
"""

from __future__ import annotations

from datetime import date
from typing import List

import pytest

from agrivalue.core import BlockData, CalculationLookups, ItemizedCosts, ParcelData
from agrivalue.core.primitives import CostSource, GlobalSettings, YieldSource

VALUATION_DATE = date(2024, 1, 1)

PALM_YIELD_CURVE = {
    0: 0.0,
    1: 0.0,
    2: 0.0,
    3: 4_000.0,
    4: 6_000.0,
    5: 8_000.0,
    6: 9_000.0,
    7: 10_000.0,
    8: 10_000.0,
    9: 10_000.0,
    10: 9_000.0,
}

PALM_COST_CURVE = {
    0: 2_000_000.0,
    5: 3_000_000.0,
    10: 3_500_000.0,
}


# Block Utilities
def create_test_block(**overrides) -> BlockData:
    """
    Create a modeled, template-costed oil palm block for testing.

    Args:
        **overrides: Any BlockData field to replace

    Returns:
        BlockData ready for valuation

    Example:
        >>> block = create_test_block(block_area_ha=5.0)
        >>> block.block_area_ha
        5.0
    """
    fields = dict(
        block_id="B1",
        block_area_ha=10.0,
        crop="Oil palm",
        variety="OxG",
        planting_date=date(2016, 1, 1),
        yield_source=YieldSource.MODELED,
        age_yield_curve_id="palm_oxg",
        price_farmgate_cop_per_kg=1_000.0,
        cost_source=CostSource.STANDARD_TEMPLATE,
        cost_template_id="palm_template",
        dnp_discount_rate=0.10,
    )
    fields.update(overrides)
    return BlockData(**fields)


def create_measured_block(**overrides) -> BlockData:
    """
    Create a measured, custom-costed block: 100 t over 365 days on 10 ha.

    Custom costs are labor 2,000,000 + fertilizers 1,000,000 COP/ha.
    """
    fields = dict(
        block_id="M1",
        block_area_ha=10.0,
        crop="Avocado",
        planting_date=date(2016, 1, 1),
        yield_source=YieldSource.MEASURED,
        production_tons_period=100.0,
        period_days=365,
        price_farmgate_cop_per_kg=1_000.0,
        cost_source=CostSource.CUSTOM_ENTERED,
        labor_cop_per_ha=2_000_000.0,
        fertilizers_cop_per_ha=1_000_000.0,
        dnp_discount_rate=0.10,
    )
    fields.update(overrides)
    return BlockData(**fields)


def create_test_parcel(blocks: List[BlockData], **overrides) -> ParcelData:
    """Create a parcel valued as of the reference valuation date."""
    fields = dict(
        valuation_asof_date=VALUATION_DATE,
        parcel_id="P-001",
        operator_name="Finca La Esperanza",
        region="Meta",
        total_parcel_area_ha=sum(block.block_area_ha or 0.0 for block in blocks),
        blocks=blocks,
    )
    fields.update(overrides)
    return ParcelData(**fields)


def create_test_lookups() -> CalculationLookups:
    """Reference lookup tables for the oil palm scenario."""
    return CalculationLookups(
        yield_curves={"palm_oxg": dict(PALM_YIELD_CURVE)},
        cost_templates={
            "palm_template": ItemizedCosts(
                labor_cop_per_ha=1_000_000.0,
                fertilizers_cop_per_ha=500_000.0,
            )
        },
        cost_curves={"oil_palm_cost_oxg": dict(PALM_COST_CURVE)},
    )


@pytest.fixture
def valuation_date() -> date:
    return VALUATION_DATE


@pytest.fixture
def lookups() -> CalculationLookups:
    return create_test_lookups()


@pytest.fixture
def settings() -> GlobalSettings:
    return GlobalSettings()


@pytest.fixture
def block_factory():
    """Factory for modeled blocks; call with field overrides."""
    return create_test_block


@pytest.fixture
def measured_block_factory():
    """Factory for measured blocks; call with field overrides."""
    return create_measured_block


@pytest.fixture
def parcel_factory():
    """Factory for parcels; call with a block list and field overrides."""
    return create_test_parcel
