# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Tests for the input contracts: blocks, parcels, itemized costs and lookups.
"""

from datetime import date

import pytest
from pydantic import ValidationError

from agrivalue.core import BlockData, CalculationLookups, ItemizedCosts, ParcelData
from agrivalue.core.primitives import CostCategoryEnum, CostSource, YieldSource


class TestItemizedCosts:
    """Tests for the eleven-category cost record."""

    def test_missing_categories_count_as_zero(self):
        costs = ItemizedCosts(labor_cop_per_ha=1_000.0, harvest_cop_per_ha=250.0)

        assert costs.total == pytest.approx(1_250.0)
        assert costs.by_category()[CostCategoryEnum.LAND_RENT] == 0.0
        assert len(costs.by_category()) == 11

    def test_empty_total(self):
        assert ItemizedCosts().total == 0.0

    def test_unknown_category_rejected(self):
        with pytest.raises(ValidationError):
            ItemizedCosts(seeds_cop_per_ha=100.0)

    def test_category_enum_matches_fields(self):
        assert {c.value for c in CostCategoryEnum} == set(ItemizedCosts.model_fields)


class TestBlockData:
    """Tests for block structure validation."""

    def test_minimal_block(self):
        block = BlockData(
            block_id="B1",
            crop="Cacao",
            planting_date=date(2020, 1, 1),
            yield_source="measured",
            cost_source="custom_entered",
        )

        assert block.yield_source == YieldSource.MEASURED
        assert block.cost_source == CostSource.CUSTOM_ENTERED
        assert block.area_ha == 0.0
        assert block.evidence_uploads == []
        assert block.financed_amount_cop == 0.0
        assert block.dnp_discount_rate == 0.0

    def test_invalid_yield_source_rejected(self):
        with pytest.raises(ValidationError):
            BlockData(
                block_id="B1",
                crop="Cacao",
                planting_date=date(2020, 1, 1),
                yield_source="estimated",
                cost_source="custom_entered",
            )

    def test_unknown_field_rejected(self, block_factory):
        with pytest.raises(ValidationError):
            block_factory(block_area_acres=10.0)

    def test_non_positive_area_accepted(self, block_factory):
        """Area problems are QA flags at valuation time, not validation errors."""
        assert block_factory(block_area_ha=0.0).block_area_ha == 0.0
        assert block_factory(block_area_ha=-1.0).block_area_ha == -1.0

    def test_custom_costs_view(self, measured_block_factory):
        block = measured_block_factory(admin_overheads_cop_per_ha=100_000.0)
        costs = block.custom_costs

        assert isinstance(costs, ItemizedCosts)
        assert costs.labor_cop_per_ha == 2_000_000.0
        assert costs.total == pytest.approx(3_100_000.0)

    def test_frozen(self, block_factory):
        block = block_factory()
        with pytest.raises(ValidationError):
            block.block_area_ha = 20.0


class TestParcelAndLookups:
    """Tests for parcel and lookup containers."""

    def test_parcel_from_dict(self):
        parcel = ParcelData.model_validate(
            {
                "valuation_asof_date": "2024-06-30",
                "parcel_id": "P-9",
                "region": "Cesar",
                "blocks": [
                    {
                        "block_id": "B1",
                        "block_area_ha": 4.5,
                        "crop": "Oil palm",
                        "planting_date": "2012-02-01",
                        "yield_source": "modeled",
                        "cost_source": "standard_template",
                    }
                ],
            }
        )

        assert parcel.valuation_asof_date == date(2024, 6, 30)
        assert parcel.blocks[0].planting_date == date(2012, 2, 1)

    def test_lookups_from_json_like_data(self):
        lookups = CalculationLookups.model_validate(
            {
                "yield_curves": {"c1": {"0": 0, "3": 4500}},
                "cost_templates": {"t1": {"labor_cop_per_ha": 800000}},
                "cost_curves": {"k1": {"5": 2500000}},
            }
        )

        assert lookups.yield_curves["c1"] == {0: 0.0, 3: 4500.0}
        assert lookups.cost_templates["t1"].total == pytest.approx(800_000.0)
        assert lookups.cost_curves["k1"][5] == pytest.approx(2_500_000.0)

    def test_template_with_unknown_category_rejected(self):
        with pytest.raises(ValidationError):
            CalculationLookups(cost_templates={"t1": {"seeds": 1.0}})

    def test_empty_lookups(self):
        lookups = CalculationLookups()
        assert lookups.yield_curves == {}
        assert lookups.cost_templates == {}
        assert lookups.cost_curves == {}
