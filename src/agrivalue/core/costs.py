# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from typing import Dict, Optional

from pydantic import Field

from .primitives import CostCategoryEnum, Model


class ItemizedCosts(Model):
    """
    Direct costs per hectare broken down by the eleven cost categories.

    Used both for the cost templates supplied by the lookup provider and
    as a view over a block's custom-entered cost fields. Missing
    categories count as zero.
    """

    land_rent_cop_per_ha: Optional[float] = Field(default=None)
    fertilizers_cop_per_ha: Optional[float] = Field(default=None)
    crop_protection_cop_per_ha: Optional[float] = Field(default=None)
    propagation_material_cop_per_ha: Optional[float] = Field(default=None)
    labor_cop_per_ha: Optional[float] = Field(default=None)
    irrigation_energy_cop_per_ha: Optional[float] = Field(default=None)
    maintenance_upkeep_cop_per_ha: Optional[float] = Field(default=None)
    harvest_cop_per_ha: Optional[float] = Field(default=None)
    transport_logistics_cop_per_ha: Optional[float] = Field(default=None)
    services_contracts_cop_per_ha: Optional[float] = Field(default=None)
    admin_overheads_cop_per_ha: Optional[float] = Field(default=None)

    def by_category(self) -> Dict[CostCategoryEnum, float]:
        """Category -> COP/ha, with missing categories as 0."""
        return {
            category: getattr(self, category.value) or 0.0
            for category in CostCategoryEnum
        }

    @property
    def total(self) -> float:
        """Sum of all categories in COP/ha."""
        return sum(self.by_category().values())
