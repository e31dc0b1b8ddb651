# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from enum import Enum
from typing import Iterable


class YieldSource(str, Enum):
    """
    Where a block's yield figure comes from.

    Options:
        MEASURED: Recorded production over a known period
        MODELED: Age-yield reference curve scaled by a realization factor
    """

    MEASURED = "measured"
    MODELED = "modeled"


class CostSource(str, Enum):
    """
    Where a block's direct cost per hectare comes from.

    Options:
        STANDARD_TEMPLATE: Reference cost curve or cost template from the lookups
        CUSTOM_ENTERED: Itemized per-hectare costs captured on the block
    """

    STANDARD_TEMPLATE = "standard_template"
    CUSTOM_ENTERED = "custom_entered"


class BlockPhase(str, Enum):
    """Productive phase of a planted block."""

    IMPRODUCTIVE = "improductive"
    PRODUCTIVE = "productive"


class PEFlag(str, Enum):
    """Break-even indicator (punto de equilibrio)."""

    REACHED = "PE+"
    NOT_REACHED = "PE-"


class ConfidenceTier(str, Enum):
    """
    Data-quality confidence tier of a valuation.

    Options:
        A: Measured yield backed by uploaded evidence
        B: Modeled or template-based figures
        C: Critical pricing or cost data missing (provisional)

    Tiers combine with "worst wins": a single C anywhere makes the
    combination C, otherwise a single B makes it B.
    """

    A = "A"
    B = "B"
    C = "C"

    @property
    def severity(self) -> int:
        """Rank used for aggregation; higher is worse."""
        return _TIER_SEVERITY[self]

    @property
    def explanation(self) -> str:
        return _TIER_EXPLANATIONS[self]

    @classmethod
    def worst(cls, tiers: Iterable["ConfidenceTier"]) -> "ConfidenceTier":
        """Combine tiers; an empty collection yields A."""
        worst_tier = cls.A
        for tier in tiers:
            if cls(tier).severity > worst_tier.severity:
                worst_tier = cls(tier)
        return worst_tier


_TIER_SEVERITY = {
    ConfidenceTier.A: 0,
    ConfidenceTier.B: 1,
    ConfidenceTier.C: 2,
}

_TIER_EXPLANATIONS = {
    ConfidenceTier.A: "Verified data with evidence",
    ConfidenceTier.B: "Modeled with standard templates",
    ConfidenceTier.C: "Provisional - requires review",
}


class CostCategoryEnum(str, Enum):
    """
    The eleven itemized direct-cost categories, in COP per hectare.

    Values match the field names of ``ItemizedCosts`` and the keys a
    lookup provider uses for cost templates.
    """

    LAND_RENT = "land_rent_cop_per_ha"
    FERTILIZERS = "fertilizers_cop_per_ha"
    CROP_PROTECTION = "crop_protection_cop_per_ha"
    PROPAGATION_MATERIAL = "propagation_material_cop_per_ha"
    LABOR = "labor_cop_per_ha"
    IRRIGATION_ENERGY = "irrigation_energy_cop_per_ha"
    MAINTENANCE_UPKEEP = "maintenance_upkeep_cop_per_ha"
    HARVEST = "harvest_cop_per_ha"
    TRANSPORT_LOGISTICS = "transport_logistics_cop_per_ha"
    SERVICES_CONTRACTS = "services_contracts_cop_per_ha"
    ADMIN_OVERHEADS = "admin_overheads_cop_per_ha"


class QAFlag(str, Enum):
    """
    Data-quality flags attached to a block result.

    Flags are non-fatal: the valuation always completes, degrading the
    affected figure to a default (usually 0) while the flag travels with
    the result up to the parcel summary.
    """

    INVALID_BLOCK_AREA = "Block area must be greater than zero"
    MISSING_PRODUCTION_DATA = "Missing production data for measured yield"
    INVALID_PERIOD_DAYS = "Invalid period days for measured yield"
    MISSING_YIELD_CURVE = "Missing age-yield curve data for modeled yield"
    MISSING_COST_DATA = "Missing cost data for projections"
    MISSING_CRITICAL_DATA = "Missing critical pricing or cost data"
