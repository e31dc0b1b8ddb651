# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from typing import Tuple

from pydantic import Field, model_validator

from .model import Model
from .types import PositiveFloat, PositiveInt


class CostCurveAlias(Model):
    """
    Alias rule for cost-curve resolution.

    When a block's age-yield curve id contains any of ``tokens``
    (case-insensitive), every id in ``aliases`` becomes a candidate cost
    curve. Reference data names yield curves and cost curves for the same
    crop/variety inconsistently; these rules bridge the two id spaces.
    """

    tokens: Tuple[str, ...]
    aliases: Tuple[str, ...]

    def matches(self, curve_id: str) -> bool:
        normalized = curve_id.lower()
        return any(token.lower() in normalized for token in self.tokens)


DEFAULT_COST_CURVE_ALIASES: Tuple[CostCurveAlias, ...] = (
    CostCurveAlias(tokens=("oxg",), aliases=("oil_palm_cost_oxg",)),
    CostCurveAlias(
        tokens=("eguinensis", "eguine", "palma"),
        aliases=(
            "oil_palm_cost_palmaeguinensis",
            "eguinensis_prueba",
            "eguinensis_prueba_cost",
        ),
    ),
)


class ValuationSettings(Model):
    """Settings for the block valuation engine."""

    days_per_year: PositiveInt = Field(
        default=365,
        gt=0,
        description="Days per year used for block age and measured-period annualization.",
    )
    default_realization_factor: PositiveFloat = Field(
        default=1.0,
        description="Realization factor applied to modeled yields when the block has none.",
    )
    default_inp_factor: PositiveFloat = Field(
        default=0.40,
        description="INP factor applied to improductive blocks when the block has none.",
    )
    inp_factor_range: Tuple[PositiveFloat, PositiveFloat] = Field(
        default=(0.30, 0.50),
        description="Typical INP factor range; factors outside it are logged.",
    )
    cost_curve_aliases: Tuple[CostCurveAlias, ...] = Field(
        default=DEFAULT_COST_CURVE_ALIASES,
        description="Alias rules bridging age-yield curve ids to cost curve ids.",
    )
    calculation_version: str = Field(
        default="1.0",
        description="Version tag stamped on persisted valuation records.",
    )

    @model_validator(mode="after")
    def check_inp_factor_range(self) -> "ValuationSettings":
        """Ensure the INP range is ordered."""
        low, high = self.inp_factor_range
        if low > high:
            raise ValueError(
                f"inp_factor_range lower bound ({low}) must not exceed upper bound ({high})"
            )
        return self


class ReportingSettings(Model):
    """Settings related to flat records and report tables."""

    include_calculation_steps: bool = Field(
        default=True,
        description="Carry the joined calculation trace on flat block records.",
    )
    steps_separator: str = Field(
        default="\n", description="Separator used when joining calculation steps."
    )


# --- Main Global Settings Class ---


class GlobalSettings(Model):
    """Global engine settings

    Groups the engine configuration by functional area. Every entry point
    accepts an optional instance and falls back to the defaults.
    """

    valuation: ValuationSettings = Field(default_factory=ValuationSettings)
    reporting: ReportingSettings = Field(default_factory=ReportingSettings)
