# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Agrivalue Core Primitives

Building blocks shared by every part of the valuation engine: the immutable
base model, the closed enumerations, constrained types and settings.
"""

from .enums import (
    BlockPhase,
    ConfidenceTier,
    CostCategoryEnum,
    CostSource,
    PEFlag,
    QAFlag,
    YieldSource,
)
from .model import Model
from .settings import (
    DEFAULT_COST_CURVE_ALIASES,
    CostCurveAlias,
    GlobalSettings,
    ReportingSettings,
    ValuationSettings,
)
from .types import AgeCurve, PositiveFloat, PositiveInt

__all__ = [
    # Core models
    "Model",
    # Settings
    "GlobalSettings",
    "ValuationSettings",
    "ReportingSettings",
    "CostCurveAlias",
    "DEFAULT_COST_CURVE_ALIASES",
    # Enums
    "BlockPhase",
    "ConfidenceTier",
    "CostCategoryEnum",
    "CostSource",
    "PEFlag",
    "QAFlag",
    "YieldSource",
    # Types
    "AgeCurve",
    "PositiveFloat",
    "PositiveInt",
]
