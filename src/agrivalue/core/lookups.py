# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Reference lookup tables supplied by the caller.

The engine reads these tables but never owns or mutates them. Missing or
partial tables are tolerated and degrade to QA flags during valuation.
"""

from __future__ import annotations

from typing import Dict

from pydantic import Field

from .costs import ItemizedCosts
from .primitives import AgeCurve, Model


class CalculationLookups(Model):
    """
    Yield curves, cost templates and cost curves keyed by reference id.

    Attributes:
        yield_curves: curve id -> {age in years -> yield kg/ha}
        cost_templates: template id -> itemized COP/ha per cost category
        cost_curves: curve id -> {age in years -> COP/ha}

    Curve ages given as strings (as they arrive from JSON) are coerced
    to integers.
    """

    yield_curves: Dict[str, AgeCurve] = Field(default_factory=dict)
    cost_templates: Dict[str, ItemizedCosts] = Field(default_factory=dict)
    cost_curves: Dict[str, AgeCurve] = Field(default_factory=dict)
