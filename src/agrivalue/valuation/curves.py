# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Curve Resolver - Yield and Cost Series Lookup

Maps a block's reference ids onto the concrete age -> value series in the
caller's lookup tables. Unresolved references never raise; lookups degrade
to numeric defaults and the caller's trace receives a QA flag.
"""

from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, Dict, List, Optional, Sequence

from ..core.primitives import AgeCurve, CostSource, QAFlag, YieldSource

if TYPE_CHECKING:
    from ..core import BlockData, CalculationLookups
    from ..core.primitives import CostCurveAlias, ValuationSettings
    from .trace import CalculationTrace

logger = logging.getLogger(__name__)

_SEPARATORS = re.compile(r"[-\s]")


def normalize_curve_id(curve_id: str) -> str:
    """Replace hyphens and whitespace with underscores."""
    return _SEPARATORS.sub("_", curve_id)


def _is_number(value: Optional[float]) -> bool:
    return value is not None and not math.isnan(value)


@dataclass(frozen=True)
class ResolvedCurve:
    """A cost curve found in the lookups together with the id it was found under."""

    curve_id: str
    series: AgeCurve

    @property
    def max_age(self) -> Optional[int]:
        return max(self.series) if self.series else None


@dataclass(frozen=True)
class CostLookup:
    """Direct cost per hectare and a description of where it came from."""

    value: float
    source: str


def cost_curve_candidates(
    curve_id: Optional[str],
    template_id: Optional[str],
    aliases: Sequence["CostCurveAlias"] = (),
) -> List[str]:
    """
    Ordered, de-duplicated candidate cost-curve ids for a block.

    Order: raw curve id, normalized curve id, alias ids triggered by
    tokens in the curve id, raw template id, normalized template id.
    """
    candidates: Dict[str, None] = {}
    if curve_id:
        candidates[curve_id] = None
        candidates[normalize_curve_id(curve_id)] = None
        for rule in aliases:
            if rule.matches(curve_id):
                for alias in rule.aliases:
                    candidates[alias] = None
    if template_id:
        candidates[template_id] = None
        candidates[normalize_curve_id(template_id)] = None
    return list(candidates)


def find_cost_curve(
    candidates: Sequence[str], cost_curves: Dict[str, AgeCurve]
) -> Optional[ResolvedCurve]:
    """
    Return the first candidate present in ``cost_curves``.

    Each candidate is tried as an exact key first, then against the
    existing keys case-insensitively.
    """
    if not cost_curves:
        return None
    for candidate in candidates:
        series = cost_curves.get(candidate)
        if series is not None:
            return ResolvedCurve(curve_id=candidate, series=series)
        lowered = candidate.lower()
        for existing_id, existing_series in cost_curves.items():
            if existing_id.lower() == lowered:
                return ResolvedCurve(curve_id=existing_id, series=existing_series)
    return None


def nearest_age(series: AgeCurve, age: int) -> Optional[int]:
    """
    Age key closest to ``age`` by absolute distance.

    Keys are scanned in ascending order and a later key only wins when it
    is strictly closer, so ties go to the lower age.
    """
    nearest: Optional[int] = None
    for candidate in sorted(series):
        if nearest is None or abs(candidate - age) < abs(nearest - age):
            nearest = candidate
    return nearest


class CurveResolver:
    """
    Per-block view over the lookup tables.

    Resolves the block's age-yield curve, its cost curve (with separator
    normalization, alias rules and case-insensitive matching), the flat
    template total and the custom cost total once, then answers per-age
    questions during the current-year calculation and the projection.
    """

    def __init__(
        self,
        block: "BlockData",
        lookups: "CalculationLookups",
        settings: "ValuationSettings",
    ):
        self._block = block
        self.realization_factor = (
            block.realization_factor or settings.default_realization_factor
        )

        self.yield_curve: Optional[AgeCurve] = None
        if block.yield_source == YieldSource.MODELED and block.age_yield_curve_id:
            self.yield_curve = lookups.yield_curves.get(block.age_yield_curve_id)

        self.cost_curve = find_cost_curve(
            cost_curve_candidates(
                block.age_yield_curve_id,
                block.cost_template_id,
                settings.cost_curve_aliases,
            ),
            lookups.cost_curves,
        )

        template = (
            lookups.cost_templates.get(block.cost_template_id)
            if block.cost_template_id
            else None
        )
        self.template_total: Optional[float] = (
            template.total if template is not None else None
        )
        self.custom_total: float = block.custom_costs.total

        logger.debug(
            f"Block {block.block_id}: yield curve "
            f"{'found' if self.yield_curve is not None else 'absent'}, cost curve "
            f"{self.cost_curve.curve_id if self.cost_curve else 'absent'}, template total "
            f"{self.template_total}"
        )

    # === YIELD ===

    def modeled_yield(self, age: int, trace: "CalculationTrace") -> float:
        """Curve yield at ``age`` x realization factor, 0 when absent."""
        if self.yield_curve is None:
            trace.flag_once(QAFlag.MISSING_YIELD_CURVE)
            return 0.0
        return self.base_yield(age) * self.realization_factor

    def base_yield(self, age: int) -> float:
        if self.yield_curve is None:
            return 0.0
        value = self.yield_curve.get(age)
        return value if _is_number(value) else 0.0

    def earliest_productive_age(self) -> Optional[int]:
        """
        Age from which the block counts as productive.

        An explicit ``improductive_years`` on the block wins; otherwise the
        lowest curve age with a strictly positive yield, or None.
        """
        if self._block.improductive_years is not None:
            return self._block.improductive_years
        if self.yield_curve is None:
            return None
        positive_ages = [
            age
            for age, value in self.yield_curve.items()
            if _is_number(value) and value > 0
        ]
        return min(positive_ages) if positive_ages else None

    # === COSTS ===

    def cost_for_age(self, age: int, trace: "CalculationTrace") -> CostLookup:
        """
        Direct cost per hectare at ``age``.

        Custom-entered blocks always use their itemized total. Template
        blocks try the exact curve age, then the nearest curve age, then
        the flat template total, and finally 0 with a single QA flag.
        """
        if self._block.cost_source == CostSource.CUSTOM_ENTERED:
            return CostLookup(value=self.custom_total, source="custom costs")

        if self.cost_curve is not None:
            series = self.cost_curve.series
            raw = series.get(age)
            if _is_number(raw):
                return CostLookup(
                    value=raw,
                    source=f"curve {self.cost_curve.curve_id} (age {age})",
                )
            nearest = nearest_age(series, age)
            if nearest is not None and _is_number(series[nearest]):
                return CostLookup(
                    value=series[nearest],
                    source=f"curve {self.cost_curve.curve_id} (age {nearest})",
                )

        if self.template_total is not None and _is_number(self.template_total):
            return CostLookup(
                value=self.template_total,
                source=f"template {self._block.cost_template_id}",
            )

        trace.flag_once(QAFlag.MISSING_COST_DATA)
        return CostLookup(value=0.0, source="no cost data")

    # === PROJECTION HORIZON ===

    def cycle_end_age(self, current_age: int) -> int:
        """Largest age in the yield curve or the cost curve, at least ``current_age``."""
        end_age = current_age
        if self.yield_curve:
            end_age = max(end_age, max(self.yield_curve))
        if self.cost_curve is not None and self.cost_curve.max_age is not None:
            end_age = max(end_age, self.cost_curve.max_age)
        return end_age
