# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Block Valuator - Per-Block Agricultural Valuation

Derives a block's age, yield, direct costs, income, phase, break-even
status and discounted value, together with its confidence tier, QA flags
and a step-by-step calculation trace.

The derivation is straight-line: each step consumes the values computed
before it, and only the productive-phase projection loops (over the
remaining years of the crop cycle). Missing or invalid data never raises;
it degrades the affected figure to a default and records a QA flag.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import List, Optional

from ..core import BlockData, CalculationLookups
from ..core.primitives import (
    BlockPhase,
    ConfidenceTier,
    GlobalSettings,
    PEFlag,
    QAFlag,
    YieldSource,
)
from .curves import CurveResolver
from .metrics import ValuationMetrics
from .results import BlockValuationResult
from .trace import CalculationTrace

logger = logging.getLogger(__name__)


def _fmt(value: float) -> str:
    return f"{value:,.0f}"


class BlockValuator:
    """
    Computes the full valuation of one block.

    Holds only read-only configuration, so a single instance can value
    any number of blocks, concurrently or not.

    Example:
        ```python
        valuator = BlockValuator()
        result = valuator.value(block, date(2024, 6, 30), lookups)
        print(result.value_block_cop, result.tier, result.qa_flags)
        ```
    """

    def __init__(self, settings: Optional[GlobalSettings] = None):
        self.settings = settings or GlobalSettings()

    def block_age(self, planting_date: date, valuation_date: date) -> int:
        """Whole years from planting to valuation (fixed-length years), never negative."""
        elapsed_days = (valuation_date - planting_date).days
        return max(0, elapsed_days // self.settings.valuation.days_per_year)

    def value(
        self,
        block: BlockData,
        valuation_date: date,
        lookups: Optional[CalculationLookups] = None,
    ) -> BlockValuationResult:
        """
        Value a single block as of ``valuation_date``.

        Args:
            block: Block inputs
            valuation_date: Valuation as-of date
            lookups: Reference curves and templates (empty when omitted)

        Returns:
            BlockValuationResult with figures, tier, QA flags and trace
        """
        lookups = lookups or CalculationLookups()
        config = self.settings.valuation
        trace = CalculationTrace()
        resolver = CurveResolver(block, lookups, config)

        # Age
        age = self.block_age(block.planting_date, valuation_date)
        trace.step(
            f"Age calculation: {age} years from planting date "
            f"{block.planting_date.isoformat()}"
        )

        # Area validity
        if not block.block_area_ha or block.block_area_ha <= 0:
            trace.flag(QAFlag.INVALID_BLOCK_AREA)
        area = block.area_ha

        # Yield
        if block.yield_source == YieldSource.MEASURED:
            yield_per_ha = self._measured_yield(block, trace)
        else:
            yield_per_ha = resolver.modeled_yield(age, trace)
            if resolver.yield_curve is not None:
                trace.step(
                    f"Modeled yield: {resolver.base_yield(age):g} kg/ha x "
                    f"{resolver.realization_factor:g} = {_fmt(yield_per_ha)} kg/ha"
                )

        # Earliest productive age: explicit override, else first positive curve age
        productive_from = resolver.earliest_productive_age()

        # Direct cost per hectare at the current age
        current_cost = resolver.cost_for_age(age, trace)
        direct_costs_per_ha = current_cost.value
        trace.step(
            f"Cost reference: {current_cost.source} = {_fmt(direct_costs_per_ha)} COP/ha"
        )

        # Financials
        price = block.price_farmgate_cop_per_kg or 0.0
        gross_income = yield_per_ha * price * area
        fin_cost = block.financed_amount_cop * block.ea_rate
        total_invest = direct_costs_per_ha * area + fin_cost
        net_income = gross_income - total_invest
        trace.step(
            f"Gross income: {_fmt(yield_per_ha)} kg/ha x {price:g} COP/kg x "
            f"{area:g} ha = {_fmt(gross_income)} COP"
        )
        trace.step(
            f"Financial cost: {_fmt(block.financed_amount_cop)} COP x "
            f"{block.ea_rate * 100:.1f}% = {_fmt(fin_cost)} COP"
        )
        trace.step(f"Total investment: {_fmt(total_invest)} COP")
        trace.step(
            f"Net income: {_fmt(gross_income)} - {_fmt(total_invest)} = "
            f"{_fmt(net_income)} COP"
        )

        # Break-even; inflows cover the current period only
        prior_outlays = block.cumulative_outlays_to_date_cop
        cum_inflows = gross_income
        cum_outflows = total_invest + (prior_outlays or 0.0)
        breakeven_reached = cum_inflows >= cum_outflows
        pe_flag = PEFlag.REACHED if breakeven_reached else PEFlag.NOT_REACHED

        # Phase; without a threshold age, fall back to yield or net income
        if productive_from is not None:
            is_productive = age >= productive_from
        else:
            is_productive = yield_per_ha > 0 or net_income > 0
        phase = BlockPhase.PRODUCTIVE if is_productive else BlockPhase.IMPRODUCTIVE

        trace.step(
            f"Phase: {phase.value} (age {age} years, yield {_fmt(yield_per_ha)} kg/ha)"
        )
        trace.step(
            f"Break-even: {pe_flag.value} (cumulative inflows {_fmt(cum_inflows)} "
            f"vs outflows {_fmt(cum_outflows)})"
        )

        # Valuation
        rate = ValuationMetrics.safe_discount_rate(block.dnp_discount_rate)
        irr: Optional[float] = None
        inp_compensation = 0.0

        if phase == BlockPhase.IMPRODUCTIVE:
            block_value = prior_outlays if prior_outlays is not None else total_invest
            trace.step(
                f"Improductive valuation (NPV): accumulated investment "
                f"{_fmt(block_value)} COP"
            )
            break_even_year = age if breakeven_reached else None

            inp_factor = self._inp_factor(block)
            inp_compensation = block_value * inp_factor
            trace.step(
                f"INP compensation: {_fmt(block_value)} COP x {inp_factor:g} = "
                f"{_fmt(inp_compensation)} COP"
            )
        else:
            end_age = resolver.cycle_end_age(age)
            future_flows: List[float] = []
            revenues: List[float] = []
            costs: List[float] = []

            for offset in range(1, max(0, end_age - age) + 1):
                projected_age = age + offset
                if block.yield_source == YieldSource.MEASURED:
                    projected_yield = yield_per_ha
                else:
                    projected_yield = resolver.modeled_yield(projected_age, trace)
                revenue = projected_yield * price * area
                cost_info = resolver.cost_for_age(projected_age, trace)
                direct_costs = cost_info.value * area
                net_cash = revenue - direct_costs

                revenues.append(revenue)
                costs.append(direct_costs)
                future_flows.append(net_cash)
                trace.step(
                    f"Cash flow year {offset} (age {projected_age}): revenue "
                    f"{_fmt(revenue)} - costs {_fmt(direct_costs)} = {_fmt(net_cash)} COP"
                )

            if not future_flows:
                trace.step("No remaining productive years found; future flows omitted.")

            discounted_current = ValuationMetrics.present_value(
                [net_income], rate, start=1
            )
            discounted_future = ValuationMetrics.present_value(
                future_flows, rate, start=2
            )
            trace.step(
                f"Future NPV ({len(future_flows)} years) at {rate * 100:.2f}% = "
                f"{_fmt(discounted_future)} COP"
            )
            block_value = discounted_current + discounted_future
            trace.step(
                f"Productive valuation (NPV): discounted net {_fmt(discounted_current)} + "
                f"future NPV {_fmt(discounted_future)} = {_fmt(block_value)} COP"
            )

            irr = ValuationMetrics.calculate_irr(
                ValuationMetrics.cash_flow_vector(
                    prior_outlays or 0.0, net_income, future_flows
                )
            )
            break_even_year = ValuationMetrics.break_even_age(
                age, cum_inflows, cum_outflows, revenues, costs
            )

        value_per_ha = block_value / area if area > 0 else 0.0

        # Confidence tier
        if block.yield_source == YieldSource.MEASURED and block.evidence_uploads:
            tier = ConfidenceTier.A
        elif not price or direct_costs_per_ha == 0:
            tier = ConfidenceTier.C
            trace.flag(QAFlag.MISSING_CRITICAL_DATA)
        else:
            tier = ConfidenceTier.B
        trace.step(f"Confidence tier: {tier.value} ({tier.explanation})")

        logger.debug(
            f"Block {block.block_id}: {phase.value}, value {block_value:,.0f} COP, "
            f"tier {tier.value}, {len(trace.qa_flags)} QA flags"
        )

        return BlockValuationResult(
            block_id=block.block_id,
            block_area_ha=area,
            age_years_t=age,
            yield_t_ha=yield_per_ha,
            direct_costs_cop_per_ha=direct_costs_per_ha,
            gross_income_cop=gross_income,
            fin_cost_cop=fin_cost,
            total_invest_cop=total_invest,
            net_income_cop=net_income,
            cum_inflows_to_t=cum_inflows,
            cum_outflows_to_t=cum_outflows,
            breakeven_reached=breakeven_reached,
            phase=phase,
            pe_flag=pe_flag,
            value_block_cop=block_value,
            value_block_cop_per_ha=value_per_ha,
            npv=block_value,
            irr=irr,
            break_even_year=break_even_year,
            inp_compensation_cop=inp_compensation,
            tier=tier,
            qa_flags=list(trace.qa_flags),
            calculation_steps=list(trace.steps),
        )

    def _measured_yield(self, block: BlockData, trace: CalculationTrace) -> float:
        """Annualized kg/ha from recorded production, 0 with a flag when incomplete."""
        if (
            not block.production_tons_period
            or not block.period_days
            or not block.block_area_ha
        ):
            trace.flag(QAFlag.MISSING_PRODUCTION_DATA)
            return 0.0

        effective_years = block.period_days / self.settings.valuation.days_per_year
        if effective_years <= 0:
            trace.flag(QAFlag.INVALID_PERIOD_DAYS)
            return 0.0

        yield_per_ha = (block.production_tons_period * 1000) / (
            block.block_area_ha * effective_years
        )
        trace.step(
            f"Measured yield: {block.production_tons_period:g} tons over "
            f"{block.period_days} days = {_fmt(yield_per_ha)} kg/ha"
        )
        return yield_per_ha

    def _inp_factor(self, block: BlockData) -> float:
        config = self.settings.valuation
        factor = block.inp_factor
        if factor is None:
            factor = config.default_inp_factor
        low, high = config.inp_factor_range
        if not low <= factor <= high:
            logger.warning(
                f"Block {block.block_id}: INP factor {factor:g} outside typical range "
                f"{low:g}-{high:g}"
            )
        return factor
