# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""Keep-vs-sell wealth projection"""

from __future__ import annotations

import logging
from typing import List, Optional, Tuple

import numpy as np

from ..core.primitives import GlobalSettings, Model, RecommendationEnum
from .cash_flow import calculate_cash_flow
from .inputs import PropertyFinancials, TaxInputs
from .tax import calculate_tax_estimate

logger = logging.getLogger(__name__)


class KeepVsSellProjection(Model):
    """Projected wealth at the end of one year under both strategies."""

    year: int
    equity_value: float
    cumulative_cash_flow: float
    total_return: float
    alternative_investment_value: float
    keep_advantage: float


class KeepVsSellAnalysis(Model):
    """Year-by-year projections with break-even year and recommendation."""

    projections: List[KeepVsSellProjection]
    break_even_year: Optional[int] = None
    final_year_keep_value: float = 0.0
    final_year_sell_value: float = 0.0
    advantage_percent: float = 0.0
    recommendation: RecommendationEnum = RecommendationEnum.NEUTRAL
    recommendation_reason: str = ""


def _recommend(
    keep_value: float, sell_value: float, num_years: int, threshold: float
) -> Tuple[float, RecommendationEnum, str]:
    if keep_value > 0 and sell_value <= 0:
        return (
            0.0,
            RecommendationEnum.KEEP,
            "Selling today would not leave any net proceeds after taxes and "
            "selling costs, while keeping the property builds equity.",
        )

    advantage = (keep_value - sell_value) / sell_value * 100 if keep_value > 0 else 0.0

    if advantage > threshold:
        return (
            advantage,
            RecommendationEnum.KEEP,
            f"Keeping the property projects {advantage:.0f}% higher returns over "
            f"{num_years} years compared to selling and investing the proceeds.",
        )
    if advantage < -threshold:
        return (
            advantage,
            RecommendationEnum.SELL,
            f"Selling and investing the proceeds projects {abs(advantage):.0f}% higher "
            f"returns over {num_years} years compared to keeping the rental property.",
        )
    return (
        advantage,
        RecommendationEnum.NEUTRAL,
        f"The projected returns are within {threshold:.0f}% of each other. Consider "
        "other factors like hassle, liquidity needs, and personal preferences.",
    )


def calculate_keep_vs_sell(
    property: PropertyFinancials,
    tax_inputs: TaxInputs,
    alternative_return_rate: float = 0.07,
    num_years: int = 10,
    settings: Optional[GlobalSettings] = None,
) -> KeepVsSellAnalysis:
    """
    Project total wealth from keeping the rental against selling today and investing.

    Keeping: equity grows with appreciation compounded on today's market value
    while the mortgage balance falls linearly by a fixed share of debt service;
    annual cash flow is held constant, so cumulative cash flow grows linearly.
    Selling: today's after-tax net proceeds compound at
    ``alternative_return_rate``.

    Args:
        property: Property financial snapshot
        tax_inputs: Inputs for the after-tax sale proceeds
        alternative_return_rate: Annual return of the alternative investment
        num_years: Projection horizon in years
        settings: Projection and tax assumptions

    Returns:
        KeepVsSellAnalysis. ``break_even_year`` is the first year keeping is
        at least as good as selling, or None if that never happens.

    Raises:
        ValueError: If ``num_years`` is less than 1
    """
    if num_years < 1:
        raise ValueError(f"num_years must be at least 1, got {num_years}")

    settings = settings or GlobalSettings()
    projection = settings.projection

    net_proceeds = calculate_tax_estimate(property, tax_inputs, settings).net_proceeds_after_tax
    cash_flow = calculate_cash_flow(property)
    annual_cash_flow = cash_flow.cash_flow_before_tax

    years = np.arange(1, num_years + 1)
    property_values = property.current_market_value * np.power(
        1 + property.annual_appreciation_rate, years
    )
    annual_paydown = cash_flow.debt_service * projection.principal_paydown_share
    mortgage_balances = np.maximum(0.0, property.mortgage_balance - annual_paydown * years)
    equity_values = property_values - mortgage_balances
    cumulative_cash_flows = annual_cash_flow * years
    total_returns = equity_values + cumulative_cash_flows
    alternative_values = net_proceeds * np.power(1 + alternative_return_rate, years)
    keep_advantages = total_returns - alternative_values

    projections = [
        KeepVsSellProjection(
            year=int(year),
            equity_value=float(equity),
            cumulative_cash_flow=float(cumulative),
            total_return=float(total),
            alternative_investment_value=float(alternative),
            keep_advantage=float(advantage),
        )
        for year, equity, cumulative, total, alternative, advantage in zip(
            years,
            equity_values,
            cumulative_cash_flows,
            total_returns,
            alternative_values,
            keep_advantages,
        )
    ]

    break_even_year = next(
        (p.year for p in projections if p.keep_advantage >= 0), None
    )

    final = projections[-1]
    advantage, recommendation, reason = _recommend(
        final.total_return,
        final.alternative_investment_value,
        num_years,
        projection.recommendation_threshold_pct,
    )
    logger.debug(
        f"Keep vs sell over {num_years} years: {recommendation.value} "
        f"({advantage:+.1f}%), break-even year {break_even_year}"
    )

    return KeepVsSellAnalysis(
        projections=projections,
        break_even_year=break_even_year,
        final_year_keep_value=final.total_return,
        final_year_sell_value=final.alternative_investment_value,
        advantage_percent=advantage,
        recommendation=recommendation,
        recommendation_reason=reason,
    )
