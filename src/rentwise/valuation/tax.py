# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Sale Tax Estimation

Educational estimate of the federal and state tax due if a rental property
were sold today: straight-line depreciation, adjusted basis, capital gain,
depreciation recapture, long-term capital gains tax, NIIT and a flat state
tax. The marginal ordinary rate is a single bracket lookup, not a full
progressive calculation.
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from ..core.primitives import FilingStatusEnum, GlobalSettings, Model, TaxBracket
from .inputs import PropertyFinancials, TaxInputs

logger = logging.getLogger(__name__)


class TaxEstimate(Model):
    """Estimated tax position of a hypothetical sale."""

    capital_gain: float
    depreciation_taken: float
    depreciation_recapture: float
    adjusted_basis: float
    net_sale_price: float
    total_taxable_gain: float
    estimated_capital_gains_tax: float
    estimated_depreciation_recapture_tax: float
    estimated_total_tax: float
    estimated_state_tax: float
    net_proceeds_after_tax: float


def progressive_tax(income: float, brackets: Sequence[TaxBracket]) -> float:
    """Tax on ``income`` filled bracket by bracket."""
    tax = 0.0
    remaining = income
    for bracket in brackets:
        if remaining <= 0:
            break
        taxable = min(remaining, bracket.width)
        tax += taxable * bracket.rate
        remaining -= taxable
    return tax


def get_marginal_tax_rate(
    income: float,
    filing_status: FilingStatusEnum,
    settings: Optional[GlobalSettings] = None,
) -> float:
    """
    Marginal federal ordinary income rate for ``income``.

    Args:
        income: Annual taxable income
        filing_status: Filing status selecting the bracket table
        settings: Bracket tables; defaults to 2024 federal rates

    Returns:
        Rate as a decimal (0.22 for the 22% bracket)
    """
    brackets = (settings or GlobalSettings()).tax.income_brackets_for(
        FilingStatusEnum(filing_status)
    )
    for bracket in brackets:
        if bracket.contains(income):
            return bracket.rate
    return brackets[-1].rate


def calculate_tax_estimate(
    property: PropertyFinancials,
    tax_inputs: TaxInputs,
    settings: Optional[GlobalSettings] = None,
) -> TaxEstimate:
    """
    Estimate tax liability and net proceeds if the property were sold today.

    Depreciation is straight-line over the residential recovery period and
    capped at the depreciable base, so owning the property longer than the
    recovery period never depreciates more than the base. Gain attributable
    to depreciation is recaptured at the lower of the recapture rate and the
    owner's marginal rate; only appreciation beyond it counts as capital gain.

    Args:
        property: Property financial snapshot (market value, purchase price, years owned)
        tax_inputs: Filing status, income, basis components and selling costs
        settings: Tax tables and rates

    Returns:
        TaxEstimate
    """
    settings = settings or GlobalSettings()
    tax = settings.tax

    depreciable_base = (
        tax_inputs.depreciable_value - tax_inputs.land_value + tax_inputs.improvements_cost
    )
    annual_depreciation = depreciable_base / tax.depreciation_years
    depreciation_taken = min(annual_depreciation * property.years_owned, depreciable_base)

    adjusted_basis = property.purchase_price + tax_inputs.improvements_cost - depreciation_taken
    net_sale_price = property.current_market_value - tax_inputs.selling_costs

    total_gain = net_sale_price - adjusted_basis
    capital_gain = max(0.0, total_gain - depreciation_taken)
    depreciation_recapture = min(depreciation_taken, max(0.0, total_gain))

    ltcg_brackets = tax.ltcg_brackets_for(tax_inputs.filing_status)
    income_with_gains = tax_inputs.annual_income + capital_gain
    ltcg_tax = progressive_tax(income_with_gains, ltcg_brackets) - progressive_tax(
        tax_inputs.annual_income, ltcg_brackets
    )

    marginal_rate = get_marginal_tax_rate(
        tax_inputs.annual_income, tax_inputs.filing_status, settings
    )
    recapture_tax = depreciation_recapture * min(tax.depreciation_recapture_rate, marginal_rate)

    niit_base = max(0.0, income_with_gains - tax.niit_threshold_for(tax_inputs.filing_status))
    niit = min(niit_base, capital_gain + depreciation_recapture) * tax.niit_rate

    total_taxable_gain = capital_gain + depreciation_recapture
    state_tax = total_taxable_gain * tax_inputs.state_income_tax_rate
    federal_tax = ltcg_tax + recapture_tax + niit

    logger.debug(
        f"Sale estimate: gain ${capital_gain:,.0f}, recapture ${depreciation_recapture:,.0f}, "
        f"federal ${federal_tax:,.0f}, state ${state_tax:,.0f}"
    )

    return TaxEstimate(
        capital_gain=capital_gain,
        depreciation_taken=depreciation_taken,
        depreciation_recapture=depreciation_recapture,
        adjusted_basis=adjusted_basis,
        net_sale_price=net_sale_price,
        total_taxable_gain=total_taxable_gain,
        estimated_capital_gains_tax=ltcg_tax + niit,
        estimated_depreciation_recapture_tax=recapture_tax,
        estimated_total_tax=federal_tax,
        estimated_state_tax=state_tax,
        net_proceeds_after_tax=net_sale_price - federal_tax - state_tax,
    )
