# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Rental Cash Flow Metrics

Annual operating metrics (NOI, cap rate, cash-on-cash) and a monthly
comparison of renting the property out against the owner's own housing costs.

Note the units: ``calculate_cash_flow`` reports annual amounts while
``calculate_rental_comparison`` reports monthly amounts.
"""

from __future__ import annotations

from ..core.primitives import Model
from .inputs import PersonalExpenses, PropertyFinancials


class CashFlowSummary(Model):
    """Annual cash flow metrics. Ratios are in percent (7.2 means 7.2%)."""

    gross_rental_income: float
    operating_expenses: float
    net_operating_income: float
    debt_service: float
    cash_flow_before_tax: float
    cash_on_cash_return: float
    cap_rate: float


class RentalComparison(Model):
    """Monthly comparison of rental profit against personal housing costs."""

    personal_expenses_saved: float
    net_rental_benefit: float
    monthly_advantage: float
    annual_advantage: float
    effective_housing_cost: float


class SimpleCashFlow(Model):
    """Rent minus the full mortgage bill (PITI)."""

    monthly_rent: float
    monthly_piti: float
    monthly_utilities: float
    includes_utilities: bool
    monthly_net_cash_flow: float
    annual_net_cash_flow: float


def calculate_cash_flow(property: PropertyFinancials) -> CashFlowSummary:
    """
    Calculate annual cash flow metrics for a rental property.

    Args:
        property: Property financial snapshot

    Returns:
        CashFlowSummary; cap rate and cash-on-cash are 0 when market value or
        equity is not positive.
    """
    gross_rental_income = property.monthly_rental_income * 12
    operating_expenses = property.monthly_operating_expenses * 12
    net_operating_income = gross_rental_income - operating_expenses
    debt_service = property.monthly_mortgage_payment * 12
    cash_flow_before_tax = net_operating_income - debt_service

    equity = property.current_market_value - property.mortgage_balance
    cash_on_cash_return = (cash_flow_before_tax / equity) * 100 if equity > 0 else 0.0

    cap_rate = (
        (net_operating_income / property.current_market_value) * 100
        if property.current_market_value > 0
        else 0.0
    )

    return CashFlowSummary(
        gross_rental_income=gross_rental_income,
        operating_expenses=operating_expenses,
        net_operating_income=net_operating_income,
        debt_service=debt_service,
        cash_flow_before_tax=cash_flow_before_tax,
        cash_on_cash_return=cash_on_cash_return,
        cap_rate=cap_rate,
    )


def calculate_rental_comparison(
    property: PropertyFinancials, personal: PersonalExpenses
) -> RentalComparison:
    """
    Compare monthly rental profit against what the owner pays to live elsewhere.

    Args:
        property: Property financial snapshot
        personal: Owner's own monthly housing costs

    Returns:
        RentalComparison in monthly units (``annual_advantage`` excepted)
    """
    personal_expenses_saved = personal.current_rent_payment + personal.current_utility_costs
    net_rental_benefit = property.monthly_rental_income - property.monthly_operating_expenses
    monthly_advantage = net_rental_benefit - property.monthly_mortgage_payment

    return RentalComparison(
        personal_expenses_saved=personal_expenses_saved,
        net_rental_benefit=net_rental_benefit,
        monthly_advantage=monthly_advantage,
        annual_advantage=monthly_advantage * 12,
        effective_housing_cost=personal_expenses_saved - monthly_advantage,
    )


def calculate_simple_cash_flow(
    monthly_rent: float,
    monthly_piti: float,
    monthly_utilities: float = 0.0,
    includes_utilities: bool = False,
) -> SimpleCashFlow:
    """Net cash flow of rent against PITI.

    Utilities included in the rent are passed through to the utility company,
    so they are reported but never netted.
    """
    net = monthly_rent - monthly_piti
    return SimpleCashFlow(
        monthly_rent=monthly_rent,
        monthly_piti=monthly_piti,
        monthly_utilities=monthly_utilities if includes_utilities else 0.0,
        includes_utilities=includes_utilities,
        monthly_net_cash_flow=net,
        annual_net_cash_flow=net * 12,
    )
