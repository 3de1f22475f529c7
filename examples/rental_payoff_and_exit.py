#!/usr/bin/env python3
# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Rental Payoff and Exit Example

Walks the demo rental through the full engine: the mortgage payoff plan,
the extra payment needed to be debt free by a target date, today's cash
flow, the tax bill of selling now and the ten-year keep-vs-sell outlook.

## Scenario

- **Mortgage**: $59,957.41 at 5.7285% with a $1,336.39 P&I payment
- **Property**: $420K market value, $2,400/month rent, self-managed
- **Owner**: single filer earning $85K, 5% state income tax

Run with the package installed (``pip install -e .``).
"""

from datetime import date

import pandas as pd

from rentwise.core.defaults import (
    DEFAULT_LOAN_PARAMS,
    DEFAULT_PERSONAL_EXPENSES,
    DEFAULT_PROPERTY_FINANCIALS,
    DEFAULT_TAX_INPUTS,
)
from rentwise.debt import (
    build_schedule,
    compare_schedules,
    current_principal,
    solve_extra_payment,
)
from rentwise.reporting import (
    format_currency,
    format_percent,
    keep_vs_sell_to_frame,
    schedule_summary,
)
from rentwise.valuation import (
    calculate_cash_flow,
    calculate_keep_vs_sell,
    calculate_rental_comparison,
    calculate_tax_estimate,
)

pd.options.display.float_format = "{:,.2f}".format


def mortgage_section(extra_monthly: float, target_date: date) -> None:
    loan = DEFAULT_LOAN_PARAMS
    baseline = build_schedule(loan)
    accelerated = build_schedule(loan, extra_monthly=extra_monthly)
    comparison = compare_schedules(baseline, accelerated, loan.principal)

    print("MORTGAGE PAYOFF")
    print("-" * 50)
    print(f"   Balance today: {format_currency(current_principal(loan), 2)}")
    print(f"   Baseline payoff: {baseline.payoff_date} ({baseline.months} payments)")
    print(f"   With {format_currency(extra_monthly)}/month extra: {accelerated.payoff_date}")
    print(f"   Months saved: {comparison.months_saved}")
    print(f"   Interest saved: {format_currency(comparison.interest_saved, 2)}")

    extra = solve_extra_payment(loan, target_date, baseline)
    if extra is None:
        print(f"   Debt free by {target_date}: not reachable")
    else:
        print(f"   Debt free by {target_date}: {format_currency(extra, 2)}/month extra")
    print()
    print(schedule_summary(accelerated).to_string())
    print()


def operations_section() -> None:
    cash_flow = calculate_cash_flow(DEFAULT_PROPERTY_FINANCIALS)
    comparison = calculate_rental_comparison(
        DEFAULT_PROPERTY_FINANCIALS, DEFAULT_PERSONAL_EXPENSES
    )

    print("OPERATIONS (annual)")
    print("-" * 50)
    print(f"   NOI: {format_currency(cash_flow.net_operating_income)}")
    print(f"   Cash flow before tax: {format_currency(cash_flow.cash_flow_before_tax)}")
    print(f"   Cap rate: {format_percent(cash_flow.cap_rate)}")
    print(f"   Cash-on-cash: {format_percent(cash_flow.cash_on_cash_return)}")
    print(f"   Effective monthly housing cost: {format_currency(comparison.effective_housing_cost)}")
    print()


def exit_section() -> None:
    estimate = calculate_tax_estimate(DEFAULT_PROPERTY_FINANCIALS, DEFAULT_TAX_INPUTS)
    analysis = calculate_keep_vs_sell(DEFAULT_PROPERTY_FINANCIALS, DEFAULT_TAX_INPUTS)

    print("SELL TODAY")
    print("-" * 50)
    print(f"   Capital gain: {format_currency(estimate.capital_gain)}")
    print(f"   Depreciation recapture: {format_currency(estimate.depreciation_recapture)}")
    print(f"   Federal tax: {format_currency(estimate.estimated_total_tax)}")
    print(f"   State tax: {format_currency(estimate.estimated_state_tax)}")
    print(f"   Net proceeds: {format_currency(estimate.net_proceeds_after_tax)}")
    print()

    print("KEEP VS SELL")
    print("-" * 50)
    print(keep_vs_sell_to_frame(analysis).to_string())
    print()
    print(f"   Recommendation: {analysis.recommendation.value.upper()}")
    print(f"   {analysis.recommendation_reason}")
    print()


def main():
    print("=" * 60)
    print("RENTAL PAYOFF AND EXIT ANALYSIS")
    print("=" * 60)
    print()

    mortgage_section(extra_monthly=500.0, target_date=date(2027, 12, 1))
    operations_section()
    exit_section()


if __name__ == "__main__":
    main()
