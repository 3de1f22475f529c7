# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""Default inputs for demos and tests. All instances are immutable."""

from __future__ import annotations

from datetime import date

from ..debt.loan import LoanParameters
from ..valuation.inputs import PersonalExpenses, PropertyFinancials, TaxInputs
from .primitives import FilingStatusEnum

DEFAULT_LOAN_PARAMS = LoanParameters(
    principal=59957.41,
    annual_rate=0.057285,
    base_monthly_payment=1336.39,
    escrow=790.03,
    total_payment=2126.42,
    start_date=date(2025, 7, 1),
)

DEFAULT_PROPERTY_FINANCIALS = PropertyFinancials(
    purchase_price=350_000.0,
    current_market_value=420_000.0,
    mortgage_balance=280_000.0,
    monthly_mortgage_payment=1_800.0,
    monthly_property_tax=350.0,
    monthly_insurance=150.0,
    monthly_hoa=0.0,
    monthly_rental_income=2_400.0,
    monthly_maintenance_reserve=200.0,
    monthly_vacancy_reserve=120.0,  # 5% of rent
    monthly_management_fee=0.0,  # Self-managed
    years_owned=5.0,
    annual_appreciation_rate=0.03,
)

DEFAULT_PERSONAL_EXPENSES = PersonalExpenses(
    current_rent_payment=1_500.0,
    current_utility_costs=200.0,
    current_job_income=6_000.0,
)

DEFAULT_TAX_INPUTS = TaxInputs(
    filing_status=FilingStatusEnum.SINGLE,
    annual_income=85_000.0,
    depreciable_value=350_000.0,
    land_value=70_000.0,  # 20% of purchase price
    improvements_cost=15_000.0,
    selling_costs=25_200.0,  # ~6% of current value
    state_income_tax_rate=0.05,
)
