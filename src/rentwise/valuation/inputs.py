# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""Property, household and tax input models"""

from __future__ import annotations

from datetime import date, datetime
from typing import Optional

from pydantic import Field

from ..core.primitives import FilingStatusEnum, FloatBetween0And1, Model, PositiveFloat


class PropertyFinancials(Model):
    """
    Financial snapshot of a single rental property.

    Monthly line items are in dollars per month; ``annual_appreciation_rate``
    is a decimal. Line items default to zero so partial snapshots validate.
    """

    purchase_price: PositiveFloat = 0.0
    current_market_value: PositiveFloat = 0.0
    mortgage_balance: PositiveFloat = 0.0
    monthly_mortgage_payment: PositiveFloat = Field(
        default=0.0, description="Principal and interest only"
    )
    monthly_property_tax: PositiveFloat = 0.0
    monthly_insurance: PositiveFloat = 0.0
    monthly_hoa: PositiveFloat = 0.0
    monthly_rental_income: PositiveFloat = 0.0
    monthly_maintenance_reserve: PositiveFloat = 0.0
    monthly_vacancy_reserve: PositiveFloat = Field(
        default=0.0, description="Usually 5-8% of rental income"
    )
    monthly_management_fee: PositiveFloat = Field(
        default=0.0, description="Usually 8-10% of rental income"
    )
    years_owned: PositiveFloat = 0.0
    annual_appreciation_rate: FloatBetween0And1 = 0.0

    @property
    def monthly_operating_expenses(self) -> float:
        """Sum of the six monthly operating line items (excludes debt service)."""
        return (
            self.monthly_property_tax
            + self.monthly_insurance
            + self.monthly_hoa
            + self.monthly_maintenance_reserve
            + self.monthly_vacancy_reserve
            + self.monthly_management_fee
        )


DAYS_PER_YEAR = 365.25


def calculate_years_owned(purchase_date: date, as_of_date: Optional[date] = None) -> float:
    """
    Fractional years between ``purchase_date`` and ``as_of_date`` (default today).

    Uses 365.25-day years and floors at 0 for purchase dates in the future.
    The result feeds ``PropertyFinancials.years_owned``.
    """
    if as_of_date is None:
        as_of_date = date.today()
    if isinstance(purchase_date, datetime):
        purchase_date = purchase_date.date()
    if isinstance(as_of_date, datetime):
        as_of_date = as_of_date.date()
    return max(0.0, (as_of_date - purchase_date).days / DAYS_PER_YEAR)


class PersonalExpenses(Model):
    """Monthly housing costs of the owner living elsewhere."""

    current_rent_payment: PositiveFloat = 0.0
    current_utility_costs: PositiveFloat = 0.0
    current_job_income: PositiveFloat = 0.0


class TaxInputs(Model):
    """Inputs for estimating tax on a hypothetical sale."""

    filing_status: FilingStatusEnum = FilingStatusEnum.SINGLE
    annual_income: PositiveFloat = 0.0
    depreciable_value: PositiveFloat = Field(
        default=0.0, description="Usually purchase price; land is subtracted separately"
    )
    land_value: PositiveFloat = Field(
        default=0.0, description="Typically 15-25% of purchase price"
    )
    improvements_cost: PositiveFloat = Field(
        default=0.0, description="Capital improvements made since purchase"
    )
    selling_costs: PositiveFloat = Field(
        default=0.0, description="Expected selling costs (typically 6-10% of sale price)"
    )
    state_income_tax_rate: FloatBetween0And1 = 0.0
