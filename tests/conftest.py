# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Test utilities and fixtures for rentwise testing.

This module provides convenient factories for loans, properties and tax
inputs so individual tests only spell out the fields they care about.
"""

from __future__ import annotations

from datetime import date

import pytest

from rentwise.core.defaults import (
    DEFAULT_LOAN_PARAMS,
    DEFAULT_PERSONAL_EXPENSES,
    DEFAULT_PROPERTY_FINANCIALS,
    DEFAULT_TAX_INPUTS,
)
from rentwise.core.primitives import GlobalSettings
from rentwise.debt import LoanParameters
from rentwise.valuation import PropertyFinancials, TaxInputs

ZERO_EXPENSES = {
    "monthly_property_tax": 0.0,
    "monthly_insurance": 0.0,
    "monthly_hoa": 0.0,
    "monthly_maintenance_reserve": 0.0,
    "monthly_vacancy_reserve": 0.0,
    "monthly_management_fee": 0.0,
}


# Loan Utilities
def create_test_loan(
    principal: float = 200_000.0,
    annual_rate: float = 0.06,
    base_monthly_payment: float = 1_199.10,
    start_date: date = date(2024, 1, 1),
) -> LoanParameters:
    """
    Create a loan for testing.

    The default payment is the level 30-year payment for $200k at 6%.

    Example:
        >>> loan = create_test_loan(principal=100_000.0)
        >>> loan.annual_rate
        0.06
    """
    return LoanParameters(
        principal=principal,
        annual_rate=annual_rate,
        base_monthly_payment=base_monthly_payment,
        escrow=0.0,
        total_payment=base_monthly_payment,
        start_date=start_date,
    )


# Property Utilities
def create_test_property(**overrides) -> PropertyFinancials:
    """Default property financials with selected fields overridden."""
    return DEFAULT_PROPERTY_FINANCIALS.model_copy(update=overrides)


def create_test_tax_inputs(**overrides) -> TaxInputs:
    """Default tax inputs with selected fields overridden."""
    return DEFAULT_TAX_INPUTS.model_copy(update=overrides)


# Pytest Fixtures
@pytest.fixture
def default_loan() -> LoanParameters:
    """The demo loan: $59,957.41 at 5.7285% with a $1,336.39 payment."""
    return DEFAULT_LOAN_PARAMS


@pytest.fixture
def test_loan() -> LoanParameters:
    """A 30-year $200k loan at 6%."""
    return create_test_loan()


@pytest.fixture
def sample_property() -> PropertyFinancials:
    return DEFAULT_PROPERTY_FINANCIALS


@pytest.fixture
def sample_personal_expenses():
    return DEFAULT_PERSONAL_EXPENSES


@pytest.fixture
def sample_tax_inputs() -> TaxInputs:
    return DEFAULT_TAX_INPUTS


@pytest.fixture
def sample_settings() -> GlobalSettings:
    """Create default global settings for testing."""
    return GlobalSettings()


__all__ = [
    "ZERO_EXPENSES",
    "create_test_loan",
    "create_test_property",
    "create_test_tax_inputs",
    # Fixtures
    "default_loan",
    "test_loan",
    "sample_property",
    "sample_personal_expenses",
    "sample_tax_inputs",
    "sample_settings",
]
