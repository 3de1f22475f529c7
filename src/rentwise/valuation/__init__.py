# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
rentwise Valuation

Rental cash flow metrics, sale tax estimates and keep-vs-sell projections
for a single property.
"""

from .cash_flow import (
    CashFlowSummary,
    RentalComparison,
    SimpleCashFlow,
    calculate_cash_flow,
    calculate_rental_comparison,
    calculate_simple_cash_flow,
)
from .inputs import PersonalExpenses, PropertyFinancials, TaxInputs, calculate_years_owned
from .keep_vs_sell import KeepVsSellAnalysis, KeepVsSellProjection, calculate_keep_vs_sell
from .strategies import TAX_MITIGATION_STRATEGIES, TaxStrategy, get_tax_strategy
from .tax import TaxEstimate, calculate_tax_estimate, get_marginal_tax_rate, progressive_tax

__all__ = [
    # Inputs
    "PropertyFinancials",
    "PersonalExpenses",
    "TaxInputs",
    "calculate_years_owned",
    # Cash flow
    "CashFlowSummary",
    "RentalComparison",
    "SimpleCashFlow",
    "calculate_cash_flow",
    "calculate_rental_comparison",
    "calculate_simple_cash_flow",
    # Tax
    "TaxEstimate",
    "calculate_tax_estimate",
    "get_marginal_tax_rate",
    "progressive_tax",
    # Keep vs sell
    "KeepVsSellAnalysis",
    "KeepVsSellProjection",
    "calculate_keep_vs_sell",
    # Strategies
    "TaxStrategy",
    "TAX_MITIGATION_STRATEGIES",
    "get_tax_strategy",
]
