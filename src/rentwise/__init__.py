# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
rentwise - Mortgage and Rental Property Financial Modeling

Deterministic, side-effect-free calculators for a single rental property and
its mortgage. Every function takes immutable inputs and returns new outputs.

Key Entry Points:
- rentwise.debt.build_schedule() - Month-by-month amortization with extra payments
- rentwise.debt.compare_schedules() - Interest and time saved by paying early
- rentwise.debt.solve_extra_payment() - Extra payment needed for a target payoff date
- rentwise.valuation.calculate_cash_flow() - NOI, cap rate, cash-on-cash
- rentwise.valuation.calculate_tax_estimate() - Tax due on a hypothetical sale
- rentwise.valuation.calculate_keep_vs_sell() - Keep renting vs sell and invest

Example Usage:
    ```python
    from rentwise.core.defaults import DEFAULT_LOAN_PARAMS
    from rentwise.debt import build_schedule, compare_schedules

    baseline = build_schedule(DEFAULT_LOAN_PARAMS)
    accelerated = build_schedule(DEFAULT_LOAN_PARAMS, extra_monthly=500.0)
    comparison = compare_schedules(baseline, accelerated, DEFAULT_LOAN_PARAMS.principal)
    print(f"Interest saved: ${comparison.interest_saved:,.2f}")
    ```
"""

import importlib
import logging

# Libraries should not configure logging; applications attach their own handlers.
logging.getLogger(__name__).addHandler(logging.NullHandler())


# Public API surface (lazy-loaded on first attribute access)
__all__ = [  # noqa: F822 - lazy loading
    "core",
    "debt",
    "reporting",
    "valuation",
]


_LAZY_MODULES = {
    "core": "rentwise.core",
    "debt": "rentwise.debt",
    "reporting": "rentwise.reporting",
    "valuation": "rentwise.valuation",
}


def __getattr__(name: str):
    module_path = _LAZY_MODULES.get(name)
    if module_path is None:
        raise AttributeError(f"module 'rentwise' has no attribute '{name}'")
    module = importlib.import_module(module_path)
    globals()[name] = module
    return module
