# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from .amortization import (
    AmortizationEntry,
    AmortizationSchedule,
    build_schedule,
    payment_date_for,
)
from .analysis import ScheduleComparison, compare_schedules
from .loan import NO_ONE_TIME_PAYMENT, LoanParameters, OneTimePayment
from .principal import current_principal, months_between
from .solver import solve_extra_payment

__all__ = [
    # Inputs
    "LoanParameters",
    "OneTimePayment",
    "NO_ONE_TIME_PAYMENT",
    # Amortization
    "AmortizationEntry",
    "AmortizationSchedule",
    "build_schedule",
    "payment_date_for",
    # Schedule analysis
    "ScheduleComparison",
    "compare_schedules",
    # Principal projection
    "current_principal",
    "months_between",
    # Target date solver
    "solve_extra_payment",
]
