# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""Extra-payment solver for a target payoff date"""

from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Optional

from ..core.primitives import GlobalSettings
from .amortization import AmortizationSchedule, build_schedule
from .loan import LoanParameters

logger = logging.getLogger(__name__)


def _as_date(value: date) -> date:
    return value.date() if isinstance(value, datetime) else value


def _pays_off_by(
    schedule: AmortizationSchedule, target_date: date, tolerance: float
) -> Optional[bool]:
    """None when the schedule does not amortize, else whether payoff is on/before target."""
    if schedule.is_empty or not schedule.converged or schedule.final_balance > tolerance:
        return None
    return schedule.last_payment_date <= target_date


def solve_extra_payment(
    loan: LoanParameters,
    target_date: date,
    original_schedule: AmortizationSchedule,
    settings: Optional[GlobalSettings] = None,
) -> Optional[float]:
    """
    Find the smallest extra monthly payment that pays the loan off by ``target_date``.

    Bisects over ``[0, principal]`` in whole cents, so the result is the
    minimal payment to the cent: one cent less misses the target. Relies on
    the scheduler being monotone: paying more each month never moves the
    payoff date later.

    Args:
        loan: Loan parameters
        target_date: Desired payoff date; time of day is ignored
        original_schedule: Baseline schedule for ``loan`` with no extra payment
        settings: Tolerances and iteration caps

    Returns:
        Extra monthly payment rounded to cents, 0.0 if the baseline already
        pays off in time, or None if the target is before the loan start or
        cannot be reached.
    """
    if original_schedule.is_empty:
        return None

    calc = (settings or GlobalSettings()).calculation
    tolerance = calc.solver_tolerance
    target = _as_date(target_date)

    if target < loan.start_date:
        logger.debug(f"Target {target} precedes loan start {loan.start_date}")
        return None

    if original_schedule.converged and target >= original_schedule.last_payment_date:
        return 0.0

    def feasible(cents: int) -> bool:
        trial = build_schedule(loan, cents / 100, settings=settings)
        return bool(_pays_off_by(trial, target, tolerance))

    # Invariant: ``high`` cents always meets the target, ``low - 1`` never does
    low = 0
    high = int(round(loan.principal * 100))
    if not feasible(high):
        return None

    iterations = 0
    while low < high and iterations < calc.max_solver_iterations:
        iterations += 1
        mid = (low + high) // 2
        if feasible(mid):
            high = mid
        else:
            low = mid + 1

    if low < high:
        logger.warning(
            f"Solver hit {calc.max_solver_iterations} iterations; "
            f"returning ${high / 100:,.2f}, which may exceed the minimum by up to ${(high - low) / 100:,.2f}"
        )
    else:
        logger.debug(f"Solver converged after {iterations} iterations at ${high / 100:,.2f}")

    return high / 100
