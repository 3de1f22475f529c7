# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""Outstanding principal projection"""

from __future__ import annotations

from datetime import date, datetime
from typing import Optional

from ..core.primitives import GlobalSettings
from .amortization import build_schedule
from .loan import LoanParameters


def months_between(start: date, end: date) -> int:
    """Whole calendar months from ``start`` to ``end`` (day of month ignored), floored at 0."""
    return max(0, (end.year - start.year) * 12 + (end.month - start.month))


def current_principal(
    loan: LoanParameters,
    as_of_date: Optional[date] = None,
    settings: Optional[GlobalSettings] = None,
) -> float:
    """
    Outstanding principal after the payments due by ``as_of_date``.

    Replays the baseline (no extra payment) schedule. Elapsed time is counted
    in calendar months, not days, so any date within the start month returns
    the original principal.

    Args:
        loan: Loan parameters
        as_of_date: Valuation date, defaults to today
        settings: Tolerances and caps for the replayed schedule

    Returns:
        Remaining balance; 0 once the loan is paid off
    """
    if as_of_date is None:
        as_of_date = date.today()
    elif isinstance(as_of_date, datetime):
        as_of_date = as_of_date.date()

    elapsed = months_between(loan.start_date, as_of_date)
    if elapsed == 0:
        return loan.principal

    schedule = build_schedule(loan, settings=settings)
    if elapsed >= schedule.months:
        return schedule.final_balance
    return schedule.entries[elapsed - 1].remaining_balance
