# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""Baseline vs accelerated schedule comparison"""

from __future__ import annotations

from datetime import date
from typing import Optional

from pydantic import Field

from ..core.primitives import Model
from .amortization import AmortizationSchedule


class ScheduleComparison(Model):
    """
    Summary deltas between a baseline schedule and an accelerated one.

    ``months_saved`` and ``interest_saved`` are only meaningful when both
    schedules reached payoff; ``comparable`` is False when either schedule
    was truncated by the safety cap.
    """

    original_total_interest: float
    accelerated_total_interest: float
    original_payoff_date: Optional[date] = None
    accelerated_payoff_date: Optional[date] = None
    months_saved: int = 0
    interest_saved: float = 0.0
    original_total_principal_paid: float = 0.0
    accelerated_total_principal_paid: float = 0.0
    comparable: bool = Field(
        default=True,
        description="Both schedules converged, so the deltas describe real payoffs",
    )


def compare_schedules(
    original: AmortizationSchedule,
    accelerated: AmortizationSchedule,
    initial_principal: float,
) -> ScheduleComparison:
    """
    Derive interest and time savings of ``accelerated`` relative to ``original``.

    Args:
        original: Baseline schedule (usually no extra payments)
        accelerated: Schedule with extra and/or one-time payments
        initial_principal: Loan principal both schedules started from

    Returns:
        ScheduleComparison. Payoff dates are None for empty schedules.
    """
    original_interest = original.total_interest
    accelerated_interest = accelerated.total_interest

    original_payoff = original.last_payment_date
    accelerated_payoff = accelerated.last_payment_date

    months_saved = 0
    if original_payoff is not None and accelerated_payoff is not None:
        months_saved = original.months - accelerated.months

    return ScheduleComparison(
        original_total_interest=original_interest,
        accelerated_total_interest=accelerated_interest,
        original_payoff_date=original_payoff,
        accelerated_payoff_date=accelerated_payoff,
        months_saved=months_saved,
        interest_saved=original_interest - accelerated_interest,
        original_total_principal_paid=initial_principal,
        accelerated_total_principal_paid=initial_principal,
        comparable=original.converged and accelerated.converged,
    )
