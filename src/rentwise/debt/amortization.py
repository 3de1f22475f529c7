# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""Loan amortization calculations"""

from __future__ import annotations

import logging
from datetime import date
from typing import List, Optional, Tuple

from dateutil.relativedelta import relativedelta
from pydantic import Field

from ..core.primitives import GlobalSettings, Model, PositiveFloat
from .loan import NO_ONE_TIME_PAYMENT, LoanParameters, OneTimePayment

logger = logging.getLogger(__name__)


class AmortizationEntry(Model):
    """One month of an amortization schedule."""

    month_index: int = Field(..., ge=1, description="1-based month number")
    payment_date: date
    principal_paid: PositiveFloat = Field(
        ..., description="Principal retired by the base payment"
    )
    interest_paid: PositiveFloat
    extra_payment: PositiveFloat = Field(
        ..., description="Extra and one-time principal actually applied this month"
    )
    total_payment: PositiveFloat
    remaining_balance: PositiveFloat


class AmortizationSchedule(Model):
    """
    Ordered month-by-month schedule produced by ``build_schedule``.

    ``converged`` distinguishes a real payoff from a schedule truncated by the
    safety cap (a payment too small to ever retire the balance). Callers that
    need a payoff date should use ``payoff_date``, which is ``None`` for
    truncated schedules, rather than the date of the last entry.

    Attributes:
        entries (Tuple[AmortizationEntry, ...]): Schedule rows in payment order
        converged (bool): True when the balance reached zero (or was zero to begin with)
    """

    entries: Tuple[AmortizationEntry, ...] = ()
    converged: bool = True

    @property
    def months(self) -> int:
        return len(self.entries)

    @property
    def is_empty(self) -> bool:
        return not self.entries

    @property
    def last_entry(self) -> Optional[AmortizationEntry]:
        return self.entries[-1] if self.entries else None

    @property
    def last_payment_date(self) -> Optional[date]:
        last = self.last_entry
        return last.payment_date if last is not None else None

    @property
    def payoff_date(self) -> Optional[date]:
        """Date of the final payment, or None if the loan never pays off."""
        if not self.converged:
            return None
        return self.last_payment_date

    @property
    def final_balance(self) -> float:
        last = self.last_entry
        return last.remaining_balance if last is not None else 0.0

    @property
    def total_interest(self) -> float:
        return sum(entry.interest_paid for entry in self.entries)

    @property
    def total_principal(self) -> float:
        """Principal retired by base and extra payments combined."""
        return sum(entry.principal_paid + entry.extra_payment for entry in self.entries)

    @property
    def total_extra(self) -> float:
        return sum(entry.extra_payment for entry in self.entries)

    @property
    def total_paid(self) -> float:
        return sum(entry.total_payment for entry in self.entries)


def payment_date_for(start_date: date, month_index: int) -> date:
    """Calendar date of payment ``month_index`` (1-based), clamped to month end."""
    return start_date + relativedelta(months=month_index - 1)


def build_schedule(
    loan: LoanParameters,
    extra_monthly: float = 0.0,
    one_time: Optional[OneTimePayment] = None,
    settings: Optional[GlobalSettings] = None,
) -> AmortizationSchedule:
    """
    Simulate the loan month by month with optional extra payments.

    Each month accrues interest on the running balance, applies the base
    payment, then any extra monthly amount plus the one-time payment scheduled
    for that month. The final month is clamped so the loan is never overpaid:
    when the base payment alone covers the balance the extra payment is not
    recorded, otherwise the extra payment absorbs exactly what remains.

    Args:
        loan: Loan parameters (never mutated)
        extra_monthly: Extra principal paid every month
        one_time: Optional lump-sum payment for a single month
        settings: Tolerances and caps; defaults to ``GlobalSettings()``

    Returns:
        AmortizationSchedule, ``converged=False`` when the safety cap was hit
        before the balance reached zero.

    Raises:
        ValueError: If ``extra_monthly`` is negative
    """
    if extra_monthly < 0:
        raise ValueError(f"extra_monthly must be non-negative, got {extra_monthly}")

    calc = (settings or GlobalSettings()).calculation
    one_time = one_time or NO_ONE_TIME_PAYMENT
    epsilon = calc.balance_epsilon
    base_payment = loan.base_monthly_payment
    monthly_rate = loan.monthly_rate

    entries: List[AmortizationEntry] = []
    balance = loan.principal
    month_index = 0

    while balance > epsilon and month_index < calc.max_schedule_months:
        month_index += 1
        interest = balance * monthly_rate
        principal_from_base = max(0.0, base_payment - interest)

        extra = extra_monthly
        if one_time.is_active and month_index == one_time.month:
            extra += one_time.amount

        if balance + interest <= base_payment + extra:
            # Final month
            if balance + interest <= base_payment:
                principal_from_base = balance
                extra = 0.0
            else:
                principal_from_base = max(0.0, base_payment - interest)
                extra = balance - principal_from_base
            balance = 0.0
        elif principal_from_base + extra >= balance:
            # Extra payment alone retires the balance while the base payment
            # does not even cover interest
            extra = balance - principal_from_base
            balance = 0.0
        else:
            balance -= principal_from_base + extra

        principal_paid = max(0.0, principal_from_base)
        extra_paid = max(0.0, extra)
        interest_paid = max(0.0, interest)

        entries.append(
            AmortizationEntry(
                month_index=month_index,
                payment_date=payment_date_for(loan.start_date, month_index),
                principal_paid=float(principal_paid),
                interest_paid=float(interest_paid),
                extra_payment=float(extra_paid),
                total_payment=float(principal_paid + interest_paid + extra_paid),
                remaining_balance=0.0 if balance < epsilon else float(balance),
            )
        )

    converged = balance <= epsilon
    if not converged:
        logger.warning(
            f"Schedule truncated at {calc.max_schedule_months} months with "
            f"${balance:,.2f} outstanding; payment does not amortize the loan"
        )
    else:
        logger.debug(
            f"Built {month_index}-month schedule "
            f"(extra ${extra_monthly:,.2f}/mo, one-time ${one_time.amount:,.2f} "
            f"in month {one_time.month})"
        )

    return AmortizationSchedule(entries=tuple(entries), converged=converged)
