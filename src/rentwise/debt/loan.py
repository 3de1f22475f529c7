# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""Loan input models"""

from __future__ import annotations

from datetime import date

from pyxirr import pmt

from ..core.primitives import FloatBetween0And1, Model, PositiveFloat, PositiveInt


class LoanParameters(Model):
    """
    Immutable description of a fixed-rate mortgage at the start of a schedule.

    The base payment is given rather than derived, so schedules can be
    replayed against the payment the servicer actually bills. Use
    ``from_terms`` when only the original loan terms are known.

    Attributes:
        principal (PositiveFloat): Outstanding balance at ``start_date``
        annual_rate (FloatBetween0And1): Nominal annual rate as a decimal
        base_monthly_payment (PositiveFloat): Scheduled principal + interest
        escrow (PositiveFloat): Monthly escrow (taxes/insurance), not applied to the loan
        total_payment (PositiveFloat): Full monthly bill (P&I + escrow)
        start_date (date): Date of the first scheduled payment

    Example:
        >>> loan = LoanParameters(
        ...     principal=59957.41,
        ...     annual_rate=0.057285,
        ...     base_monthly_payment=1336.39,
        ...     escrow=790.03,
        ...     total_payment=2126.42,
        ...     start_date=date(2025, 7, 1),
        ... )
    """

    principal: PositiveFloat
    annual_rate: FloatBetween0And1
    base_monthly_payment: PositiveFloat
    escrow: PositiveFloat = 0.0
    total_payment: PositiveFloat = 0.0
    start_date: date

    @property
    def monthly_rate(self) -> float:
        return self.annual_rate / 12

    @classmethod
    def from_terms(
        cls,
        principal: float,
        annual_rate: float,
        term_years: int,
        start_date: date,
        escrow: float = 0.0,
    ) -> "LoanParameters":
        """
        Build parameters from original loan terms using the level-payment formula.

        Args:
            principal: Loan amount
            annual_rate: Nominal annual rate as a decimal
            term_years: Amortization term in years
            start_date: Date of the first payment
            escrow: Monthly escrow added to the total payment

        Returns:
            LoanParameters with the standard P&I payment rounded to cents
        """
        if term_years <= 0:
            raise ValueError(f"term_years must be positive, got {term_years}")
        periods = term_years * 12
        if annual_rate > 0:
            payment = pmt(annual_rate / 12, periods, principal) * -1
        else:
            payment = principal / periods
        payment = round(payment, 2)
        return cls(
            principal=float(principal),
            annual_rate=float(annual_rate),
            base_monthly_payment=payment,
            escrow=float(escrow),
            total_payment=round(payment + escrow, 2),
            start_date=start_date,
        )


class OneTimePayment(Model):
    """A lump-sum payment applied on top of the regular payment in one month.

    ``month`` is the 1-based schedule month; 0 means no payment is applied.
    """

    amount: PositiveFloat = 0.0
    month: PositiveInt = 0

    @property
    def is_active(self) -> bool:
        return self.amount > 0 and self.month > 0


NO_ONE_TIME_PAYMENT = OneTimePayment()
