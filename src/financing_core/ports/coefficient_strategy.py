from __future__ import annotations

from abc import ABC, abstractmethod
from decimal import Decimal
from typing import Sequence

from financing_core.domain.financing import CalculationMethod


class CoefficientStrategy(ABC):
    """
    Port for a coefficient calculation method.

    An implementation decides how the payment coefficient and the
    method-specific annual metrics are derived from the resultant rate.
    Everything downstream (tax, payments, totals) is shared.

    Methods that need a per-installment schedule compute it once in
    ``installment_coefficients``; the caller hands that schedule back
    through ``discounts`` so it is never rebuilt within one calculation.

    Contract (Preconditions):
        - Inputs are validated by the caller (UseCase)
        - installment_count >= 1 and amount > 0
        - Implementations are stateless and safe to share between threads
    """

    method: CalculationMethod

    def installment_coefficients(
        self, annual_rate: Decimal, installment_count: int
    ) -> list[Decimal]:
        """
        Per-installment discount coefficients at full precision.

        Methods without a per-installment breakdown return an empty list.
        """
        return []

    @abstractmethod
    def coefficient(
        self,
        annual_rate: Decimal,
        installment_count: int,
        discounts: Sequence[Decimal] | None = None,
    ) -> Decimal:
        """
        Payment coefficient, rounded to 6 decimal places.

        Args:
            annual_rate: Resultant annual rate in percent
            installment_count: Number of installments
            discounts: Schedule from ``installment_coefficients``, if already built

        Returns:
            Multiplier applied to the principal to obtain each installment
        """
        ...

    @abstractmethod
    def effective_annual_rate(
        self,
        amount: Decimal,
        annual_rate: Decimal,
        installment_count: int,
        discounts: Sequence[Decimal] | None = None,
    ) -> Decimal:
        """Effective annual rate in percent."""
        ...

    @abstractmethod
    def total_financial_cost(
        self,
        amount: Decimal,
        annual_rate: Decimal,
        coefficient: Decimal,
        installment_count: int,
        discounts: Sequence[Decimal] | None = None,
    ) -> Decimal:
        """Total financial cost in percent."""
        ...
