from __future__ import annotations

from decimal import Decimal
from typing import Sequence

from financing_core.domain.coefficients import uniform_rate_coefficient
from financing_core.domain.financing import CalculationMethod
from financing_core.domain.metrics import (
    effective_annual_rate_uniform,
    total_financial_cost_uniform,
)
from financing_core.domain.rates import monthly_rate
from financing_core.ports.coefficient_strategy import CoefficientStrategy


class UniformRateStrategy(CoefficientStrategy):
    """
    French amortization: one monthly rate (annual / 12) for every installment.

    No per-installment breakdown is produced, so ``discounts`` is ignored.
    """

    method = CalculationMethod.UNIFORM_RATE

    def coefficient(
        self,
        annual_rate: Decimal,
        installment_count: int,
        discounts: Sequence[Decimal] | None = None,
    ) -> Decimal:
        return uniform_rate_coefficient(monthly_rate(annual_rate), installment_count)

    def effective_annual_rate(
        self,
        amount: Decimal,
        annual_rate: Decimal,
        installment_count: int,
        discounts: Sequence[Decimal] | None = None,
    ) -> Decimal:
        return effective_annual_rate_uniform(monthly_rate(annual_rate))

    def total_financial_cost(
        self,
        amount: Decimal,
        annual_rate: Decimal,
        coefficient: Decimal,
        installment_count: int,
        discounts: Sequence[Decimal] | None = None,
    ) -> Decimal:
        return total_financial_cost_uniform(coefficient, installment_count)
