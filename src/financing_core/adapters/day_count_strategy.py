from __future__ import annotations

from decimal import Decimal
from typing import Sequence

from financing_core.domain.coefficients import day_count_coefficient, discount_coefficients
from financing_core.domain.financing import CalculationMethod
from financing_core.domain.metrics import (
    day_count_financial_cost,
    effective_annual_rate_day_count,
    total_financial_cost_day_count,
)
from financing_core.ports.coefficient_strategy import CoefficientStrategy


class DayCountStrategy(CoefficientStrategy):
    """
    Day-count discounting: 28 days for the first installment, 30 for each
    following one, over a 360-day commercial year.

    Annual metrics derive from the aggregate financial cost of the
    discounted installments rather than from the payment coefficient.
    Every method rebuilds the discount schedule only when it is not given.
    """

    method = CalculationMethod.DAY_COUNT

    def installment_coefficients(
        self, annual_rate: Decimal, installment_count: int
    ) -> list[Decimal]:
        return discount_coefficients(annual_rate, installment_count)

    def coefficient(
        self,
        annual_rate: Decimal,
        installment_count: int,
        discounts: Sequence[Decimal] | None = None,
    ) -> Decimal:
        return day_count_coefficient(annual_rate, installment_count, discounts)

    def _financial_cost(
        self,
        amount: Decimal,
        annual_rate: Decimal,
        installment_count: int,
        discounts: Sequence[Decimal] | None,
    ) -> Decimal:
        if discounts is None:
            discounts = discount_coefficients(annual_rate, installment_count)
        return day_count_financial_cost(amount, discounts)

    def effective_annual_rate(
        self,
        amount: Decimal,
        annual_rate: Decimal,
        installment_count: int,
        discounts: Sequence[Decimal] | None = None,
    ) -> Decimal:
        financial_cost = self._financial_cost(amount, annual_rate, installment_count, discounts)
        return effective_annual_rate_day_count(amount, installment_count, financial_cost)

    def total_financial_cost(
        self,
        amount: Decimal,
        annual_rate: Decimal,
        coefficient: Decimal,
        installment_count: int,
        discounts: Sequence[Decimal] | None = None,
    ) -> Decimal:
        financial_cost = self._financial_cost(amount, annual_rate, installment_count, discounts)
        return total_financial_cost_day_count(amount, financial_cost)
