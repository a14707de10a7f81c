from __future__ import annotations

from decimal import Decimal
from typing import Sequence

from financing_core.domain.financing import (
    COMMERCIAL_YEAR_DAYS,
    FIRST_PERIOD_DAYS,
    HUNDRED,
    MONTHS_PER_YEAR,
    ONE,
    REGULAR_PERIOD_DAYS,
    TAX_MULTIPLIER,
    ZERO,
    round_coefficient,
)


def direct_rate(coefficient: Decimal, installment_count: int) -> Decimal:
    """Total financing cost as a simple percentage of principal."""
    return ((coefficient * Decimal(installment_count)) - ONE) * HUNDRED


def coefficient_with_tax(coefficient: Decimal) -> Decimal:
    """Coefficient grossed up by VAT, rounded to 6 decimal places."""
    return round_coefficient(coefficient * TAX_MULTIPLIER)


# ==============================================================================
# Uniform rate
# ==============================================================================


def effective_annual_rate_uniform(monthly_rate: Decimal) -> Decimal:
    """Annual rate with monthly compounding: ((1 + r)^12 - 1) * 100."""
    return ((ONE + monthly_rate) ** MONTHS_PER_YEAR - ONE) * HUNDRED


def total_financial_cost_uniform(coefficient: Decimal, installment_count: int) -> Decimal:
    """Annualized total cost: ((coefficient * n)^(12 / n) - 1) * 100."""
    exponent = Decimal(MONTHS_PER_YEAR) / Decimal(installment_count)
    return ((coefficient * Decimal(installment_count)) ** exponent - ONE) * HUNDRED


# ==============================================================================
# Day count
# ==============================================================================


def day_count_financial_cost(amount: Decimal, discounts: Sequence[Decimal]) -> Decimal:
    """Aggregate financial cost: amount * (1 - mean(discount coefficients))."""
    mean_discount = sum(discounts, ZERO) / Decimal(len(discounts))
    return amount * (ONE - mean_discount)


def total_financial_cost_day_count(amount: Decimal, financial_cost: Decimal) -> Decimal:
    return (financial_cost / amount) * HUNDRED


def total_days(installment_count: int) -> int:
    """Days spanned by the loan: 28 for the first installment, 30 for each other one."""
    return FIRST_PERIOD_DAYS + REGULAR_PERIOD_DAYS * (installment_count - 1)


def effective_annual_rate_day_count(
    amount: Decimal, installment_count: int, financial_cost: Decimal
) -> Decimal:
    """
    Annualize the day-count financial cost over the loan's span in years.

    Falls back to the total financial cost percentage when the span or
    the amount is not positive.
    """
    years = Decimal(total_days(installment_count)) / Decimal(COMMERCIAL_YEAR_DAYS)
    if years > 0 and amount > 0:
        total_payable = amount + financial_cost
        return ((total_payable / amount) ** (ONE / years) - ONE) * HUNDRED

    return total_financial_cost_day_count(amount, financial_cost)
