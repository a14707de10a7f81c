"""Financing coefficient formulas.

Two families live here:

* Uniform rate (French amortization): one monthly rate applied to every
  installment, coefficient = r(1+r)^n / ((1+r)^n - 1), evaluated as
  r / (1 - (1+r)^-n) for positive rates.
* Day count: the first installment is discounted over 28 days and every
  following one over 30 more days, against a 360-day commercial year.
  Each installment index gets its own discount coefficient and the
  payment coefficient is 1 / sum(discount coefficients).

Coefficients returned by the ``*_coefficient`` functions are rounded to
6 decimal places. Discount coefficients are returned at full precision
so that aggregate metrics do not compound rounding.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Sequence

from financing_core.domain.financing import (
    COMMERCIAL_YEAR_DAYS,
    FIRST_PERIOD_DAYS,
    HUNDRED,
    ONE,
    REGULAR_PERIOD_DAYS,
    ZERO,
    round_coefficient,
    to_decimal,
)


def uniform_rate_coefficient(monthly_rate: Decimal, installment_count: int) -> Decimal:
    """
    Annuity factor for a constant monthly rate.

    When the rate is zero the factor degenerates to 1 / installment_count.
    """
    n = Decimal(installment_count)
    if monthly_rate == 0:
        return round_coefficient(ONE / n)

    # The power is always taken so that it shrinks with the count: long
    # terms underflow to zero instead of overflowing the context.
    if monthly_rate > 0:
        shrink = (ONE + monthly_rate) ** -installment_count
        return round_coefficient(monthly_rate / (ONE - shrink))

    shrink = (ONE + monthly_rate) ** installment_count
    return round_coefficient((monthly_rate * shrink) / (shrink - ONE))


def period_factor(annual_rate: Decimal, days: int) -> Decimal:
    """Simple-interest growth factor for a period of ``days`` over a 360-day year."""
    return ONE + (to_decimal(annual_rate) / HUNDRED) * Decimal(days) / Decimal(COMMERCIAL_YEAR_DAYS)


def discount_coefficient(annual_rate: Decimal, installment_number: int) -> Decimal:
    """
    Present-value factor of the installment due at ``installment_number`` (1-based).

    The first installment only accrues the 28-day period; the 30-day
    factor is not evaluated for it.
    """
    if installment_number < 1:
        raise ValueError("installment_number must be >= 1")

    first = period_factor(annual_rate, FIRST_PERIOD_DAYS)
    if installment_number == 1:
        return ONE / first

    regular = period_factor(annual_rate, REGULAR_PERIOD_DAYS)
    return ONE / (first * regular ** (installment_number - 1))


def discount_coefficients(annual_rate: Decimal, installment_count: int) -> list[Decimal]:
    """
    Discount coefficients for installments 1..installment_count, in order.

    Each value is the previous one discounted by one more 30-day period,
    so the whole schedule costs one division per installment.
    """
    current = discount_coefficient(annual_rate, 1)
    values = [current]
    if installment_count > 1:
        regular = period_factor(annual_rate, REGULAR_PERIOD_DAYS)
        for _ in range(installment_count - 1):
            current = current / regular
            values.append(current)
    return values


def day_count_coefficient(
    annual_rate: Decimal,
    installment_count: int,
    discounts: Sequence[Decimal] | None = None,
) -> Decimal:
    """
    Payment coefficient under the day-count method.

    The inverse of the mean discount coefficient spread over the
    installments: 1 / (n * mean(d)) == 1 / sum(d). A zero rate returns
    1 / n directly, which is also what the general formula yields.

    ``discounts`` may carry an already computed schedule for the same
    rate and count.
    """
    if to_decimal(annual_rate) == 0:
        return round_coefficient(ONE / Decimal(installment_count))

    if discounts is None:
        discounts = discount_coefficients(annual_rate, installment_count)
    return round_coefficient(ONE / sum(discounts, ZERO))
