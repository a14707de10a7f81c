from __future__ import annotations

from decimal import Decimal

from financing_core.domain.financing import round_currency


def installment_value(amount: Decimal, coefficient: Decimal) -> Decimal:
    return round_currency(amount * coefficient)


def total_payable(installment: Decimal, installment_count: int) -> Decimal:
    return round_currency(installment * Decimal(installment_count))


def total_interest(payable: Decimal, amount: Decimal) -> Decimal:
    return round_currency(payable - amount)
