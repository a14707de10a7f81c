from __future__ import annotations

from decimal import Decimal
from typing import Sequence

from financing_core.domain.financing import InstallmentDetail, round_coefficient
from financing_core.domain.metrics import coefficient_with_tax


def build_installment_details(
    *,
    amount: Decimal,
    resultant_rate: Decimal,
    installment_value: Decimal,
    discounts: Sequence[Decimal],
    effective_annual_rate: Decimal,
    total_financial_cost: Decimal,
    direct_rate: Decimal,
) -> tuple[InstallmentDetail, ...]:
    """
    Expand an aggregate result into one record per installment (1-based).

    Each record carries its own discount coefficient rounded to 6 decimal
    places; the tax-adjusted form is derived from that rounded value.
    """
    details = []
    for number, discount in enumerate(discounts, start=1):
        coefficient = round_coefficient(discount)
        details.append(
            InstallmentDetail(
                number=number,
                principal=amount,
                resultant_rate=resultant_rate,
                installment_value=installment_value,
                coefficient=coefficient,
                coefficient_with_tax=coefficient_with_tax(coefficient),
                effective_annual_rate=effective_annual_rate,
                total_financial_cost=total_financial_cost,
                direct_rate=direct_rate,
            )
        )
    return tuple(details)
