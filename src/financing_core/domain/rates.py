from __future__ import annotations

from decimal import Decimal

from financing_core.domain.financing import (
    HUNDRED,
    MONTHS_PER_YEAR,
    CalculationInput,
    to_decimal,
)


def compose_resultant_rate(calculation_input: CalculationInput) -> Decimal:
    """Nominal annual rate plus every optional fee percentage (absent fees count as 0)."""
    return to_decimal(calculation_input.nominal_annual_rate) + calculation_input.fees.total()


def monthly_rate(annual_rate: Decimal) -> Decimal:
    """
    Effective monthly rate as a decimal fraction.

    monthly_rate(120) == 0.10. Not rounded: full precision is carried forward.
    """
    return (to_decimal(annual_rate) / HUNDRED) / Decimal(MONTHS_PER_YEAR)
