from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal, ROUND_HALF_UP
from enum import Enum


# ==============================================================================
# Constants
# ==============================================================================

# VAT applied on top of the financing coefficient (21%)
TAX_MULTIPLIER = Decimal("1.21")

MONTHS_PER_YEAR = 12
COMMERCIAL_YEAR_DAYS = 360
FIRST_PERIOD_DAYS = 28
REGULAR_PERIOD_DAYS = 30

COEFFICIENT_QUANTUM = Decimal("0.000001")
CURRENCY_QUANTUM = Decimal("0.01")

ZERO = Decimal("0")
ONE = Decimal("1")
HUNDRED = Decimal("100")

# -100% per month: at or below it the 30-day growth factor is no longer positive
MIN_RESULTANT_RATE = -HUNDRED * MONTHS_PER_YEAR

# Longest term accepted at the HTTP boundary (50 years of monthly installments)
MAX_INSTALLMENT_COUNT = 600


def round_coefficient(value: Decimal) -> Decimal:
    """Round a coefficient to 6 decimal places (half-up)."""
    return value.quantize(COEFFICIENT_QUANTUM, rounding=ROUND_HALF_UP)


def round_currency(value: Decimal) -> Decimal:
    """Round a currency amount to 2 decimal places (half-up)."""
    return value.quantize(CURRENCY_QUANTUM, rounding=ROUND_HALF_UP)


def to_decimal(value: Decimal | int | float | str) -> Decimal:
    """Convert a numeric value to Decimal without binary float artifacts."""
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(str(value))
    return Decimal(value)


# ==============================================================================
# Domain Models
# ==============================================================================


class CalculationMethod(str, Enum):
    """Available coefficient calculation methods."""

    UNIFORM_RATE = "uniform_rate"  # French amortization, one monthly rate
    DAY_COUNT = "day_count"  # 28/30-day discounting over a 360-day year


@dataclass(frozen=True, slots=True)
class AdditionalFees:
    """Optional percentages added on top of the nominal annual rate."""

    processor_tariff: Decimal = ZERO
    risk_fee: Decimal = ZERO
    collector_surcharge: Decimal = ZERO
    taxes: Decimal = ZERO

    def total(self) -> Decimal:
        return (
            to_decimal(self.processor_tariff)
            + to_decimal(self.risk_fee)
            + to_decimal(self.collector_surcharge)
            + to_decimal(self.taxes)
        )


@dataclass(frozen=True, slots=True)
class CalculationInput:
    """
    Inputs for a single financing calculation.

    Rates and fees are expressed in percent (e.g. 120 for 120% per year).
    """

    amount: Decimal
    installment_count: int
    nominal_annual_rate: Decimal
    fees: AdditionalFees = field(default_factory=AdditionalFees)


@dataclass(frozen=True, slots=True)
class ValidationResult:
    is_valid: bool
    error_message: str | None = None


@dataclass(frozen=True, slots=True)
class InstallmentDetail:
    """
    One row of the per-installment breakdown.

    installment_value is the aggregate (constant) payment, not an
    amortizing one. The aggregate rates are repeated on every row so a
    table can be rendered from the details alone.
    """

    number: int
    principal: Decimal
    resultant_rate: Decimal
    installment_value: Decimal
    coefficient: Decimal
    coefficient_with_tax: Decimal
    effective_annual_rate: Decimal
    total_financial_cost: Decimal
    direct_rate: Decimal


@dataclass(frozen=True, slots=True)
class CalculationResult:
    method: CalculationMethod
    resultant_rate: Decimal
    coefficient: Decimal
    direct_rate: Decimal
    coefficient_with_tax: Decimal
    effective_annual_rate: Decimal
    total_financial_cost: Decimal
    installment_value: Decimal
    installment_value_with_tax: Decimal
    total_payable: Decimal
    total_payable_with_tax: Decimal
    total_interest: Decimal
    total_interest_with_tax: Decimal
    installments: tuple[InstallmentDetail, ...] = ()
