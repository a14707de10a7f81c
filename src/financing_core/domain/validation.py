from __future__ import annotations

from decimal import Decimal
from numbers import Integral

from financing_core.domain.financing import (
    MIN_RESULTANT_RATE,
    CalculationInput,
    ValidationResult,
)
from financing_core.domain.rates import compose_resultant_rate


AMOUNT_NOT_POSITIVE = "amount must be greater than zero"
INSTALLMENT_COUNT_INVALID = "installment count must be a positive integer"
NEGATIVE_NOMINAL_RATE = "nominal annual rate cannot be negative"
RESULTANT_RATE_TOO_LOW = f"resultant rate must be greater than {MIN_RESULTANT_RATE}"


def _is_whole_number(value: object) -> bool:
    # bool is an Integral subclass but never a meaningful count
    if isinstance(value, bool):
        return False
    if isinstance(value, Integral):
        return True
    if isinstance(value, Decimal):
        return value.is_finite() and value == value.to_integral_value()
    return False


def validate_input(calculation_input: CalculationInput) -> ValidationResult:
    """
    Check a calculation input against the domain rules.

    Rules are evaluated in order and the first failure wins:
    1. amount must be > 0
    2. installment_count must be a positive integer
    3. nominal_annual_rate must be >= 0
    4. nominal rate plus fees must stay above -1200 (negative fees can
       otherwise cancel a whole period's growth factor)

    Returns:
        ValidationResult with is_valid=False and the reason on failure
    """
    if calculation_input.amount <= 0:
        return ValidationResult(is_valid=False, error_message=AMOUNT_NOT_POSITIVE)

    count = calculation_input.installment_count
    if not _is_whole_number(count) or count <= 0:
        return ValidationResult(is_valid=False, error_message=INSTALLMENT_COUNT_INVALID)

    if calculation_input.nominal_annual_rate < 0:
        return ValidationResult(is_valid=False, error_message=NEGATIVE_NOMINAL_RATE)

    if compose_resultant_rate(calculation_input) <= MIN_RESULTANT_RATE:
        return ValidationResult(is_valid=False, error_message=RESULTANT_RATE_TOO_LOW)

    return ValidationResult(is_valid=True)
