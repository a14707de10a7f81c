from __future__ import annotations

import logging
from dataclasses import dataclass, field
from decimal import Decimal

from financing_core.adapters.day_count_strategy import DayCountStrategy
from financing_core.adapters.uniform_rate_strategy import UniformRateStrategy
from financing_core.domain.errors import InternalError, InvalidInput
from financing_core.domain.financing import (
    CalculationInput,
    CalculationMethod,
    CalculationResult,
    to_decimal,
)
from financing_core.domain.installments import build_installment_details
from financing_core.domain.metrics import coefficient_with_tax, direct_rate
from financing_core.domain.payments import installment_value, total_interest, total_payable
from financing_core.domain.rates import compose_resultant_rate
from financing_core.domain.validation import validate_input
from financing_core.ports.coefficient_strategy import CoefficientStrategy

logger = logging.getLogger(__name__)


_STRATEGIES: dict[CalculationMethod, type[CoefficientStrategy]] = {
    CalculationMethod.UNIFORM_RATE: UniformRateStrategy,
    CalculationMethod.DAY_COUNT: DayCountStrategy,
}


def strategy_for(method: CalculationMethod | str) -> CoefficientStrategy:
    """
    Resolve a calculation method to its strategy.

    Raises:
        ValueError: If the method name is unknown
    """
    return _STRATEGIES[CalculationMethod(method)]()


@dataclass(frozen=True, slots=True)
class ComputeFinancing:
    """
    Compute every financing indicator for a loan.

    Pipeline: validate → compose resultant rate → coefficient (strategy)
    → derived metrics → payments → per-installment details.

    Rounding policy:
    - Coefficients (aggregate, tax-adjusted, per-installment) to 6 decimals, ROUND_HALF_UP
    - Currency amounts to 2 decimals, ROUND_HALF_UP
    - Rates (direct, effective annual, total financial cost) are not rounded
    - Each value is rounded once; totals derive from the rounded installment
    """

    strategy: CoefficientStrategy = field(default_factory=UniformRateStrategy)

    def execute(self, calculation_input: CalculationInput) -> CalculationResult:
        validation = validate_input(calculation_input)
        if not validation.is_valid:
            logger.info(
                "Calculation input rejected",
                extra={"reason": validation.error_message, "method": self.strategy.method.value},
            )
            raise InvalidInput(validation.error_message)

        amount = to_decimal(calculation_input.amount)
        count = int(calculation_input.installment_count)
        resultant_rate = compose_resultant_rate(calculation_input)

        # Built once and shared by every strategy call below
        discounts = self.strategy.installment_coefficients(resultant_rate, count)

        coefficient = self.strategy.coefficient(resultant_rate, count, discounts)
        if coefficient <= 0:
            raise InternalError(
                "Computed coefficient is invalid",
                coefficient=str(coefficient),
                installment_count=count,
            )

        rate_direct = direct_rate(coefficient, count)
        taxed_coefficient = coefficient_with_tax(coefficient)
        annual_rate = self.strategy.effective_annual_rate(
            amount, resultant_rate, count, discounts
        )
        financial_cost = self.strategy.total_financial_cost(
            amount, resultant_rate, coefficient, count, discounts
        )

        # Totals are computed from the rounded installment values
        installment = installment_value(amount, coefficient)
        installment_taxed = installment_value(amount, taxed_coefficient)
        payable = total_payable(installment, count)
        payable_taxed = total_payable(installment_taxed, count)

        details = build_installment_details(
            amount=amount,
            resultant_rate=resultant_rate,
            installment_value=installment,
            discounts=discounts,
            effective_annual_rate=annual_rate,
            total_financial_cost=financial_cost,
            direct_rate=rate_direct,
        )

        logger.debug(
            "Financing computed",
            extra={
                "method": self.strategy.method.value,
                "installment_count": count,
                "resultant_rate": str(resultant_rate),
                "coefficient": str(coefficient),
            },
        )

        return CalculationResult(
            method=self.strategy.method,
            resultant_rate=resultant_rate,
            coefficient=coefficient,
            direct_rate=rate_direct,
            coefficient_with_tax=taxed_coefficient,
            effective_annual_rate=annual_rate,
            total_financial_cost=financial_cost,
            installment_value=installment,
            installment_value_with_tax=installment_taxed,
            total_payable=payable,
            total_payable_with_tax=payable_taxed,
            total_interest=total_interest(payable, amount),
            total_interest_with_tax=total_interest(payable_taxed, amount),
            installments=details,
        )


def compute_financing(
    calculation_input: CalculationInput,
    method: CalculationMethod | str = CalculationMethod.UNIFORM_RATE,
) -> CalculationResult:
    """
    Compute financing for ``calculation_input`` with the given method.

    Raises:
        InvalidInput: If the input fails validation (nothing is computed),
            including fees that push the resultant rate to -1200 or below
        InternalError: If the coefficient rounds to zero, which only happens
            for terms of millions of installments
    """
    return ComputeFinancing(strategy=strategy_for(method)).execute(calculation_input)
