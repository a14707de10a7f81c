from __future__ import annotations

from decimal import Decimal, InvalidOperation

from financing_core.domain.errors import ValidationError
from financing_core.domain.financing import (
    AdditionalFees,
    CalculationInput,
    CalculationResult,
    InstallmentDetail,
)
from financing_core.entrypoints.http.dtos.financing import (
    FinancingRequestDTO,
    FinancingResponseDTO,
    InstallmentDetailDTO,
)


_DECIMAL_FIELDS = (
    "amount",
    "nominal_annual_rate",
    "processor_tariff",
    "risk_fee",
    "collector_surcharge",
    "taxes",
)


class FinancingMapper:
    """Maps between REST DTOs and domain models for financing."""

    @staticmethod
    def to_domain_input(dto: FinancingRequestDTO) -> CalculationInput:
        """
        Converts request DTO to domain CalculationInput.

        Handles string → Decimal conversion at the boundary.

        Args:
            dto: Request DTO with string numeric values

        Returns:
            CalculationInput with Decimal values

        Raises:
            ValidationError: If any string value cannot be converted to a Decimal
        """
        errors = []
        values: dict[str, Decimal] = {}

        for name in _DECIMAL_FIELDS:
            raw = getattr(dto, name)
            try:
                values[name] = Decimal(raw)
            except (InvalidOperation, ValueError):
                errors.append(
                    {
                        "field": name,
                        "message": f"Must be a valid decimal: {raw}",
                        "code": "INVALID_DECIMAL",
                    }
                )

        if errors:
            raise ValidationError(errors=errors)

        return CalculationInput(
            amount=values["amount"],
            installment_count=dto.installment_count,
            nominal_annual_rate=values["nominal_annual_rate"],
            fees=AdditionalFees(
                processor_tariff=values["processor_tariff"],
                risk_fee=values["risk_fee"],
                collector_surcharge=values["collector_surcharge"],
                taxes=values["taxes"],
            ),
        )

    @staticmethod
    def _to_installment(detail: InstallmentDetail) -> InstallmentDetailDTO:
        return InstallmentDetailDTO(
            number=detail.number,
            principal=str(detail.principal),
            resultant_rate=str(detail.resultant_rate),
            installment_value=str(detail.installment_value),
            coefficient=str(detail.coefficient),
            coefficient_with_tax=str(detail.coefficient_with_tax),
            effective_annual_rate=str(detail.effective_annual_rate),
            total_financial_cost=str(detail.total_financial_cost),
            direct_rate=str(detail.direct_rate),
        )

    @staticmethod
    def to_response(result: CalculationResult) -> FinancingResponseDTO:
        """
        Converts domain CalculationResult to response DTO.

        Handles Decimal → string conversion at the boundary.
        """
        return FinancingResponseDTO(
            method=result.method,
            resultant_rate=str(result.resultant_rate),
            coefficient=str(result.coefficient),
            direct_rate=str(result.direct_rate),
            coefficient_with_tax=str(result.coefficient_with_tax),
            effective_annual_rate=str(result.effective_annual_rate),
            total_financial_cost=str(result.total_financial_cost),
            installment_value=str(result.installment_value),
            installment_value_with_tax=str(result.installment_value_with_tax),
            total_payable=str(result.total_payable),
            total_payable_with_tax=str(result.total_payable_with_tax),
            total_interest=str(result.total_interest),
            total_interest_with_tax=str(result.total_interest_with_tax),
            installments=[FinancingMapper._to_installment(d) for d in result.installments],
        )
