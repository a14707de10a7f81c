from fastapi import APIRouter, Depends

from financing_core.domain.financing import CalculationMethod
from financing_core.entrypoints.http.dependencies import (
    UseCaseFactory,
    get_compute_financing_factory,
    get_default_method,
)
from financing_core.entrypoints.http.dtos.financing import (
    FinancingComparisonDTO,
    FinancingRequestDTO,
    FinancingResponseDTO,
)
from financing_core.entrypoints.http.error_responses import ErrorResponse
from financing_core.entrypoints.http.mappers.financing_mapper import FinancingMapper


router = APIRouter(tags=["Financing"])


_VALIDATION_ERROR_RESPONSE = {
    "model": ErrorResponse,
    "description": "Validation error",
    "content": {
        "application/json": {
            "examples": {
                "invalid_amount": {
                    "summary": "Amount not positive",
                    "value": {
                        "detail": "amount must be greater than zero",
                        "code": "VALIDATION_ERROR",
                    },
                },
                "invalid_decimal": {
                    "summary": "Invalid decimal format",
                    "value": {
                        "detail": "Invalid request parameters",
                        "code": "VALIDATION_ERROR",
                        "errors": [
                            {
                                "field": "amount",
                                "message": "String should match pattern '^\\d+(\\.\\d{1,2})?$'",
                                "code": "string_pattern_mismatch",
                            }
                        ],
                    },
                },
            }
        }
    },
}


@router.post(
    "/financing/calculate",
    response_model=FinancingResponseDTO,
    summary="Calculate financing indicators",
    description="""
    Compute coefficient, rates, installment value and totals for a loan.

    ## Numeric Values
    - Amounts and percentages are strings (e.g., "10000.00", "120")
    - Amounts accept up to 2 decimal places
    - Optional fees are added to the nominal annual rate

    ## Methods
    - `uniform_rate`: French amortization with monthly rate = annual / 12
    - `day_count`: 28-day first period, 30-day following periods, 360-day year;
      returns one row per installment in `installments`

    ## Example
    ```
    POST /v1/financing/calculate
    {
        "amount": "10000.00",
        "installment_count": 12,
        "nominal_annual_rate": "120"
    }
    ```
    """,
    responses={422: _VALIDATION_ERROR_RESPONSE},
)
def calculate_financing(
    payload: FinancingRequestDTO,
    default_method: CalculationMethod = Depends(get_default_method),
    use_case_factory: UseCaseFactory = Depends(get_compute_financing_factory),
) -> FinancingResponseDTO:
    """
    Calculate financing endpoint.

    Follows the parse → map → execute → map pattern:
    1. Parse: FastAPI + Pydantic handle request parsing
    2. Map: Convert DTO to domain input (string → Decimal)
    3. Execute: Run the use case for the requested method
    4. Map: Convert domain result to response DTO
    """
    calculation_input = FinancingMapper.to_domain_input(payload)

    use_case = use_case_factory(payload.method or default_method)
    result = use_case.execute(calculation_input)

    return FinancingMapper.to_response(result)


@router.post(
    "/financing/compare",
    response_model=FinancingComparisonDTO,
    summary="Compare calculation methods",
    description="""
    Compute the same input under both methods.

    The `method` field of the request body is ignored.
    """,
    responses={422: _VALIDATION_ERROR_RESPONSE},
)
def compare_financing(
    payload: FinancingRequestDTO,
    use_case_factory: UseCaseFactory = Depends(get_compute_financing_factory),
) -> FinancingComparisonDTO:
    calculation_input = FinancingMapper.to_domain_input(payload)

    uniform = use_case_factory(CalculationMethod.UNIFORM_RATE).execute(calculation_input)
    day_count = use_case_factory(CalculationMethod.DAY_COUNT).execute(calculation_input)

    return FinancingComparisonDTO(
        uniform_rate=FinancingMapper.to_response(uniform),
        day_count=FinancingMapper.to_response(day_count),
    )
