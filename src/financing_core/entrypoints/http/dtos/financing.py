from pydantic import BaseModel, ConfigDict, Field

from financing_core.domain.financing import MAX_INSTALLMENT_COUNT, CalculationMethod


AMOUNT_PATTERN = r"^\d+(\.\d{1,2})?$"
PERCENT_PATTERN = r"^\d+(\.\d+)?$"


class FinancingRequestDTO(BaseModel):
    """Request payload for computing financing indicators."""

    amount: str = Field(
        description="Financed amount as decimal string",
        examples=["10000.00"],
        pattern=AMOUNT_PATTERN,
    )
    installment_count: int = Field(
        description="Number of monthly installments",
        examples=[12],
        ge=1,
        le=MAX_INSTALLMENT_COUNT,
    )
    nominal_annual_rate: str = Field(
        description="Nominal annual rate in percent as decimal string (e.g. '120' = 120%)",
        examples=["120"],
        pattern=PERCENT_PATTERN,
    )
    processor_tariff: str = Field(
        default="0",
        description="Processor tariff in percent, added to the nominal rate",
        pattern=PERCENT_PATTERN,
    )
    risk_fee: str = Field(
        default="0",
        description="Processor risk fee in percent, added to the nominal rate",
        pattern=PERCENT_PATTERN,
    )
    collector_surcharge: str = Field(
        default="0",
        description="Collector surcharge in percent, added to the nominal rate",
        pattern=PERCENT_PATTERN,
    )
    taxes: str = Field(
        default="0",
        description="Taxes in percent, added to the nominal rate",
        pattern=PERCENT_PATTERN,
    )
    method: CalculationMethod | None = Field(
        default=None,
        description="Calculation method. Defaults to the server's configured method",
        examples=["uniform_rate"],
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "amount": "10000.00",
                "installment_count": 12,
                "nominal_annual_rate": "120",
                "method": "uniform_rate",
            }
        }
    )


class InstallmentDetailDTO(BaseModel):
    """One row of the per-installment breakdown (day-count method only)."""

    number: int = Field(description="Installment number, starting at 1", examples=[1])
    principal: str = Field(examples=["10000.00"])
    resultant_rate: str = Field(examples=["50"])
    installment_value: str = Field(examples=["3605.25"])
    coefficient: str = Field(
        description="Discount coefficient for this installment",
        examples=["0.962567"],
    )
    coefficient_with_tax: str = Field(examples=["1.164706"])
    effective_annual_rate: str
    total_financial_cost: str
    direct_rate: str


class FinancingResponseDTO(BaseModel):
    """Response with every computed financing indicator."""

    method: CalculationMethod = Field(examples=["uniform_rate"])
    resultant_rate: str = Field(
        description="Nominal rate plus fees, in percent",
        examples=["120"],
    )
    coefficient: str = Field(examples=["0.146763"])
    direct_rate: str = Field(description="Direct rate in percent", examples=["76.1156"])
    coefficient_with_tax: str = Field(examples=["0.177583"])
    effective_annual_rate: str = Field(description="Effective annual rate in percent")
    total_financial_cost: str = Field(description="Total financial cost in percent")
    installment_value: str = Field(examples=["1467.63"])
    installment_value_with_tax: str = Field(examples=["1775.83"])
    total_payable: str = Field(examples=["17611.56"])
    total_payable_with_tax: str = Field(examples=["21309.96"])
    total_interest: str = Field(examples=["7611.56"])
    total_interest_with_tax: str = Field(examples=["11309.96"])
    installments: list[InstallmentDetailDTO] = Field(default_factory=list)


class FinancingComparisonDTO(BaseModel):
    """Results for the same input under both calculation methods."""

    uniform_rate: FinancingResponseDTO
    day_count: FinancingResponseDTO
