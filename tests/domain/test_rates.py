from decimal import Decimal

from financing_core.domain.financing import AdditionalFees, CalculationInput
from financing_core.domain.rates import compose_resultant_rate, monthly_rate


def test_resultant_rate_without_fees_is_nominal_rate():
    req = CalculationInput(amount=Decimal("1000"), installment_count=6, nominal_annual_rate=Decimal("120"))

    assert compose_resultant_rate(req) == Decimal("120")


def test_resultant_rate_adds_every_fee():
    req = CalculationInput(
        amount=Decimal("1000"),
        installment_count=6,
        nominal_annual_rate=Decimal("80"),
        fees=AdditionalFees(
            processor_tariff=Decimal("1.5"),
            risk_fee=Decimal("2"),
            collector_surcharge=Decimal("10"),
            taxes=Decimal("0.25"),
        ),
    )

    assert compose_resultant_rate(req) == Decimal("93.75")


def test_resultant_rate_treats_absent_fees_as_zero():
    req = CalculationInput(
        amount=Decimal("1000"),
        installment_count=6,
        nominal_annual_rate=Decimal("50"),
        fees=AdditionalFees(risk_fee=Decimal("5")),
    )

    assert compose_resultant_rate(req) == Decimal("55")


def test_resultant_rate_accepts_float_fees_without_binary_artifacts():
    req = CalculationInput(
        amount=Decimal("1000"),
        installment_count=6,
        nominal_annual_rate=0.1,
        fees=AdditionalFees(taxes=0.2),
    )

    assert compose_resultant_rate(req) == Decimal("0.3")


def test_monthly_rate_divides_percent_by_twelve():
    """120% per year is 10% per month."""
    assert monthly_rate(Decimal("120")) == Decimal("0.1")


def test_monthly_rate_is_not_rounded():
    rate = monthly_rate(Decimal("50"))

    assert rate == Decimal("0.5") / Decimal("12")
    assert rate != Decimal("0.041667")
