"""
Test suite for the /v1/financing routes.

- Routes validate the payload (Pydantic) and map it to the domain input
- Routes delegate to the use case obtained through dependency injection
- Routes map domain results to response DTOs with string decimals
- Domain validation failures become structured 422 responses
"""

from __future__ import annotations

from decimal import Decimal
from unittest.mock import Mock

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from financing_core.domain.errors import InvalidInput
from financing_core.domain.financing import CalculationMethod, CalculationResult
from financing_core.entrypoints.http.dependencies import (
    get_compute_financing_factory,
    get_default_method,
)
from financing_core.entrypoints.http.exception_handlers import register_exception_handlers
from financing_core.entrypoints.http.routes.financing import router


VALID_PAYLOAD = {
    "amount": "10000.00",
    "installment_count": 12,
    "nominal_annual_rate": "120",
}


@pytest.fixture
def app() -> FastAPI:
    """Create a test FastAPI app with financing router and exception handlers."""
    test_app = FastAPI()
    register_exception_handlers(test_app)
    test_app.include_router(router, prefix="/v1")
    test_app.dependency_overrides[get_default_method] = lambda: CalculationMethod.UNIFORM_RATE
    return test_app


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    return TestClient(app, raise_server_exceptions=False)


@pytest.fixture
def sample_result() -> CalculationResult:
    return CalculationResult(
        method=CalculationMethod.UNIFORM_RATE,
        resultant_rate=Decimal("120"),
        coefficient=Decimal("0.146763"),
        direct_rate=Decimal("76.115600"),
        coefficient_with_tax=Decimal("0.177583"),
        effective_annual_rate=Decimal("213.8428376721"),
        total_financial_cost=Decimal("76.115600"),
        installment_value=Decimal("1467.63"),
        installment_value_with_tax=Decimal("1775.83"),
        total_payable=Decimal("17611.56"),
        total_payable_with_tax=Decimal("21309.96"),
        total_interest=Decimal("7611.56"),
        total_interest_with_tax=Decimal("11309.96"),
    )


@pytest.fixture
def mock_use_case(sample_result: CalculationResult) -> Mock:
    use_case = Mock()
    use_case.execute.return_value = sample_result
    return use_case


@pytest.fixture
def mock_factory(app: FastAPI, mock_use_case: Mock) -> Mock:
    """Override the use case factory so every method returns the mock use case."""
    factory = Mock(return_value=mock_use_case)
    app.dependency_overrides[get_compute_financing_factory] = lambda: factory
    return factory


# ==============================================================================
# POST /v1/financing/calculate - Happy Path
# ==============================================================================


def test_calculate_success(client: TestClient, mock_factory: Mock, mock_use_case: Mock) -> None:
    response = client.post("/v1/financing/calculate", json=VALID_PAYLOAD)

    assert response.status_code == 200
    data = response.json()

    assert data["method"] == "uniform_rate"
    assert data["coefficient"] == "0.146763"
    assert data["installment_value"] == "1467.63"
    assert data["total_payable"] == "17611.56"
    assert data["total_interest_with_tax"] == "11309.96"
    assert data["installments"] == []

    mock_use_case.execute.assert_called_once()


def test_calculate_passes_decimal_input_to_use_case(
    client: TestClient, mock_factory: Mock, mock_use_case: Mock
) -> None:
    response = client.post(
        "/v1/financing/calculate",
        json={**VALID_PAYLOAD, "risk_fee": "2.5", "taxes": "1"},
    )

    assert response.status_code == 200
    calculation_input = mock_use_case.execute.call_args[0][0]
    assert calculation_input.amount == Decimal("10000.00")
    assert calculation_input.installment_count == 12
    assert calculation_input.nominal_annual_rate == Decimal("120")
    assert calculation_input.fees.risk_fee == Decimal("2.5")
    assert calculation_input.fees.taxes == Decimal("1")
    assert calculation_input.fees.processor_tariff == Decimal("0")


def test_calculate_uses_default_method_when_omitted(
    app: FastAPI, client: TestClient, mock_factory: Mock
) -> None:
    app.dependency_overrides[get_default_method] = lambda: CalculationMethod.DAY_COUNT

    client.post("/v1/financing/calculate", json=VALID_PAYLOAD)

    mock_factory.assert_called_once_with(CalculationMethod.DAY_COUNT)


def test_calculate_uses_requested_method(client: TestClient, mock_factory: Mock) -> None:
    client.post("/v1/financing/calculate", json={**VALID_PAYLOAD, "method": "day_count"})

    mock_factory.assert_called_once_with(CalculationMethod.DAY_COUNT)


def test_response_values_are_strings(client: TestClient, mock_factory: Mock) -> None:
    data = client.post("/v1/financing/calculate", json=VALID_PAYLOAD).json()

    for key, value in data.items():
        if key not in ("method", "installments"):
            assert isinstance(value, str), key


# ==============================================================================
# POST /v1/financing/calculate - Real Use Case
# ==============================================================================


def test_calculate_day_count_returns_installment_rows(client: TestClient) -> None:
    response = client.post(
        "/v1/financing/calculate",
        json={
            "amount": "10000",
            "installment_count": 3,
            "nominal_annual_rate": "50",
            "method": "day_count",
        },
    )

    assert response.status_code == 200
    data = response.json()
    assert data["coefficient"] == "0.360525"
    assert data["installment_value"] == "3605.25"
    assert [row["number"] for row in data["installments"]] == [1, 2, 3]
    assert [row["coefficient"] for row in data["installments"]] == [
        "0.962567",
        "0.924064",
        "0.887102",
    ]


def test_calculate_rejects_zero_amount_from_domain(client: TestClient) -> None:
    response = client.post("/v1/financing/calculate", json={**VALID_PAYLOAD, "amount": "0"})

    assert response.status_code == 422
    assert response.json() == {
        "detail": "amount must be greater than zero",
        "code": "VALIDATION_ERROR",
    }


# ==============================================================================
# Pydantic Validation Errors - Request Body
# ==============================================================================


@pytest.mark.parametrize(
    "override",
    [
        {"amount": "abc"},
        {"amount": "10000.123"},
        {"amount": "$10,000.00"},
        {"amount": ""},
        {"nominal_annual_rate": "-5"},
        {"installment_count": 0},
        {"taxes": "1e3"},
        {"method": "flat"},
    ],
)
def test_rejects_invalid_payload(client: TestClient, override: dict) -> None:
    response = client.post("/v1/financing/calculate", json={**VALID_PAYLOAD, **override})

    assert response.status_code == 422
    data = response.json()
    assert data["code"] == "VALIDATION_ERROR"
    assert "errors" in data


def test_rejects_installment_count_above_cap(client: TestClient, mock_factory: Mock) -> None:
    response = client.post(
        "/v1/financing/calculate",
        json={**VALID_PAYLOAD, "installment_count": 50_000_000, "method": "day_count"},
    )

    assert response.status_code == 422
    assert response.json()["errors"][0]["field"] == "installment_count"
    mock_factory.assert_not_called()


def test_accepts_installment_count_at_cap(client: TestClient, mock_factory: Mock) -> None:
    response = client.post(
        "/v1/financing/calculate", json={**VALID_PAYLOAD, "installment_count": 600}
    )

    assert response.status_code == 200


def test_rejects_missing_required_fields(client: TestClient) -> None:
    response = client.post("/v1/financing/calculate", json={"amount": "10000"})

    assert response.status_code == 422
    fields = {e["field"] for e in response.json()["errors"]}
    assert {"installment_count", "nominal_annual_rate"} <= fields


def test_domain_error_from_use_case_is_structured(
    client: TestClient, mock_factory: Mock, mock_use_case: Mock
) -> None:
    mock_use_case.execute.side_effect = InvalidInput("nominal annual rate cannot be negative")

    response = client.post("/v1/financing/calculate", json=VALID_PAYLOAD)

    assert response.status_code == 422
    assert response.json()["detail"] == "nominal annual rate cannot be negative"


# ==============================================================================
# POST /v1/financing/compare
# ==============================================================================


def test_compare_returns_both_methods(client: TestClient) -> None:
    response = client.post("/v1/financing/compare", json=VALID_PAYLOAD)

    assert response.status_code == 200
    data = response.json()
    assert data["uniform_rate"]["method"] == "uniform_rate"
    assert data["day_count"]["method"] == "day_count"
    assert data["uniform_rate"]["installments"] == []
    assert len(data["day_count"]["installments"]) == 12


def test_compare_ignores_requested_method(client: TestClient, mock_factory: Mock) -> None:
    client.post("/v1/financing/compare", json={**VALID_PAYLOAD, "method": "day_count"})

    assert [c.args[0] for c in mock_factory.call_args_list] == [
        CalculationMethod.UNIFORM_RATE,
        CalculationMethod.DAY_COUNT,
    ]


def test_compare_rejects_invalid_input(client: TestClient) -> None:
    response = client.post(
        "/v1/financing/compare", json={**VALID_PAYLOAD, "installment_count": -1}
    )

    assert response.status_code == 422
