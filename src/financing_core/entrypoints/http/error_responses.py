"""REST API error response models.

Structured error responses that provide a consistent format for all HTTP errors.
"""

from pydantic import BaseModel, ConfigDict


class ErrorDetail(BaseModel):
    """Individual error detail for field-level errors."""

    field: str
    message: str
    code: str | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "field": "amount",
                "message": "Must be a valid decimal: abc",
                "code": "INVALID_DECIMAL",
            }
        }
    )


class ErrorResponse(BaseModel):
    """Structured error response format.

    Examples:
        Domain rule violated:
            {
                "detail": "installment count must be a positive integer",
                "code": "VALIDATION_ERROR"
            }

        Field-level errors:
            {
                "detail": "Validation failed",
                "code": "VALIDATION_ERROR",
                "errors": [
                    {"field": "amount", "message": "Must be a valid decimal: abc", "code": "INVALID_DECIMAL"}
                ]
            }
    """

    detail: str
    code: str | None = None
    errors: list[ErrorDetail] | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {"detail": "amount must be greater than zero", "code": "VALIDATION_ERROR"},
                {
                    "detail": "Validation failed",
                    "code": "VALIDATION_ERROR",
                    "errors": [
                        {
                            "field": "amount",
                            "message": "Must be a valid decimal: abc",
                            "code": "INVALID_DECIMAL",
                        },
                    ],
                },
            ]
        }
    )
