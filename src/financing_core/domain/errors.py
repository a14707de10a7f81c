"""Errors raised by the financing core.

They carry no transport details; the HTTP entrypoint decides how each
``error_code`` is rendered.
"""

from typing import Any


class DomainError(Exception):
    """Root of every financing error: a readable message plus free-form context."""

    # Stable identifier exposed to clients
    error_code: str = "DOMAIN_ERROR"

    def __init__(self, message: str, **context: Any) -> None:
        self.message = message
        self.context = context
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "message": self.message,
            "code": self.error_code,
            **self.context,
        }


class ValidationError(DomainError):
    """Rejected input.

    Either a single reason (a calculation rule failed) or a list of
    per-field entries such as
    ``{"field": "amount", "message": "...", "code": "INVALID_DECIMAL"}``
    when request values could not be parsed.
    """

    error_code: str = "VALIDATION_ERROR"

    def __init__(
        self,
        message: str | None = None,
        errors: list[dict[str, str]] | None = None,
        **context: Any,
    ) -> None:
        self.errors: list[dict[str, str]] | None = errors or None
        default = "Validation failed" if self.errors else "Validation error"

        super().__init__(message or default, **context)

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        if self.errors:
            data["errors"] = self.errors
        return data


class InvalidInput(ValidationError):
    """A calculation input failed validation.

    The message is the validator's reason, unmodified. No partial
    result is ever produced alongside this error.
    """


class InternalError(DomainError):
    """A computation produced a value the core cannot report (e.g. a zero coefficient)."""

    error_code: str = "INTERNAL_ERROR"
