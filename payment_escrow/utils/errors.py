"""Payment error taxonomy and standardized error payloads."""
from typing import Any


def error_response(code: str, message: str, details: dict[str, Any] | None = None) -> dict[str, Any]:
    """Return a standardized error payload."""

    payload: dict[str, Any] = {"error": {"code": code, "message": message}}
    if details:
        payload["error"]["details"] = details
    return payload


class PaymentError(Exception):
    """Base class for every per-call failure raised by the ledger."""

    code = "PAYMENT_ERROR"
    status_code = 400
    default_message = "Payment operation rejected."

    def __init__(self, message: str | None = None, *, payment_id: int | None = None) -> None:
        self.message = message or self.default_message
        self.payment_id = payment_id
        super().__init__(self.message)

    def to_response(self) -> dict[str, Any]:
        details = {"payment_id": self.payment_id} if self.payment_id is not None else None
        return error_response(self.code, self.message, details)


class PaymentNotFound(PaymentError):
    code = "PAYMENT_NOT_FOUND"
    status_code = 404
    default_message = "Payment not found."


class UnauthorizedOperation(PaymentError):
    code = "UNAUTHORIZED_OPERATION"
    status_code = 403
    default_message = "Caller is not allowed to perform this operation."


class InvalidPaymentStatus(PaymentError):
    code = "INVALID_PAYMENT_STATUS"
    status_code = 409
    default_message = "Payment status does not allow this operation."


class AmountTooLow(PaymentError):
    code = "AMOUNT_TOO_LOW"
    status_code = 422
    default_message = "Payment amount must be greater than zero."


class OperationFailed(PaymentError):
    """The value transfer backing a transition failed; nothing was committed."""

    code = "OPERATION_FAILED"
    status_code = 502
    default_message = "Value transfer failed; payment left unchanged."


class PaymentAlreadyExists(PaymentError):
    code = "ALREADY_EXISTS"
    status_code = 409
    default_message = "A payment with this id already exists."


__all__ = [
    "error_response",
    "PaymentError",
    "PaymentNotFound",
    "UnauthorizedOperation",
    "InvalidPaymentStatus",
    "AmountTooLow",
    "OperationFailed",
    "PaymentAlreadyExists",
]
