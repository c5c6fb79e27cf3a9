"""Domain models package."""
from .payment import TERMINAL_STATUSES, U64_MAX, Payment, PaymentStatus

__all__ = [
    "Payment",
    "PaymentStatus",
    "TERMINAL_STATUSES",
    "U64_MAX",
]
