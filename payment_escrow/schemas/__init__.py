"""Schema package exports."""
from .payment import PaymentCreate, PaymentRead

__all__ = [
    "PaymentCreate",
    "PaymentRead",
]
