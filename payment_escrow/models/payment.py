"""Payment record held by the escrow ledger."""
from dataclasses import dataclass, replace
from datetime import datetime
from enum import Enum as PyEnum

U64_MAX = 2**64 - 1


class PaymentStatus(str, PyEnum):
    """Lifecycle status of an escrowed payment."""

    PENDING = "Pending"
    ESCROWED = "Escrowed"
    RELEASED = "Released"
    REFUNDED = "Refunded"
    DISPUTED = "Disputed"

    @property
    def is_terminal(self) -> bool:
        return self in TERMINAL_STATUSES


TERMINAL_STATUSES = frozenset(
    {PaymentStatus.RELEASED, PaymentStatus.REFUNDED, PaymentStatus.DISPUTED}
)


@dataclass(frozen=True)
class Payment:
    """Immutable snapshot of a payment between a client and a freelancer."""

    id: int
    project_id: int
    client: str
    freelancer: str
    amount: int
    status: PaymentStatus
    created_at: datetime
    updated_at: datetime

    def with_status(self, status: PaymentStatus, at: datetime) -> "Payment":
        return replace(self, status=status, updated_at=at)

    def is_party(self, identity: str) -> bool:
        return identity in (self.client, self.freelancer)
