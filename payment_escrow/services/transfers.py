"""Value transfer hook invoked when funds would move for a payment."""
from __future__ import annotations

import logging
from enum import Enum
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:  # pragma: no cover - hints only
    from payment_escrow.models import Payment

logger = logging.getLogger(__name__)


class TransferKind(str, Enum):
    """Direction of a value movement for a payment."""

    ESCROW = "escrow"  # client -> escrow custody
    RELEASE = "release"  # escrow custody -> freelancer
    REFUND = "refund"  # escrow custody -> client


class TransferFailed(RuntimeError):
    """Raised by a hook when the value movement could not be completed."""


class ValueTransferHook(Protocol):
    def transfer(self, payment: "Payment", kind: TransferKind) -> None:
        """Move ``payment.amount`` for ``kind`` or raise :class:`TransferFailed`."""


class NoopTransferHook:
    """Bookkeeping-only hook: records the intent and moves nothing."""

    name = "noop"

    def transfer(self, payment: "Payment", kind: TransferKind) -> None:
        logger.info(
            "Value transfer skipped (bookkeeping only)",
            extra={
                "payment_id": payment.id,
                "transfer": kind.value,
                "amount": payment.amount,
            },
        )


__all__ = ["TransferKind", "TransferFailed", "ValueTransferHook", "NoopTransferHook"]
