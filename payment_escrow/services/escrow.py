"""Escrow ledger: payment registry, lifecycle transitions and lookups."""
from __future__ import annotations

import logging
import threading
from collections import Counter
from collections.abc import Callable

from payment_escrow.models.payment import Payment, PaymentStatus
from payment_escrow.services.transfers import TransferFailed, TransferKind, ValueTransferHook
from payment_escrow.utils.errors import (
    AmountTooLow,
    InvalidPaymentStatus,
    OperationFailed,
    PaymentAlreadyExists,
    PaymentError,
    PaymentNotFound,
    UnauthorizedOperation,
)
from payment_escrow.utils.time import Clock, not_before, utcnow

logger = logging.getLogger(__name__)

FIRST_PAYMENT_ID = 1

# caller, payment -> allowed
Authorizer = Callable[[str, Payment], bool]


def _client_only(caller: str, payment: Payment) -> bool:
    return caller == payment.client


def _either_party(caller: str, payment: Payment) -> bool:
    return payment.is_party(caller)


class PaymentLedger:
    """In-memory registry of payments keyed by a monotonically increasing id.

    Every public method runs under a single lock, so each call is atomic with
    respect to every other call on the same ledger. Records are immutable
    snapshots; a transition swaps in a new snapshot only once all
    preconditions and the value transfer have succeeded.
    """

    def __init__(
        self,
        *,
        clock: Clock = utcnow,
        transfer_hook: ValueTransferHook | None = None,
    ) -> None:
        self._clock = clock
        self._transfer_hook = transfer_hook
        self._payments: dict[int, Payment] = {}
        self._next_id = FIRST_PAYMENT_ID
        self._lock = threading.Lock()

    @property
    def transfer_hook(self) -> ValueTransferHook | None:
        return self._transfer_hook

    # --- creation -----------------------------------------------------------

    def create_payment(self, caller: str, project_id: int, freelancer: str, amount: int) -> Payment:
        """Open a pending payment funded by ``caller`` for ``freelancer``."""

        if amount <= 0:
            logger.warning(
                "Payment creation rejected",
                extra={"caller": caller, "amount": amount, "code": AmountTooLow.code},
            )
            raise AmountTooLow()

        with self._lock:
            payment_id = self._next_id
            if payment_id in self._payments:
                raise PaymentAlreadyExists(payment_id=payment_id)
            self._next_id += 1

            now = self._clock()
            payment = Payment(
                id=payment_id,
                project_id=project_id,
                client=caller,
                freelancer=freelancer,
                amount=amount,
                status=PaymentStatus.PENDING,
                created_at=now,
                updated_at=now,
            )
            self._payments[payment_id] = payment

        logger.info(
            "Payment created",
            extra={"payment_id": payment.id, "project_id": project_id, "caller": caller},
        )
        return payment

    # --- transitions --------------------------------------------------------

    def escrow_payment(self, caller: str, payment_id: int) -> Payment:
        """Move a pending payment into escrow custody (client only)."""

        return self._transition(
            caller,
            payment_id,
            expected=PaymentStatus.PENDING,
            target=PaymentStatus.ESCROWED,
            authorize=_client_only,
            transfer=TransferKind.ESCROW,
        )

    def release_payment(self, caller: str, payment_id: int) -> Payment:
        """Pay the escrowed amount out to the freelancer (client only)."""

        return self._transition(
            caller,
            payment_id,
            expected=PaymentStatus.ESCROWED,
            target=PaymentStatus.RELEASED,
            authorize=_client_only,
            transfer=TransferKind.RELEASE,
        )

    def refund_payment(self, caller: str, payment_id: int) -> Payment:
        """Return the escrowed amount to the client (client only)."""

        return self._transition(
            caller,
            payment_id,
            expected=PaymentStatus.ESCROWED,
            target=PaymentStatus.REFUNDED,
            authorize=_client_only,
            transfer=TransferKind.REFUND,
        )

    def dispute_payment(self, caller: str, payment_id: int) -> Payment:
        """Flag an escrowed payment as disputed (client or freelancer)."""

        return self._transition(
            caller,
            payment_id,
            expected=PaymentStatus.ESCROWED,
            target=PaymentStatus.DISPUTED,
            authorize=_either_party,
            transfer=None,
        )

    # Names used by the first revision of the escrow API.
    create_escrow = create_payment
    deposit_to_escrow = escrow_payment

    def _transition(
        self,
        caller: str,
        payment_id: int,
        *,
        expected: PaymentStatus,
        target: PaymentStatus,
        authorize: Authorizer,
        transfer: TransferKind | None,
    ) -> Payment:
        with self._lock:
            try:
                current = self._get_or_raise(payment_id)
                if not authorize(caller, current):
                    raise UnauthorizedOperation(payment_id=payment_id)
                if current.status != expected:
                    raise InvalidPaymentStatus(
                        f"Payment is {current.status.value}; expected {expected.value}.",
                        payment_id=payment_id,
                    )
                if transfer is not None:
                    self._run_transfer(current, transfer)
            except PaymentError as exc:
                logger.warning(
                    "Payment transition rejected",
                    extra={
                        "payment_id": payment_id,
                        "caller": caller,
                        "target": target.value,
                        "code": exc.code,
                    },
                )
                raise

            updated = current.with_status(target, not_before(self._clock(), current.updated_at))
            self._payments[payment_id] = updated

        logger.info(
            "Payment transitioned",
            extra={
                "payment_id": payment_id,
                "caller": caller,
                "from_status": expected.value,
                "status": target.value,
            },
        )
        return updated

    def _run_transfer(self, payment: Payment, kind: TransferKind) -> None:
        if self._transfer_hook is None:
            return
        try:
            self._transfer_hook.transfer(payment, kind)
        except TransferFailed as exc:
            logger.error(
                "Value transfer failed",
                extra={"payment_id": payment.id, "transfer": kind.value, "reason": str(exc)},
            )
            raise OperationFailed(payment_id=payment.id) from exc

    # --- queries ------------------------------------------------------------

    def get_payment(self, payment_id: int) -> Payment:
        with self._lock:
            return self._get_or_raise(payment_id)

    def get_client_payments(self, client: str) -> list[Payment]:
        return self._filter(lambda p: p.client == client)

    def get_freelancer_payments(self, freelancer: str) -> list[Payment]:
        return self._filter(lambda p: p.freelancer == freelancer)

    def get_project_payments(self, project_id: int) -> list[Payment]:
        return self._filter(lambda p: p.project_id == project_id)

    def _filter(self, predicate: Callable[[Payment], bool]) -> list[Payment]:
        # dict preserves insertion order, which is also id order.
        with self._lock:
            return [p for p in self._payments.values() if predicate(p)]

    def _get_or_raise(self, payment_id: int) -> Payment:
        payment = self._payments.get(payment_id)
        if payment is None:
            raise PaymentNotFound(payment_id=payment_id)
        return payment

    # --- introspection ------------------------------------------------------

    def __len__(self) -> int:
        with self._lock:
            return len(self._payments)

    @property
    def next_payment_id(self) -> int:
        with self._lock:
            return self._next_id

    def status_counts(self) -> dict[str, int]:
        with self._lock:
            counts = Counter(p.status for p in self._payments.values())
        return {status.value: counts.get(status, 0) for status in PaymentStatus}


__all__ = ["FIRST_PAYMENT_ID", "PaymentLedger"]
