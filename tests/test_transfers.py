import logging

import pytest

from payment_escrow.models import PaymentStatus
from payment_escrow.services.escrow import PaymentLedger
from payment_escrow.services.transfers import NoopTransferHook, TransferFailed, TransferKind
from payment_escrow.utils.errors import InvalidPaymentStatus, OperationFailed

CLIENT = "client-aaaa"
FREELANCER = "freelancer-bbbb"


def test_failed_escrow_transfer_leaves_payment_pending(ledger, transfer_hook):
    payment = ledger.create_payment(CLIENT, 1, FREELANCER, 100)
    transfer_hook.fail_on.add(TransferKind.ESCROW)

    with pytest.raises(OperationFailed) as excinfo:
        ledger.escrow_payment(CLIENT, payment.id)

    assert isinstance(excinfo.value.__cause__, TransferFailed)
    assert ledger.get_payment(payment.id) == payment

    # The caller may resubmit once the transfer goes through.
    transfer_hook.fail_on.clear()
    assert ledger.escrow_payment(CLIENT, payment.id).status == PaymentStatus.ESCROWED


@pytest.mark.parametrize(
    ("operation", "kind"),
    [("release_payment", TransferKind.RELEASE), ("refund_payment", TransferKind.REFUND)],
)
def test_failed_payout_keeps_escrowed(ledger, transfer_hook, escrowed_payment, operation, kind):
    transfer_hook.fail_on.add(kind)

    with pytest.raises(OperationFailed):
        getattr(ledger, operation)(CLIENT, escrowed_payment.id)

    assert ledger.get_payment(escrowed_payment.id) == escrowed_payment


def test_hook_not_called_when_preconditions_fail(ledger, transfer_hook):
    payment = ledger.create_payment(CLIENT, 1, FREELANCER, 100)

    with pytest.raises(InvalidPaymentStatus):
        ledger.release_payment(CLIENT, payment.id)

    assert transfer_hook.calls == []


def test_ledger_without_hook_only_bookkeeps(clock):
    ledger = PaymentLedger(clock=clock)
    payment = ledger.create_payment(CLIENT, 1, FREELANCER, 100)

    ledger.escrow_payment(CLIENT, payment.id)
    assert ledger.refund_payment(CLIENT, payment.id).status == PaymentStatus.REFUNDED
    assert ledger.transfer_hook is None


def test_noop_hook_logs_intent(clock, caplog):
    ledger = PaymentLedger(clock=clock, transfer_hook=NoopTransferHook())
    payment = ledger.create_payment(CLIENT, 1, FREELANCER, 100)

    with caplog.at_level(logging.INFO, logger="payment_escrow.services.transfers"):
        ledger.escrow_payment(CLIENT, payment.id)

    records = [r for r in caplog.records if r.name == "payment_escrow.services.transfers"]
    assert len(records) == 1
    assert records[0].payment_id == payment.id
    assert records[0].transfer == "escrow"
