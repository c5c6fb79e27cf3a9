"""Walk a payment through the escrow lifecycle against a local ledger."""
from __future__ import annotations

from dotenv import load_dotenv

load_dotenv()

from payment_escrow.config import get_settings
from payment_escrow.core.logging import setup_logging
from payment_escrow.services.escrow import PaymentLedger
from payment_escrow.services.transfers import NoopTransferHook
from payment_escrow.utils.errors import PaymentError

CLIENT = "client-principal"
FREELANCER = "freelancer-principal"
PROJECT_ID = 1


def main() -> None:
    settings = get_settings()
    setup_logging(settings.LOG_LEVEL)
    ledger = PaymentLedger(transfer_hook=NoopTransferHook())

    payment = ledger.create_payment(CLIENT, PROJECT_ID, FREELANCER, 100)
    print(f"Created: {payment}")

    try:
        ledger.escrow_payment(FREELANCER, payment.id)
    except PaymentError as exc:
        print(f"Escrow by freelancer rejected: {exc.code}")

    payment = ledger.escrow_payment(CLIENT, payment.id)
    print(f"Escrowed: {payment}")

    payment = ledger.release_payment(CLIENT, payment.id)
    print(f"Released: {payment}")

    print(f"Project {PROJECT_ID} payments: {ledger.get_project_payments(PROJECT_ID)}")


if __name__ == "__main__":
    main()
