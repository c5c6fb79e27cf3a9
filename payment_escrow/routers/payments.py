"""Escrowed payment endpoints."""
from fastapi import APIRouter, Depends, status

from payment_escrow.models.payment import Payment
from payment_escrow.registry import get_ledger
from payment_escrow.schemas.payment import PaymentCreate, PaymentRead
from payment_escrow.security import require_caller
from payment_escrow.services.escrow import PaymentLedger

router = APIRouter(
    prefix="/payments",
    tags=["payments"],
)


@router.post("", response_model=PaymentRead, status_code=status.HTTP_201_CREATED)
def create_payment(
    payload: PaymentCreate,
    ledger: PaymentLedger = Depends(get_ledger),
    caller: str = Depends(require_caller),
) -> Payment:
    return ledger.create_payment(caller, payload.project_id, payload.freelancer, payload.amount)


@router.post("/{payment_id}/escrow", response_model=PaymentRead)
def escrow_payment(
    payment_id: int,
    ledger: PaymentLedger = Depends(get_ledger),
    caller: str = Depends(require_caller),
) -> Payment:
    return ledger.escrow_payment(caller, payment_id)


@router.post("/{payment_id}/release", response_model=PaymentRead)
def release_payment(
    payment_id: int,
    ledger: PaymentLedger = Depends(get_ledger),
    caller: str = Depends(require_caller),
) -> Payment:
    return ledger.release_payment(caller, payment_id)


@router.post("/{payment_id}/refund", response_model=PaymentRead)
def refund_payment(
    payment_id: int,
    ledger: PaymentLedger = Depends(get_ledger),
    caller: str = Depends(require_caller),
) -> Payment:
    return ledger.refund_payment(caller, payment_id)


@router.post("/{payment_id}/dispute", response_model=PaymentRead)
def dispute_payment(
    payment_id: int,
    ledger: PaymentLedger = Depends(get_ledger),
    caller: str = Depends(require_caller),
) -> Payment:
    return ledger.dispute_payment(caller, payment_id)


@router.get("/{payment_id}", response_model=PaymentRead)
def read_payment(
    payment_id: int,
    ledger: PaymentLedger = Depends(get_ledger),
) -> Payment:
    return ledger.get_payment(payment_id)


@router.get("/clients/{client}", response_model=list[PaymentRead])
def list_client_payments(
    client: str,
    ledger: PaymentLedger = Depends(get_ledger),
) -> list[Payment]:
    return ledger.get_client_payments(client)


@router.get("/freelancers/{freelancer}", response_model=list[PaymentRead])
def list_freelancer_payments(
    freelancer: str,
    ledger: PaymentLedger = Depends(get_ledger),
) -> list[Payment]:
    return ledger.get_freelancer_payments(freelancer)


@router.get("/projects/{project_id}", response_model=list[PaymentRead])
def list_project_payments(
    project_id: int,
    ledger: PaymentLedger = Depends(get_ledger),
) -> list[Payment]:
    return ledger.get_project_payments(project_id)
