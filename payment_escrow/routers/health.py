"""Health check endpoint."""
from __future__ import annotations

from fastapi import APIRouter, Depends

from payment_escrow.config import get_settings
from payment_escrow.registry import get_ledger
from payment_escrow.services.escrow import PaymentLedger

router = APIRouter(prefix="/health", tags=["health"])


def _transfer_hook_name(ledger: PaymentLedger) -> str:
    hook = ledger.transfer_hook
    if hook is None:
        return "disabled"
    return getattr(hook, "name", type(hook).__name__)


@router.get("", summary="Health check")
def healthcheck(ledger: PaymentLedger = Depends(get_ledger)) -> dict[str, object]:
    """Return a simple health payload with ledger counters."""

    settings = get_settings()
    return {
        "status": "ok",
        "env": settings.app_env,
        "payments_total": len(ledger),
        "next_payment_id": ledger.next_payment_id,
        "payments_by_status": ledger.status_counts(),
        "transfer_hook": _transfer_hook_name(ledger),
    }
