"""Process-wide ledger lifecycle and FastAPI dependency."""
from __future__ import annotations

from payment_escrow.config import get_settings
from payment_escrow.services.escrow import PaymentLedger
from payment_escrow.services.transfers import NoopTransferHook

ledger: PaymentLedger | None = None


def init_ledger() -> PaymentLedger:
    """Create the shared ledger lazily; later calls return the same instance."""

    global ledger
    if ledger is None:
        settings = get_settings()
        hook = NoopTransferHook() if settings.TRANSFER_HOOK_ENABLED else None
        ledger = PaymentLedger(transfer_hook=hook)
    return ledger


def close_ledger() -> None:
    """Drop the shared ledger; its payments do not survive a restart."""

    global ledger
    ledger = None


def get_ledger() -> PaymentLedger:
    """Provide the shared ledger for FastAPI dependencies."""

    if ledger is None:
        return init_ledger()
    return ledger


__all__ = ["ledger", "init_ledger", "close_ledger", "get_ledger"]
