"""Test configuration."""
import os
from collections.abc import AsyncIterator, Callable, Iterator
from datetime import UTC, datetime, timedelta

import pytest
from httpx import ASGITransport, AsyncClient

# --- Default env config
os.environ.setdefault("ESCROW_ENV", "test")
os.environ.setdefault("LOG_LEVEL", "DEBUG")

from payment_escrow.main import app  # noqa: E402
from payment_escrow.models import Payment  # noqa: E402
from payment_escrow.registry import get_ledger  # noqa: E402
from payment_escrow.services.escrow import PaymentLedger  # noqa: E402
from payment_escrow.services.transfers import TransferFailed, TransferKind  # noqa: E402

CLIENT = "client-aaaa"
FREELANCER = "freelancer-bbbb"


class StepClock:
    """Deterministic clock advancing one second per reading."""

    def __init__(self, start: datetime | None = None, step: timedelta = timedelta(seconds=1)) -> None:
        self.now = start or datetime(2024, 1, 1, tzinfo=UTC)
        self.step = step

    def __call__(self) -> datetime:
        current = self.now
        self.now = self.now + self.step
        return current


class RecordingHook:
    """Transfer hook recording calls; fails for kinds listed in ``fail_on``."""

    name = "recording"

    def __init__(self) -> None:
        self.calls: list[tuple[int, TransferKind]] = []
        self.fail_on: set[TransferKind] = set()

    def transfer(self, payment: Payment, kind: TransferKind) -> None:
        if kind in self.fail_on:
            raise TransferFailed(f"{kind.value} declined")
        self.calls.append((payment.id, kind))


@pytest.fixture
def clock() -> StepClock:
    return StepClock()


@pytest.fixture
def transfer_hook() -> RecordingHook:
    return RecordingHook()


@pytest.fixture
def ledger(clock: StepClock, transfer_hook: RecordingHook) -> PaymentLedger:
    return PaymentLedger(clock=clock, transfer_hook=transfer_hook)


@pytest.fixture(autouse=True)
def override_ledger_dependency(ledger: PaymentLedger) -> Iterator[None]:
    app.dependency_overrides[get_ledger] = lambda: ledger
    yield
    app.dependency_overrides.pop(get_ledger, None)


@pytest.fixture
async def client() -> AsyncIterator[AsyncClient]:
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as async_client:
        yield async_client


@pytest.fixture
def caller_headers() -> Callable[[str], dict[str, str]]:
    def _headers(identity: str) -> dict[str, str]:
        return {"X-Caller-Id": identity}

    return _headers


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture
def escrowed_payment(ledger: PaymentLedger) -> Payment:
    """A payment already moved into escrow by its client."""

    payment = ledger.create_payment(CLIENT, 7, FREELANCER, 250)
    return ledger.escrow_payment(CLIENT, payment.id)
