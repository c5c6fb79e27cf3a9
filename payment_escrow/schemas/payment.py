"""Payment schemas."""
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from payment_escrow.models.payment import U64_MAX, PaymentStatus


class PaymentCreate(BaseModel):
    project_id: int = Field(ge=0, le=U64_MAX)
    freelancer: str = Field(min_length=1, max_length=256)
    # Non-positive amounts are rejected by the ledger as AMOUNT_TOO_LOW.
    amount: int = Field(le=U64_MAX)


class PaymentRead(BaseModel):
    id: int
    project_id: int
    client: str
    freelancer: str
    amount: int
    status: PaymentStatus
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)
