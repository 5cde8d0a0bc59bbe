"""Invoice Domain Entity

Computes fee, tax and total for a new invoice and defines the
closed status vocabulary.
"""

from datetime import date
from enum import Enum
from typing import List, Union
from sqlmodel import Field
from src.domain.base import BaseModel

FEE_RATE = 0.04
TAX_RATE = 0.10


class InvoiceStatus(str, Enum):
    """Invoice status types"""
    UNPROCESSED = "unprocessed"
    PROCESSING = "processing"
    PAID = "paid"
    ERROR = "error"

    @classmethod
    def values(cls) -> List[str]:
        return [member.value for member in cls]


class InvalidStatus(ValueError):
    """Raised when a status string is outside InvoiceStatus"""

    def __init__(self, status: str):
        self.status = status
        super().__init__(
            f"'status' must be one of [{', '.join(InvoiceStatus.values())}], "
            f"but got {status}"
        )


class Invoice(BaseModel):
    """
    Invoice - Amount billed to a company with derived charges

    Domain Rules:
    - fee = int(amount * fee_rate), truncated toward zero
    - tax = int(fee * tax_rate), truncated toward zero
    - total = amount + fee + tax
    - invoice_id is assigned by the store and is empty until persisted
    """

    invoice_id: str = Field(
        default="",
        description="Store-assigned identifier (empty before persistence)"
    )

    company_id: str = Field(
        default="",
        description="Company the invoice is issued to"
    )

    issue_date: date = Field(
        description="Issue date (calendar date, UTC)"
    )

    amount: int = Field(
        description="Billed amount in minor currency units"
    )

    fee: int = Field(
        description="Fee derived from amount"
    )

    fee_rate: float = Field(
        default=FEE_RATE,
        description="Fee rate applied to amount"
    )

    tax: int = Field(
        description="Tax derived from fee"
    )

    tax_rate: float = Field(
        default=TAX_RATE,
        description="Tax rate applied to fee"
    )

    total: int = Field(
        description="amount + fee + tax"
    )

    due_date: date = Field(
        description="Due date (calendar date, UTC)"
    )

    status: InvoiceStatus = Field(
        description="Invoice status (unprocessed, processing, paid, error)"
    )

    class Config:
        """SQLModel configuration"""
        json_schema_extra = {
            "example": {
                "invoice_id": "1",
                "company_id": "1",
                "issue_date": "1970-01-01",
                "amount": 10000,
                "fee": 400,
                "fee_rate": 0.04,
                "tax": 40,
                "tax_rate": 0.1,
                "total": 10440,
                "due_date": "2024-10-30",
                "status": "processing"
            }
        }


def parse_status(status: Union[str, InvoiceStatus]) -> InvoiceStatus:
    """Convert a status string to InvoiceStatus, raising InvalidStatus otherwise"""
    try:
        return InvoiceStatus(status)
    except ValueError:
        raise InvalidStatus(str(status)) from None


def compute_invoice(
    issue_date: date,
    due_date: date,
    amount: int,
    status: Union[str, InvoiceStatus],
    company_id: str = "",
) -> Invoice:
    """
    Build an unpersisted invoice with fee, tax and total derived from amount

    Args:
        issue_date: Issue date
        due_date: Due date
        amount: Billed amount in minor currency units
        status: One of InvoiceStatus values
        company_id: Company the invoice is issued to

    Returns:
        Invoice without an identifier

    Raises:
        InvalidStatus: status is not part of the vocabulary
    """
    invoice_status = parse_status(status)

    fee = int(amount * FEE_RATE)
    tax = int(fee * TAX_RATE)

    return Invoice(
        company_id=company_id,
        issue_date=issue_date,
        amount=amount,
        fee=fee,
        fee_rate=FEE_RATE,
        tax=tax,
        tax_rate=TAX_RATE,
        total=amount + fee + tax,
        due_date=due_date,
        status=invoice_status,
    )
