"""Response schemas for Invoice API"""

from datetime import date
from typing import List
from pydantic import BaseModel, Field
from src.domain.invoice import Invoice


class InvoiceResponseSchema(BaseModel):
    """Invoice as returned by the API"""

    issue_date: date = Field(..., description="Issue date")
    amount: int = Field(..., description="Billed amount")
    fee: int = Field(..., description="Fee")
    fee_rate: float = Field(..., description="Fee rate")
    tax: int = Field(..., description="Tax")
    tax_rate: float = Field(..., description="Tax rate")
    total: int = Field(..., description="amount + fee + tax")
    due_date: date = Field(..., description="Due date")
    status: str = Field(..., description="Invoice status")

    @classmethod
    def from_invoice(cls, invoice: Invoice) -> "InvoiceResponseSchema":
        return cls(
            issue_date=invoice.issue_date,
            amount=invoice.amount,
            fee=invoice.fee,
            fee_rate=invoice.fee_rate,
            tax=invoice.tax,
            tax_rate=invoice.tax_rate,
            total=invoice.total,
            due_date=invoice.due_date,
            status=invoice.status.value,
        )

    class Config:
        json_schema_extra = {
            "example": {
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


class ListInvoicesResponseSchema(BaseModel):
    """Invoices found for a company"""

    invoices: List[InvoiceResponseSchema] = Field(default_factory=list)
