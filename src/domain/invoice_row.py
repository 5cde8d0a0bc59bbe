"""Stored Invoice Row

Storage-side representation of a persisted invoice.

InvoiceRecord maps the `invoice` table; dates are kept as YYYY-MM-DD text.
InvoiceRow is what the repository hands back to the use cases, with the
identifier as a string and dates parsed into calendar dates.
"""

from datetime import date
from typing import Optional
from sqlmodel import Field, Column, Index
from sqlalchemy import BigInteger, Integer, Float, String
from src.domain.base import BaseModel

DATE_FORMAT_LENGTH = 10  # YYYY-MM-DD


class InvoiceRecord(BaseModel, table=True):
    """
    Invoice table mapping

    Domain Rules:
    - invoice_id is auto-incremented by the store
    - issue_date and due_date are stored as YYYY-MM-DD text
    """

    __tablename__ = "invoice"
    __table_args__ = (
        Index('ix_invoice_company_id_due_date', 'company_id', 'due_date'),
    )

    invoice_id: Optional[int] = Field(
        default=None,
        sa_column=Column(
            BigInteger().with_variant(Integer, "sqlite"),
            primary_key=True,
            autoincrement=True,
        ),
        description="Unique invoice identifier (auto-increment)"
    )

    company_id: str = Field(
        sa_column=Column(String(255), nullable=False),
        description="Company ID"
    )

    issue_date: str = Field(
        sa_column=Column(String(DATE_FORMAT_LENGTH), nullable=False),
        description="Issue date as YYYY-MM-DD"
    )

    amount: int = Field(
        sa_column=Column(BigInteger, nullable=False),
        description="Billed amount in minor currency units"
    )

    fee: int = Field(
        sa_column=Column(BigInteger, nullable=False),
        description="Fee derived from amount"
    )

    fee_rate: float = Field(
        sa_column=Column(Float, nullable=False),
        description="Fee rate"
    )

    tax: int = Field(
        sa_column=Column(BigInteger, nullable=False),
        description="Tax derived from fee"
    )

    tax_rate: float = Field(
        sa_column=Column(Float, nullable=False),
        description="Tax rate"
    )

    total: int = Field(
        sa_column=Column(BigInteger, nullable=False),
        description="amount + fee + tax"
    )

    due_date: str = Field(
        sa_column=Column(String(DATE_FORMAT_LENGTH), nullable=False),
        description="Due date as YYYY-MM-DD"
    )

    status: str = Field(
        sa_column=Column(String(20), nullable=False),
        description="Invoice status (unprocessed, processing, paid, error)"
    )


class InvoiceRow(BaseModel):
    """Persisted invoice as read back from the store"""

    invoice_id: str
    company_id: str
    issue_date: date
    amount: int
    fee: int
    fee_rate: float
    tax: int
    tax_rate: float
    total: int
    due_date: date
    status: str
