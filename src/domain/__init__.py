from .base import BaseModel
from .invoice import (
    FEE_RATE,
    TAX_RATE,
    Invoice,
    InvoiceStatus,
    InvalidStatus,
    compute_invoice,
    parse_status,
)
from .invoice_row import InvoiceRecord, InvoiceRow

__all__ = [
    "BaseModel",
    "FEE_RATE",
    "TAX_RATE",
    "Invoice",
    "InvoiceStatus",
    "InvalidStatus",
    "compute_invoice",
    "parse_status",
    "InvoiceRecord",
    "InvoiceRow",
]
