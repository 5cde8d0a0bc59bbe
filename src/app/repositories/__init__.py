from .invoice_repository import InvoiceRepository, StorageError

__all__ = [
    "InvoiceRepository",
    "StorageError",
]
