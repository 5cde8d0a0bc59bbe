"""Invoicing domain use cases"""
from .find_invoices import FindInvoices, row_to_invoice
from .register_invoice import RegisterInvoice
from .errors import ServiceError
from .dtos import RegisterInvoiceCommandDTO

__all__ = [
    "FindInvoices",
    "RegisterInvoice",
    "ServiceError",
    "RegisterInvoiceCommandDTO",
    "row_to_invoice",
]
