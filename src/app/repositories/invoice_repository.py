"""Invoice Repository Interface

Defines the contract for invoice persistence operations.
"""

from abc import ABC, abstractmethod
from typing import List
from datetime import date
from src.domain.invoice import Invoice
from src.domain.invoice_row import InvoiceRow


class StorageError(Exception):
    """Raised on any store fault: connectivity, constraint violation, decode failure"""
    pass


class InvoiceRepository(ABC):
    """
    Repository interface for Invoice persistence

    Implementations raise StorageError for every underlying failure.
    """

    @abstractmethod
    async def find_invoices(self, company_id: str, due_date: date) -> List[InvoiceRow]:
        """
        Retrieve unpaid invoices of a company due between today and due_date

        The lower bound is the store's current date. Rows whose status is
        'paid' are excluded. Row order is stable for an unchanged dataset.

        Args:
            company_id: Company identifier
            due_date: Inclusive due date horizon

        Returns:
            List of stored rows (empty when nothing matches)

        Raises:
            StorageError: query failed or a stored date could not be parsed
        """
        pass

    @abstractmethod
    async def insert_invoice(self, company_id: str, invoice: Invoice) -> InvoiceRow:
        """
        Persist a computed invoice

        The store assigns the identifier. The returned row is authoritative
        for total.

        Args:
            company_id: Company identifier
            invoice: Computed invoice without identifier

        Returns:
            Stored row with generated invoice_id

        Raises:
            StorageError: insert failed
        """
        pass
