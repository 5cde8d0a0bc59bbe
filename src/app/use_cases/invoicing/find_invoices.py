"""
Find Invoices Use Case

Lists a company's unpaid invoices due between today and a horizon date.
"""
import logging
from datetime import date
from typing import List
from libs.result import Result, Return
from src.app.repositories.invoice_repository import InvoiceRepository, StorageError
from src.domain.invoice import Invoice
from src.domain.invoice_row import InvoiceRow
from .errors import ServiceError

logger = logging.getLogger(__name__)


def row_to_invoice(row: InvoiceRow) -> Invoice:
    """Map a stored row to the domain entity, trusting the stored values"""
    return Invoice(
        invoice_id=row.invoice_id,
        company_id=row.company_id,
        issue_date=row.issue_date,
        amount=row.amount,
        fee=row.fee,
        fee_rate=row.fee_rate,
        tax=row.tax,
        tax_rate=row.tax_rate,
        total=row.total,
        due_date=row.due_date,
        status=row.status,
    )


class FindInvoices:
    """
    Use case: Find invoices for a company

    Stored rows are returned as-is; fee, tax and total are not recomputed.
    An empty list is a success, never an error.
    """

    def __init__(self, invoice_repo: InvoiceRepository):
        self.invoice_repo = invoice_repo

    async def execute(self, company_id: str, due_date: date) -> Result[List[Invoice]]:
        """
        Find invoices due on or before due_date.

        Args:
            company_id: Company identifier
            due_date: Inclusive due date horizon

        Returns:
            Result[List[Invoice]]: Matching invoices or ServiceError
        """
        try:
            rows = await self.invoice_repo.find_invoices(company_id, due_date)
        except StorageError as e:
            logger.error(f"Finding invoices for company {company_id} failed: {e}")
            return Return.err(
                ServiceError.wrap(
                    code="FIND_INVOICES_FAILED",
                    message="find service error",
                    cause=e,
                )
            )

        return Return.ok([row_to_invoice(row) for row in rows])
