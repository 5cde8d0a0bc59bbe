"""RegisterInvoice Use Case

Computes a new invoice and persists it.
"""

import logging
from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.invoice_repository import InvoiceRepository, StorageError
from src.domain.invoice import Invoice, compute_invoice
from .dtos import RegisterInvoiceCommandDTO
from .errors import ServiceError
from .find_invoices import row_to_invoice

logger = logging.getLogger(__name__)


class RegisterInvoice:
    """
    Use Case: Register a new invoice for a company

    Business Rules:
    1. fee, tax and total are derived from amount by the domain
    2. An unknown status raises InvalidStatus before the store is touched
    3. The store assigns invoice_id
    4. The stored row is authoritative for total

    Flow:
    1. Compute invoice
    2. Insert invoice row
    3. Commit transaction (rollback on any failure)
    4. Return invoice rebuilt from the stored row
    """

    def __init__(
        self,
        uow: UnitOfWork,
        invoice_repo: InvoiceRepository,
    ):
        self.uow = uow
        self.invoice_repo = invoice_repo

    async def execute(self, command: RegisterInvoiceCommandDTO) -> Result[Invoice]:
        """
        Execute invoice registration

        Args:
            command: RegisterInvoiceCommandDTO with company, dates, amount, status

        Returns:
            Result[Invoice]: Persisted invoice or ServiceError

        Raises:
            InvalidStatus: command.status is not a known status
        """
        # Step 1: Compute fee, tax and total
        invoice = compute_invoice(
            issue_date=command.issue_date,
            due_date=command.due_date,
            amount=command.amount,
            status=command.status,
            company_id=command.company_id,
        )

        try:
            # Step 2: Insert
            row = await self.invoice_repo.insert_invoice(command.company_id, invoice)

            # Step 3: Commit transaction
            await self.uow.commit()

        except StorageError as e:
            try:
                await self.uow.rollback()
            except StorageError as rollback_error:
                logger.error(f"Rollback after failed insert for company {command.company_id} failed: {rollback_error}")
            logger.error(f"Registering invoice for company {command.company_id} failed: {e}")
            return Return.err(
                ServiceError.wrap(
                    code="INSERT_INVOICE_FAILED",
                    message="insert error",
                    cause=e,
                )
            )

        # Step 4: Build response from the stored row
        return Return.ok(row_to_invoice(row))
