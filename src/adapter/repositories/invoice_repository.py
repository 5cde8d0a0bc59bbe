"""SQLAlchemy Invoice Repository Implementation

Implements invoice persistence using SQLAlchemy async session.
"""

from typing import List
from datetime import date
from sqlalchemy import String, cast, func
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.invoice_repository import InvoiceRepository, StorageError
from src.domain.calendar_date import format_date_only, parse_date_only
from src.domain.invoice import Invoice, InvoiceStatus, InvalidStatus, parse_status
from src.domain.invoice_row import InvoiceRecord, InvoiceRow


def parse_stored_date(value: str) -> date:
    try:
        return parse_date_only(value)
    except ValueError as e:
        raise StorageError(f"cannot parse stored date: {e}") from e


def parse_stored_status(value: str) -> str:
    try:
        return parse_status(value).value
    except InvalidStatus as e:
        raise StorageError(f"cannot parse stored status: {e}") from e


def to_row(record: InvoiceRecord) -> InvoiceRow:
    return InvoiceRow(
        invoice_id=str(record.invoice_id),
        company_id=record.company_id,
        issue_date=parse_stored_date(record.issue_date),
        amount=record.amount,
        fee=record.fee,
        fee_rate=record.fee_rate,
        tax=record.tax,
        tax_rate=record.tax_rate,
        total=record.total,
        due_date=parse_stored_date(record.due_date),
        status=parse_stored_status(record.status),
    )


class SqlAlchemyInvoiceRepository(InvoiceRepository):
    """
    SQLAlchemy implementation of InvoiceRepository

    Uses async session for database operations. Transactions are
    committed by the unit of work, not here.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def find_invoices(self, company_id: str, due_date: date) -> List[InvoiceRow]:
        """
        Retrieve unpaid invoices of a company due between today and due_date

        Args:
            company_id: Company identifier
            due_date: Inclusive due date horizon

        Returns:
            List of stored rows ordered by invoice_id
        """
        # CURRENT_DATE renders as YYYY-MM-DD on the supported backends
        today = cast(func.current_date(), String)
        statement = (
            select(InvoiceRecord)
            .where(InvoiceRecord.company_id == company_id)
            .where(InvoiceRecord.due_date.between(today, format_date_only(due_date)))
            .where(InvoiceRecord.status != InvoiceStatus.PAID.value)
            .order_by(InvoiceRecord.invoice_id)
        )
        try:
            result = await self.session.execute(statement)
            records = result.scalars().all()
        except SQLAlchemyError as e:
            raise StorageError(f"select invoices failed: {e}") from e

        return [to_row(record) for record in records]

    async def insert_invoice(self, company_id: str, invoice: Invoice) -> InvoiceRow:
        """
        Persist a computed invoice

        Args:
            company_id: Company identifier
            invoice: Computed invoice without identifier

        Returns:
            Stored row with generated invoice_id
        """
        record = InvoiceRecord(
            company_id=company_id,
            issue_date=format_date_only(invoice.issue_date),
            amount=invoice.amount,
            fee=invoice.fee,
            fee_rate=invoice.fee_rate,
            tax=invoice.tax,
            tax_rate=invoice.tax_rate,
            total=invoice.total,
            due_date=format_date_only(invoice.due_date),
            status=invoice.status.value,
        )
        try:
            self.session.add(record)
            await self.session.flush()
            await self.session.refresh(record)
        except SQLAlchemyError as e:
            raise StorageError(f"insert invoice failed: {e}") from e

        return to_row(record)
