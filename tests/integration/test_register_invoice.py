"""Integration tests for RegisterInvoice and FindInvoices use cases

Tests cover:
- Invoice registration with real database
- Create then list round trip
- Paid invoices are not listed
"""

import pytest
from datetime import date, datetime, timedelta, timezone

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from src.adapter.repositories.invoice_repository import SqlAlchemyInvoiceRepository
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.app.use_cases.invoicing import FindInvoices, RegisterInvoice, RegisterInvoiceCommandDTO
from src.domain.invoice import InvoiceStatus
from src.domain.invoice_row import InvoiceRecord


def utc_today() -> date:
    return datetime.now(timezone.utc).date()


@pytest.mark.asyncio
class TestRegisterInvoiceIntegration:
    """Integration tests with real database"""

    async def test_end_to_end_invoice_registration(self, db_session: AsyncSession):
        """
        Test complete flow: register invoice, verify database state
        """
        # Arrange
        invoice_repo = SqlAlchemyInvoiceRepository(db_session)
        uow = SqlAlchemyUnitOfWork(db_session)
        use_case = RegisterInvoice(uow, invoice_repo)

        command = RegisterInvoiceCommandDTO(
            company_id="company_1",
            issue_date=date(1970, 1, 1),
            amount=10000,
            due_date=date(2024, 10, 30),
            status="processing",
        )

        # Act
        result = await use_case.execute(command)

        # Assert
        assert result.is_ok()
        invoice = result.value
        assert invoice.invoice_id != ""
        assert invoice.total == 10440
        assert invoice.status == InvoiceStatus.PROCESSING

        record = await db_session.get(InvoiceRecord, int(invoice.invoice_id))
        assert record is not None
        assert record.company_id == "company_1"
        assert record.fee == 400
        assert record.tax == 40
        assert record.total == 10440

    async def test_round_trip_reproduces_invoice(self, db_session: AsyncSession):
        """
        Test that an invoice registered and then listed keeps all its fields
        """
        # Arrange
        invoice_repo = SqlAlchemyInvoiceRepository(db_session)
        register = RegisterInvoice(SqlAlchemyUnitOfWork(db_session), invoice_repo)
        find = FindInvoices(invoice_repo)
        due = utc_today() + timedelta(days=7)

        created = await register.execute(
            RegisterInvoiceCommandDTO(
                company_id="company_rt",
                issue_date=date(2024, 3, 1),
                amount=123456,
                due_date=due,
                status="unprocessed",
            )
        )

        # Act
        found = await find.execute("company_rt", due)

        # Assert
        assert found.is_ok()
        assert found.value == [created.value]

    async def test_paid_invoice_is_not_listed(self, db_session: AsyncSession):
        invoice_repo = SqlAlchemyInvoiceRepository(db_session)
        register = RegisterInvoice(SqlAlchemyUnitOfWork(db_session), invoice_repo)
        due = utc_today() + timedelta(days=7)

        for status in ("paid", "error"):
            await register.execute(
                RegisterInvoiceCommandDTO(
                    company_id="company_paid",
                    issue_date=date(2024, 3, 1),
                    amount=1000,
                    due_date=due,
                    status=status,
                )
            )

        found = await FindInvoices(invoice_repo).execute("company_paid", due)

        assert [invoice.status for invoice in found.value] == [InvoiceStatus.ERROR]

    async def test_every_registration_is_committed(self, db_session: AsyncSession):
        invoice_repo = SqlAlchemyInvoiceRepository(db_session)
        register = RegisterInvoice(SqlAlchemyUnitOfWork(db_session), invoice_repo)

        for amount in (100, 200, 300):
            result = await register.execute(
                RegisterInvoiceCommandDTO(
                    company_id="company_multi",
                    issue_date=date(2024, 3, 1),
                    amount=amount,
                    due_date=date(2024, 4, 1),
                    status="processing",
                )
            )
            assert result.is_ok()

        await db_session.rollback()

        stmt = select(InvoiceRecord).where(InvoiceRecord.company_id == "company_multi")
        records = (await db_session.execute(stmt)).scalars().all()
        assert sorted(record.amount for record in records) == [100, 200, 300]
        assert len({record.invoice_id for record in records}) == 3
