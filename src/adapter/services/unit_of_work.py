from sqlalchemy.exc import SQLAlchemyError
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.invoice_repository import StorageError
from src.app.services.unit_of_work import UnitOfWork


class SqlAlchemyUnitOfWork(UnitOfWork):
    def __init__(self, session: AsyncSession):
        self.session = session

    async def __aenter__(self):
        return self

    async def __aexit__(self, *args):
        await self.rollback()

    async def commit(self):
        try:
            await self.session.commit()
        except SQLAlchemyError as e:
            raise StorageError(f"commit failed: {e}") from e

    async def rollback(self):
        try:
            await self.session.rollback()
        except SQLAlchemyError as e:
            raise StorageError(f"rollback failed: {e}") from e
