"""Invoice API Routes

FastAPI routes for listing and registering invoices.
"""

import logging
from fastapi import APIRouter, Depends, Query, status
from sqlmodel.ext.asyncio.session import AsyncSession

from libs.result import Error
from src.api.error import ClientError
from src.api.schemas.invoice_request import InvoiceRequestSchema
from src.api.schemas.invoice_response import InvoiceResponseSchema, ListInvoicesResponseSchema
from src.app.use_cases.invoicing import FindInvoices, RegisterInvoice, RegisterInvoiceCommandDTO
from src.adapter.repositories.invoice_repository import SqlAlchemyInvoiceRepository
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.depends import get_session
from src.domain.calendar_date import parse_date_only

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/invoices", tags=["Invoices"])

ERROR_RESPONSE_EXAMPLE = {
    "application/json": {"example": {"message": "'company_id' mustn't be empty"}}
}


@router.get(
    "",
    response_model=ListInvoicesResponseSchema,
    status_code=status.HTTP_200_OK,
    responses={
        400: {"description": "Invalid query parameters", "content": ERROR_RESPONSE_EXAMPLE},
        500: {"description": "Failed to find invoices"},
    },
)
async def list_invoices(
    company_id: str = Query(default="", description="Company identifier"),
    due_date: str = Query(default="", description="Due date horizon as YYYY-MM-DD"),
    session: AsyncSession = Depends(get_session),
):
    """
    List unpaid invoices of a company due between today and `due_date`.

    **Query parameters:**
    - `company_id` (required): Company identifier
    - `due_date` (required): Inclusive horizon, YYYY-MM-DD

    **Returns:**
    - 200: `{"invoices": [...]}` (possibly empty)
    - 400: Empty company_id or unparsable due_date
    - 500: Store failure
    """
    if company_id == "":
        raise ClientError(Error(code="VALIDATION_ERROR", message="'company_id' mustn't be empty"))

    try:
        horizon = parse_date_only(due_date)
    except ValueError as e:
        logger.error(f"Failed to convert duedate parameter to date: {e}")
        raise ClientError(
            Error(code="VALIDATION_ERROR", message="Can't convert duedate parameter to date")
        )

    use_case = FindInvoices(SqlAlchemyInvoiceRepository(session))
    result = await use_case.execute(company_id, horizon)

    if result.is_err():
        logger.error(
            f"Failed to find invoices: company_id={company_id} due_date={horizon} "
            f"err={result.error}"
        )
        raise ClientError(
            Error(
                code=result.error.code,
                message="Failed to find invoices",
                reason=str(result.error),
            ),
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    return ListInvoicesResponseSchema(
        invoices=[InvoiceResponseSchema.from_invoice(invoice) for invoice in result.value]
    )


@router.post(
    "",
    response_model=InvoiceResponseSchema,
    status_code=status.HTTP_200_OK,
    responses={
        400: {"description": "Invalid request body", "content": ERROR_RESPONSE_EXAMPLE},
        500: {"description": "Failed to create invoice"},
    },
)
async def create_invoice(
    request: InvoiceRequestSchema,
    session: AsyncSession = Depends(get_session),
):
    """
    Register an invoice; fee, tax and total are computed from `amount`.

    **Example request:**
    ```json
    {
      "company_id": "1",
      "issue_date": "1970-01-01",
      "amount": 10000,
      "due_date": "2024-10-30",
      "status": "processing"
    }
    ```

    **Returns:**
    - 200: Created invoice
    - 400: Invalid body, company_id, dates or status
    - 500: Store failure
    """
    uow = SqlAlchemyUnitOfWork(session)
    invoice_repo = SqlAlchemyInvoiceRepository(session)

    command = RegisterInvoiceCommandDTO(
        company_id=request.company_id,
        issue_date=request.issue_date,
        amount=request.amount,
        due_date=request.due_date,
        status=request.status.value,
    )

    use_case = RegisterInvoice(uow, invoice_repo)
    result = await use_case.execute(command)

    if result.is_err():
        logger.error(
            f"Failed to create invoice: company_id={command.company_id} "
            f"issue_date={command.issue_date} amount={command.amount} "
            f"due_date={command.due_date} status={command.status} err={result.error}"
        )
        raise ClientError(
            Error(
                code=result.error.code,
                message="Failed to create invoice",
                reason=str(result.error),
            ),
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    return InvoiceResponseSchema.from_invoice(result.value)
