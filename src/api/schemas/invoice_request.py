"""Request schemas for Invoice API

Pydantic models for validating incoming HTTP requests.
Validators raise with the exact message returned to the client; fields are
checked in declaration order and the first failure is reported.
"""

from datetime import date
from pydantic import BaseModel, Field, field_validator
from src.domain.calendar_date import parse_date_only
from src.domain.invoice import InvalidStatus, InvoiceStatus, parse_status


def _parse_request_date(value, field_name: str) -> date:
    if isinstance(value, date):
        return value
    try:
        return parse_date_only(value if isinstance(value, str) else "")
    except ValueError:
        raise ValueError(f"Failed to decode {field_name} as YYYY-MM-DD") from None


class InvoiceRequestSchema(BaseModel):
    """
    Request schema for registering an invoice

    Used for POST /api/invoices endpoint.
    """

    company_id: str = Field(
        default="",
        validate_default=True,
        description="Company identifier (required, non-empty)"
    )

    issue_date: date = Field(
        default="",
        validate_default=True,
        description="Issue date as YYYY-MM-DD"
    )

    due_date: date = Field(
        default="",
        validate_default=True,
        description="Due date as YYYY-MM-DD"
    )

    status: InvoiceStatus = Field(
        default="",
        validate_default=True,
        description="One of unprocessed, processing, paid, error"
    )

    amount: int = Field(
        default=0,
        strict=True,
        description="Billed amount in minor currency units"
    )

    @field_validator('company_id')
    @classmethod
    def validate_company_id(cls, v):
        if v == "":
            raise ValueError("'company_id' mustn't be empty")
        return v

    @field_validator('issue_date', mode='before')
    @classmethod
    def validate_issue_date(cls, v):
        return _parse_request_date(v, "issue_date")

    @field_validator('due_date', mode='before')
    @classmethod
    def validate_due_date(cls, v):
        return _parse_request_date(v, "due_date")

    @field_validator('status', mode='before')
    @classmethod
    def validate_status(cls, v):
        try:
            return parse_status(v)
        except InvalidStatus as e:
            raise ValueError(str(e)) from None

    class Config:
        json_schema_extra = {
            "example": {
                "company_id": "1",
                "issue_date": "1970-01-01",
                "amount": 10000,
                "due_date": "2024-10-30",
                "status": "processing"
            }
        }
