"""Data Transfer Objects for Invoicing Use Cases"""

from datetime import date
from pydantic import BaseModel, Field


class RegisterInvoiceCommandDTO(BaseModel):
    """
    Command DTO for registering an invoice

    Used as input to RegisterInvoice use case. status is validated by
    the domain computation, not here.
    """

    company_id: str = Field(
        ...,
        description="Company identifier"
    )

    issue_date: date = Field(
        ...,
        description="Issue date"
    )

    amount: int = Field(
        ...,
        description="Billed amount in minor currency units"
    )

    due_date: date = Field(
        ...,
        description="Due date"
    )

    status: str = Field(
        ...,
        description="Requested status (unprocessed, processing, paid, error)"
    )

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
