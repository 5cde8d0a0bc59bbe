"""Unit tests for Invoice domain entity and computation"""

import pytest
from datetime import date
from src.domain.invoice import (
    FEE_RATE,
    TAX_RATE,
    Invoice,
    InvoiceStatus,
    InvalidStatus,
    compute_invoice,
)


class TestComputeInvoice:
    """Test fee, tax and total derivation"""

    def test_compute_invoice_for_ten_thousand(self):
        """amount=10000 -> fee=400, tax=40, total=10440"""
        # Act
        invoice = compute_invoice(
            issue_date=date(1970, 1, 1),
            due_date=date(2024, 10, 30),
            amount=10000,
            status="unprocessed",
        )

        # Assert
        assert invoice.fee == 400
        assert invoice.tax == 40
        assert invoice.total == 10440
        assert invoice.fee_rate == 0.04
        assert invoice.tax_rate == 0.10
        assert invoice.status == InvoiceStatus.UNPROCESSED

    @pytest.mark.parametrize("amount", [0, 1, 24, 25, 99, 249, 250, 1234, 5000, 99999, 10**9])
    def test_derivation_truncates_float_products(self, amount):
        """fee and tax truncate the float product toward zero"""
        invoice = compute_invoice(date(2024, 1, 1), date(2024, 2, 1), amount, "processing")

        assert invoice.fee == int(amount * FEE_RATE)
        assert invoice.tax == int(invoice.fee * TAX_RATE)
        assert invoice.total == amount + invoice.fee + invoice.tax

    def test_small_amount_has_no_fee(self):
        invoice = compute_invoice(date(2024, 1, 1), date(2024, 2, 1), 10, "processing")

        assert invoice.fee == 0
        assert invoice.tax == 0
        assert invoice.total == 10

    def test_computed_invoice_has_no_identifier(self):
        invoice = compute_invoice(date(2024, 1, 1), date(2024, 2, 1), 5000, "paid")

        assert invoice.invoice_id == ""

    def test_company_id_and_dates_are_kept(self):
        invoice = compute_invoice(
            date(2024, 1, 1), date(2024, 2, 1), 5000, "error", company_id="company_1"
        )

        assert invoice.company_id == "company_1"
        assert invoice.issue_date == date(2024, 1, 1)
        assert invoice.due_date == date(2024, 2, 1)

    def test_compute_is_deterministic(self):
        first = compute_invoice(date(2024, 1, 1), date(2024, 2, 1), 777, "processing")
        second = compute_invoice(date(2024, 1, 1), date(2024, 2, 1), 777, "processing")

        assert first == second


class TestInvoiceStatus:
    """Test the closed status vocabulary"""

    @pytest.mark.parametrize("status", ["unprocessed", "processing", "paid", "error"])
    def test_known_statuses_are_accepted(self, status):
        invoice = compute_invoice(date(2024, 1, 1), date(2024, 2, 1), 100, status)

        assert invoice.status.value == status

    def test_accepts_enum_member(self):
        invoice = compute_invoice(date(2024, 1, 1), date(2024, 2, 1), 100, InvoiceStatus.PAID)

        assert invoice.status == InvoiceStatus.PAID

    @pytest.mark.parametrize("status", ["", "UNKNOWN", "Paid", "cancelled", " paid"])
    def test_unknown_status_raises_invalid_status(self, status):
        with pytest.raises(InvalidStatus) as exc_info:
            compute_invoice(date(2024, 1, 1), date(2024, 2, 1), 100, status)

        assert exc_info.value.status == status

    def test_invalid_status_message_lists_vocabulary(self):
        with pytest.raises(InvalidStatus) as exc_info:
            compute_invoice(date(2024, 1, 1), date(2024, 2, 1), 100, "UNKNOWN")

        assert str(exc_info.value) == (
            "'status' must be one of [unprocessed, processing, paid, error], but got UNKNOWN"
        )

    def test_invalid_status_is_value_error(self):
        assert issubclass(InvalidStatus, ValueError)

    def test_values_in_declaration_order(self):
        assert InvoiceStatus.values() == ["unprocessed", "processing", "paid", "error"]


class TestInvoiceEntity:
    """Test Invoice construction"""

    def test_status_string_is_coerced(self):
        invoice = Invoice(
            invoice_id="7",
            company_id="1",
            issue_date=date(2024, 1, 1),
            amount=100,
            fee=4,
            tax=0,
            total=104,
            due_date=date(2024, 2, 1),
            status="processing",
        )

        assert invoice.status == InvoiceStatus.PROCESSING
        assert invoice.fee_rate == FEE_RATE
        assert invoice.tax_rate == TAX_RATE
