"""Tests for the payer input field checks."""

import logging

from paymenthub.domain.validation import (
    check_amount,
    check_card_number,
    check_email,
    check_tax_id,
    validate_payer_input,
)


class TestFieldChecks:
    def test_valid_amount(self):
        check = check_amount(100.5, "brl")

        assert check.passed
        assert check.field_name == "amount"
        assert check.message == "Amount R$ 100,50"
        assert check.details["cents"] == 10050
        assert check.details["currency"] == "BRL"
        assert check.details["amount"] == "100.50"

    def test_negative_amount(self):
        check = check_amount(-1)

        assert not check.passed
        assert check.error_code == "INVALID_AMOUNT"
        assert check.message == "Amount cannot be negative"

    def test_amount_too_large(self):
        check = check_amount(1e300)

        assert not check.passed
        assert check.error_code == "INVALID_AMOUNT"
        assert check.message == "Amount too large"

    def test_unknown_currency(self):
        check = check_amount(10, "XYZ")

        assert not check.passed
        assert check.error_code == "UNSUPPORTED_CURRENCY"

    def test_valid_tax_id_details_are_masked(self):
        check = check_tax_id("123.456.789-09")

        assert check.passed
        assert check.message == "Valid CPF"
        assert check.details == {"kind": "cpf", "masked": "***.456.789-09"}

    def test_invalid_tax_id(self):
        check = check_tax_id("123.456.789-00", field_name="payer_document")

        assert not check.passed
        assert check.field_name == "payer_document"
        assert check.error_code == "INVALID_DOCUMENT"

    def test_valid_card_details_are_masked(self):
        check = check_card_number("4111 1111 1111 1111")

        assert check.passed
        assert check.message == "Valid Visa card ending in 1111"
        assert "4111111111111111" not in str(check.details)
        assert check.details["masked"] == "************1111"

    def test_invalid_card(self):
        check = check_card_number("4111111111111112")

        assert not check.passed
        assert check.error_code == "INVALID_CARD_NUMBER"

    def test_email(self):
        assert check_email("john@example.com").details == {
            "masked": "j***@example.com",
            "disposable": False,
        }
        assert check_email("nope").error_code == "INVALID_EMAIL"


class TestValidatePayerInput:
    def test_all_fields_valid(self):
        result = validate_payer_input(
            amount="250.00",
            currency="BRL",
            document="11.222.333/0001-81",
            card_number="5555555555554444",
            email="finance@example.com",
        )

        assert result.all_passed
        assert len(result.checks) == 4
        assert result.failed_fields == []
        assert result.errors_by_field() == {}

    def test_collects_every_failure(self):
        result = validate_payer_input(
            amount=-5,
            document="111.111.111-11",
            card_number="1234",
            email="john@example.com",
        )

        assert not result.all_passed
        assert result.failed_fields == ["amount", "document", "card_number"]
        assert set(result.errors_by_field()) == {"amount", "document", "card_number"}

    def test_missing_fields_are_skipped(self):
        result = validate_payer_input(document="123.456.789-09")

        assert [c.field_name for c in result.checks] == ["document"]
        assert result.all_passed

    def test_empty_input_passes(self):
        assert validate_payer_input().all_passed

    def test_logs_never_contain_raw_numbers(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="paymenthub"):
            validate_payer_input(
                document="123.456.789-09",
                card_number="4111111111111111",
            )
            validate_payer_input(card_number="4111111111111112")

        assert "Payer input valid" in caplog.text
        assert "Payer input rejected" in caplog.text
        assert "4111111111111111" not in caplog.text
        assert "4111111111111112" not in caplog.text
        assert "12345678909" not in caplog.text
