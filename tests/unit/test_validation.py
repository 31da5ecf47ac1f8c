"""Unit tests for payment request validation."""

import pytest

from payment_handoff.domain.validation import (
    is_valid_email,
    parse_amount,
    validate_payment_request,
)
from payment_handoff.models import PaymentRequest

CONTEXT = object()


def make_request(**overrides):
    fields = {
        "customer_email": "user@example.com",
        "amount": "1500",
        "reference": "ref_12345",
        "auth_credential": "sk_test_abc",
    }
    fields.update(overrides)
    return PaymentRequest(**fields)


class TestValidRequests:
    """Requests that must pass."""

    def test_minimal_valid_request(self):
        assert validate_payment_request(make_request(), CONTEXT) == []

    def test_full_valid_request(self, valid_request):
        assert validate_payment_request(valid_request, CONTEXT) == []

    def test_reference_of_exactly_five_characters_passes(self):
        assert validate_payment_request(make_request(reference="ab123"), CONTEXT) == []

    def test_live_secret_key_passes(self):
        assert validate_payment_request(make_request(auth_credential="sk_live_xxx"), CONTEXT) == []

    def test_empty_currency_is_treated_as_absent(self):
        assert validate_payment_request(make_request(currency=""), CONTEXT) == []

    def test_decimal_amount_passes(self):
        assert validate_payment_request(make_request(amount="10.50"), CONTEXT) == []


class TestFieldRules:
    """Each rule in isolation."""

    def test_empty_email(self):
        assert validate_payment_request(make_request(customer_email=""), CONTEXT) == [
            "Customer email is required"
        ]

    @pytest.mark.parametrize(
        "email",
        ["plainaddress", "user@domain", "user@domain.c", "user name@example.com", "@example.com"],
    )
    def test_invalid_email_format(self, email):
        assert validate_payment_request(make_request(customer_email=email), CONTEXT) == [
            "Invalid email format"
        ]

    def test_email_checked_after_trimming(self):
        assert is_valid_email("  user@example.com  ")

    def test_empty_amount(self):
        assert validate_payment_request(make_request(amount=""), CONTEXT) == ["Amount is required"]

    @pytest.mark.parametrize("amount", ["abc", "1,234.56", "12 USD", "NaN", "Infinity", "1_000", "\u0661\u0660\u0660", "\uff15"])
    def test_non_numeric_amount(self, amount):
        assert validate_payment_request(make_request(amount=amount), CONTEXT) == [
            "Amount must be numeric"
        ]

    @pytest.mark.parametrize("amount", ["0", "0.00", "-5"])
    def test_amount_not_positive(self, amount):
        assert validate_payment_request(make_request(amount=amount), CONTEXT) == [
            "Amount must be greater than zero"
        ]

    def test_empty_reference(self):
        assert validate_payment_request(make_request(reference=""), CONTEXT) == [
            "Payment reference is required"
        ]

    def test_short_reference(self):
        assert validate_payment_request(make_request(reference="ab12"), CONTEXT) == [
            "Reference must be at least 5 characters"
        ]

    @pytest.mark.parametrize("credential", [None, ""])
    def test_missing_credential(self, credential):
        assert validate_payment_request(make_request(auth_credential=credential), CONTEXT) == [
            "Secret key is required"
        ]

    def test_public_key_rejected(self):
        assert validate_payment_request(make_request(auth_credential="pk_live_xxx"), CONTEXT) == [
            "Invalid secret key format"
        ]

    @pytest.mark.parametrize("currency", ["US", "USDT"])
    def test_currency_length(self, currency):
        assert validate_payment_request(make_request(currency=currency), CONTEXT) == [
            "Currency code must be 3 characters (e.g., NGN, USD)"
        ]

    def test_currency_is_not_checked_for_letters(self):
        assert validate_payment_request(make_request(currency="123"), CONTEXT) == []

    def test_missing_context(self):
        assert validate_payment_request(make_request(), None) == [
            "Presentation context is required to launch authorization"
        ]


class TestViolationOrdering:
    """All violations are reported, in field order."""

    def test_every_field_invalid(self):
        request = PaymentRequest(
            customer_email="",
            amount="",
            reference="",
            auth_credential=None,
            currency="NAIRA",
        )

        assert validate_payment_request(request, None) == [
            "Customer email is required",
            "Amount is required",
            "Payment reference is required",
            "Secret key is required",
            "Currency code must be 3 characters (e.g., NGN, USD)",
            "Presentation context is required to launch authorization",
        ]

    def test_does_not_short_circuit(self):
        request = make_request(customer_email="bad", amount="abc", auth_credential="pk_test_1")

        assert validate_payment_request(request, CONTEXT) == [
            "Invalid email format",
            "Amount must be numeric",
            "Invalid secret key format",
        ]


class TestParseAmount:
    def test_scientific_notation(self):
        assert parse_amount("1e3") == 1000

    def test_surrounding_whitespace(self):
        assert parse_amount(" 12.5 ") is not None

    def test_garbage(self):
        assert parse_amount("12.5.1") is None
