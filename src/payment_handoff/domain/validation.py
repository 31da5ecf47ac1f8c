"""
Validation of payment requests before hand-off.

Every rule is checked independently and all violations are returned together,
in a fixed field order: email, amount, reference, credential, currency,
presentation context. Nothing here raises; an empty list is the only success
signal.
"""

import re
from decimal import Decimal, InvalidOperation
from typing import Any

from payment_handoff.models import PaymentRequest

# Simplified RFC 5322 pattern
EMAIL_PATTERN = re.compile(r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$")

# Plain decimal or scientific notation, optional sign
NUMERIC_PATTERN = re.compile(r"^[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?$")

# Secret-tier credentials only; public keys (pk_...) cannot start a flow
SECRET_KEY_PREFIX = "sk_"

MIN_REFERENCE_LENGTH = 5
CURRENCY_CODE_LENGTH = 3


def is_valid_email(email: str) -> bool:
    """Check an email address against the simplified RFC 5322 pattern."""
    return EMAIL_PATTERN.match(email.strip()) is not None


def parse_amount(amount: str) -> Decimal | None:
    """
    Parse an amount string as a finite decimal.

    Returns:
        The parsed value, or None when the string is not numeric
    """
    candidate = amount.strip()
    if not NUMERIC_PATTERN.match(candidate):
        return None
    try:
        value = Decimal(candidate)
    except InvalidOperation:
        return None
    return value if value.is_finite() else None


def validate_payment_request(request: PaymentRequest, context: Any) -> list[str]:
    """
    Validate a payment request and its presentation context.

    Args:
        request: Caller-supplied payment request
        context: Presentation context the authorization flow is anchored to

    Returns:
        Ordered list of human-readable violations (empty if valid)
    """
    errors: list[str] = []

    # Email validation
    if not request.customer_email:
        errors.append("Customer email is required")
    elif not is_valid_email(request.customer_email):
        errors.append("Invalid email format")

    # Amount validation
    if not request.amount:
        errors.append("Amount is required")
    else:
        numeric_amount = parse_amount(request.amount)
        if numeric_amount is None:
            errors.append("Amount must be numeric")
        elif numeric_amount <= 0:
            errors.append("Amount must be greater than zero")

    # Reference validation
    if not request.reference:
        errors.append("Payment reference is required")
    elif len(request.reference) < MIN_REFERENCE_LENGTH:
        errors.append(f"Reference must be at least {MIN_REFERENCE_LENGTH} characters")

    # Credential validation
    if not request.auth_credential:
        errors.append("Secret key is required")
    elif not request.auth_credential.startswith(SECRET_KEY_PREFIX):
        errors.append("Invalid secret key format")

    # Currency validation
    if request.currency and len(request.currency) != CURRENCY_CODE_LENGTH:
        errors.append("Currency code must be 3 characters (e.g., NGN, USD)")

    # Context validation
    if context is None:
        errors.append("Presentation context is required to launch authorization")

    return errors
