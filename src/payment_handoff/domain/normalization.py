"""Canonicalization of validated payment requests."""

import re
from collections.abc import Mapping
from typing import Any

import structlog

from payment_handoff.config import Settings, settings as default_settings
from payment_handoff.models import NormalizedRequest, PaymentRequest

logger = structlog.get_logger(__name__)

_NON_AMOUNT_CHARS = re.compile(r"[^0-9.]")


def normalize_email(email: str) -> str:
    return email.strip().lower()


def normalize_amount(amount: str) -> str:
    """
    Strip everything except digits and the decimal point.

    This is a syntactic strip, not a locale-aware parse:
    ``"1,234.56 USD"`` becomes ``"1234.56"``.
    """
    return _NON_AMOUNT_CHARS.sub("", amount.strip())


def convert_metadata(metadata: Any, log: Any = None) -> dict[str, Any] | None:
    """
    Re-key caller metadata into a ``dict[str, Any]``.

    Empty or missing metadata becomes None. Anything that is not a mapping
    with string keys is discarded with a warning; conversion never raises.

    Args:
        metadata: Caller-supplied metadata
        log: Logger to report conversion failures on (module logger if None)

    Returns:
        A new dict, or None when metadata is absent or unusable
    """
    if metadata is None:
        return None

    log = log or logger

    if not isinstance(metadata, Mapping):
        log.warning(
            "metadata_conversion_failed",
            reason="metadata is not a mapping",
            metadata_type=type(metadata).__name__,
        )
        return None

    if not metadata:
        return None

    bad_key_types = sorted({type(key).__name__ for key in metadata if not isinstance(key, str)})
    if bad_key_types:
        log.warning(
            "metadata_conversion_failed",
            reason="metadata keys must be strings",
            key_types=bad_key_types,
        )
        return None

    return dict(metadata)


def normalize_request(
    request: PaymentRequest,
    settings: Settings | None = None,
    log: Any = None,
) -> NormalizedRequest:
    """
    Build the canonical form of a request.

    Must only be called for requests that passed validation; the credential
    is assumed to be present.

    Args:
        request: Validated payment request
        settings: Settings providing currency and callback defaults
        log: Logger used for metadata conversion warnings

    Returns:
        NormalizedRequest ready to be handed to an authorizer
    """
    settings = settings or default_settings

    return NormalizedRequest(
        customer_email=normalize_email(request.customer_email),
        amount=normalize_amount(request.amount),
        reference=request.reference.strip(),
        currency=request.currency or settings.default_currency,
        callback_url=request.callback_url or settings.default_callback_url,
        auth_credential=request.auth_credential or "",
        plan=request.plan,
        metadata=convert_metadata(request.metadata, log=log),
    )
