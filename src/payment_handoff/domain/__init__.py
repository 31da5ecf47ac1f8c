"""Pure request pipeline: validation, normalization, redaction and attempt states."""

from payment_handoff.domain.normalization import (
    convert_metadata,
    normalize_amount,
    normalize_email,
    normalize_request,
)
from payment_handoff.domain.redaction import mask_email, redact_sensitive_fields
from payment_handoff.domain.state_machine import (
    ALLOWED_TRANSITIONS,
    AttemptState,
    AttemptTracker,
    validate_transition,
)
from payment_handoff.domain.validation import is_valid_email, validate_payment_request

__all__ = [
    "ALLOWED_TRANSITIONS",
    "AttemptState",
    "AttemptTracker",
    "convert_metadata",
    "is_valid_email",
    "mask_email",
    "normalize_amount",
    "normalize_email",
    "normalize_request",
    "redact_sensitive_fields",
    "validate_payment_request",
    "validate_transition",
]
