"""Domain models for the payment hand-off layer."""

from payment_handoff.models.exceptions import (
    AuthorizationLaunchError,
    InvalidTransitionError,
    PaymentHandoffError,
    PaymentValidationError,
)
from payment_handoff.models.payment import (
    AuthorizationBundle,
    AuthorizationOutcome,
    NormalizedRequest,
    PaymentRequest,
    TransactionOutcome,
)

__all__ = [
    "AuthorizationBundle",
    "AuthorizationLaunchError",
    "AuthorizationOutcome",
    "InvalidTransitionError",
    "NormalizedRequest",
    "PaymentHandoffError",
    "PaymentRequest",
    "PaymentValidationError",
    "TransactionOutcome",
]
