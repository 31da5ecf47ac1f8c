"""Hand-off of validated payment requests to an external authorization flow."""

from payment_handoff.authorizers import (
    AuthorizerFactory,
    MockAuthorizer,
    PaymentAuthorizer,
    PresentationAuthorizer,
    get_authorizer,
)
from payment_handoff.handlers import TransactionOrchestrator
from payment_handoff.models import (
    AuthorizationBundle,
    AuthorizationLaunchError,
    AuthorizationOutcome,
    NormalizedRequest,
    PaymentRequest,
    PaymentValidationError,
    TransactionOutcome,
)

__all__ = [
    "AuthorizationBundle",
    "AuthorizationLaunchError",
    "AuthorizationOutcome",
    "AuthorizerFactory",
    "MockAuthorizer",
    "NormalizedRequest",
    "PaymentAuthorizer",
    "PaymentRequest",
    "PaymentValidationError",
    "PresentationAuthorizer",
    "TransactionOrchestrator",
    "TransactionOutcome",
    "get_authorizer",
]
