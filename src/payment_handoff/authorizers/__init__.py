"""
Authorization flow integrations.

- base.PaymentAuthorizer: Abstract interface that all authorizers implement
- presentation_authorizer.PresentationAuthorizer: Flow shown through a presentation context (mobile)
- mock_authorizer.MockAuthorizer: Scripted authorizer for tests
- factory: Configuration-based authorizer selection
"""

from payment_handoff.authorizers.base import PaymentAuthorizer
from payment_handoff.authorizers.factory import AuthorizerFactory, get_authorizer
from payment_handoff.authorizers.mock_authorizer import MockAuthorizer
from payment_handoff.authorizers.presentation_authorizer import (
    PresentationAuthorizer,
    PresentationContext,
)

__all__ = [
    "AuthorizerFactory",
    "MockAuthorizer",
    "PaymentAuthorizer",
    "PresentationAuthorizer",
    "PresentationContext",
    "get_authorizer",
]
