"""Pytest configuration and shared fixtures for all tests.

This module provides shared test fixtures including:
- A valid payment request and settings instance
- A fake presentation context that scripts checkout screen behaviour
- A recorder for completion callbacks
"""

import pytest

from payment_handoff.config import Settings
from payment_handoff.models import PaymentRequest


class FakePresentationContext:
    """
    Presentation context double.

    ``signals`` lists what the checkout screen reports while shown
    ("completed" / "not_completed"); ``result`` is what ``present`` returns
    on dismissal; ``error`` makes ``present`` raise instead.
    """

    def __init__(self, signals=None, result=None, error=None):
        self.signals = list(signals or [])
        self.result = result
        self.error = error
        self.presented = []

    async def present(self, bundle, *, on_completed, on_not_completed):
        self.presented.append(bundle)
        if self.error is not None:
            raise self.error
        for signal in self.signals:
            if signal == "completed":
                on_completed()
            else:
                on_not_completed()
        return self.result


class CallbackRecorder:
    """Counts how often each completion callback fired."""

    def __init__(self):
        self.completed = 0
        self.not_completed = 0

    def on_completed(self):
        self.completed += 1

    def on_not_completed(self):
        self.not_completed += 1


@pytest.fixture
def test_settings():
    """Settings with deterministic defaults (ignores the environment)."""
    return Settings(
        default_currency="NGN",
        default_callback_url="https://example.com/api/payment/callback",
    )


@pytest.fixture
def valid_request():
    """A request that passes every validation rule."""
    return PaymentRequest(
        customer_email="  Customer.Name@Example.COM ",
        amount="2500.00",
        reference=" ref_12345 ",
        auth_credential="sk_live_abc123",
        currency="USD",
        plan="PLN_monthly",
        metadata={"order_id": "order-123", "items": 2},
    )


@pytest.fixture
def make_context():
    """Factory for scripted presentation contexts."""
    return FakePresentationContext


@pytest.fixture
def presentation_context():
    """Presentation context whose screen reports completion."""
    return FakePresentationContext(signals=["completed"], result="closed")


@pytest.fixture
def callbacks():
    return CallbackRecorder()
