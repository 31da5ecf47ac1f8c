"""
Mock authorization flow for tests and local development.

Outcomes are scripted by payment reference, the same way test cards script a
gateway sandbox. Unknown references fall back to ``default_response``.
"""

import asyncio
from collections import deque
from typing import Any

import structlog

from payment_handoff.authorizers.base import PaymentAuthorizer
from payment_handoff.logging_config import SafeLogger
from payment_handoff.models import (
    AuthorizationBundle,
    AuthorizationLaunchError,
    AuthorizationOutcome,
)

logger = SafeLogger(structlog.get_logger(__name__))

TEST_REFERENCE_BEHAVIORS = {
    "ref_completed": {
        "type": "completed",
        "description": "User paid successfully",
    },
    "ref_cancelled": {
        "type": "not_completed",
        "description": "User closed the checkout",
    },
    "ref_declined": {
        "type": "not_completed",
        "description": "Provider declined the payment",
    },
    "ref_launch_failure": {
        "type": "launch_failure",
        "description": "Checkout could not be opened",
    },
}

_VALID_RESPONSES = {"completed", "not_completed"}

MAX_RECORDED_CALLS = 100


class MockAuthorizer(PaymentAuthorizer):
    """
    Mock authorizer that never presents anything.

    Args:
        config: Configuration dictionary with optional keys:
            - default_response: Outcome for unscripted references ("completed" or "not_completed")
            - latency_ms: Simulated flow duration in milliseconds
            - reference_behaviors: Override default reference behaviors with custom mapping
    """

    name = "mock"
    platform = "test"

    def __init__(
        self,
        config: dict[str, Any] | None = None,
        default_response: str = "completed",
        latency_ms: int = 0,
    ) -> None:
        self.config = config or {}
        self.default_response = self.config.get("default_response", default_response)
        self.latency_ms = self.config.get("latency_ms", latency_ms)
        self.reference_behaviors = self.config.get("reference_behaviors", TEST_REFERENCE_BEHAVIORS)
        # Most recent bundles only, for assertions in tests
        self.calls: deque[AuthorizationBundle] = deque(maxlen=MAX_RECORDED_CALLS)

        if self.default_response not in _VALID_RESPONSES:
            raise ValueError(
                f"Unknown default_response: {self.default_response}. "
                f"Expected one of: {', '.join(sorted(_VALID_RESPONSES))}"
            )

        logger.info(
            "mock_authorizer_initialized",
            default_response=self.default_response,
            latency_ms=self.latency_ms,
            custom_behaviors=self.reference_behaviors is not TEST_REFERENCE_BEHAVIORS,
        )

    async def authorize(
        self,
        bundle: AuthorizationBundle,
        context: Any,
    ) -> AuthorizationOutcome:
        self.calls.append(bundle)

        if self.latency_ms > 0:
            await asyncio.sleep(self.latency_ms / 1000.0)

        behavior = self.reference_behaviors.get(bundle.reference)
        if behavior is None:
            behavior = {"type": self.default_response}

        behavior_type = behavior["type"]

        if behavior_type == "launch_failure":
            logger.warning(
                "mock_launch_failure",
                reference=bundle.reference,
                description=behavior.get("description", "Launch failure"),
            )
            raise AuthorizationLaunchError(
                f"Mock authorizer launch failure: {behavior.get('description', 'Simulated failure')}"
            )

        value = {
            "reference": bundle.reference,
            "status": behavior_type,
            "mock": True,
        }

        logger.info("mock_authorization_finished", reference=bundle.reference, status=behavior_type)

        if behavior_type == "completed":
            return AuthorizationOutcome.completed_with(value)
        return AuthorizationOutcome.not_completed_with(value)
