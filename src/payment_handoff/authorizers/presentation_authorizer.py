"""
Authorization flow presented through a caller-supplied presentation context.

This is the mobile variant: the context pushes a checkout screen, the screen
reports ``on_completed`` or ``on_not_completed`` while it is shown, and the
``present`` coroutine returns once the screen is dismissed. Whatever the
screen reports, the result collapses into one AuthorizationOutcome.
"""

from typing import Any, Awaitable, Callable, Protocol, runtime_checkable

import structlog

from payment_handoff.models import (
    AuthorizationBundle,
    AuthorizationLaunchError,
    AuthorizationOutcome,
    TransactionOutcome,
)
from payment_handoff.authorizers.base import PaymentAuthorizer
from payment_handoff.logging_config import SafeLogger

# Logs from here run inside a payment attempt
logger = SafeLogger(structlog.get_logger(__name__))


@runtime_checkable
class PresentationContext(Protocol):
    """Anything able to display an authorization flow and wait for its dismissal."""

    def present(
        self,
        bundle: AuthorizationBundle,
        *,
        on_completed: Callable[[], None],
        on_not_completed: Callable[[], None],
    ) -> Awaitable[Any]:
        ...


class _OutcomeLatch:
    """Keeps the first signal reported by a presentation and ignores the rest."""

    def __init__(self, reference: str) -> None:
        self.reference = reference
        self.status: TransactionOutcome | None = None

    def signal(self, status: TransactionOutcome) -> None:
        if self.status is not None:
            logger.warning(
                "authorization_signal_ignored",
                reference=self.reference,
                signal=status.value,
                recorded=self.status.value,
            )
            return
        self.status = status

    def completed(self) -> None:
        self.signal(TransactionOutcome.COMPLETED)

    def not_completed(self) -> None:
        self.signal(TransactionOutcome.NOT_COMPLETED)


class PresentationAuthorizer(PaymentAuthorizer):
    """
    Authorizer that delegates to ``context.present``.

    A presentation that is dismissed without reporting a signal is treated as
    NOT_COMPLETED (the user closed the checkout).
    """

    name = "presentation"
    platform = "mobile"

    def __init__(self, config: dict[str, Any] | None = None) -> None:
        self.config = config or {}

    async def authorize(
        self,
        bundle: AuthorizationBundle,
        context: Any,
    ) -> AuthorizationOutcome:
        present = getattr(context, "present", None)
        if not callable(present):
            raise AuthorizationLaunchError(
                f"Presentation context {type(context).__name__} cannot present an authorization flow"
            )

        latch = _OutcomeLatch(bundle.reference)

        logger.debug(
            "presentation_starting",
            reference=bundle.reference,
            context_type=type(context).__name__,
        )

        value = await present(
            bundle,
            on_completed=latch.completed,
            on_not_completed=latch.not_completed,
        )

        if latch.status is None:
            logger.info("presentation_dismissed_without_signal", reference=bundle.reference)
            return AuthorizationOutcome.not_completed_with(value)

        return AuthorizationOutcome(status=latch.status, value=value)
