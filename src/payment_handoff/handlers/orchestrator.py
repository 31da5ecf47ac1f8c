"""
Transaction orchestration around an external authorization flow.

This module ties the request pipeline together:
- Validation (all violations collected, attempt rejected before delegation)
- Normalization
- Redacted diagnostic logging
- Delegation to the injected authorizer
- Completion handshake (exactly one callback per resolved attempt)
"""

import inspect
import traceback
from typing import Any, Awaitable, Callable

import structlog

from payment_handoff.authorizers.base import PaymentAuthorizer
from payment_handoff.config import Settings, settings as default_settings
from payment_handoff.domain.normalization import normalize_request
from payment_handoff.domain.redaction import mask_email, scrub_text
from payment_handoff.domain.state_machine import AttemptState, AttemptTracker
from payment_handoff.domain.validation import validate_payment_request
from payment_handoff.logging_config import SafeLogger
from payment_handoff.models import (
    AuthorizationLaunchError,
    AuthorizationOutcome,
    NormalizedRequest,
    PaymentRequest,
    PaymentValidationError,
    TransactionOutcome,
)

SOURCE_TAG = "payment_handoff.orchestrator"

CompletionCallback = Callable[[], Awaitable[None] | None]


class TransactionOrchestrator:
    """
    Runs one payment attempt per ``initiate`` call.

    The orchestrator holds no per-attempt state, so one instance can serve
    concurrent attempts.

    Args:
        authorizer: Authorization flow implementation (see AuthorizerFactory)
        settings: Settings providing currency and callback defaults
        logger: Structured logger port; only the masked email is ever logged
    """

    def __init__(
        self,
        authorizer: PaymentAuthorizer,
        settings: Settings | None = None,
        logger: Any = None,
    ) -> None:
        self.authorizer = authorizer
        self.settings = settings or default_settings
        self.logger = logger or structlog.get_logger(SOURCE_TAG)

    async def initiate(
        self,
        request: PaymentRequest,
        context: Any,
        *,
        on_completed: CompletionCallback | None = None,
        on_not_completed: CompletionCallback | None = None,
    ) -> AuthorizationOutcome:
        """
        Validate, normalize and hand a payment request to the authorizer.

        Args:
            request: Caller-supplied payment request
            context: Presentation context passed through to the authorizer
            on_completed: Zero-argument callback fired when the flow completes
            on_not_completed: Zero-argument callback fired when it does not

        Returns:
            The authorizer's AuthorizationOutcome, unchanged

        Raises:
            PaymentValidationError: Request failed validation; authorizer not called
            Exception: Whatever the authorizer raised while launching, unchanged

        Error Handling:
            - Validation failure → raised, no callback
            - Launch failure → logged at error, re-raised, no callback
            - Metadata conversion failure → warning only, attempt proceeds
            - NOT_COMPLETED → on_not_completed, never an exception
        """
        log = SafeLogger(self.logger)
        tracker = AttemptTracker(request.reference, log)

        # Step 1: Validate
        tracker.advance(AttemptState.VALIDATING)
        violations = validate_payment_request(request, context)

        if violations:
            tracker.advance(AttemptState.REJECTED)
            log.warning(
                "payment_validation_failed",
                source=SOURCE_TAG,
                platform=self.authorizer.platform,
                violations=violations,
            )
            raise PaymentValidationError(violations)

        # Step 2: Normalize
        normalized = normalize_request(request, settings=self.settings, log=log)
        tracker.advance(AttemptState.NORMALIZED)

        # Step 3: Diagnostic logging
        log.info(
            "payment_initiating",
            source=SOURCE_TAG,
            platform=self.authorizer.platform,
            reference=normalized.reference,
        )
        log.debug(
            "payment_details",
            source=SOURCE_TAG,
            platform=self.authorizer.platform,
            masked_email=mask_email(normalized.customer_email),
            amount=normalized.amount,
            currency=normalized.currency,
            reference=normalized.reference,
            has_metadata=normalized.has_metadata,
        )

        # Step 4: Delegate
        tracker.advance(AttemptState.DELEGATING)
        try:
            outcome = await self.authorizer.authorize(normalized.to_bundle(), context)
            if not isinstance(outcome, AuthorizationOutcome):
                raise AuthorizationLaunchError(
                    f"{type(self.authorizer).__name__} returned {type(outcome).__name__}, "
                    "expected AuthorizationOutcome"
                )
        except Exception as e:
            tracker.advance(AttemptState.LAUNCH_FAILED)
            # Error text comes from third-party code and may embed the request
            stack = "".join(traceback.format_exception(type(e), e, e.__traceback__))
            log.error(
                "payment_launch_failed",
                source=SOURCE_TAG,
                platform=self.authorizer.platform,
                reference=normalized.reference,
                error=_scrub(str(e), normalized),
                error_type=type(e).__name__,
                stack=_scrub(stack, normalized),
            )
            raise

        tracker.advance(AttemptState.AWAITING_OUTCOME)

        # Step 5: Completion handshake
        if outcome.status == TransactionOutcome.COMPLETED:
            tracker.advance(AttemptState.COMPLETED)
            log.info(
                "payment_completed",
                source=SOURCE_TAG,
                platform=self.authorizer.platform,
                reference=normalized.reference,
            )
            await _fire(on_completed)
        else:
            tracker.advance(AttemptState.NOT_COMPLETED)
            log.warning(
                "payment_not_completed",
                source=SOURCE_TAG,
                platform=self.authorizer.platform,
                reference=normalized.reference,
            )
            await _fire(on_not_completed)

        return outcome


def _scrub(text: str, normalized: NormalizedRequest) -> str:
    return scrub_text(
        text,
        email=normalized.customer_email,
        credential=normalized.auth_credential,
    )


async def _fire(callback: CompletionCallback | None) -> None:
    if callback is None:
        return
    result = callback()
    if inspect.isawaitable(result):
        await result

