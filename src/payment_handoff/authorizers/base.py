"""Base interface for authorization flows."""

from abc import ABC, abstractmethod
from typing import Any

from payment_handoff.models import AuthorizationBundle, AuthorizationOutcome


class PaymentAuthorizer(ABC):
    """
    Abstract base class for authorization flow integrations.

    Each platform (mobile navigation, web redirect, test double) implements
    this interface so the orchestrator can delegate without knowing how the
    flow is presented.
    """

    name: str = "base"
    platform: str = "unknown"

    @abstractmethod
    async def authorize(
        self,
        bundle: AuthorizationBundle,
        context: Any,
    ) -> AuthorizationOutcome:
        """
        Run the authorization flow to completion.

        The flow may suspend for as long as the user needs; no timeout is
        imposed here.

        Args:
            bundle: Normalized payment parameters and target callback URL
            context: Presentation context the flow anchors its UI to

        Returns:
            AuthorizationOutcome with either COMPLETED or NOT_COMPLETED status.

        Raises:
            AuthorizationLaunchError: If the flow could not be started.

        Note:
            Cancellations and declines are NOT exceptions - they return
            AuthorizationOutcome with status=NOT_COMPLETED.
        """
        pass
