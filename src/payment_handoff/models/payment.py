"""Payment hand-off domain models."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping


class TransactionOutcome(str, Enum):
    """Terminal signal of an authorization flow."""

    COMPLETED = "completed"
    NOT_COMPLETED = "not_completed"


@dataclass(frozen=True)
class PaymentRequest:
    """
    Payment initiation request as supplied by the caller.

    One instance is built per transaction attempt. The ``reference`` is the
    only continuity token between attempts; its uniqueness is the caller's
    responsibility.
    """

    customer_email: str = field(repr=False)
    amount: str
    reference: str
    callback_url: str | None = None
    auth_credential: str | None = field(default=None, repr=False)
    currency: str | None = None
    plan: str | None = None
    metadata: Mapping[Any, Any] | None = None


@dataclass(frozen=True)
class AuthorizationBundle:
    """
    Parameters handed to an authorization flow in a single call.

    The email and credential are excluded from ``repr`` so the bundle can be
    passed around without leaking them into error messages or tracebacks.
    """

    email: str = field(repr=False)
    reference: str
    currency: str
    amount: str
    callback_url: str
    credential: str = field(repr=False)
    plan: str | None = None
    metadata: dict[str, Any] | None = None


@dataclass(frozen=True)
class NormalizedRequest:
    """Canonical form of a PaymentRequest that passed validation."""

    customer_email: str = field(repr=False)
    amount: str
    reference: str
    currency: str
    callback_url: str
    auth_credential: str = field(repr=False)
    plan: str | None = None
    metadata: dict[str, Any] | None = None

    @property
    def has_metadata(self) -> bool:
        return self.metadata is not None

    def to_bundle(self) -> AuthorizationBundle:
        """Build the parameter bundle for the authorization flow."""
        return AuthorizationBundle(
            email=self.customer_email,
            reference=self.reference,
            currency=self.currency,
            amount=self.amount,
            callback_url=self.callback_url,
            credential=self.auth_credential,
            plan=self.plan,
            metadata=dict(self.metadata) if self.metadata is not None else None,
        )


@dataclass(frozen=True)
class AuthorizationOutcome:
    """
    Result of an authorization flow.

    Carries exactly one TransactionOutcome tag plus whatever continuation value
    the flow itself produced (for example the value its presentation returned
    when dismissed). Declines and cancellations are NOT exceptions; they are
    reported with status=NOT_COMPLETED.
    """

    status: TransactionOutcome
    value: Any = None

    @property
    def completed(self) -> bool:
        return self.status == TransactionOutcome.COMPLETED

    @classmethod
    def completed_with(cls, value: Any = None) -> "AuthorizationOutcome":
        return cls(status=TransactionOutcome.COMPLETED, value=value)

    @classmethod
    def not_completed_with(cls, value: Any = None) -> "AuthorizationOutcome":
        return cls(status=TransactionOutcome.NOT_COMPLETED, value=value)
