"""Custom exceptions for the payment hand-off layer."""


class PaymentHandoffError(Exception):
    """Base exception for payment hand-off errors."""

    pass


class PaymentValidationError(PaymentHandoffError, ValueError):
    """
    Raised when a PaymentRequest fails one or more validation rules.

    This is raised BEFORE the authorization flow is reached. The caller can
    correct the request and resubmit it. All violations are collected, so the
    caller sees every problem at once.
    """

    def __init__(self, violations: list[str]) -> None:
        self.violations = list(violations)
        super().__init__(f"Payment validation failed: {', '.join(self.violations)}")


class AuthorizationLaunchError(PaymentHandoffError):
    """
    Raised when an authorization flow cannot be started.

    Examples:
    - The presentation context cannot present the flow
    - The authorizer returned something that is not an AuthorizationOutcome
    - A scripted launch failure in the mock authorizer

    The attempt ends without either completion callback firing. The caller
    may retry with a new request.
    """

    pass


class InvalidTransitionError(PaymentHandoffError, ValueError):
    """Raised when an attempt moves between states the state machine forbids."""

    def __init__(self, current: str, new: str) -> None:
        self.current = current
        self.new = new
        super().__init__(f"Invalid transition: {current} -> {new}")
