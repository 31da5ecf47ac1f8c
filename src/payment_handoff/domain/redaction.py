"""Masking of sensitive request fields for diagnostic logs.

Raw customer emails and credentials must never reach a log sink. The
orchestrator masks the email itself before logging; ``redact_sensitive_fields``
is installed in the structlog chain so that anything logged elsewhere under a
sensitive key is scrubbed as well.
"""

import re
from typing import Any

from structlog.types import EventDict

EMAIL_MASK = "***"
REDACTED = "[REDACTED]"

# Keys whose values are replaced outright
CREDENTIAL_KEYS = frozenset(
    {
        "auth_credential",
        "credential",
        "secret_key",
        "api_key",
        "authorization",
    }
)

# Keys whose values are run through mask_email
EMAIL_KEYS = frozenset({"email", "customer_email"})


def mask_email(email: str) -> str:
    """
    Mask an email address for secure logging.

    Keeps at most the first three characters of the local part and the full
    domain, e.g. ``abcdef@domain.io`` becomes ``abc***@domain.io``.

    Args:
        email: Normalized email address

    Returns:
        Masked representation, or ``"***"`` when no safe form can be derived
    """
    if not isinstance(email, str) or len(email) <= 3:
        return EMAIL_MASK

    parts = email.split("@")
    if len(parts) != 2:
        return EMAIL_MASK

    username, domain = parts
    if not username:
        return EMAIL_MASK

    if len(username) <= 3:
        return f"{username[0]}{EMAIL_MASK}@{domain}"

    return f"{username[:3]}{EMAIL_MASK}@{domain}"


def scrub_text(text: str, email: str | None = None, credential: str | None = None) -> str:
    """
    Remove a known email and credential from free text such as an error message.

    The email is matched case-insensitively, so caller-supplied spellings of a
    normalized address are caught too.
    """
    if credential:
        text = text.replace(credential, REDACTED)
    if email:
        text = re.sub(re.escape(email), mask_email(email), text, flags=re.IGNORECASE)
    return text


def redact_sensitive_fields(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
    """Scrub credential and email values from a structlog event."""
    for key in list(event_dict):
        lowered = key.lower()
        if lowered in CREDENTIAL_KEYS:
            event_dict[key] = REDACTED
        elif lowered in EMAIL_KEYS:
            event_dict[key] = mask_email(event_dict[key])
    return event_dict
