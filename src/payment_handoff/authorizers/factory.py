"""
Authorizer factory for creating authorization flow instances.

This module provides configuration-based authorizer selection, so the
orchestrator receives exactly one platform-specific implementation at
composition time.
"""

from typing import Any

import structlog

from payment_handoff.authorizers.base import PaymentAuthorizer
from payment_handoff.authorizers.mock_authorizer import MockAuthorizer
from payment_handoff.authorizers.presentation_authorizer import PresentationAuthorizer
from payment_handoff.config import settings

logger = structlog.get_logger(__name__)


class AuthorizerFactory:
    """Registry-backed factory for authorization flow implementations."""

    # Registry of available authorizers
    _AUTHORIZERS: dict[str, type[PaymentAuthorizer]] = {
        "presentation": PresentationAuthorizer,
        "mock": MockAuthorizer,
    }

    @classmethod
    def create_authorizer(
        cls,
        authorizer_name: str,
        authorizer_config: dict[str, Any] | None = None,
    ) -> PaymentAuthorizer:
        """
        Create an authorizer instance by name.

        Args:
            authorizer_name: Name of the authorizer (e.g., "presentation", "mock")
            authorizer_config: Optional authorizer-specific configuration.
                               If not provided, uses settings from global config.

        Returns:
            PaymentAuthorizer instance

        Raises:
            ValueError: If authorizer_name is not registered
        """
        authorizer_name_lower = authorizer_name.lower()

        if authorizer_name_lower not in cls._AUTHORIZERS:
            available = ", ".join(cls.list_authorizers())
            raise ValueError(
                f"Unknown authorizer: {authorizer_name}. "
                f"Available authorizers: {available}"
            )

        authorizer_class = cls._AUTHORIZERS[authorizer_name_lower]

        if authorizer_config is None:
            authorizer_config = cls._get_default_config(authorizer_name_lower)

        logger.info(
            "authorizer_created",
            authorizer_name=authorizer_name_lower,
            authorizer_class=authorizer_class.__name__,
        )

        return authorizer_class(config=authorizer_config)

    @classmethod
    def _get_default_config(cls, authorizer_name: str) -> dict[str, Any]:
        """Get default configuration for an authorizer from settings."""
        if authorizer_name == "mock":
            return {
                "default_response": settings.authorizer.mock_default_response,
                "latency_ms": settings.authorizer.mock_latency_ms,
            }
        return {}

    @classmethod
    def register_authorizer(
        cls,
        name: str,
        authorizer_class: type[PaymentAuthorizer],
    ) -> None:
        """
        Register a new authorizer type.

        Registered classes must accept a ``config`` keyword argument.

        Example:
            AuthorizerFactory.register_authorizer("web", WebRedirectAuthorizer)
        """
        if not isinstance(authorizer_class, type) or not issubclass(authorizer_class, PaymentAuthorizer):
            raise TypeError(
                f"{getattr(authorizer_class, '__name__', authorizer_class)} must inherit from PaymentAuthorizer"
            )

        cls._AUTHORIZERS[name.lower()] = authorizer_class
        logger.info(
            "authorizer_registered",
            authorizer_name=name.lower(),
            authorizer_class=authorizer_class.__name__,
        )

    @classmethod
    def list_authorizers(cls) -> list[str]:
        return sorted(cls._AUTHORIZERS.keys())


def get_authorizer(
    authorizer_name: str | None = None,
    authorizer_config: dict[str, Any] | None = None,
) -> PaymentAuthorizer:
    """
    Convenience function to create an authorizer.

    Args:
        authorizer_name: Name of authorizer (defaults to settings.authorizer.name)
        authorizer_config: Optional authorizer-specific config

    Returns:
        PaymentAuthorizer instance
    """
    if authorizer_name is None:
        authorizer_name = settings.authorizer.name

    return AuthorizerFactory.create_authorizer(authorizer_name, authorizer_config)
