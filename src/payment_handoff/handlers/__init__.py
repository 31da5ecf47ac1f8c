"""Payment attempt orchestration."""

from payment_handoff.handlers.orchestrator import SOURCE_TAG, TransactionOrchestrator

__all__ = ["SOURCE_TAG", "TransactionOrchestrator"]
