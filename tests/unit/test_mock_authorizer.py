"""Unit tests for MockAuthorizer."""

import pytest

from payment_handoff.authorizers.mock_authorizer import (
    MAX_RECORDED_CALLS,
    MockAuthorizer,
    TEST_REFERENCE_BEHAVIORS,
)
from payment_handoff.models import (
    AuthorizationBundle,
    AuthorizationLaunchError,
    TransactionOutcome,
)


def make_bundle(reference="ref_unscripted"):
    return AuthorizationBundle(
        email="user@example.com",
        reference=reference,
        currency="NGN",
        amount="100",
        callback_url="https://example.com/cb",
        credential="sk_test_1",
    )


@pytest.mark.asyncio
class TestMockAuthorizerOutcomes:
    """Scripted outcomes."""

    async def test_scripted_completed(self):
        outcome = await MockAuthorizer().authorize(make_bundle("ref_completed"), object())

        assert outcome.status == TransactionOutcome.COMPLETED
        assert outcome.completed is True
        assert outcome.value == {"reference": "ref_completed", "status": "completed", "mock": True}

    @pytest.mark.parametrize("reference", ["ref_cancelled", "ref_declined"])
    async def test_scripted_not_completed(self, reference):
        outcome = await MockAuthorizer().authorize(make_bundle(reference), object())

        assert outcome.status == TransactionOutcome.NOT_COMPLETED
        assert outcome.completed is False

    async def test_scripted_launch_failure(self):
        with pytest.raises(AuthorizationLaunchError) as exc_info:
            await MockAuthorizer().authorize(make_bundle("ref_launch_failure"), object())

        assert "Checkout could not be opened" in str(exc_info.value)

    async def test_unknown_reference_uses_default(self):
        authorizer = MockAuthorizer(default_response="not_completed")

        outcome = await authorizer.authorize(make_bundle(), object())

        assert outcome.status == TransactionOutcome.NOT_COMPLETED

    async def test_records_calls(self):
        authorizer = MockAuthorizer()
        bundle = make_bundle()

        await authorizer.authorize(bundle, object())

        assert list(authorizer.calls) == [bundle]

    async def test_recorded_calls_are_capped(self):
        authorizer = MockAuthorizer()
        bundles = [make_bundle(f"ref_{i:05d}") for i in range(MAX_RECORDED_CALLS + 5)]

        for bundle in bundles:
            await authorizer.authorize(bundle, object())

        assert len(authorizer.calls) == MAX_RECORDED_CALLS
        assert authorizer.calls[0] is bundles[5]
        assert authorizer.calls[-1] is bundles[-1]


@pytest.mark.asyncio
class TestMockAuthorizerConfig:
    """Configuration handling."""

    async def test_config_overrides_arguments(self):
        authorizer = MockAuthorizer(
            config={"default_response": "not_completed", "latency_ms": 1},
            default_response="completed",
        )

        assert authorizer.default_response == "not_completed"
        assert authorizer.latency_ms == 1

        outcome = await authorizer.authorize(make_bundle(), object())
        assert outcome.status == TransactionOutcome.NOT_COMPLETED

    async def test_custom_reference_behaviors(self):
        authorizer = MockAuthorizer(
            config={"reference_behaviors": {"ref_custom": {"type": "not_completed"}}}
        )

        assert (await authorizer.authorize(make_bundle("ref_custom"), object())).completed is False
        # Default behaviours are replaced, not merged
        assert (await authorizer.authorize(make_bundle("ref_cancelled"), object())).completed is True

    async def test_invalid_default_response(self):
        with pytest.raises(ValueError) as exc_info:
            MockAuthorizer(default_response="maybe")

        assert "Unknown default_response: maybe" in str(exc_info.value)

    async def test_default_behaviors_unchanged(self):
        assert set(TEST_REFERENCE_BEHAVIORS) == {
            "ref_completed",
            "ref_cancelled",
            "ref_declined",
            "ref_launch_failure",
        }
