"""Tests for the access policy decisions."""

import pytest

from hintline.access.policy import AccessPolicy, Operation
from hintline.common.exceptions import ForbiddenError
from hintline.common.security import ActorIdentity, Role


USER = ActorIdentity(id="u1", role=Role.USER)
OTHER_USER = ActorIdentity(id="u2", role=Role.USER)
SPECIALIST = ActorIdentity(id="s1", role=Role.SUPPORT_SPECIALIST)
ADMIN = ActorIdentity(id="a1", role=Role.ADMIN)


@pytest.fixture
def policy():
    return AccessPolicy()


class TestStaffOnlyOperations:
    @pytest.mark.parametrize("operation", [Operation.VIEW_PROGRESS, Operation.SEND_HINT])
    def test_staff_allowed(self, policy, operation):
        assert policy.is_allowed(SPECIALIST, operation, target_user_id="u1")
        assert policy.is_allowed(ADMIN, operation, target_user_id="u1")

    @pytest.mark.parametrize("operation", [Operation.VIEW_PROGRESS, Operation.SEND_HINT])
    def test_user_denied_even_for_self(self, policy, operation):
        assert not policy.is_allowed(USER, operation, target_user_id="u1")
        assert not policy.is_allowed(USER, operation)


class TestListHints:
    def test_user_without_target(self, policy):
        assert policy.is_allowed(USER, Operation.LIST_OWN_HINTS)

    def test_user_with_explicit_target_denied(self, policy):
        assert not policy.is_allowed(USER, Operation.LIST_OWN_HINTS, target_user_id="u2")

    def test_staff_any_target(self, policy):
        assert policy.is_allowed(SPECIALIST, Operation.LIST_OWN_HINTS, target_user_id="u2")
        assert policy.is_allowed(ADMIN, Operation.LIST_OWN_HINTS, target_user_id="u9")


class TestMarkViewed:
    def test_owner_allowed(self, policy):
        assert policy.is_allowed(USER, Operation.MARK_VIEWED, hint_owner_id="u1")

    def test_other_user_denied(self, policy):
        assert not policy.is_allowed(OTHER_USER, Operation.MARK_VIEWED, hint_owner_id="u1")

    def test_admin_allowed_for_any_hint(self, policy):
        assert policy.is_allowed(ADMIN, Operation.MARK_VIEWED, hint_owner_id="u1")

    def test_specialist_denied(self, policy):
        assert not policy.is_allowed(SPECIALIST, Operation.MARK_VIEWED, hint_owner_id="u1")

    def test_unknown_owner_denied_for_user(self, policy):
        assert not policy.is_allowed(USER, Operation.MARK_VIEWED)


class TestAuthorize:
    def test_allowed_returns_none(self, policy):
        assert policy.authorize(SPECIALIST, Operation.SEND_HINT, target_user_id="u1") is None

    def test_denied_raises_forbidden(self, policy):
        with pytest.raises(ForbiddenError) as exc:
            policy.authorize(USER, Operation.SEND_HINT, target_user_id="u1")
        assert exc.value.code == "FORBIDDEN"
        assert exc.value.message == "Access denied."

    def test_custom_message(self, policy):
        with pytest.raises(ForbiddenError, match="role required"):
            policy.authorize(
                USER, Operation.VIEW_PROGRESS, message="Support Specialist role required",
            )
