"""Tests for the access policy table."""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import pytest

from app.errors import Forbidden, Unauthenticated
from app.services.policy import CONTENT_RESOURCES, Operation, Requirement, authorize, requirement_for
from app.services.tokens import TokenPayload


def principal(role: str) -> TokenPayload:
    return TokenPayload(
        user_id=uuid4(),
        email=f"{role}@example.com",
        role=role,
        exp=datetime.now(timezone.utc) + timedelta(hours=1),
    )


@pytest.mark.parametrize("resource", CONTENT_RESOURCES)
def test_content_reads_are_public(resource: str) -> None:
    assert authorize(None, resource, Operation.LIST) is None
    assert authorize(None, resource, Operation.READ) is None


@pytest.mark.parametrize("resource", CONTENT_RESOURCES)
@pytest.mark.parametrize("operation", [Operation.CREATE, Operation.UPDATE, Operation.DELETE])
def test_content_mutations_require_admin(resource: str, operation: Operation) -> None:
    with pytest.raises(Unauthenticated):
        authorize(None, resource, operation)
    with pytest.raises(Forbidden):
        authorize(principal("student"), resource, operation)

    admin = principal("admin")
    assert authorize(admin, resource, operation) is admin


def test_public_operation_passes_principal_through() -> None:
    student = principal("student")
    assert authorize(student, "notes", Operation.LIST) is student


def test_profile_mutations_only_need_authentication() -> None:
    student = principal("student")
    for operation in (Operation.UPDATE, Operation.CHANGE_PASSWORD, Operation.DEACTIVATE):
        assert requirement_for("users", operation) is Requirement.AUTHENTICATED
        assert authorize(student, "users", operation) is student
        with pytest.raises(Unauthenticated):
            authorize(None, "users", operation)


def test_unknown_pair_denied() -> None:
    with pytest.raises(Forbidden):
        authorize(principal("admin"), "users", Operation.DELETE)
    with pytest.raises(Forbidden):
        authorize(None, "payments", Operation.LIST)
