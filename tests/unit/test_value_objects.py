"""Unit tests for domain value objects."""

from uuid import uuid4

import pytest

from rolegate.domain.entities import Permission
from rolegate.domain.exceptions import ValidationError
from rolegate.domain.value_objects import (
    UNSPECIFIED,
    AccessCriteria,
    AllOf,
    AnyOf,
    PermissionKey,
    ResolvedIdentity,
)


def test_permission_key_canonical_form() -> None:
    assert str(PermissionKey("proposal", "read")) == "proposal:read"
    perm = Permission(id=uuid4(), resource="ai_analysis", action="create")
    assert perm.key == "ai_analysis:create"


def test_permission_key_parse() -> None:
    assert PermissionKey.parse("billing:manage") == PermissionKey("billing", "manage")


@pytest.mark.parametrize("bad", ["", "proposal", ":read", "proposal:"])
def test_permission_key_parse_rejects_malformed(bad: str) -> None:
    with pytest.raises(ValidationError):
        PermissionKey.parse(bad)


def test_identity_claims_are_sorted_lists() -> None:
    identity = ResolvedIdentity.of(
        roles=["user", "admin"], permissions=["proposal:read", "billing:manage"]
    )
    assert identity.to_claims() == {
        "roles": ["admin", "user"],
        "permissions": ["billing:manage", "proposal:read"],
    }


def test_identity_from_claims_reads_back() -> None:
    identity = ResolvedIdentity.of(roles=["user"], permissions=["proposal:read"])
    assert ResolvedIdentity.from_claims({"sub": "u", **identity.to_claims()}) == identity


def test_identity_from_unenriched_claims_is_none() -> None:
    assert ResolvedIdentity.from_claims({"sub": "u"}) is None
    assert ResolvedIdentity.from_claims(None) is None


def test_identity_from_malformed_claims_is_empty() -> None:
    identity = ResolvedIdentity.from_claims({"roles": "admin", "permissions": [1, None]})
    assert identity == ResolvedIdentity.empty()


def test_criteria_default_is_unrestricted() -> None:
    criteria = AccessCriteria()
    assert criteria.roles is UNSPECIFIED
    assert criteria.permissions is UNSPECIFIED
    assert criteria.is_unrestricted


def test_from_props_keeps_empty_list_as_explicit_criterion() -> None:
    criteria = AccessCriteria.from_props(roles=[])
    assert criteria.roles == AnyOf()
    assert not criteria.is_unrestricted


def test_any_of_and_all_of_are_distinct() -> None:
    assert AnyOf("a") != AllOf("a")
    assert AllOf("a", "b") == AllOf("a", "b")
