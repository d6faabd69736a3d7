"""API resource tests."""

from uuid import uuid4

from tests.api.conftest import auth


class TestForbidden:
    def test_forbidden_page_offers_back_and_home(self, client) -> None:
        result = client.simulate_get("/403")

        assert result.status_code == 403
        assert [a["id"] for a in result.json["actions"]] == ["back", "home"]


class TestMe:
    def test_me_requires_authentication(self, client) -> None:
        assert client.simulate_get("/v1/me").status_code == 401

    def test_me_returns_resolved_identity(self, client) -> None:
        result = client.simulate_get("/v1/me", headers=auth("plain"))

        assert result.status_code == 200
        assert result.json["user_id"] == "plain"
        assert result.json["roles"] == ["user"]
        assert "proposal:read" in result.json["permissions"]
        assert "user:manage" not in result.json["permissions"]

    def test_permission_check(self, client) -> None:
        result = client.simulate_get(
            "/v1/me/permissions/check",
            params={"resource": "proposal", "action": "read"},
            headers=auth("plain"),
        )

        assert result.status_code == 200
        assert result.json["permission"] == "proposal:read"
        assert result.json["allowed"] is True

    def test_permission_check_unknown_permission_denies(self, client) -> None:
        result = client.simulate_get(
            "/v1/me/permissions/check",
            params={"resource": "nothing", "action": "here"},
            headers=auth("plain"),
        )

        assert result.json["allowed"] is False

    def test_permission_check_requires_resource_and_action(self, client) -> None:
        result = client.simulate_get(
            "/v1/me/permissions/check",
            params={"resource": "proposal"},
            headers=auth("plain"),
        )

        assert result.status_code == 400

    def test_permission_check_rejects_bad_workspace(self, client) -> None:
        result = client.simulate_get(
            "/v1/me/permissions/check",
            params={"resource": "proposal", "action": "read", "workspace_id": "nope"},
            headers=auth("plain"),
        )

        assert result.status_code == 400


class TestUserRoles:
    def test_admin_assigns_role(self, client) -> None:
        result = client.simulate_post(
            "/v1/users/plain/roles", json={"role": "premium"}, headers=auth("boss")
        )

        assert result.status_code == 201
        assert result.json["role"] == "premium"

        me = client.simulate_get("/v1/me", headers=auth("plain"))
        assert me.json["roles"] == ["premium", "user"]

    def test_assign_twice_keeps_single_binding(self, client) -> None:
        workspace_id = str(uuid4())
        for _ in range(2):
            result = client.simulate_post(
                "/v1/users/plain/roles",
                json={"role": "premium", "workspace_id": workspace_id},
                headers=auth("boss"),
            )
            assert result.status_code == 201

        listing = client.simulate_get("/v1/users/plain/roles", headers=auth("boss"))
        premium = [i for i in listing.json["items"] if i["role"] == "premium"]
        assert len(premium) == 1
        assert premium[0]["workspace_id"] == workspace_id

    def test_non_manager_cannot_assign(self, client) -> None:
        result = client.simulate_post(
            "/v1/users/plain/roles", json={"role": "admin"}, headers=auth("plain")
        )

        assert result.status_code == 403

    def test_assign_requires_role_field(self, client) -> None:
        result = client.simulate_post("/v1/users/plain/roles", json={}, headers=auth("boss"))

        assert result.status_code == 400

    def test_assign_unknown_role(self, client) -> None:
        result = client.simulate_post(
            "/v1/users/plain/roles", json={"role": "wizard"}, headers=auth("boss")
        )

        assert result.status_code == 404

    def test_user_lists_own_roles_but_not_others(self, client) -> None:
        own = client.simulate_get("/v1/users/plain/roles", headers=auth("plain"))
        other = client.simulate_get("/v1/users/boss/roles", headers=auth("plain"))

        assert own.status_code == 200
        assert [i["role"] for i in own.json["items"]] == ["user"]
        assert other.status_code == 403

    def test_remove_role_then_permission_checks_deny(self, client) -> None:
        result = client.simulate_delete("/v1/users/plain/roles/user", headers=auth("boss"))
        assert result.status_code == 204

        me = client.simulate_get("/v1/me", headers=auth("plain"))
        assert me.json["roles"] == []
        assert me.json["permissions"] == []
        check = client.simulate_get(
            "/v1/me/permissions/check",
            params={"resource": "proposal", "action": "read"},
            headers=auth("plain"),
        )
        assert check.json["allowed"] is False

    def test_remove_missing_binding(self, client) -> None:
        result = client.simulate_delete(
            "/v1/users/plain/roles/premium", headers=auth("boss")
        )

        assert result.status_code == 404

    def test_requires_authentication(self, client) -> None:
        assert client.simulate_get("/v1/users/plain/roles").status_code == 401
        assert client.simulate_delete("/v1/users/plain/roles/user").status_code == 401


class TestSignupRole:
    def test_new_user_claims_default_role(self, client) -> None:
        result = client.simulate_post("/v1/users/newbie/signup-role", headers=auth("newbie"))

        assert result.status_code == 201
        me = client.simulate_get("/v1/me", headers=auth("newbie"))
        assert me.json["roles"] == ["user"]

    def test_cannot_claim_for_someone_else(self, client) -> None:
        result = client.simulate_post("/v1/users/newbie/signup-role", headers=auth("plain"))

        assert result.status_code == 403
