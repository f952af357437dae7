"""
API tests for organization endpoints.

Tests cover:
- Create / list / get / rename organizations
- Members endpoints
- Summary endpoint
- Error responses (400, 401, 403, 404, 422)
"""

from fastapi.testclient import TestClient

from tests.conftest import MEMBER_ID, OUTSIDER_ID, OWNER_ID, auth


# =============================================================================
# ORGANIZATION TESTS
# =============================================================================


class TestOrganizationsAPI:
    """Tests for /organizations."""

    def test_create_organization(self, client: TestClient):
        """
        GIVEN a signed-in user
        WHEN I POST /organizations
        THEN response is 201 and the caller is listed as owner
        """
        response = client.post("/organizations", json={"name": "Household"}, headers=auth(OWNER_ID))

        assert response.status_code == 201
        org = response.json()
        assert org["name"] == "Household"

        members = client.get(
            f"/organizations/{org['organization_id']}/members", headers=auth(OWNER_ID)
        ).json()
        assert members["count"] == 1
        assert members["members"][0]["user_id"] == OWNER_ID
        assert members["members"][0]["role"] == "owner"

    def test_create_without_identity(self, client: TestClient):
        response = client.post("/organizations", json={"name": "Household"})

        assert response.status_code == 401
        assert response.json()["error"] == "UNAUTHENTICATED"

    def test_create_short_name(self, client: TestClient):
        response = client.post("/organizations", json={"name": "H"}, headers=auth(OWNER_ID))

        assert response.status_code == 400
        assert response.json()["error"] == "VALIDATION_ERROR"

    def test_create_missing_name(self, client: TestClient):
        response = client.post("/organizations", json={}, headers=auth(OWNER_ID))

        assert response.status_code == 422

    def test_list_organizations(self, client: TestClient, api_organization):
        response = client.get("/organizations", headers=auth(MEMBER_ID))

        assert response.status_code == 200
        assert response.json()["count"] == 1

        assert client.get("/organizations", headers=auth(OUTSIDER_ID)).json()["count"] == 0

    def test_get_organization(self, client: TestClient, api_organization):
        org_id = api_organization["organization_id"]

        assert client.get(f"/organizations/{org_id}", headers=auth(MEMBER_ID)).status_code == 200
        assert client.get(f"/organizations/{org_id}", headers=auth(OUTSIDER_ID)).status_code == 403
        assert client.get("/organizations/missing", headers=auth(OWNER_ID)).status_code == 404

    def test_rename_owner_only(self, client: TestClient, api_organization):
        org_id = api_organization["organization_id"]

        forbidden = client.patch(
            f"/organizations/{org_id}", json={"name": "Mine"}, headers=auth(MEMBER_ID)
        )
        renamed = client.patch(
            f"/organizations/{org_id}", json={"name": "Our Home"}, headers=auth(OWNER_ID)
        )

        assert forbidden.status_code == 403
        assert renamed.status_code == 200
        assert renamed.json()["name"] == "Our Home"


# =============================================================================
# MEMBER TESTS
# =============================================================================


class TestMembersAPI:
    """Tests for /organizations/{id}/members."""

    def test_add_member(self, client: TestClient, api_organization):
        org_id = api_organization["organization_id"]

        response = client.post(
            f"/organizations/{org_id}/members",
            json={"user_id": "user-new"},
            headers=auth(OWNER_ID),
        )

        assert response.status_code == 201
        assert response.json()["role"] == "member"

    def test_add_duplicate_member(self, client: TestClient, api_organization):
        response = client.post(
            f"/organizations/{api_organization['organization_id']}/members",
            json={"user_id": MEMBER_ID},
            headers=auth(OWNER_ID),
        )

        assert response.status_code == 400

    def test_member_cannot_add(self, client: TestClient, api_organization):
        response = client.post(
            f"/organizations/{api_organization['organization_id']}/members",
            json={"user_id": "user-new"},
            headers=auth(MEMBER_ID),
        )

        assert response.status_code == 403
        assert response.json()["error"] == "FORBIDDEN"

    def test_invalid_role(self, client: TestClient, api_organization):
        response = client.post(
            f"/organizations/{api_organization['organization_id']}/members",
            json={"user_id": "user-new", "role": "admin"},
            headers=auth(OWNER_ID),
        )

        assert response.status_code == 422


# =============================================================================
# SUMMARY TESTS
# =============================================================================


class TestSummaryAPI:
    """Tests for GET /organizations/{id}/summary."""

    def test_summary(self, client: TestClient, api_organization, api_account):
        org_id = api_organization["organization_id"]
        for amount, txn_type in ((5000, "income"), (2000, "expense")):
            client.post(
                "/transactions",
                json={
                    "organization_id": org_id,
                    "account_id": api_account["account_id"],
                    "amount": amount,
                    "txn_type": txn_type,
                    "txn_date": "2024-06-01",
                },
                headers=auth(MEMBER_ID),
            )

        response = client.get(f"/organizations/{org_id}/summary", headers=auth(MEMBER_ID))

        assert response.status_code == 200
        data = response.json()
        assert data["total_balance"] == 3000
        assert data["total_income"] == 5000
        assert data["total_expenses"] == 2000
        assert data["accounts_count"] == 1
        assert data["transactions_count"] == 2
        assert len(data["recent_transactions"]) == 2

    def test_summary_outsider(self, client: TestClient, api_organization):
        response = client.get(
            f"/organizations/{api_organization['organization_id']}/summary",
            headers=auth(OUTSIDER_ID),
        )

        assert response.status_code == 403


class TestHealthAPI:
    def test_health(self, client: TestClient):
        assert client.get("/health").json() == {"status": "healthy"}
