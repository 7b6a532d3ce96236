"""
HTTP tests for roles, contractors, equity allocations and invoices.
"""

import pytest
from httpx import AsyncClient

from equity_payroll.core.config import settings


API = "/api/v1"


async def create_company(client: AsyncClient, **overrides) -> dict:
    payload = {"name": "Gumroad", "equity_compensation_enabled": True}
    payload.update(overrides)
    response = await client.post(f"{API}/companies", json=payload)
    assert response.status_code == 201
    return response.json()


async def create_role(client: AsyncClient, company_id: int, pay_rate_type: str = "hourly", **overrides) -> dict:
    payload = {
        "company_id": company_id,
        "name": "Software Engineer",
        "rate": {"pay_rate_type": pay_rate_type, "pay_rate_in_subunits": 6000},
    }
    payload.update(overrides)
    response = await client.post(f"{API}/company-roles", json=payload)
    assert response.status_code == 201, response.text
    return response.json()


async def create_contractor(client: AsyncClient, company_id: int, role_id: int) -> dict:
    response = await client.post(
        f"{API}/contractors",
        json={"company_id": company_id, "company_role_id": role_id, "name": "Sahil"},
    )
    assert response.status_code == 201, response.text
    return response.json()


@pytest.mark.asyncio
class TestCompanyRoleApi:
    async def test_create_role_exposes_current_rate(self, test_client: AsyncClient):
        company = await create_company(test_client)

        role = await create_role(test_client, company["id"], trial_enabled=True, expense_card_spending_limit_cents=5000)

        assert role["pay_rate_type"] == "hourly"
        assert role["pay_rate_in_subunits"] == 6000
        assert role["rate"]["pay_rate_type"] == "hourly"
        assert role["expense_card_has_limit"] is True
        assert role["deleted_at"] is None

    async def test_trial_on_project_based_role_is_rejected(self, test_client: AsyncClient):
        company = await create_company(test_client)

        response = await test_client.post(
            f"{API}/company-roles",
            json={
                "company_id": company["id"],
                "name": "Designer",
                "trial_enabled": True,
                "rate": {"pay_rate_type": "project_based", "pay_rate_in_subunits": 100000},
            },
        )

        assert response.status_code == 422
        error = response.json()["error"]
        assert error["details"]["errors"] == ["Can only set trials with hourly contracts"]

    async def test_role_with_active_contractor_cannot_be_deleted(self, test_client: AsyncClient):
        company = await create_company(test_client)
        role = await create_role(test_client, company["id"])
        contractor = await create_contractor(test_client, company["id"], role["id"])

        response = await test_client.delete(f"{API}/company-roles/{role['id']}")
        assert response.status_code == 422
        assert response.json()["error"]["details"]["errors"] == ["Cannot delete role with active contractors"]
        assert (await test_client.get(f"{API}/company-roles/{role['id']}")).status_code == 200

        response = await test_client.put(f"{API}/contractors/{contractor['id']}/end", json={})
        assert response.status_code == 200

        response = await test_client.delete(f"{API}/company-roles/{role['id']}")
        assert response.status_code == 204
        assert (await test_client.get(f"{API}/company-roles/{role['id']}")).status_code == 404

    async def test_actively_hiring_filter(self, test_client: AsyncClient):
        company = await create_company(test_client)
        await create_role(test_client, company["id"], name="Hiring", actively_hiring=True)
        await create_role(test_client, company["id"], name="Closed")

        response = await test_client.get(f"{API}/company-roles", params={"actively_hiring": "true"})

        assert response.status_code == 200
        assert [role["name"] for role in response.json()["items"]] == ["Hiring"]

    async def test_actively_hiring_endpoint_lists_every_hiring_role(self, test_client: AsyncClient):
        company = await create_company(test_client)
        hiring = await create_role(test_client, company["id"], name="Hiring", actively_hiring=True)
        await create_role(test_client, company["id"], name="Closed")

        response = await test_client.get(f"{API}/company-roles/actively-hiring", params={"company_id": company["id"]})

        assert response.status_code == 200
        assert [role["id"] for role in response.json()["items"]] == [hiring["id"]]

    async def test_missing_role_returns_404(self, test_client: AsyncClient):
        response = await test_client.get(f"{API}/company-roles/999")

        assert response.status_code == 404
        assert response.json()["error"]["message"] == "Company role not found"


@pytest.mark.asyncio
class TestInvoiceApi:
    async def setup_contractor(self, client: AsyncClient) -> dict:
        company = await create_company(client)
        role = await create_role(client, company["id"])
        contractor = await create_contractor(client, company["id"], role["id"])
        response = await client.put(
            f"{API}/contractors/{contractor['id']}/equity-allocations/2023",
            json={"equity_percentage": 20},
        )
        assert response.status_code == 200
        response = await client.post(
            f"{API}/contractors/{contractor['id']}/equity-grants",
            json={"period_year": 2023, "share_price_usd": "1", "number_of_shares": 1000},
        )
        assert response.status_code == 201
        return contractor

    async def test_first_invoice_requires_lock_confirmation(self, test_client: AsyncClient):
        contractor = await self.setup_contractor(test_client)
        invoice = {
            "company_worker_id": contractor["id"],
            "invoice_date": "2023-08-08",
            "description": "I worked on invoices",
            "hours": "03:25",
        }

        response = await test_client.post(f"{API}/invoices", json=invoice)
        assert response.status_code == 409
        error = response.json()["error"]
        assert error["message"] == "Lock 20% in equity for all 2023?"
        assert error["details"]["confirm_label"] == "Confirm 20% equity selection"
        assert error["details"]["change_selection_url"] == "/settings/equity"

        response = await test_client.post(f"{API}/invoices", json={**invoice, "confirm_equity_lock": True})
        assert response.status_code == 201
        data = response.json()
        assert data["total_amount_in_usd_cents"] == 20500
        assert data["equity_amount_in_cents"] == 4100
        assert data["cash_amount_in_cents"] == 16400
        assert data["status"] == "received"
        assert data["status_label"] == "Awaiting approval (0/2)"

        allocation = await test_client.get(f"{API}/contractors/{contractor['id']}/equity-allocations/2023")
        assert allocation.json()["lock_state"] == "locked"

        response = await test_client.put(
            f"{API}/contractors/{contractor['id']}/equity-allocations/2023",
            json={"equity_percentage": 50},
        )
        assert response.status_code == 409

        listing = await test_client.get(f"{API}/invoices", params={"company_worker_id": contractor["id"]})
        assert listing.json()["total"] == 1
        fetched = await test_client.get(f"{API}/invoices/{data['id']}")
        assert fetched.json()["invoice_number"] == "1"

    async def test_preview_does_not_lock(self, test_client: AsyncClient):
        contractor = await self.setup_contractor(test_client)

        response = await test_client.post(
            f"{API}/invoices/preview",
            json={
                "company_worker_id": contractor["id"],
                "invoice_date": "2023-08-08",
                "description": "Draft",
                "total_minutes": 205,
            },
        )

        assert response.status_code == 200
        data = response.json()
        assert data["equity_amount_in_cents"] == 4100
        assert data["requires_equity_lock_confirmation"] is True
        assert data["equity_lock_confirmation"]["title"] == "Lock 20% in equity for all 2023?"
        allocation = await test_client.get(f"{API}/contractors/{contractor['id']}/equity-allocations/2023")
        assert allocation.json()["lock_state"] == "unlocked"

    async def test_invalid_hours_are_a_validation_error(self, test_client: AsyncClient):
        contractor = await self.setup_contractor(test_client)

        response = await test_client.post(
            f"{API}/invoices",
            json={
                "company_worker_id": contractor["id"],
                "invoice_date": "2023-08-08",
                "description": "Bad hours",
                "hours": "three hours",
            },
        )

        assert response.status_code == 422
        assert response.json()["error"]["message"] == "Validation error"

    async def test_unknown_contractor_and_invoice(self, test_client: AsyncClient):
        response = await test_client.post(
            f"{API}/invoices",
            json={"company_worker_id": 999, "invoice_date": "2023-08-08", "description": "x", "total_minutes": 60},
        )
        assert response.status_code == 404
        assert response.json()["error"]["message"] == "Contractor not found"

        assert (await test_client.get(f"{API}/invoices/999")).status_code == 404
        assert (await test_client.get(f"{API}/contractors/999/equity-allocations/2023")).status_code == 404


@pytest.mark.asyncio
class TestCompanyAndContractorApi:
    async def test_required_approvals_default_comes_from_settings(self, test_client: AsyncClient, monkeypatch):
        monkeypatch.setattr(settings, "DEFAULT_REQUIRED_INVOICE_APPROVALS", 3)

        company = await create_company(test_client)
        role = await create_role(test_client, company["id"])
        contractor = await create_contractor(test_client, company["id"], role["id"])
        response = await test_client.post(
            f"{API}/invoices",
            json={
                "company_worker_id": contractor["id"],
                "invoice_date": "2023-08-08",
                "description": "Support",
                "hours": "01:00",
            },
        )

        assert company["required_invoice_approval_count"] == 3
        assert response.status_code == 201
        assert response.json()["status_label"] == "Awaiting approval (0/3)"

    async def test_contract_dates_with_mixed_timezones(self, test_client: AsyncClient):
        company = await create_company(test_client)
        role = await create_role(test_client, company["id"])
        payload = {"company_id": company["id"], "company_role_id": role["id"], "name": "Sahil"}

        response = await test_client.post(
            f"{API}/contractors",
            json={**payload, "started_at": "2024-01-01T00:00:00+00:00", "ended_at": "2023-12-31T00:00:00"},
        )
        assert response.status_code == 422
        assert response.json()["error"]["message"] == "Validation error"

        response = await test_client.post(
            f"{API}/contractors",
            json={**payload, "started_at": "2024-01-01T00:00:00+05:00", "ended_at": "2024-06-01T00:00:00"},
        )
        assert response.status_code == 201
        assert response.json()["started_at"] == "2023-12-31T19:00:00"
