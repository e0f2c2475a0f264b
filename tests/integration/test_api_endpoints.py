"""API endpoint integration tests.

Tests the FastAPI endpoints for onboarding, tax status, deadlines, PAYE,
documents and the assistant.
"""

import json
from dataclasses import replace
from datetime import date
from decimal import Decimal

import openai
from httpx import ASGITransport, AsyncClient

from biztax.ai.client import ASSISTANT_FALLBACK_MESSAGE
from biztax.api.app import create_app

from tests.conftest import make_advisor

from .conftest import ANSWER, TEST_SETTINGS


def dec(value) -> Decimal:
    return Decimal(str(value))


class TestHealthEndpoints:
    """Test health check endpoints."""

    async def test_health_check(self, client: AsyncClient):
        response = await client.get("/health")
        assert response.status_code == 200

        data = response.json()
        assert data["status"] == "healthy"
        assert data["profile"] == "configured"
        assert data["ai"] == "enabled"
        assert "timestamp" in data

    async def test_health_before_onboarding(self, fresh_client: AsyncClient):
        response = await fresh_client.get("/health")
        assert response.json()["profile"] == "missing"

    async def test_readiness_check(self, client: AsyncClient):
        response = await client.get("/ready")
        assert response.status_code == 200
        assert response.json()["status"] == "ready"

    async def test_liveness_check(self, client: AsyncClient):
        response = await client.get("/live")
        assert response.status_code == 200
        assert response.json()["status"] == "alive"


class TestProfile:
    async def test_missing_profile_is_404(self, fresh_client: AsyncClient):
        response = await fresh_client.get("/api/v1/profile")
        assert response.status_code == 404
        assert response.json()["code"] == "NOT_FOUND"

    async def test_onboarding_saves_profile(self, fresh_client: AsyncClient, fresh_state):
        response = await fresh_client.put(
            "/api/v1/profile",
            json={
                "company_name": "Kano Agro Ltd",
                "sector": "Agriculture",
                "annual_turnover": "30000000",
                "employee_count": 14,
                "registration_date": "2023-05-02",
            },
        )
        assert response.status_code == 200, response.text
        data = response.json()
        assert data["company_name"] == "Kano Agro Ltd"
        assert data["registration_date"] == "2023-05-02"

        stored = await fresh_state.repository.load()
        assert stored.annual_turnover == Decimal("30000000")
        assert fresh_state.profile == stored

    async def test_sector_defaults(self, fresh_client: AsyncClient):
        response = await fresh_client.put(
            "/api/v1/profile",
            json={"company_name": "Kano Agro Ltd", "annual_turnover": 100, "employee_count": 1},
        )
        assert response.json()["sector"] == "General Trade"
        assert response.json()["registration_date"] == date.today().isoformat()

    async def test_edit_keeps_registration_date(self, client: AsyncClient):
        response = await client.put(
            "/api/v1/profile",
            json={"company_name": "Lagos Ventures Ltd", "annual_turnover": "45000000", "employee_count": 9},
        )
        assert response.json()["registration_date"] == "2024-03-01"

    async def test_blank_name_rejected(self, fresh_client: AsyncClient, fresh_state):
        response = await fresh_client.put(
            "/api/v1/profile",
            json={"company_name": "  ", "annual_turnover": "100", "employee_count": 1},
        )
        assert response.status_code == 422
        assert response.json()["code"] == "INVALID_INPUT"
        assert response.json()["field"] == "company_name"
        assert fresh_state.profile is None

    async def test_negative_turnover_rejected(self, fresh_client: AsyncClient):
        response = await fresh_client.put(
            "/api/v1/profile",
            json={"company_name": "Acme", "annual_turnover": "-1", "employee_count": 1},
        )
        assert response.status_code == 422
        assert response.json()["field"] == "annual_turnover"

    async def test_sectors(self, client: AsyncClient):
        response = await client.get("/api/v1/profile/sectors")
        assert "General Trade" in response.json()["sectors"]


class TestTaxStatus:
    async def test_medium_business(self, client: AsyncClient):
        response = await client.get("/api/v1/tax-status", params={"turnover": "30000000"})
        data = response.json()
        assert data["tier"] == "medium"
        assert data["label"] == "Medium Business"
        assert data["rate_label"] == "20% CIT"
        assert dec(data["cit_rate"]) == Decimal("20")

    async def test_negative_turnover(self, client: AsyncClient):
        response = await client.get("/api/v1/tax-status", params={"turnover": "-5"})
        assert response.status_code == 422
        assert response.json()["code"] == "INVALID_INPUT"


class TestDashboardAndDeadlines:
    async def test_dashboard(self, client: AsyncClient):
        response = await client.get("/api/v1/dashboard", params={"reference_date": "2026-01-15"})
        assert response.status_code == 200, response.text
        data = response.json()
        assert data["tax_status"]["label"] == "Small Business"
        assert dec(data["turnover_progress_percent"]) == Decimal("5")
        assert data["alerts"] == []
        assert [d["id"] for d in data["upcoming"]] == ["paye-1", "paye-2", "cit-2026"]

    async def test_dashboard_requires_profile(self, fresh_client: AsyncClient):
        response = await fresh_client.get("/api/v1/dashboard")
        assert response.status_code == 404

    async def test_deadlines(self, client: AsyncClient):
        response = await client.get("/api/v1/deadlines", params={"reference_date": "2026-01-15"})
        data = response.json()
        assert data["total"] == 4
        first = data["items"][0]
        assert first["id"] == "paye-0"
        assert first["due_date"] == "2026-01-12"
        assert first["status"] == "pending"
        assert first["display_state"] == "overdue"
        assert data["items"][-1]["type"] == "CIT"

    async def test_mark_filed(self, client: AsyncClient):
        response = await client.post(
            "/api/v1/deadlines/paye-0/filed", params={"reference_date": "2026-01-15"}
        )
        assert response.status_code == 200, response.text
        items = {d["id"]: d for d in response.json()["items"]}
        assert items["paye-0"]["status"] == "completed"
        assert items["paye-0"]["display_state"] == "completed"
        assert items["paye-1"]["status"] == "pending"

    async def test_mark_unknown_deadline(self, client: AsyncClient):
        response = await client.post(
            "/api/v1/deadlines/vat-0/filed", params={"reference_date": "2026-01-15"}
        )
        assert response.status_code == 404


class TestPaye:
    async def test_compute(self, client: AsyncClient):
        response = await client.post(
            "/api/v1/paye", json={"annual_gross_salary": "2400000", "name": "Ada Obi"}
        )
        assert response.status_code == 200, response.text
        data = response.json()
        assert data["name"] == "Ada Obi"
        assert dec(data["cra"]) == Decimal("680000.00")
        assert dec(data["taxable_income"]) == Decimal("1720000.00")
        assert dec(data["annual_tax"]) == Decimal("249200.00")
        assert dec(data["monthly_tax"]) == Decimal("20766.67")
        assert dec(data["effective_rate"]) == Decimal("10.38")
        assert len(data["bands"]) == 5

    async def test_zero_salary(self, client: AsyncClient):
        response = await client.post("/api/v1/paye", json={"annual_gross_salary": 0})
        data = response.json()
        assert dec(data["annual_tax"]) == Decimal("0")
        assert dec(data["effective_rate"]) == Decimal("0")

    async def test_negative_salary(self, client: AsyncClient):
        response = await client.post("/api/v1/paye", json={"annual_gross_salary": "-1"})
        assert response.status_code == 422
        assert response.json()["field"] == "annual_gross_salary"

    async def test_payroll_sheet(self, client: AsyncClient):
        first = await client.post("/api/v1/payroll", json={"annual_gross_salary": "2400000"})
        assert first.status_code == 201
        second = await client.post(
            "/api/v1/payroll", json={"annual_gross_salary": "1200000", "name": "Bola"}
        )
        data = second.json()
        assert data["total"] == 2
        assert [item["name"] for item in data["items"]] == ["Employee 1", "Bola"]
        monthly = sum(dec(item["monthly_tax"]) for item in data["items"])
        assert abs(dec(data["total_monthly_remittance"]) - monthly) <= Decimal("0.01")

        employee_id = data["items"][0]["employee_id"]
        deleted = await client.delete(f"/api/v1/payroll/{employee_id}")
        assert deleted.status_code == 204

        remaining = (await client.get("/api/v1/payroll")).json()
        assert [item["name"] for item in remaining["items"]] == ["Bola"]

        again = await client.delete(f"/api/v1/payroll/{employee_id}")
        assert again.status_code == 404


class TestDocuments:
    async def test_list_and_search(self, client: AsyncClient):
        data = (await client.get("/api/v1/documents")).json()
        assert data["total"] == 1
        assert data["items"][0]["name"] == "TCC-2023.pdf"

        empty = (await client.get("/api/v1/documents", params={"q": "invoice"})).json()
        assert empty["total"] == 0

    async def test_analyze(self, client: AsyncClient, state):
        state.advisor = make_advisor(
            content=json.dumps({"amount": "75000", "type": "Invoice", "summary": "Logistics invoice."})
        )
        response = await client.post("/api/v1/documents/analyze", json={"text": "INVOICE 75,000"})
        assert response.status_code == 201, response.text
        data = response.json()
        assert data["type"] == "Invoice"
        assert data["category"] == "Financial"
        assert data["has_content"] is True

        listed = (await client.get("/api/v1/documents")).json()
        assert listed["items"][0]["id"] == data["id"]

        detail = await client.get(f"/api/v1/documents/{data['id']}")
        assert detail.status_code == 200
        assert detail.json()["content"] == "INVOICE 75,000"

    async def test_unknown_document(self, client: AsyncClient):
        response = await client.get("/api/v1/documents/missing")
        assert response.status_code == 404
        assert response.json()["code"] == "NOT_FOUND"

    async def test_analyze_failure(self, client: AsyncClient, state):
        state.advisor = make_advisor(error=openai.OpenAIError("unavailable"))
        response = await client.post("/api/v1/documents/analyze", json={"text": "INVOICE"})
        assert response.status_code == 502
        assert response.json()["detail"] == "Failed to analyze document. Please try again."
        assert len(state.documents.documents()) == 1


class TestAssistant:
    async def test_answer_uses_profile_context(self, client: AsyncClient, state):
        response = await client.post("/api/v1/assistant/ask", json={"question": "Do I pay CIT?"})
        assert response.json() == {"answer": ANSWER, "fallback": False}

        call = state.advisor._client.chat.completions.calls[0]
        assert "Lagos Ventures Ltd (General Trade)" in call["messages"][0]["content"]
        assert "Small Business (0% CIT)" in call["messages"][0]["content"]

    async def test_fallback_on_failure(self, client: AsyncClient, state):
        state.advisor = make_advisor(error=openai.OpenAIError("timeout"))
        response = await client.post("/api/v1/assistant/ask", json={"question": "Do I pay CIT?"})
        assert response.json() == {"answer": ASSISTANT_FALLBACK_MESSAGE, "fallback": True}

    async def test_empty_question_rejected(self, client: AsyncClient):
        response = await client.post("/api/v1/assistant/ask", json={"question": ""})
        assert response.status_code == 422


class TestStartup:
    async def test_not_ready_without_state(self):
        app = create_app(settings=TEST_SETTINGS)
        async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
            response = await ac.get("/ready")
        assert response.status_code == 503
        assert response.json()["status"] == "starting"

    async def test_lifespan_loads_profile_from_database(self, tmp_path):
        settings = replace(
            TEST_SETTINGS,
            database_url=f"sqlite+aiosqlite:///{tmp_path / 'biztax.db'}",
            seed_sample_documents=True,
        )
        payload = {"company_name": "Enugu Crafts", "annual_turnover": "26000000", "employee_count": 3}

        app = create_app(settings=settings)
        async with app.router.lifespan_context(app):
            async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
                assert (await ac.put("/api/v1/profile", json=payload)).status_code == 200
                assert (await ac.get("/health")).json()["ai"] == "disabled"
                assert (await ac.get("/api/v1/documents")).json()["total"] == 1

        restarted = create_app(settings=settings)
        async with restarted.router.lifespan_context(restarted):
            async with AsyncClient(transport=ASGITransport(app=restarted), base_url="http://test") as ac:
                profile = (await ac.get("/api/v1/profile")).json()
        assert profile["company_name"] == "Enugu Crafts"
