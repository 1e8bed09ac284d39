from __future__ import annotations

import uuid

import httpx


async def _create(client: httpx.AsyncClient, token: str, **overrides) -> dict:
    payload = {
        "description": "Power bill",
        "category": "Utilities",
        "value": "400.00",
        "date": "2024-01-15",
    }
    payload.update(overrides)
    res = await client.post(
        "/api/v1/expenses",
        headers={"Authorization": f"Bearer {token}"},
        json=payload,
    )
    assert res.status_code == 201
    return res.json()["data"]


async def test_create_expense(client: httpx.AsyncClient, syndic_token: str):
    data = await _create(client, syndic_token)
    assert data["description"] == "Power bill"
    assert data["category"] == "Utilities"
    assert data["value"] == 400


async def test_create_expense_blank_category_is_null(client: httpx.AsyncClient, syndic_token: str):
    data = await _create(client, syndic_token, category="   ")
    assert data["category"] is None


async def test_create_expense_without_category(client: httpx.AsyncClient, syndic_token: str):
    payload = {"description": "Plumber", "value": "120", "date": "2024-02-01"}
    res = await client.post(
        "/api/v1/expenses",
        headers={"Authorization": f"Bearer {syndic_token}"},
        json=payload,
    )
    assert res.status_code == 201
    assert res.json()["data"]["category"] is None


async def test_create_expense_forbidden_for_residents(
    client: httpx.AsyncClient, resident_token: str
):
    res = await client.post(
        "/api/v1/expenses",
        headers={"Authorization": f"Bearer {resident_token}"},
        json={"description": "Power bill", "value": "400", "date": "2024-01-15"},
    )
    assert res.status_code == 403


async def test_list_expenses(client: httpx.AsyncClient, syndic_token: str, resident_token: str):
    await _create(client, syndic_token, description="Older", date="2023-12-30")
    await _create(client, syndic_token, description="Newer", date="2024-01-02")

    res = await client.get(
        "/api/v1/expenses",
        headers={"Authorization": f"Bearer {resident_token}"},
    )
    assert res.status_code == 200
    body = res.json()
    assert body["total"] == 2
    assert [e["description"] for e in body["data"]] == ["Newer", "Older"]

    res = await client.get(
        "/api/v1/expenses",
        headers={"Authorization": f"Bearer {resident_token}"},
        params={"endDate": "2023-12-31"},
    )
    assert [e["description"] for e in res.json()["data"]] == ["Older"]


async def test_update_expense_clears_category(client: httpx.AsyncClient, syndic_token: str):
    created = await _create(client, syndic_token)
    res = await client.put(
        f"/api/v1/expenses/{created['id']}",
        headers={"Authorization": f"Bearer {syndic_token}"},
        json={"category": None, "description": None},
    )
    assert res.status_code == 200
    data = res.json()["data"]
    assert data["category"] is None
    assert data["description"] == "Power bill"


async def test_update_expense_not_found(client: httpx.AsyncClient, syndic_token: str):
    res = await client.put(
        f"/api/v1/expenses/{uuid.uuid4()}",
        headers={"Authorization": f"Bearer {syndic_token}"},
        json={"value": "1"},
    )
    assert res.status_code == 404


async def test_delete_expense(client: httpx.AsyncClient, syndic_token: str):
    created = await _create(client, syndic_token)
    res = await client.delete(
        f"/api/v1/expenses/{created['id']}",
        headers={"Authorization": f"Bearer {syndic_token}"},
    )
    assert res.status_code == 200
    assert res.json() == {"message": "Expense deleted"}


async def test_delete_expense_forbidden_for_residents(
    client: httpx.AsyncClient, syndic_token: str, resident_token: str
):
    created = await _create(client, syndic_token)
    res = await client.delete(
        f"/api/v1/expenses/{created['id']}",
        headers={"Authorization": f"Bearer {resident_token}"},
    )
    assert res.status_code == 403


async def test_expenses_feed_dashboard(client: httpx.AsyncClient, syndic_token: str):
    await _create(client, syndic_token, category=None, value="30", date="2024-05-02")
    await _create(client, syndic_token, category="", value="20", date="2024-05-03")

    res = await client.get(
        "/api/v1/dashboard",
        headers={"Authorization": f"Bearer {syndic_token}"},
    )
    assert res.status_code == 200
    assert res.json()["expensesByCategory"] == [
        {"name": "Other", "value": 50, "colorTag": "#ef4444"}
    ]
