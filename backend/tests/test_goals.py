"""Goal endpoint tests."""

from datetime import date

import pytest
from httpx import AsyncClient


async def _create_goal(client: AsyncClient, headers: dict, **overrides) -> dict:
    payload = {"name": "Emergency fund", "target_amount": "3000", "current_amount": "500"}
    payload.update(overrides)
    response = await client.post("/api/v1/goals/", json=payload, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()


@pytest.mark.asyncio
async def test_create_goal_returns_progress(client: AsyncClient, headers: dict):
    goal = await _create_goal(client, headers)
    assert goal["progress_percent"] == pytest.approx(16.7)
    assert goal["remaining_amount"] == 2500
    assert goal["days_remaining"] is None
    assert goal["monthly_needed"] is None


@pytest.mark.asyncio
async def test_goal_with_target_date(client: AsyncClient, headers: dict):
    # TODAY in conftest is 2025-06-15
    goal = await _create_goal(client, headers, target_date="2025-07-15")
    assert goal["days_remaining"] == 30
    assert goal["monthly_needed"] == pytest.approx(round(2500 / (30 / 30.44), 2))


@pytest.mark.asyncio
async def test_list_goals_is_scoped_to_user(
    client: AsyncClient, headers: dict, other_headers: dict
):
    await _create_goal(client, headers)
    await _create_goal(client, other_headers, name="Other user goal")

    response = await client.get("/api/v1/goals/", headers=headers)
    assert response.status_code == 200
    names = [g["name"] for g in response.json()]
    assert names == ["Emergency fund"]


@pytest.mark.asyncio
async def test_other_user_cannot_read_goal(
    client: AsyncClient, headers: dict, other_headers: dict
):
    goal = await _create_goal(client, headers)
    response = await client.get(f"/api/v1/goals/{goal['id']}", headers=other_headers)
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_update_goal(client: AsyncClient, headers: dict):
    goal = await _create_goal(client, headers)
    response = await client.patch(
        f"/api/v1/goals/{goal['id']}",
        json={"current_amount": "4000"},
        headers=headers,
    )
    assert response.status_code == 200
    data = response.json()
    assert data["progress_percent"] == 100.0
    assert data["remaining_amount"] == 0


@pytest.mark.asyncio
async def test_add_funds(client: AsyncClient, headers: dict):
    goal = await _create_goal(client, headers)
    response = await client.post(
        f"/api/v1/goals/{goal['id']}/funds",
        json={"amount": "1000"},
        headers=headers,
    )
    assert response.status_code == 200
    assert response.json()["remaining_amount"] == 1500


@pytest.mark.asyncio
async def test_add_funds_rejects_non_positive(client: AsyncClient, headers: dict):
    goal = await _create_goal(client, headers)
    response = await client.post(
        f"/api/v1/goals/{goal['id']}/funds",
        json={"amount": "0"},
        headers=headers,
    )
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_estimate_time_to_goal(client: AsyncClient, headers: dict):
    goal = await _create_goal(client, headers)
    response = await client.get(
        f"/api/v1/goals/{goal['id']}/estimate",
        params={"monthly_contribution": 500},
        headers=headers,
    )
    assert response.status_code == 200
    data = response.json()
    assert data["months"] == 5
    assert data["label"] == "5 months"
    assert data["already_met"] is False


@pytest.mark.asyncio
async def test_estimate_rejects_zero_contribution(client: AsyncClient, headers: dict):
    goal = await _create_goal(client, headers)
    response = await client.get(
        f"/api/v1/goals/{goal['id']}/estimate",
        params={"monthly_contribution": 0},
        headers=headers,
    )
    assert response.status_code == 422
    assert "greater than zero" in response.json()["detail"]


@pytest.mark.asyncio
async def test_delete_goal(client: AsyncClient, headers: dict):
    goal = await _create_goal(client, headers)
    response = await client.delete(f"/api/v1/goals/{goal['id']}", headers=headers)
    assert response.status_code == 204

    response = await client.get(f"/api/v1/goals/{goal['id']}", headers=headers)
    assert response.status_code == 404


@pytest.mark.asyncio
@pytest.mark.parametrize("field", ["name", "target_amount", "current_amount"])
async def test_update_goal_rejects_null_for_required_field(
    client: AsyncClient, headers: dict, field: str
):
    goal = await _create_goal(client, headers)

    response = await client.patch(
        f"/api/v1/goals/{goal['id']}", json={field: None}, headers=headers
    )
    assert response.status_code == 422

    response = await client.get(f"/api/v1/goals/{goal['id']}", headers=headers)
    assert response.json()["target_amount"] == goal["target_amount"]


@pytest.mark.asyncio
async def test_update_goal_can_clear_target_date(client: AsyncClient, headers: dict):
    goal = await _create_goal(client, headers, target_date="2025-07-15")

    response = await client.patch(
        f"/api/v1/goals/{goal['id']}", json={"target_date": None}, headers=headers
    )
    assert response.status_code == 200
    assert response.json()["target_date"] is None
    assert response.json()["days_remaining"] is None
