import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport


@pytest_asyncio.fixture
async def client(test_app, rems_feed):
    transport = ASGITransport(app=test_app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        r = await ac.post("/ingestion/sols", json=rems_feed)
        assert r.status_code == 200, r.text
        yield ac


@pytest.mark.asyncio
async def test_list_sols_newest_first(client):
    r = await client.get("/sols")

    assert r.status_code == 200
    data = r.json()
    assert data["total"] == 3
    assert [x["sol"] for x in data["items"]] == [4804, 4803, 4802]


@pytest.mark.asyncio
async def test_list_sols_pagination(client):
    r = await client.get("/sols?limit=1&offset=1")

    data = r.json()
    assert data["total"] == 3
    assert [x["sol"] for x in data["items"]] == [4803]


@pytest.mark.asyncio
async def test_list_sols_rejects_bad_limit(client):
    r = await client.get("/sols?limit=0")
    assert r.status_code == 422


@pytest.mark.asyncio
async def test_get_single_sol(client):
    r = await client.get("/sols/4803")

    assert r.status_code == 200
    assert r.json()["terrestrial_date"] == "2026-02-09"


@pytest.mark.asyncio
async def test_get_unknown_sol(client):
    r = await client.get("/sols/1")

    assert r.status_code == 404
    assert r.json() == {"detail": "Sol report not found"}
