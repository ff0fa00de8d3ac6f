import csv
from io import StringIO

import pytest
from httpx import ASGITransport, AsyncClient

from cricketroster.api import create_app
from cricketroster.models import PlayerRecord
from cricketroster.roster import RosterManager


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
async def client():
    app = create_app()
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as async_client:
        async_client.app = app
        yield async_client


def _payload(player_id: int, name: str, role: str = "Batsman") -> dict:
    return {
        "player_id": player_id,
        "name": name,
        "role": role,
        "matches_played": 10,
        "stat_value": 250,
    }


async def _seed(client: AsyncClient) -> None:
    for player_id, name, role in ((1, "Sachin", "Batsman"), (2, "Zaheer", "Bowler"), (3, "Yuvraj", "All-Rounder")):
        resp = await client.post("/players", json=_payload(player_id, name, role))
        assert resp.status_code == 201


@pytest.mark.anyio
async def test_health(client: AsyncClient):
    resp = await client.get("/health")
    assert resp.status_code == 200
    assert resp.json()["status"] == "ok"


@pytest.mark.anyio
async def test_roles(client: AsyncClient):
    resp = await client.get("/roles")
    assert resp.status_code == 200
    body = resp.json()
    assert body[0] == {"role": "Batsman", "stat_label": "Runs"}
    assert {"role": "Bowler", "stat_label": "Wickets"} in body


@pytest.mark.anyio
async def test_add_and_list_top_to_bottom(client: AsyncClient):
    await _seed(client)
    resp = await client.get("/players")
    assert resp.status_code == 200
    body = resp.json()
    assert body["total"] == 3
    assert [player["player_id"] for player in body["players"]] == [3, 2, 1]
    assert body["players"][1]["stat_label"] == "Wickets"


@pytest.mark.anyio
async def test_add_message_and_duplicate(client: AsyncClient):
    resp = await client.post("/players", json=_payload(5, "Kapil"))
    assert resp.json()["message"] == "Player added. Total: 1"

    resp = await client.post("/players", json=_payload(5, "Other"))
    assert resp.status_code == 409
    assert resp.json()["detail"] == "ID already exists."
    store = client.app.state.roster
    assert store.size() == 1
    assert store.find_by_id(5).name == "Kapil"


@pytest.mark.anyio
async def test_add_rejects_non_numeric_json(client: AsyncClient):
    body = _payload(1, "Bad")
    body["matches_played"] = "many"
    resp = await client.post("/players", json=body)
    assert resp.status_code == 422
    assert client.app.state.roster.is_empty()


@pytest.mark.anyio
async def test_add_from_form_fields(client: AsyncClient):
    resp = await client.post(
        "/players/form",
        json={"id": " 9 ", "name": " Anil ", "role": "Bowler", "matches": "132", "stat": "619"},
    )
    assert resp.status_code == 201
    assert resp.json()["player"]["name"] == "Anil"

    resp = await client.post("/players/form", json={"id": "ten", "name": "X", "matches": "1", "stat": "1"})
    assert resp.status_code == 422
    assert resp.json()["detail"] == "Please enter valid numeric values."
    assert client.app.state.roster.size() == 1


@pytest.mark.anyio
async def test_pop(client: AsyncClient):
    resp = await client.post("/players/pop")
    assert resp.status_code == 404
    assert resp.json()["detail"] == "Stack is empty."

    await _seed(client)
    resp = await client.post("/players/pop")
    assert resp.status_code == 200
    body = resp.json()
    assert body["message"] == "Popped: Yuvraj"
    assert body["total"] == 2


@pytest.mark.anyio
async def test_get_player(client: AsyncClient):
    await _seed(client)
    resp = await client.get("/players/2")
    assert resp.status_code == 200
    assert resp.json()["name"] == "Zaheer"

    resp = await client.get("/players/77")
    assert resp.status_code == 404


@pytest.mark.anyio
async def test_update_keeps_position(client: AsyncClient):
    await _seed(client)
    resp = await client.put(
        "/players/2",
        json={"name": "Zak", "role": "Batsman", "matches_played": 200, "stat_value": 1200},
    )
    assert resp.status_code == 200
    assert resp.json()["message"] == "Updated: ID 2"
    assert resp.json()["player"]["stat_label"] == "Runs"

    listing = (await client.get("/players")).json()["players"]
    assert [player["player_id"] for player in listing] == [3, 2, 1]
    assert listing[1]["name"] == "Zak"

    resp = await client.put(
        "/players/99",
        json={"name": "Nobody", "role": "Coach", "matches_played": 0, "stat_value": 0},
    )
    assert resp.status_code == 404


@pytest.mark.anyio
async def test_delete(client: AsyncClient):
    await _seed(client)
    resp = await client.delete("/players/2")
    assert resp.status_code == 200
    assert resp.json() == {"message": "Deleted ID: 2", "total": 2, "player": None}

    listing = (await client.get("/players")).json()["players"]
    assert [player["player_id"] for player in listing] == [3, 1]

    resp = await client.delete("/players/2")
    assert resp.status_code == 404


@pytest.mark.anyio
async def test_search_and_export(client: AsyncClient):
    await _seed(client)
    resp = await client.get("/players", params={"q": "ZAH"})
    body = resp.json()
    assert body["total"] == 3
    assert body["matched"] == 1
    assert body["players"][0]["player_id"] == 2

    resp = await client.get("/players/export.csv")
    assert resp.status_code == 200
    assert resp.headers["content-type"].startswith("text/csv")
    rows = list(csv.reader(StringIO(resp.text)))
    assert rows[0] == ["ID", "Name", "Role", "Matches", "Runs/Wickets"]
    assert [row[0] for row in rows[1:]] == ["3", "2", "1"]
    assert rows[2][4] == "250 Wickets"


@pytest.mark.anyio
async def test_app_uses_supplied_manager():
    manager = RosterManager([PlayerRecord(player_id=1, name="Seed", role="Coach", matches_played=0, stat_value=0)])
    app = create_app(manager)
    assert app.state.roster is manager
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as async_client:
        resp = await async_client.get("/players")
    assert resp.json()["players"][0]["name"] == "Seed"


@pytest.mark.anyio
async def test_reset_clears_roster(client: AsyncClient):
    await _seed(client)
    resp = await client.delete("/players")
    assert resp.status_code == 200
    assert resp.json() == {"message": "Cleared 3 players.", "total": 0, "player": None}
    assert client.app.state.roster.is_empty()

    resp = await client.post("/players/pop")
    assert resp.status_code == 404


@pytest.mark.anyio
async def test_form_duplicate_id_reported_before_other_fields(client: AsyncClient):
    await _seed(client)
    resp = await client.post("/players/form", json={"id": "2", "name": "X", "matches": "lots", "stat": "1"})
    assert resp.status_code == 409
    assert resp.json()["detail"] == "ID already exists."
    assert client.app.state.roster.size() == 3


@pytest.mark.anyio
async def test_non_numeric_path_id_rejected(client: AsyncClient):
    await _seed(client)
    before = (await client.get("/players")).json()

    resp = await client.delete("/players/abc")
    assert resp.status_code == 422

    resp = await client.put(
        "/players/abc",
        json={"name": "Nobody", "role": "Coach", "matches_played": 0, "stat_value": 0},
    )
    assert resp.status_code == 422

    resp = await client.get("/players/abc")
    assert resp.status_code == 422

    assert (await client.get("/players")).json() == before
