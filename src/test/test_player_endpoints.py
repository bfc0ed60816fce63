import pytest
from fastapi.testclient import TestClient

from src.models import MANAGED_PASSWORD
from src.test.utils_common_methods import TestUtils, API

utils = TestUtils()


@pytest.mark.nivel("bajo")
def test_create_player_and_fetch_by_id(client: TestClient):
    team = utils.create_team(client)
    payload = utils.player_payload(team["id"], "Jorge Campos", category="U18", phone_number="5512345678")

    res = client.post(f"{API}/players", json=payload)

    assert res.status_code == 201
    player = res.json()["data"]
    for field in ("team_id", "player_name", "date_of_birth", "curp", "email", "federation_id", "category", "phone_number"):
        assert player[field] == payload[field]
    assert player["eligibility"] is True
    assert player["password"] == MANAGED_PASSWORD

    fetched = client.get(f"{API}/players/{player['id']}")
    assert fetched.status_code == 200
    assert fetched.json()["data"] == player


@pytest.mark.nivel("bajo")
def test_player_password_from_client_is_ignored(client: TestClient):
    team = utils.create_team(client)
    player = utils.create_player(client, team["id"], password="plaintext")

    assert player["password"] == MANAGED_PASSWORD


@pytest.mark.nivel("bajo")
def test_create_player_missing_required_fields_returns_400(client: TestClient):
    res = client.post(f"{API}/players", json={"player_name": "Sin Equipo"})

    assert res.status_code == 400
    body = res.json()
    assert body["success"] is False
    assert "team_id" in body["error"]


@pytest.mark.nivel("bajo")
def test_create_player_with_unknown_team_surfaces_backend_error(client: TestClient):
    payload = utils.player_payload("00000000-0000-0000-0000-000000000000")

    res = client.post(f"{API}/players", json=payload)

    assert res.status_code == 500
    assert res.json()["success"] is False
    assert "FOREIGN KEY" in res.json()["error"].upper()


@pytest.mark.nivel("bajo")
def test_get_unknown_player_returns_404(client: TestClient):
    res = client.get(f"{API}/players/9999")

    assert res.status_code == 404
    assert res.json() == {"success": False, "error": "Player not found"}


@pytest.mark.nivel("bajo")
def test_non_numeric_player_id_is_a_bad_request(client: TestClient):
    res = client.get(f"{API}/players/abc")
    assert res.status_code == 400


@pytest.mark.nivel("medio")
def test_players_are_listed_by_name(client: TestClient):
    team = utils.create_team(client)
    for name in ("Zamora", "Aguirre", "Marquez"):
        utils.create_player(client, team["id"], name)

    res = client.get(f"{API}/players")

    assert [p["player_name"] for p in res.json()["data"]] == ["Aguirre", "Marquez", "Zamora"]


@pytest.mark.nivel("medio")
def test_players_by_team(client: TestClient):
    eagles = utils.create_team(client, "Eagles")
    wolves = utils.create_team(client, "Wolves")
    utils.create_player(client, eagles["id"], "Lozano")
    utils.create_player(client, eagles["id"], "Herrera")
    utils.create_player(client, wolves["id"], "Ochoa")

    res = client.get(f"{API}/players/team/{eagles['id']}")
    assert res.status_code == 200
    assert [p["player_name"] for p in res.json()["data"]] == ["Herrera", "Lozano"]

    empty = client.get(f"{API}/players/team/00000000-0000-0000-0000-000000000000")
    assert empty.json() == {"success": True, "data": []}


@pytest.mark.nivel("medio")
def test_update_and_delete_player(client: TestClient):
    team = utils.create_team(client)
    player = utils.create_player(client, team["id"], "Raúl Jiménez")

    res = client.put(f"{API}/players/{player['id']}", json={"eligibility": False, "jersey_size": "L"})
    assert res.status_code == 200
    updated = res.json()["data"]
    assert updated["eligibility"] is False
    assert updated["jersey_size"] == "L"
    assert updated["player_name"] == "Raúl Jiménez"

    assert client.put(f"{API}/players/9999", json={"category": "U20"}).status_code == 404

    deleted = client.delete(f"{API}/players/{player['id']}")
    assert deleted.json() == {"success": True, "message": "Player deleted successfully"}
    assert client.get(f"{API}/players/{player['id']}").status_code == 404
