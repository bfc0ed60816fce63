# test/utils_common_methods.py

import uuid
from typing import Dict, Optional
from fastapi.testclient import TestClient

from src.utils.logger_config import test_logger as logger

API = "/api"


class TestUtils:
    __test__ = False  # no es una clase de tests

    # ─────────────────────────────
    # TEAMS
    # ─────────────────────────────

    def create_team(self, client: TestClient, name: str = "Eagles", region: Optional[str] = "North") -> Dict:
        res = client.post(f"{API}/teams", json={"name": name, "region": region})
        assert res.status_code == 201, f"Error creando team '{name}': {res.text}"
        return res.json()["data"]

    # ─────────────────────────────
    # PLAYERS
    # ─────────────────────────────

    def player_payload(self, team_id: str, name: str = "Hugo Sánchez", **overrides) -> Dict:
        payload = {
            "team_id": team_id,
            "player_name": name,
            "date_of_birth": "1995-01-01",
            "curp": f"CURP{uuid.uuid4().hex[:14].upper()}",
            "email": f"player.{uuid.uuid4().hex[:8]}@example.com",
            "federation_id": 1001,
            "eligibility": True,
        }
        payload.update(overrides)
        return payload

    def create_player(self, client: TestClient, team_id: str, name: str = "Hugo Sánchez", **overrides) -> Dict:
        res = client.post(f"{API}/players", json=self.player_payload(team_id, name, **overrides))
        assert res.status_code == 201, f"Error creando player '{name}': {res.text}"
        player = res.json()["data"]
        logger.info(f"Player creado: {player['player_name']} (id={player['id']})")
        return player

    # ─────────────────────────────
    # AUTH
    # ─────────────────────────────

    def register_user(self, client: TestClient, email: str, password: str = "secret123", **fields) -> Dict:
        payload = {"email": email, "password": password, "player_name": fields.pop("player_name", email.split("@")[0])}
        payload.update(fields)
        res = client.post(f"{API}/auth/register", json=payload)
        assert res.status_code == 201, f"Error registrando '{email}': {res.text}"
        return res.json()["data"]

    def login(self, client: TestClient, email: str, password: str = "secret123") -> str:
        res = client.post(f"{API}/auth/login", json={"email": email, "password": password})
        assert res.status_code == 200, f"Login fallido para '{email}': {res.text}"
        return res.json()["data"]["token"]

    def auth_headers(self, token: str) -> Dict[str, str]:
        return {"Authorization": f"Bearer {token}"}

    def make_admin(self, client: TestClient, player_id: int, role: str = "coach") -> Dict:
        res = client.post(f"{API}/admins", json={"player_id": player_id, "role": role})
        assert res.status_code == 201, f"Error creando admin para player {player_id}: {res.text}"
        return res.json()["data"]

    def admin_token(self, client: TestClient, email: str = "admin@example.com") -> str:
        registration = self.register_user(client, email)
        self.make_admin(client, registration["player"]["id"])
        return self.login(client, email)

    # ─────────────────────────────
    # SEASONS
    # ─────────────────────────────

    def create_season(self, client: TestClient, token: str, name: str = "Temporada 2026", modality: str = "XV", is_current: bool = True) -> Dict:
        res = client.post(
            f"{API}/seasons",
            json={"name": name, "modality": modality, "is_current": is_current},
            headers=self.auth_headers(token),
        )
        assert res.status_code == 201, f"Error creando season '{name}': {res.text}"
        return res.json()["data"]
