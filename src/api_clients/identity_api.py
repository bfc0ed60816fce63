# src/api_clients/identity_api.py
from typing import Any, Dict, Optional

import httpx

from src.config import settings
from src.utils.logger_config import app_logger as logger


class IdentityServiceError(Exception):
    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


def _error_message(response: httpx.Response) -> str:
    # GoTrue no es consistente con la clave del mensaje
    try:
        body = response.json()
    except ValueError:
        return response.text or f"Identity service error ({response.status_code})"
    for key in ("msg", "message", "error_description", "error"):
        if isinstance(body, dict) and body.get(key):
            return str(body[key])
    return f"Identity service error ({response.status_code})"


class IdentityAPIClient:
    """
    Cliente del servicio de identidad (API REST de Supabase Auth / GoTrue).

    `api_key` es la anon key; `service_key` solo se usa para borrar usuarios.
    """

    def __init__(
        self,
        base_url: str,
        api_key: str,
        service_key: Optional[str] = None,
        timeout: float = 10.0,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.service_key = service_key
        self.timeout = timeout
        self.transport = transport

    def _headers(self, token: Optional[str] = None, admin: bool = False) -> Dict[str, str]:
        if admin:
            return {"apikey": self.service_key, "Authorization": f"Bearer {self.service_key}"}
        headers = {"apikey": self.api_key}
        if token:
            headers["Authorization"] = f"Bearer {token}"
        return headers

    def _request(
        self, method: str, path: str, token: Optional[str] = None, admin: bool = False, **kwargs
    ) -> Optional[Dict[str, Any]]:
        url = f"{self.base_url}{path}"
        headers = self._headers(token, admin=admin)

        try:
            with httpx.Client(timeout=self.timeout, transport=self.transport) as client:
                res = client.request(method, url, headers=headers, **kwargs)
        except httpx.HTTPError as e:
            logger.warning(f"Servicio de identidad inalcanzable ({method} {path}): {e}")
            raise IdentityServiceError(str(e)) from e

        if res.status_code >= 400:
            message = _error_message(res)
            logger.warning(f"Servicio de identidad respondió {res.status_code} en {path}: {message}")
            raise IdentityServiceError(message, res.status_code)

        if not res.content:
            return None
        return res.json()

    def sign_up(self, email: str, password: str, metadata: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """
        Devuelve {"user": ..., "session": ...}. session es None cuando el
        proyecto exige confirmar el email antes de iniciar sesión.
        """
        body = self._request(
            "POST", "/signup", json={"email": email, "password": password, "data": metadata or {}}
        ) or {}
        if "access_token" in body:
            session = {key: value for key, value in body.items() if key != "user"}
            return {"user": body.get("user"), "session": session}
        return {"user": body or None, "session": None}

    def sign_in(self, email: str, password: str) -> Dict[str, Any]:
        body = self._request(
            "POST", "/token", params={"grant_type": "password"},
            json={"email": email, "password": password},
        ) or {}
        session = {key: value for key, value in body.items() if key != "user"}
        return {"user": body.get("user"), "session": session}

    def get_user(self, token: str) -> Dict[str, Any]:
        return self._request("GET", "/user", token=token) or {}

    def sign_out(self, token: str) -> None:
        self._request("POST", "/logout", token=token)

    def reset_password_for_email(self, email: str, redirect_to: Optional[str] = None) -> None:
        params = {"redirect_to": redirect_to} if redirect_to else None
        self._request("POST", "/recover", params=params, json={"email": email})

    def delete_user(self, user_id: str) -> None:
        if not self.service_key:
            raise IdentityServiceError("Service key required to delete users")
        self._request("DELETE", f"/admin/users/{user_id}", admin=True)


def get_identity_client() -> IdentityAPIClient:
    missing = [
        name for name in ("SUPABASE_URL", "SUPABASE_ANON_KEY", "SUPABASE_SERVICE_KEY")
        if not getattr(settings, name)
    ]
    if missing:
        raise RuntimeError(f"Faltan variables de entorno del servicio de identidad: {', '.join(missing)}")

    return IdentityAPIClient(
        base_url=settings.identity_root,
        api_key=settings.SUPABASE_ANON_KEY,
        service_key=settings.SUPABASE_SERVICE_KEY,
        timeout=settings.IDENTITY_TIMEOUT,
    )
