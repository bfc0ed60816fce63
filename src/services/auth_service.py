# src/services/auth_service.py
from typing import Any, Dict, Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from src.api_clients.identity_api import IdentityAPIClient, IdentityServiceError, get_identity_client
from src.config import settings
from src.services.results import Ok, NotFound
from src.services.table_gateway import TableGateway, get_gateway
from src.utils.logger_config import app_logger as logger

bearer_scheme = HTTPBearer(auto_error=False)


def get_bearer_token(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> Optional[str]:
    # solo el prefijo exacto "Bearer "
    if credentials is None or credentials.scheme != "Bearer" or not credentials.credentials:
        return None
    return credentials.credentials


def get_current_user(
    token: Optional[str] = Depends(get_bearer_token),
    identity: IdentityAPIClient = Depends(get_identity_client),
) -> Dict[str, Any]:
    if token is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing or invalid authorization header",
            headers={"WWW-Authenticate": "Bearer"},
        )

    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Invalid or expired token",
        headers={"WWW-Authenticate": "Bearer"},
    )
    try:
        user = identity.get_user(token)
    except IdentityServiceError:
        raise credentials_exception
    if not user or not user.get("id"):
        raise credentials_exception
    return user


def find_linked_player(gateway: TableGateway, auth_user_id: str) -> Optional[Dict[str, Any]]:
    result = gateway.select_one("player", {"auth_user_id": auth_user_id})
    if isinstance(result, Ok):
        return result.value
    if not isinstance(result, NotFound):
        logger.warning(f"No se pudo leer el player de {auth_user_id}: {result.message}")
    return None


def require_admin(
    current_user: Dict[str, Any] = Depends(get_current_user),
    gateway: TableGateway = Depends(get_gateway),
) -> Dict[str, Any]:
    forbidden = HTTPException(
        status_code=status.HTTP_403_FORBIDDEN,
        detail="Forbidden: Admin access required",
    )
    player = find_linked_player(gateway, current_user["id"])
    if player is None:
        raise forbidden

    admin = gateway.select_one("admin", {"player_id": player["id"]})
    if not isinstance(admin, Ok):
        raise forbidden
    return current_user


def authenticate_user(identity: IdentityAPIClient, gateway: TableGateway, email: str, password: str) -> Dict[str, Any]:
    try:
        signin = identity.sign_in(email, password)
    except IdentityServiceError as e:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=e.message)

    user = signin["user"] or {}
    session = signin["session"]
    logger.info(f"Login correcto: {email}")
    return {
        "user": user,
        "player": find_linked_player(gateway, user.get("id")) if user.get("id") else None,
        "session": session,
        "token": session.get("access_token"),
    }


def end_session(identity: IdentityAPIClient, token: Optional[str]) -> None:
    # Sin token no hay sesión que invalidar del lado del servicio
    if token is None:
        return
    try:
        identity.sign_out(token)
    except IdentityServiceError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)


def send_password_reset(identity: IdentityAPIClient, email: str) -> None:
    try:
        identity.reset_password_for_email(email, redirect_to=settings.PASSWORD_RESET_REDIRECT_URL)
    except IdentityServiceError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)
