# src/services/registration_saga.py
"""
Alta de usuario en dos pasos con compensación.

1. Crear el usuario en el servicio de identidad.
2. Insertar el player vinculado (auth_user_id).

Si el paso 2 falla se borra el usuario creado en el paso 1. Si ese
borrado también falla se levanta CompensationFailed: el usuario huérfano
queda registrado en el log y el cliente recibe un 500.
"""
from dataclasses import dataclass
from typing import Any, Dict, Optional

from fastapi import status

from src.api_clients.identity_api import IdentityAPIClient, IdentityServiceError
from src.models import MANAGED_PASSWORD
from src.services.results import Ok
from src.services.table_gateway import TableGateway
from src.utils.logger_config import app_logger as logger


class RegistrationError(Exception):
    def __init__(self, message: str, status_code: int = status.HTTP_400_BAD_REQUEST):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class CompensationFailed(RegistrationError):
    def __init__(self, cause: str, compensation_error: str):
        super().__init__(
            f"{cause}; identity rollback failed: {compensation_error}",
            status.HTTP_500_INTERNAL_SERVER_ERROR,
        )
        self.cause = cause
        self.compensation_error = compensation_error


@dataclass
class Registration:
    user: Dict[str, Any]
    player: Dict[str, Any]
    session: Optional[Dict[str, Any]]


class RegistrationSaga:
    def __init__(self, identity: IdentityAPIClient, gateway: TableGateway):
        self.identity = identity
        self.gateway = gateway

    def run(self, email: str, password: str, player_fields: Dict[str, Any]) -> Registration:
        user, session = self._create_identity(email, password, player_fields)

        result = self.gateway.insert("player", {
            **player_fields,
            "email": email,
            "auth_user_id": user["id"],
            "password": MANAGED_PASSWORD,
        })
        if isinstance(result, Ok):
            logger.info(f"Registro completo: {email} (player id={result.value['id']})")
            return Registration(user=user, player=result.value, session=session)

        self._compensate(user["id"], result.message)
        raise RegistrationError(result.message)

    def _create_identity(self, email: str, password: str, player_fields: Dict[str, Any]):
        try:
            signup = self.identity.sign_up(
                email, password, metadata={"player_name": player_fields.get("player_name")}
            )
        except IdentityServiceError as e:
            raise RegistrationError(e.message) from e

        user = signup.get("user")
        if not user or not user.get("id"):
            raise RegistrationError("User creation failed", status.HTTP_500_INTERNAL_SERVER_ERROR)

        logger.info(f"Usuario de identidad creado para {email} (id={user['id']})")
        return user, signup.get("session")

    def _compensate(self, user_id: str, cause: str) -> None:
        logger.warning(f"Alta de player falló ({cause}); borrando usuario de identidad {user_id}")
        try:
            self.identity.delete_user(user_id)
        except IdentityServiceError as e:
            logger.exception(f"No se pudo borrar el usuario de identidad huérfano {user_id}")
            raise CompensationFailed(cause, e.message) from e
        logger.info(f"Usuario de identidad {user_id} borrado")
