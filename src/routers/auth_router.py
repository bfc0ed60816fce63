from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, HTTPException, status

from src.api_clients.identity_api import IdentityAPIClient, get_identity_client
from src.schemas.auth_schema import (
    RegisterRequest, LoginRequest, ForgotPasswordRequest,
    RegisterData, LoginData, CurrentUserData,
)
from src.schemas.envelope import DataEnvelope, MessageEnvelope
from src.services.auth_service import (
    get_bearer_token, get_current_user, find_linked_player,
    authenticate_user, end_session, send_password_reset,
)
from src.services.registration_saga import RegistrationSaga, RegistrationError
from src.services.table_gateway import TableGateway, get_gateway

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/register", response_model=DataEnvelope[RegisterData], status_code=status.HTTP_201_CREATED)
def register(
    payload: RegisterRequest,
    identity: IdentityAPIClient = Depends(get_identity_client),
    gateway: TableGateway = Depends(get_gateway),
):
    if not payload.email or not payload.password:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Email and password are required")

    player_fields = payload.model_dump(exclude_unset=True, exclude={"email", "password"})
    try:
        registration = RegistrationSaga(identity, gateway).run(payload.email, payload.password, player_fields)
    except RegistrationError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)

    return {"data": {
        "user": registration.user,
        "player": registration.player,
        "session": registration.session,
        "message": "Registration successful! Please check your email to verify your account.",
    }}


@router.post("/login", response_model=DataEnvelope[LoginData])
def login(
    payload: LoginRequest,
    identity: IdentityAPIClient = Depends(get_identity_client),
    gateway: TableGateway = Depends(get_gateway),
):
    if not payload.email or not payload.password:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Email and password are required")
    return {"data": authenticate_user(identity, gateway, payload.email, payload.password)}


@router.post("/logout", response_model=MessageEnvelope)
def logout(
    token: Optional[str] = Depends(get_bearer_token),
    identity: IdentityAPIClient = Depends(get_identity_client),
):
    end_session(identity, token)
    return {"message": "Logged out successfully"}


@router.get("/me", response_model=DataEnvelope[CurrentUserData])
def read_current_user(
    current_user: Dict[str, Any] = Depends(get_current_user),
    gateway: TableGateway = Depends(get_gateway),
):
    return {"data": {"user": current_user, "player": find_linked_player(gateway, current_user["id"])}}


@router.post("/forgot-password", response_model=MessageEnvelope)
def forgot_password(payload: ForgotPasswordRequest, identity: IdentityAPIClient = Depends(get_identity_client)):
    if not payload.email:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Email is required")
    send_password_reset(identity, payload.email)
    return {"message": "Password reset email sent"}
