# src/schemas/auth_schema.py

from typing import Any, Dict, Optional
from pydantic import BaseModel, EmailStr

from src.schemas.player_schema import PlayerFields, PlayerResponse


class RegisterRequest(PlayerFields):
    # email/password se chequean en el handler (400 con mensaje propio)
    email: Optional[EmailStr] = None
    password: Optional[str] = None


class LoginRequest(BaseModel):
    email: Optional[str] = None
    password: Optional[str] = None


class ForgotPasswordRequest(BaseModel):
    email: Optional[str] = None


class RegisterData(BaseModel):
    user: Dict[str, Any]
    player: PlayerResponse
    session: Optional[Dict[str, Any]] = None
    message: str


class LoginData(BaseModel):
    user: Dict[str, Any]
    player: Optional[PlayerResponse] = None
    session: Dict[str, Any]
    token: Optional[str] = None


class CurrentUserData(BaseModel):
    user: Dict[str, Any]
    player: Optional[PlayerResponse] = None
