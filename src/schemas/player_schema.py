# src/schemas/player_schema.py

from datetime import date, datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, EmailStr


class PlayerFields(BaseModel):
    """Campos opcionales comunes a alta, edición y registro."""
    team_id: Optional[str] = None
    player_name: Optional[str] = None
    date_of_birth: Optional[date] = None
    curp: Optional[str] = None
    rfc: Optional[str] = None
    short_size: Optional[str] = None
    jersey_size: Optional[str] = None
    phone_number: Optional[str] = None
    federation_id: Optional[int] = None
    eligibility: Optional[bool] = None
    category: Optional[str] = None
    profile_picture: Optional[str] = None


class PlayerCreate(PlayerFields):
    team_id: str
    player_name: str
    date_of_birth: date
    curp: str
    email: EmailStr
    federation_id: int


class PlayerUpdate(PlayerFields):
    email: Optional[EmailStr] = None


class PlayerResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    team_id: Optional[str] = None
    player_name: str
    date_of_birth: Optional[date] = None
    curp: Optional[str] = None
    rfc: Optional[str] = None
    short_size: Optional[str] = None
    jersey_size: Optional[str] = None
    email: str
    phone_number: Optional[str] = None
    password: str
    federation_id: Optional[int] = None
    eligibility: bool
    category: Optional[str] = None
    profile_picture: Optional[str] = None
    auth_user_id: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
