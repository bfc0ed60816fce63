# src/schemas/player_number_schema.py

from datetime import datetime
from typing import Optional
from pydantic import BaseModel


class PlayerNumberCreate(BaseModel):
    player_id: int
    team_id: str
    player_number: int


class PlayerNumberUpdate(BaseModel):
    player_id: Optional[int] = None
    team_id: Optional[str] = None
    player_number: Optional[int] = None


class PlayerNumberResponse(PlayerNumberCreate):
    id: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
