# src/schemas/admin_schema.py

from datetime import datetime
from typing import Optional
from pydantic import BaseModel


class AdminCreate(BaseModel):
    player_id: int
    role: str


class AdminUpdate(BaseModel):
    player_id: Optional[int] = None
    role: Optional[str] = None


class AdminResponse(AdminCreate):
    id: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
