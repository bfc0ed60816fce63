# src/schemas/season_schema.py

from datetime import datetime
from typing import Optional
from pydantic import BaseModel


class SeasonCreate(BaseModel):
    modality: str
    name: str
    is_current: Optional[bool] = None


class SeasonUpdate(BaseModel):
    modality: Optional[str] = None
    name: Optional[str] = None
    is_current: Optional[bool] = None


class SeasonResponse(BaseModel):
    id: int
    modality: str
    name: str
    is_current: bool
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
