# src/schemas/affiliation_schema.py

from datetime import datetime
from typing import Optional
from pydantic import BaseModel


class AffiliationCreate(BaseModel):
    player_id: int
    federation: Optional[bool] = None
    association: Optional[bool] = None


class AffiliationUpdate(BaseModel):
    player_id: Optional[int] = None
    federation: Optional[bool] = None
    association: Optional[bool] = None


class AffiliationResponse(BaseModel):
    id: int
    player_id: int
    federation: bool
    association: bool
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
