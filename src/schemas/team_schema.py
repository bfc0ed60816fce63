# src/schemas/team_schema.py

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict


class TeamCreate(BaseModel):
    # name se valida en el router para responder 400 con mensaje propio
    name: Optional[str] = None
    region: Optional[str] = None


class TeamUpdate(BaseModel):
    name: Optional[str] = None
    region: Optional[str] = None


class TeamResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    region: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
