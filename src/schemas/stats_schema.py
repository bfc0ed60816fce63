# src/schemas/stats_schema.py

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class StatsCreate(BaseModel):
    # "try" no puede ser nombre de atributo: se expone como alias
    model_config = ConfigDict(populate_by_name=True)

    player_id: int
    season_id: int
    yellow_card: Optional[int] = None
    red_card: Optional[int] = None
    try_: Optional[int] = Field(None, alias="try")
    drop: Optional[int] = None
    conversion: Optional[int] = None
    penalty_scored: Optional[int] = None
    points: Optional[int] = None


class StatsUpdate(StatsCreate):
    player_id: Optional[int] = None
    season_id: Optional[int] = None


class StatsResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int
    player_id: int
    season_id: int
    yellow_card: int
    red_card: int
    try_: int = Field(alias="try")
    drop: int
    conversion: int
    penalty_scored: int
    points: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
