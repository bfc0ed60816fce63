# src/schemas/payment_schema.py

from datetime import datetime
from typing import Optional
from pydantic import BaseModel


class PaymentCreate(BaseModel):
    player_id: int
    total_payed: Optional[float] = None
    total_debt: Optional[float] = None
    debt: Optional[bool] = None


class PaymentUpdate(BaseModel):
    player_id: Optional[int] = None
    total_payed: Optional[float] = None
    total_debt: Optional[float] = None
    debt: Optional[bool] = None


class PaymentResponse(BaseModel):
    id: int
    player_id: int
    total_payed: float
    total_debt: float
    debt: bool
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
