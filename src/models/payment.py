# src/models/payment.py

from sqlalchemy import Column, Integer, Float, Boolean, ForeignKey
from src.database import Base
from src.models.mixins import TimestampMixin


class Payment(TimestampMixin, Base):
    __tablename__ = "payments"

    id = Column(Integer, primary_key=True, index=True)
    player_id = Column(Integer, ForeignKey("player.id", ondelete="CASCADE"), nullable=False)
    total_payed = Column(Float, nullable=False, default=0)
    total_debt = Column(Float, nullable=False, default=0)
    debt = Column(Boolean, nullable=False, default=False)
