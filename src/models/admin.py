# src/models/admin.py

from sqlalchemy import Column, Integer, String, ForeignKey
from src.database import Base
from src.models.mixins import TimestampMixin


class Admin(TimestampMixin, Base):
    __tablename__ = "admin"

    id = Column(Integer, primary_key=True, index=True)
    player_id = Column(Integer, ForeignKey("player.id", ondelete="CASCADE"), nullable=False)
    role = Column(String, nullable=False)
