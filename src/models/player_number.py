# src/models/player_number.py

from sqlalchemy import Column, Integer, String, ForeignKey
from src.database import Base
from src.models.mixins import TimestampMixin


class PlayerNumber(TimestampMixin, Base):
    __tablename__ = "player_number"

    id = Column(Integer, primary_key=True, index=True)
    player_id = Column(Integer, ForeignKey("player.id", ondelete="CASCADE"), nullable=False)
    team_id = Column(String(36), ForeignKey("team.id", ondelete="CASCADE"), nullable=False)
    player_number = Column(Integer, nullable=False)
