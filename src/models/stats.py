# src/models/stats.py

from sqlalchemy import Column, Integer, ForeignKey
from src.database import Base
from src.models.mixins import TimestampMixin


class Stats(TimestampMixin, Base):
    __tablename__ = "stats"

    id = Column(Integer, primary_key=True, index=True)
    player_id = Column(Integer, ForeignKey("player.id", ondelete="CASCADE"), nullable=False)
    season_id = Column(Integer, ForeignKey("season.id", ondelete="CASCADE"), nullable=False)
    yellow_card = Column(Integer, nullable=False, default=0)
    red_card = Column(Integer, nullable=False, default=0)
    # "try" es palabra reservada en Python; la columna conserva el nombre
    try_ = Column("try", Integer, nullable=False, default=0)
    drop = Column(Integer, nullable=False, default=0)
    conversion = Column(Integer, nullable=False, default=0)
    penalty_scored = Column(Integer, nullable=False, default=0)
    points = Column(Integer, nullable=False, default=0)
