# src/models/affiliation.py

from sqlalchemy import Column, Integer, Boolean, ForeignKey
from src.database import Base
from src.models.mixins import TimestampMixin


class Affiliation(TimestampMixin, Base):
    __tablename__ = "affiliations"

    id = Column(Integer, primary_key=True, index=True)
    player_id = Column(Integer, ForeignKey("player.id", ondelete="CASCADE"), nullable=False)
    federation = Column(Boolean, nullable=False, default=False)
    association = Column(Boolean, nullable=False, default=False)
