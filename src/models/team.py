# src/models/team.py

import uuid

from sqlalchemy import Column, String
from sqlalchemy.orm import relationship
from src.database import Base
from src.models.mixins import TimestampMixin


def _new_team_id() -> str:
    return str(uuid.uuid4())


class Team(TimestampMixin, Base):
    __tablename__ = "team"

    id = Column(String(36), primary_key=True, default=_new_team_id)
    name = Column(String, nullable=False)
    region = Column(String, nullable=True)

    players = relationship("Player", back_populates="team", passive_deletes=True)
