# src/models/season.py

from sqlalchemy import Column, Integer, String, Boolean
from src.database import Base
from src.models.mixins import TimestampMixin


class Season(TimestampMixin, Base):
    __tablename__ = "season"

    id = Column(Integer, primary_key=True, index=True)
    modality = Column(String, nullable=False)
    name = Column(String, nullable=False)
    is_current = Column(Boolean, nullable=False, default=False)
