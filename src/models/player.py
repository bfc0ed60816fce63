# src/models/player.py

from sqlalchemy import Column, Integer, String, Boolean, Date, ForeignKey
from sqlalchemy.orm import relationship
from src.database import Base
from src.models.mixins import TimestampMixin

# Las credenciales viven en el servicio de identidad
MANAGED_PASSWORD = "MANAGED_BY_IDENTITY_SERVICE"


class Player(TimestampMixin, Base):
    __tablename__ = "player"

    id = Column(Integer, primary_key=True, index=True)
    team_id = Column(String(36), ForeignKey("team.id", ondelete="SET NULL"), nullable=True)
    player_name = Column(String, nullable=False)
    date_of_birth = Column(Date, nullable=True)
    curp = Column(String(18), unique=True, nullable=True)
    rfc = Column(String(13), nullable=True)
    short_size = Column(String, nullable=True)
    jersey_size = Column(String, nullable=True)
    email = Column(String, unique=True, nullable=False)
    phone_number = Column(String, nullable=True)
    password = Column(String, nullable=False, default=MANAGED_PASSWORD)
    federation_id = Column(Integer, nullable=True)
    eligibility = Column(Boolean, nullable=False, default=False)
    category = Column(String, nullable=True)
    profile_picture = Column(String, nullable=True)

    # Referencia al usuario del servicio de identidad (uuid)
    auth_user_id = Column(String(36), unique=True, index=True, nullable=True)

    team = relationship("Team", back_populates="players")
