# src/models/mixins.py

from sqlalchemy import Column, DateTime, func


class TimestampMixin:
    # Los asigna la base de datos, nunca el cliente
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False
    )
