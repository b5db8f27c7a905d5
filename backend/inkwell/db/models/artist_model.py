# backend/inkwell/db/models/artist_model.py
"""
Se encarga de definir el modelo de artista (tatuador) del estudio.
"""

import uuid

from sqlalchemy import Column, String, Text, DateTime, Numeric, Boolean, ForeignKey

from inkwell.db.database import Base
from inkwell.db.types import StringList, utcnow


class Artist(Base):
    __tablename__ = "artists"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    user_id = Column(String(36), ForeignKey("users.id", ondelete="SET NULL"), nullable=True)
    name = Column(String(255), nullable=False, index=True)
    email = Column(String(255), unique=True, nullable=True)
    phone = Column(String(50))
    # Orden de inserción preservado; sin deduplicación implícita
    specialties = Column(StringList, nullable=False, default=list)
    schedule = Column(Text)
    hourly_rate = Column(Numeric(10, 2), nullable=True)
    is_active = Column(Boolean, nullable=False, default=True, index=True)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False)

    def __repr__(self):
        return f"<Artist(id={self.id}, name='{self.name}', active={self.is_active})>"
