# backend/inkwell/db/models/appointment_model.py
"""
Este archivo contiene el modelo de cita para la aplicación.
"""

import uuid

from sqlalchemy import Column, Integer, String, Text, DateTime, Numeric, ForeignKey, Enum, CheckConstraint

from inkwell.db.database import Base
from inkwell.db.types import StringList, utcnow

APPOINTMENT_STATUSES = ("scheduled", "confirmed", "in_progress", "completed", "cancelled", "no_show")


class Appointment(Base):
    __tablename__ = "appointments"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    client_id = Column(String(36), ForeignKey("clients.id", ondelete="RESTRICT"), nullable=False, index=True)
    artist_id = Column(String(36), ForeignKey("artists.id", ondelete="RESTRICT"), nullable=False, index=True)
    scheduled_date = Column(DateTime(timezone=True), nullable=False, index=True)
    duration = Column(Integer, nullable=False)  # minutos
    body_part = Column(String(50), nullable=False)
    description = Column(Text)
    reference_images = Column(StringList, nullable=False, default=list)
    status = Column(Enum(*APPOINTMENT_STATUSES, name="appointment_status"), nullable=False, default="scheduled")
    estimated_price = Column(Numeric(10, 2), nullable=True)
    notes = Column(Text)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False)

    __table_args__ = (
        CheckConstraint("duration > 0", name="ck_appointment_duration_positive"),
    )

    def __repr__(self):
        return f"<Appointment(id={self.id}, client_id={self.client_id}, artist_id={self.artist_id}, status='{self.status}')>"
