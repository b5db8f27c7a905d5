# backend/inkwell/db/models/sale_model.py
"""
Este archivo contiene el modelo de venta para la aplicación.

remaining_balance y payment_status son campos derivados: los calcula
services/finance_service.py en cada escritura.
"""

import uuid

from sqlalchemy import Column, String, Text, DateTime, Numeric, ForeignKey

from inkwell.db.database import Base
from inkwell.db.types import utcnow


class Sale(Base):
    __tablename__ = "sales"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    appointment_id = Column(String(36), ForeignKey("appointments.id", ondelete="RESTRICT"), nullable=True, index=True)
    client_id = Column(String(36), ForeignKey("clients.id", ondelete="RESTRICT"), nullable=False, index=True)
    artist_id = Column(String(36), ForeignKey("artists.id", ondelete="RESTRICT"), nullable=False, index=True)
    total_amount = Column(Numeric(10, 2), nullable=False)
    deposit = Column(Numeric(10, 2), nullable=False, default=0)
    remaining_balance = Column(Numeric(10, 2), nullable=False, default=0)
    payment_status = Column(String(20), nullable=False, default="pending")
    payment_method = Column(String(20), nullable=True)
    sale_date = Column(DateTime(timezone=True), nullable=False, default=utcnow, index=True)
    notes = Column(Text)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False)

    def __repr__(self):
        return f"<Sale(id={self.id}, total={self.total_amount}, status='{self.payment_status}')>"
