# backend/inkwell/db/models/client_model.py
"""
Se encarga de definir el modelo de cliente del estudio.
"""

import uuid

from sqlalchemy import Column, String, Text, DateTime

from inkwell.db.database import Base
from inkwell.db.types import utcnow


class Client(Base):
    __tablename__ = "clients"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    first_name = Column(String(255), nullable=False)
    last_name = Column(String(255), nullable=False, index=True)
    email = Column(String(255), unique=True, nullable=True, index=True)
    phone = Column(String(50))
    date_of_birth = Column(DateTime(timezone=True))
    address = Column(Text)
    emergency_contact = Column(Text)
    medical_notes = Column(Text)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False)

    def __repr__(self):
        return f"<Client(id={self.id}, name='{self.first_name} {self.last_name}')>"
