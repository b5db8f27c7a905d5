# backend/inkwell/db/models/user_model.py
"""
Se encarga de definir el modelo de usuario (personal del estudio).
"""

import uuid

from sqlalchemy import Column, String, DateTime, Enum

from inkwell.db.database import Base
from inkwell.db.types import utcnow

USER_ROLES = ("admin", "artist", "receptionist")


class User(Base):
    __tablename__ = "users"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    email = Column(String(255), unique=True, nullable=True)
    first_name = Column(String(255))
    last_name = Column(String(255))
    profile_image_url = Column(String(1024))
    role = Column(Enum(*USER_ROLES, name="user_role"), nullable=False, default="receptionist")
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False)

    def __repr__(self):
        return f"<User(id={self.id}, role='{self.role}')>"
