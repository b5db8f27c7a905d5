# backend/inkwell/crud/user_crud.py
"""
Operaciones CRUD para el modelo User.
"""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from inkwell.db.models.user_model import User
from inkwell.db.types import column_values
from inkwell.schemas import user_schema


async def get_user(db: AsyncSession, user_id: str) -> Optional[User]:
    result = await db.execute(select(User).filter(User.id == user_id))
    return result.scalars().first()


async def upsert_user(db: AsyncSession, user_in: user_schema.UserUpsert) -> User:
    """
    Inserta el usuario o actualiza sus datos si el ID ya existe.
    """
    db_user = await get_user(db, user_in.id)
    data = user_in.model_dump(exclude_unset=True)
    if db_user is None:
        db_user = User(**column_values(user_in.model_dump()))
        db.add(db_user)
    else:
        for field, value in column_values(data).items():
            setattr(db_user, field, value)
    await db.commit()
    await db.refresh(db_user)
    return db_user
