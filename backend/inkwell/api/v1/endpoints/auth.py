# backend/inkwell/api/v1/endpoints/auth.py
"""
Endpoint de la identidad autenticada.
"""

import logging

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from inkwell.api import deps
from inkwell.crud import user_crud
from inkwell.schemas.user_schema import Identity, UserResponse, UserUpsert

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("/user", response_model=UserResponse)
async def read_current_user(
    identity: Identity = Depends(deps.get_current_identity),
    db: AsyncSession = Depends(deps.get_db),
) -> UserResponse:
    """
    Devuelve el usuario asociado al token. Si es la primera vez que se ve
    esa identidad, se registra con su rol.
    """
    user = await user_crud.get_user(db, identity.user_id)
    if user is None:
        user = await user_crud.upsert_user(db, UserUpsert(id=identity.user_id, role=identity.role))
        logger.info(f"Usuario registrado: {user.id} ({user.role})")
    return user
