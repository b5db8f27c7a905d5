# backend/inkwell/api/v1/endpoints/upload.py
"""
Endpoint de subida de imágenes de referencia.

Devuelve las URLs que luego se guardan en referenceImages de la cita.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, File, UploadFile

from inkwell.api import deps
from inkwell.schemas.upload_schema import UploadResponse
from inkwell.services.upload_service import UploadService

router = APIRouter()


@router.post("", response_model=UploadResponse)
async def upload_images(
    files: Optional[List[UploadFile]] = File(default=None),
    upload_service: UploadService = Depends(deps.get_upload_service),
) -> UploadResponse:
    """Guarda hasta UPLOAD_MAX_FILES imágenes (campo multipart ``files``)."""
    urls = await upload_service.save_images(files or [])
    return UploadResponse(urls=urls)
