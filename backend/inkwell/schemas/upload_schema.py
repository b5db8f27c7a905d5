# backend/inkwell/schemas/upload_schema.py
from typing import List

from .base_schema import CamelModel


class UploadResponse(CamelModel):
    """URLs estables de los archivos subidos, en el orden recibido."""
    urls: List[str]
