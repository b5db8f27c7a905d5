# backend/inkwell/services/upload_service.py
"""
Este servicio guarda las imágenes de referencia de las citas en el
directorio de subidas y devuelve URLs estables (/uploads/<archivo>).

El núcleo solo almacena esas URLs en Appointment.reference_images; nunca
inspecciona el contenido de los archivos.

Límites (configurables en settings):
- como máximo UPLOAD_MAX_FILES archivos por petición
- como máximo UPLOAD_MAX_BYTES por archivo
- solo imágenes jpeg/jpg/png/gif (extensión y tipo MIME)
"""

import logging
import os
import re
import secrets
import time
from pathlib import Path
from typing import List, Sequence

from fastapi import UploadFile

from inkwell.core.config import Settings
from inkwell.core.exceptions import ValidationError

logger = logging.getLogger(__name__)

ALLOWED_TYPES = re.compile(r"jpeg|jpg|png|gif")
CHUNK_SIZE = 1024 * 1024


class UploadService:

    def __init__(self, settings: Settings):
        self.upload_dir = Path(settings.UPLOAD_DIR)
        self.url_prefix = settings.UPLOAD_URL_PREFIX.rstrip("/")
        self.max_files = settings.UPLOAD_MAX_FILES
        self.max_bytes = settings.UPLOAD_MAX_BYTES

    def is_allowed_image(self, upload: UploadFile) -> bool:
        extension = os.path.splitext(upload.filename or "")[1].lower().lstrip(".")
        return bool(ALLOWED_TYPES.fullmatch(extension)) and bool(
            ALLOWED_TYPES.search((upload.content_type or "").lower())
        )

    def _unique_name(self, field_name: str, original_name: str) -> str:
        extension = os.path.splitext(original_name)[1].lower()
        return f"{field_name}-{int(time.time() * 1000)}-{secrets.randbelow(10**9)}{extension}"

    async def save_images(self, uploads: Sequence[UploadFile], field_name: str = "files") -> List[str]:
        """
        Valida y guarda los archivos; devuelve sus URLs en el mismo orden.

        Si algún archivo no cumple los límites o falla la escritura, no queda
        ninguno guardado.

        Raises:
            ValidationError: con la clave ``files`` (o ``files.<n>``).
        """
        if not uploads:
            raise ValidationError({field_name: "No files received"})
        if len(uploads) > self.max_files:
            raise ValidationError({field_name: f"At most {self.max_files} files are allowed"})

        for index, upload in enumerate(uploads):
            if not self.is_allowed_image(upload):
                raise ValidationError({f"{field_name}.{index}": "Only image files are allowed"})

        self.upload_dir.mkdir(parents=True, exist_ok=True)
        written: List[Path] = []
        try:
            for index, upload in enumerate(uploads):
                target = self.upload_dir / self._unique_name(field_name, upload.filename or "")
                written.append(target)
                await self._write_limited(upload, target, f"{field_name}.{index}")
        except Exception:
            for path in written:
                path.unlink(missing_ok=True)
            raise

        urls = [f"{self.url_prefix}/{path.name}" for path in written]
        logger.info(f"{len(urls)} imágenes guardadas en {self.upload_dir}")
        return urls

    async def _write_limited(self, upload: UploadFile, target: Path, key: str) -> None:
        size = 0
        with open(target, "wb") as f:
            while True:
                chunk = await upload.read(CHUNK_SIZE)
                if not chunk:
                    break
                size += len(chunk)
                if size > self.max_bytes:
                    raise ValidationError({key: f"File exceeds {self.max_bytes} bytes"})
                f.write(chunk)
