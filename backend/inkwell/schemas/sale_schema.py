# backend/inkwell/schemas/sale_schema.py
"""
Se encarga de definir los esquemas Pydantic para el modelo Sale.

remaining_balance y payment_status son solo de salida: si llegan en el
cuerpo de la petición se ignoran y el servidor los recalcula.
"""

import enum
from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import Field, field_validator

from .base_schema import CamelModel, ResponseModel, blank_to_none
from .appointment_schema import AppointmentResponse
from .artist_schema import ArtistResponse
from .client_schema import ClientResponse


class PaymentStatus(str, enum.Enum):
    """Estado de cobro derivado de total y depósito."""
    PENDING = "pending"
    PARTIAL = "partial"
    COMPLETED = "completed"


class PaymentMethod(str, enum.Enum):
    CASH = "cash"
    CARD = "card"
    TRANSFER = "transfer"
    CHECK = "check"
    DIGITAL = "digital"


class SaleBase(CamelModel):
    """Propiedades base de una venta."""
    appointment_id: Optional[str] = Field(None, description="Cita asociada (opcional)")
    client_id: str = Field(..., min_length=1)
    artist_id: str = Field(..., min_length=1)
    total_amount: Decimal = Field(..., ge=0, max_digits=10, decimal_places=2)
    deposit: Decimal = Field(Decimal("0"), ge=0, max_digits=10, decimal_places=2)
    payment_method: Optional[PaymentMethod] = None
    sale_date: Optional[datetime] = None
    notes: Optional[str] = None

    @field_validator("appointment_id", "payment_method", "sale_date", mode="before")
    @classmethod
    def empty_as_null(cls, value):
        return blank_to_none(value)


class SaleCreate(SaleBase):
    pass


class SaleUpdate(SaleBase):
    """Actualización parcial de una venta."""
    client_id: Optional[str] = Field(None, min_length=1)
    artist_id: Optional[str] = Field(None, min_length=1)
    total_amount: Optional[Decimal] = Field(None, ge=0, max_digits=10, decimal_places=2)
    deposit: Optional[Decimal] = Field(None, ge=0, max_digits=10, decimal_places=2)


class SaleResponse(ResponseModel):
    id: str
    appointment_id: Optional[str] = None
    client_id: str
    artist_id: str
    total_amount: Decimal
    deposit: Decimal
    remaining_balance: Decimal
    payment_status: PaymentStatus
    payment_method: Optional[PaymentMethod] = None
    sale_date: datetime
    notes: Optional[str] = None
    created_at: datetime
    updated_at: datetime


class SaleWithRelations(SaleResponse):
    """Venta enriquecida; la cita es opcional."""
    client: ClientResponse
    artist: ArtistResponse
    appointment: Optional[AppointmentResponse] = None
