# backend/inkwell/services/sale_service.py

"""
Capa de servicios para las ventas.

Reglas del dominio:
- remaining_balance y payment_status se recalculan en cada alta y
  modificación con finance_service; nunca se toman del cliente.
- En una modificación parcial, el operando que falte (total o depósito) se
  lee de la fila bloqueada dentro de la misma transacción.
- Cliente, artista y, si se indica, la cita deben existir antes de escribir.
- Las lecturas devuelven la venta enriquecida; la cita es opcional.
"""

import logging
from datetime import date
from typing import List, Optional, Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from inkwell.core.exceptions import NotFoundError, ValidationError
from inkwell.core.time_utils import local_date_bounds, studio_tz, to_utc
from inkwell.crud import appointment_crud, artist_crud, client_crud, sale_crud
from inkwell.db.models.sale_model import Sale
from inkwell.db.types import column_values, utcnow
from inkwell.schemas import sale_schema
from inkwell.services import finance_service, relationship_service
from inkwell.services.appointment_service import appointment_service
from inkwell.services.validation_service import require_fields

logger = logging.getLogger(__name__)

NON_NULLABLE_FIELDS = ("client_id", "artist_id", "total_amount", "deposit", "sale_date")


class SaleService:
    """
    Servicio para operaciones de negocio relacionadas con ventas.
    """

    # ========================================
    # OPERACIONES DE CONSULTA
    # ========================================

    async def get_sale(self, db: AsyncSession, sale_id: str) -> sale_schema.SaleWithRelations:
        sale = await sale_crud.get_sale(db, sale_id)
        if not sale:
            raise NotFoundError("Sale", sale_id)
        enriched = await self.enrich(db, [sale])
        return enriched[0]

    async def list_sales(
        self,
        db: AsyncSession,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        skip: int = 0,
        limit: int = 100,
    ) -> List[sale_schema.SaleWithRelations]:
        """
        Lista de ventas enriquecidas. Con ambas fechas, filtra por el rango
        de días naturales [start_date, end_date], ambos incluidos.

        Raises:
            ValidationError: si solo llega una de las fechas o el rango está invertido.
        """
        if (start_date is None) != (end_date is None):
            missing = "startDate" if start_date is None else "endDate"
            raise ValidationError({missing: "startDate and endDate must be given together"})

        if start_date is not None and end_date is not None:
            if start_date > end_date:
                raise ValidationError({"startDate": "startDate must not be after endDate"})
            tz = studio_tz()
            start, _ = local_date_bounds(start_date, tz)
            _, end = local_date_bounds(end_date, tz)
            sales = await sale_crud.get_sales_between(db, start, end, skip=skip, limit=limit)
        else:
            sales = await sale_crud.get_sales(db, skip=skip, limit=limit)
        return await self.enrich(db, sales)

    async def enrich(self, db: AsyncSession, sales: Sequence[Sale]) -> List[sale_schema.SaleWithRelations]:
        clients = await client_crud.get_clients_by_ids(db, {s.client_id for s in sales})
        artists = await artist_crud.get_artists_by_ids(db, {s.artist_id for s in sales})
        appointments = await appointment_crud.get_appointments_by_ids(
            db, {s.appointment_id for s in sales if s.appointment_id is not None}
        )
        return relationship_service.resolve_sales(sales, clients, artists, appointments)

    # ========================================
    # OPERACIONES DE ESCRITURA
    # ========================================

    async def create_sale(self, db: AsyncSession, sale_in: sale_schema.SaleCreate) -> Sale:
        await self.ensure_references(
            db, client_id=sale_in.client_id, artist_id=sale_in.artist_id, appointment_id=sale_in.appointment_id
        )

        data = column_values(sale_in.model_dump())
        balance = finance_service.compute_balance(data["total_amount"], data["deposit"])
        data["remaining_balance"] = balance.remaining_balance
        data["payment_status"] = balance.payment_status.value
        data["sale_date"] = to_utc(data["sale_date"]) if data.get("sale_date") else utcnow()

        sale = await sale_crud.create_sale(db, data)
        logger.info(
            f"Venta creada: {sale.id} total={sale.total_amount} pendiente={sale.remaining_balance} "
            f"estado={sale.payment_status}"
        )
        return sale

    async def update_sale(self, db: AsyncSession, sale_id: str, sale_in: sale_schema.SaleUpdate) -> Sale:
        """
        Modificación parcial en una sola transacción: bloquear la fila,
        recalcular el saldo con los valores resultantes y escribir.
        """
        db_sale = await sale_crud.get_sale_for_update(db, sale_id)
        if not db_sale:
            raise NotFoundError("Sale", sale_id)

        update_data = column_values(sale_in.model_dump(exclude_unset=True))
        require_fields(update_data, NON_NULLABLE_FIELDS)

        await self.ensure_references(
            db,
            client_id=update_data.get("client_id"),
            artist_id=update_data.get("artist_id"),
            appointment_id=update_data.get("appointment_id"),
        )
        if "sale_date" in update_data:
            update_data["sale_date"] = to_utc(update_data["sale_date"])

        balance = finance_service.compute_balance(
            update_data.get("total_amount", db_sale.total_amount),
            update_data.get("deposit", db_sale.deposit),
        )
        update_data["remaining_balance"] = balance.remaining_balance
        update_data["payment_status"] = balance.payment_status.value

        sale = await sale_crud.update_sale(db, db_sale, update_data)
        logger.info(f"Venta actualizada: {sale_id} pendiente={sale.remaining_balance} estado={sale.payment_status}")
        return sale

    async def delete_sale(self, db: AsyncSession, sale_id: str) -> None:
        db_sale = await sale_crud.get_sale(db, sale_id)
        if not db_sale:
            raise NotFoundError("Sale", sale_id)
        await sale_crud.delete_sale(db, db_sale)
        logger.info(f"Venta eliminada: {sale_id}")

    async def ensure_references(
        self,
        db: AsyncSession,
        client_id: Optional[str] = None,
        artist_id: Optional[str] = None,
        appointment_id: Optional[str] = None,
    ) -> None:
        await appointment_service.ensure_references(db, client_id=client_id, artist_id=artist_id)
        if appointment_id is not None and not await appointment_crud.get_appointment(db, appointment_id):
            raise NotFoundError("Appointment", appointment_id)


sale_service = SaleService()
