# backend/inkwell/services/finance_service.py
"""
Cálculo financiero de las ventas.

Deriva el saldo pendiente y el estado de cobro a partir del total y del
depósito. Se invoca en cada alta y modificación de una venta; los valores
que envíe el cliente para estos campos nunca se usan.
"""

from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP
from typing import Union

from inkwell.schemas.sale_schema import PaymentStatus

CENTS = Decimal("0.01")

Amount = Union[Decimal, int, str]


@dataclass(frozen=True)
class BalanceResult:
    remaining_balance: Decimal
    payment_status: PaymentStatus


def to_money(value: Amount) -> Decimal:
    """Normaliza un importe a Decimal con dos decimales."""
    return Decimal(str(value)).quantize(CENTS, rounding=ROUND_HALF_UP)


def compute_balance(total_amount: Amount, deposit: Amount) -> BalanceResult:
    """
    remaining = max(0, total - deposit)

    - completed si remaining <= 0 (incluye sobrepago, que no es un error)
    - partial si 0 < remaining < total
    - pending en otro caso (sin depósito)
    """
    total = to_money(total_amount)
    paid = to_money(deposit)
    if total < 0 or paid < 0:
        raise ValueError("Amounts must be non-negative")

    remaining = max(Decimal("0.00"), total - paid)

    if remaining <= 0:
        status = PaymentStatus.COMPLETED
    elif remaining < total:
        status = PaymentStatus.PARTIAL
    else:
        status = PaymentStatus.PENDING

    return BalanceResult(remaining_balance=remaining.quantize(CENTS), payment_status=status)
