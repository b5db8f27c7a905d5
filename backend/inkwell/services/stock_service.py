# backend/inkwell/services/stock_service.py
"""
Monitor de niveles de stock.

La clasificación es derivada y nunca se guarda:
- out_of_stock: current_stock == 0
- low_stock:    0 < current_stock <= min_level
- in_stock:     resto

El contador agregado del panel (low_stock_count) cuenta
current_stock <= min_level, por lo que incluye los artículos agotados.
"""

from dataclasses import dataclass, field
from typing import Dict, Iterable, Protocol

from inkwell.schemas.inventory_schema import StockStatus


class StockLevels(Protocol):
    id: str
    current_stock: int
    min_level: int


@dataclass(frozen=True)
class StockSummary:
    statuses: Dict[str, StockStatus] = field(default_factory=dict)
    low_stock_count: int = 0


def classify_stock(current_stock: int, min_level: int) -> StockStatus:
    if current_stock == 0:
        return StockStatus.OUT_OF_STOCK
    if current_stock <= min_level:
        return StockStatus.LOW_STOCK
    return StockStatus.IN_STOCK


def is_low_stock(item: StockLevels) -> bool:
    """Criterio del panel y del filtro ?lowStock=true."""
    return item.current_stock <= item.min_level


def summarize_stock(items: Iterable[StockLevels]) -> StockSummary:
    statuses: Dict[str, StockStatus] = {}
    low_count = 0
    for item in items:
        statuses[item.id] = classify_stock(item.current_stock, item.min_level)
        if is_low_stock(item):
            low_count += 1
    return StockSummary(statuses=statuses, low_stock_count=low_count)
