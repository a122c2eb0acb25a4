"""Product model sourced from the commerce backend."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Any

UNNAMED_PRODUCT = "Produto sem nome"
# Upstream numbers at or above this magnitude are treated as garbage.
MAX_NUMERIC = Decimal("1e15")


@dataclass(frozen=True, slots=True)
class Product:
    """Catalog entry as exposed by Bling; never mutated locally."""

    name: str
    price: Decimal
    stock_quantity: int

    @classmethod
    def from_bling(cls, raw: dict[str, Any]) -> Product:
        """Build a product from a Bling item, wrapped in ``produto`` or bare."""
        data = raw.get("produto") if isinstance(raw.get("produto"), dict) else raw
        name = data.get("nome") or data.get("descricao") or UNNAMED_PRODUCT
        return cls(
            name=str(name).strip() or UNNAMED_PRODUCT,
            price=_to_decimal(data.get("preco")),
            stock_quantity=max(int(_to_decimal(data.get("estoque"))), 0),
        )


def _to_decimal(value: Any) -> Decimal:
    """Coerce upstream numeric strings; anything unparseable becomes zero."""
    if value is None or isinstance(value, bool):
        return Decimal("0")
    try:
        number = Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        return Decimal("0")
    if not number.is_finite() or abs(number) >= MAX_NUMERIC:
        return Decimal("0")
    return number
