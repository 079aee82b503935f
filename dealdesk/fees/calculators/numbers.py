from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Any, Optional

D = Decimal
ZERO = D("0")
HUNDRED = D("100")


def to_decimal(v: Any) -> Optional[D]:
    """None blijft None; al het andere via str() naar Decimal (geen float-ruis)."""
    if v is None:
        return None
    if isinstance(v, Decimal):
        return v if v.is_finite() else None
    if isinstance(v, bool):
        return D(int(v))
    try:
        d = D(str(v).strip())
    except (InvalidOperation, ValueError):
        return None
    if not d.is_finite():
        return None
    return d


def amount_or_zero(v: Any) -> D:
    d = to_decimal(v)
    return ZERO if d is None else d


def clamp(v: D, lo: D, hi: D) -> D:
    return max(lo, min(hi, v))


def plain(v: D) -> str:
    """
    10000000 -> "10000000", 2.50 -> "2.5" (geen exponent-notatie).
    Geen quantize: die faalt boven de 28 cijfers van de standaard context.
    """
    return format(v.normalize(), "f")
