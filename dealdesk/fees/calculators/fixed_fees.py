from __future__ import annotations

from decimal import Decimal
from typing import Any, Optional

from .numbers import ZERO, to_decimal

D = Decimal


def calc_fixed_fee(enabled: bool, amount: Any) -> Optional[D]:
    """
    Retainer en flat fee: alleen als de toggle aan staat en het bedrag > 0.
    None betekent "niet van toepassing" (component blijft weg uit de breakdown).
    """
    if not enabled:
        return None
    d = to_decimal(amount)
    if d is None or d <= ZERO:
        return None
    return d
