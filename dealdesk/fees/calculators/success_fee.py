from __future__ import annotations

from decimal import Decimal
from typing import Any, Iterable, List, Mapping, Optional, Tuple

from ..domain.models import (
    ProgressiveSuccessFeeDetail,
    SimpleSuccessFeeDetail,
    SuccessFeeBase,
    Tranche,
    TrancheLine,
)
from .numbers import HUNDRED, ZERO, amount_or_zero, plain, to_decimal

D = Decimal


def calc_simple_success_fee(
    weighted_value: D, percentage: Any, base: SuccessFeeBase = SuccessFeeBase.VE
) -> Optional[SimpleSuccessFeeDetail]:
    pct = to_decimal(percentage)
    if pct is None or pct <= ZERO:
        return None

    amount = weighted_value * pct / HUNDRED
    return SimpleSuccessFeeDetail(percentage=pct, base=base, amount=amount)


def _bound(raw: Any) -> Optional[D]:
    # None = geen grens; een grens die geen eindig getal is maakt de tranche onbruikbaar
    if raw is None:
        return None
    d = to_decimal(raw)
    if d is None:
        raise TypeError(f"unusable tranche bound: {raw!r}")
    return d


def _normalize_tranche(t: Any) -> Tranche:
    # Tranches komen soms nog als JSON-dict uit de dossier-opslag ({min, max, percent})
    if isinstance(t, Tranche):
        return Tranche(percent=amount_or_zero(t.percent), min=_bound(t.min), max=_bound(t.max))
    if isinstance(t, Mapping):
        return Tranche(
            percent=amount_or_zero(t.get("percent")),
            min=_bound(t.get("min")),
            max=_bound(t.get("max")),
        )
    raise TypeError(f"unsupported tranche: {t!r}")


def _sort_key(t: Tranche) -> Tuple[D, bool, D, D]:
    # min oplopend; bij gelijke min: begrensde max eerst, daarna onbegrensd, dan percent
    return (
        t.min if t.min is not None else ZERO,
        t.max is None,
        t.max if t.max is not None else ZERO,
        t.percent,
    )


def sort_tranches(tranches: Iterable[Any]) -> List[Tranche]:
    """Returns a sorted copy; caller's sequence is never touched."""
    normalized = []
    for t in tranches or ():
        try:
            normalized.append(_normalize_tranche(t))
        except TypeError:
            continue
    return sorted(normalized, key=_sort_key)


def range_label(min_value: D, max_value: Optional[D]) -> str:
    if max_value is not None:
        return f"{plain(min_value)} – {plain(max_value)}"
    return f"above {plain(min_value)}"


def calc_progressive_success_fee(weighted_value: D, tranches: Iterable[Any]) -> ProgressiveSuccessFeeDetail:
    """
    Marginal bands: every tranche only charges the slice of the weighted value
    that falls inside [min, max). An unbounded tranche is capped at the weighted value.
    """
    total = ZERO
    lines: List[TrancheLine] = []

    for t in sort_tranches(tranches):
        effective_min = t.min if t.min is not None else ZERO

        if t.percent <= ZERO or weighted_value <= effective_min:
            continue

        effective_max = t.max if t.max is not None else weighted_value
        applicable = min(weighted_value, effective_max) - effective_min
        if applicable <= ZERO:
            continue

        fee = applicable * t.percent / HUNDRED
        total += fee
        lines.append(
            TrancheLine(
                min=effective_min,
                max=t.max,
                range_label=range_label(effective_min, t.max),
                percent=t.percent,
                applicable_amount=applicable,
                fee=fee,
            )
        )

    return ProgressiveSuccessFeeDetail(total=total, line_items=tuple(lines))
