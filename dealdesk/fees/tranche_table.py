# dealdesk/fees/tranche_table.py
from __future__ import annotations

from dataclasses import replace
from decimal import Decimal
from typing import Any, List, Optional, Sequence, Tuple

from dealdesk.core.settings import settings

from .calculators.numbers import ZERO, to_decimal
from .calculators.success_fee import sort_tranches
from .domain.errors import TrancheIndexError, TrancheLimitReached
from .domain.models import Tranche

D = Decimal

MAX_TRANCHES = settings.FEES_MAX_TRANCHES


def suggest_next_tranche(tranches: Sequence[Tranche], width: Optional[D] = None) -> Tranche:
    """
    Default row for "add tranche": start where the highest bounded tranche ends,
    so a fresh row does not overlap the existing ones.
    """
    if width is None:
        width = settings.FEES_DEFAULT_TRANCHE_WIDTH

    bounded = [t.max for t in tranches if t.max is not None and t.max > ZERO]
    last_max = max(bounded) if bounded else ZERO

    return Tranche(
        min=last_max if last_max > ZERO else None,
        max=last_max + width,
        percent=D("0"),
    )


def add_tranche(
    tranches: Sequence[Tranche], limit: Optional[int] = None, width: Optional[D] = None
) -> Tuple[Tranche, ...]:
    if limit is None:
        limit = MAX_TRANCHES
    if len(tranches) >= limit:
        raise TrancheLimitReached(limit)
    return tuple(tranches) + (suggest_next_tranche(tranches, width=width),)


def remove_tranche(tranches: Sequence[Tranche], index: int) -> Tuple[Tranche, ...]:
    if not 0 <= index < len(tranches):
        raise TrancheIndexError(index, len(tranches))
    return tuple(t for i, t in enumerate(tranches) if i != index)


def update_tranche(tranches: Sequence[Tranche], index: int, **changes: Any) -> Tuple[Tranche, ...]:
    if not 0 <= index < len(tranches):
        raise TrancheIndexError(index, len(tranches))

    unknown = set(changes) - {"min", "max", "percent"}
    if unknown:
        raise TypeError(f"unknown tranche field(s): {sorted(unknown)}")

    # lege invoer in het formulier komt binnen als None
    if "percent" in changes:
        changes["percent"] = to_decimal(changes["percent"]) or D("0")
    for k in ("min", "max"):
        if k in changes:
            changes[k] = to_decimal(changes[k])

    out = list(tranches)
    out[index] = replace(out[index], **changes)
    return tuple(out)


def find_overlaps(tranches: Sequence[Tranche]) -> List[Tuple[Tranche, Tranche]]:
    """
    Pairs of neighbouring tranches (in evaluation order) whose ranges overlap.
    An unbounded tranche overlaps everything that starts after it.
    """
    ordered = sort_tranches(tranches)
    overlaps: List[Tuple[Tranche, Tranche]] = []
    for prev, cur in zip(ordered, ordered[1:]):
        cur_min = cur.min if cur.min is not None else ZERO
        if prev.max is None or cur_min < prev.max:
            overlaps.append((prev, cur))
    return overlaps
