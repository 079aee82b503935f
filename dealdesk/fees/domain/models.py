# dealdesk/fees/domain/models.py
from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Any, Dict, Optional, Tuple, Union

D = Decimal


class SuccessFeeMode(str, Enum):
    SIMPLE = "simple"
    PROGRESSIVE = "progressive"


class SuccessFeeBase(str, Enum):
    """Informatief label: de fee wordt altijd over de gewogen waarde berekend."""

    VE = "VE"  # enterprise value
    VT = "VT"  # transaction value


# -----------------------------
# Input (economic conditions)
# -----------------------------


@dataclass(frozen=True)
class Tranche:
    """
    One band of a progressive success fee.
    - min None: no lower bound (treated as 0)
    - max None: unbounded (capped at the weighted value when evaluated)
    """

    percent: D
    min: Optional[D] = None
    max: Optional[D] = None


@dataclass(frozen=True)
class SimpleSuccessFee:
    percentage: D
    base: SuccessFeeBase = SuccessFeeBase.VE

    mode = SuccessFeeMode.SIMPLE


@dataclass(frozen=True)
class ProgressiveSuccessFee:
    tranches: Tuple[Tranche, ...] = ()

    mode = SuccessFeeMode.PROGRESSIVE


SuccessFeeTerms = Union[SimpleSuccessFee, ProgressiveSuccessFee]


@dataclass(frozen=True)
class FeeConfiguration:
    operation_value: D
    pipeline_weight: Optional[int] = 100
    retainer_enabled: bool = False
    retainer_amount: D = D("0")
    flat_fee_enabled: bool = False
    flat_fee_amount: D = D("0")
    success_fee: Optional[SuccessFeeTerms] = None

    @property
    def success_fee_mode(self) -> Optional[SuccessFeeMode]:
        return self.success_fee.mode if self.success_fee is not None else None


# -----------------------------
# Output (breakdown)
# -----------------------------


@dataclass(frozen=True)
class TrancheLine:
    min: D
    max: Optional[D]
    range_label: str
    percent: D
    applicable_amount: D
    fee: D

    def as_dict(self) -> Dict[str, Any]:
        return {
            "min": self.min,
            "max": self.max,
            "range_label": self.range_label,
            "percent": self.percent,
            "applicable_amount": self.applicable_amount,
            "fee": self.fee,
        }


@dataclass(frozen=True)
class SimpleSuccessFeeDetail:
    percentage: D
    base: SuccessFeeBase
    amount: D

    mode = SuccessFeeMode.SIMPLE

    @property
    def total(self) -> D:
        return self.amount

    def as_dict(self) -> Dict[str, Any]:
        return {
            "mode": self.mode.value,
            "percentage": self.percentage,
            "base": self.base.value,
            "amount": self.amount,
            "total": self.total,
        }


@dataclass(frozen=True)
class ProgressiveSuccessFeeDetail:
    total: D
    line_items: Tuple[TrancheLine, ...] = ()

    mode = SuccessFeeMode.PROGRESSIVE

    def as_dict(self) -> Dict[str, Any]:
        return {
            "mode": self.mode.value,
            "total": self.total,
            "line_items": [li.as_dict() for li in self.line_items],
        }


SuccessFeeDetail = Union[SimpleSuccessFeeDetail, ProgressiveSuccessFeeDetail]


@dataclass(frozen=True)
class FeeBreakdown:
    """
    Result of one computation. Components that do not apply stay None and are
    left out of `as_dict()`.
    """

    total: D
    weighted_value: D = D("0")
    retainer: Optional[D] = None
    flat_fee: Optional[D] = None
    success_fee: Optional[SuccessFeeDetail] = None

    def as_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {"weighted_value": self.weighted_value}
        if self.retainer is not None:
            out["retainer"] = self.retainer
        if self.flat_fee is not None:
            out["flat_fee"] = self.flat_fee
        if self.success_fee is not None:
            out["success_fee"] = self.success_fee.as_dict()
        out["total"] = self.total
        return out
