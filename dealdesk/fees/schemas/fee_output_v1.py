# dealdesk/fees/schemas/fee_output_v1.py
from __future__ import annotations

from decimal import Decimal
from typing import List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict

from ..domain.models import (
    FeeBreakdown,
    ProgressiveSuccessFeeDetail,
    SimpleSuccessFeeDetail,
    SuccessFeeBase,
    TrancheLine,
)


class TrancheLineV1(BaseModel):
    min: Decimal
    max: Optional[Decimal] = None
    range_label: str
    percent: Decimal
    applicable_amount: Decimal
    fee: Decimal

    @classmethod
    def from_domain(cls, line: TrancheLine) -> "TrancheLineV1":
        return cls(**line.as_dict())


class SimpleSuccessFeeOutV1(BaseModel):
    mode: Literal["simple"] = "simple"
    percentage: Decimal
    base: SuccessFeeBase
    amount: Decimal
    total: Decimal


class ProgressiveSuccessFeeOutV1(BaseModel):
    mode: Literal["progressive"] = "progressive"
    total: Decimal
    line_items: List[TrancheLineV1]


class FeeEstimateOutputV1(BaseModel):
    """
    Response lock voor de quick simulator:
    - componenten die niet van toepassing zijn blijven weg (exclude_none)
    - `lines` is de gerenderde weergave; UI toont ze read-only
    """

    model_config = ConfigDict(extra="forbid")

    version: Literal["v1"] = "v1"
    currency: str
    weighted_value: Decimal
    retainer: Optional[Decimal] = None
    flat_fee: Optional[Decimal] = None
    success_fee: Optional[Union[SimpleSuccessFeeOutV1, ProgressiveSuccessFeeOutV1]] = None
    total: Decimal
    lines: List[str] = []

    @classmethod
    def from_breakdown(cls, breakdown: FeeBreakdown, *, currency: str, lines: List[str]) -> "FeeEstimateOutputV1":
        success_fee = None
        sf = breakdown.success_fee
        if isinstance(sf, SimpleSuccessFeeDetail):
            success_fee = SimpleSuccessFeeOutV1(
                percentage=sf.percentage, base=sf.base, amount=sf.amount, total=sf.total
            )
        elif isinstance(sf, ProgressiveSuccessFeeDetail):
            success_fee = ProgressiveSuccessFeeOutV1(
                total=sf.total,
                line_items=[TrancheLineV1.from_domain(li) for li in sf.line_items],
            )

        return cls(
            currency=currency,
            weighted_value=breakdown.weighted_value,
            retainer=breakdown.retainer,
            flat_fee=breakdown.flat_fee,
            success_fee=success_fee,
            total=breakdown.total,
            lines=lines,
        )
