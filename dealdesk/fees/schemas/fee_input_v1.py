# dealdesk/fees/schemas/fee_input_v1.py
from __future__ import annotations

from decimal import Decimal
from typing import Annotated, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from dealdesk.core.settings import settings

from ..domain.models import (
    FeeConfiguration,
    ProgressiveSuccessFee,
    SimpleSuccessFee,
    SuccessFeeBase,
    Tranche,
)
from ..tranche_table import find_overlaps

# 1 biljard: ruim boven elke dealwaarde, en binnen de 28 cijfers die Decimal standaard aankan
MAX_AMOUNT = Decimal("1000000000000000")


class TrancheV1(BaseModel):
    model_config = ConfigDict(extra="forbid")

    min: Optional[Decimal] = Field(default=None, ge=0, le=MAX_AMOUNT)
    max: Optional[Decimal] = Field(default=None, ge=0, le=MAX_AMOUNT)
    percent: Decimal = Field(default=Decimal("0"), ge=0, le=100)

    @model_validator(mode="after")
    def _max_above_min(self) -> "TrancheV1":
        if self.max is not None and self.max <= (self.min or 0):
            raise ValueError("tranche max must be greater than min")
        return self

    def to_domain(self) -> Tranche:
        return Tranche(min=self.min, max=self.max, percent=self.percent)


class SimpleSuccessFeeV1(BaseModel):
    model_config = ConfigDict(extra="forbid")

    mode: Literal["simple"] = "simple"
    percentage: Decimal = Field(default=Decimal("0"), ge=0, le=100)
    base: SuccessFeeBase = SuccessFeeBase.VE

    def to_domain(self) -> SimpleSuccessFee:
        return SimpleSuccessFee(percentage=self.percentage, base=self.base)


class ProgressiveSuccessFeeV1(BaseModel):
    model_config = ConfigDict(extra="forbid")

    mode: Literal["progressive"]
    tranches: List[TrancheV1] = Field(default_factory=list)

    @field_validator("tranches")
    @classmethod
    def _check_table(cls, v: List[TrancheV1]) -> List[TrancheV1]:
        if len(v) > settings.FEES_MAX_TRANCHES:
            raise ValueError(f"at most {settings.FEES_MAX_TRANCHES} tranches allowed")
        if find_overlaps([t.to_domain() for t in v]):
            raise ValueError("tranches may not overlap")
        return v

    def to_domain(self) -> ProgressiveSuccessFee:
        return ProgressiveSuccessFee(tranches=tuple(t.to_domain() for t in self.tranches))


SuccessFeeV1 = Annotated[
    Union[SimpleSuccessFeeV1, ProgressiveSuccessFeeV1],
    Field(discriminator="mode"),
]


class FeeEstimateInputV1(BaseModel):
    """
    Economische voorwaarden zoals het formulier ze instuurt.
    Validatie gebeurt hier; de calculator zelf accepteert alles.
    """

    model_config = ConfigDict(extra="forbid")

    operation_value: Decimal = Field(default=Decimal("0"), ge=0, le=MAX_AMOUNT)
    pipeline_weight: int = Field(default=100, ge=0, le=100)

    retainer_enabled: bool = False
    retainer_amount: Decimal = Field(default=Decimal("0"), ge=0, le=MAX_AMOUNT)

    flat_fee_enabled: bool = False
    flat_fee_amount: Decimal = Field(default=Decimal("0"), ge=0, le=MAX_AMOUNT)

    success_fee: Optional[SuccessFeeV1] = None

    def to_config(self) -> FeeConfiguration:
        return FeeConfiguration(
            operation_value=self.operation_value,
            pipeline_weight=self.pipeline_weight,
            retainer_enabled=self.retainer_enabled,
            retainer_amount=self.retainer_amount,
            flat_fee_enabled=self.flat_fee_enabled,
            flat_fee_amount=self.flat_fee_amount,
            success_fee=self.success_fee.to_domain() if self.success_fee else None,
        )


class TrancheTableV1(BaseModel):
    model_config = ConfigDict(extra="forbid")

    tranches: List[TrancheV1] = Field(default_factory=list)

    def to_domain(self) -> List[Tranche]:
        return [t.to_domain() for t in self.tranches]
