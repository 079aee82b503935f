from __future__ import annotations

from decimal import Decimal
from typing import Any

from .numbers import HUNDRED, ZERO, amount_or_zero, clamp, to_decimal

D = Decimal

DEFAULT_PIPELINE_WEIGHT = D("100")


def effective_pipeline_weight(pipeline_weight: Any) -> D:
    # None = formulier-default (100%), buiten [0,100] wordt geclampt
    w = to_decimal(pipeline_weight)
    if w is None:
        return DEFAULT_PIPELINE_WEIGHT
    return clamp(w, ZERO, HUNDRED)


def calc_weighted_value(operation_value: Any, pipeline_weight: Any) -> D:
    value = amount_or_zero(operation_value)
    if value <= ZERO:
        return ZERO
    return value * effective_pipeline_weight(pipeline_weight) / HUNDRED
