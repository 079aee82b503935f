from __future__ import annotations

from .fixed_fees import calc_fixed_fee
from .success_fee import (
    calc_progressive_success_fee,
    calc_simple_success_fee,
    range_label,
    sort_tranches,
)
from .weighting import calc_weighted_value, effective_pipeline_weight

__all__ = [
    "calc_fixed_fee",
    "calc_progressive_success_fee",
    "calc_simple_success_fee",
    "calc_weighted_value",
    "effective_pipeline_weight",
    "range_label",
    "sort_tranches",
]
