from __future__ import annotations

from .fee_input_v1 import (
    FeeEstimateInputV1,
    ProgressiveSuccessFeeV1,
    SimpleSuccessFeeV1,
    TrancheTableV1,
    TrancheV1,
)
from .fee_output_v1 import FeeEstimateOutputV1

__all__ = [
    "FeeEstimateInputV1",
    "FeeEstimateOutputV1",
    "ProgressiveSuccessFeeV1",
    "SimpleSuccessFeeV1",
    "TrancheTableV1",
    "TrancheV1",
]
