from __future__ import annotations

from .errors import TrancheIndexError, TrancheLimitReached, TrancheTableError
from .models import (
    FeeBreakdown,
    FeeConfiguration,
    ProgressiveSuccessFee,
    ProgressiveSuccessFeeDetail,
    SimpleSuccessFee,
    SimpleSuccessFeeDetail,
    SuccessFeeBase,
    SuccessFeeMode,
    Tranche,
    TrancheLine,
)

__all__ = [
    "FeeBreakdown",
    "FeeConfiguration",
    "ProgressiveSuccessFee",
    "ProgressiveSuccessFeeDetail",
    "SimpleSuccessFee",
    "SimpleSuccessFeeDetail",
    "SuccessFeeBase",
    "SuccessFeeMode",
    "Tranche",
    "TrancheIndexError",
    "TrancheLimitReached",
    "TrancheLine",
    "TrancheTableError",
]
