# Fee estimator for dossier economic conditions

from .domain import (
    FeeBreakdown,
    FeeConfiguration,
    ProgressiveSuccessFee,
    SimpleSuccessFee,
    SuccessFeeBase,
    Tranche,
)
from .engine import compute_fees

__all__ = [
    "FeeBreakdown",
    "FeeConfiguration",
    "ProgressiveSuccessFee",
    "SimpleSuccessFee",
    "SuccessFeeBase",
    "Tranche",
    "compute_fees",
]
