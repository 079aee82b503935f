from __future__ import annotations

from .fee_engine import compute_fees

__all__ = ["compute_fees"]
