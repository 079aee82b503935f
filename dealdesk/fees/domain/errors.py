from __future__ import annotations


class TrancheTableError(ValueError):
    """Invalid edit on a progressive tranche table."""


class TrancheLimitReached(TrancheTableError):
    def __init__(self, limit: int):
        super().__init__(f"tranche table is full (max {limit} tranches)")
        self.limit = limit


class TrancheIndexError(TrancheTableError):
    def __init__(self, index: int, size: int):
        super().__init__(f"no tranche at index {index} (table has {size})")
        self.index = index
        self.size = size
