# dealdesk/fees/explain/__init__.py
from __future__ import annotations

from .formatter import fmt_money, fmt_percent, render_breakdown_lines, tranche_label

__all__ = [
    "fmt_money",
    "fmt_percent",
    "render_breakdown_lines",
    "tranche_label",
]
