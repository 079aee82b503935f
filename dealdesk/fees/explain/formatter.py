from __future__ import annotations

from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Dict, List

from ..calculators.numbers import ZERO, amount_or_zero, plain
from ..calculators.weighting import effective_pipeline_weight
from ..domain.models import (
    FeeBreakdown,
    ProgressiveSuccessFeeDetail,
    SimpleSuccessFeeDetail,
    TrancheLine,
)

MONEY = Decimal("0.01")

LABELS: Dict[str, Dict[str, str]] = {
    "fr": {
        "operation_value": "Valeur opération",
        "weighting": "Pondération pipeline ({pct})",
        "retainer": "Retainer",
        "flat_fee": "Flat fee",
        "success_simple": "Success fee ({pct} sur {base})",
        "success_progressive": "Success fee (progressif)",
        "above": "Au-dessus de {min}",
        "range": "{min} - {max}",
        "total": "Total des fees estimés",
    },
    "en": {
        "operation_value": "Operation value",
        "weighting": "Pipeline weighting ({pct})",
        "retainer": "Retainer",
        "flat_fee": "Flat fee",
        "success_simple": "Success fee ({pct} on {base})",
        "success_progressive": "Success fee (progressive)",
        "above": "above {min}",
        "range": "{min} – {max}",
        "total": "Estimated total fees",
    },
}


def qmoney(x: Any) -> Decimal:
    return amount_or_zero(x).quantize(MONEY, rounding=ROUND_HALF_UP)


def _group(whole: str, sep: str) -> str:
    sign = ""
    if whole.startswith("-"):
        sign, whole = "-", whole[1:]
    parts = []
    while whole:
        parts.append(whole[-3:])
        whole = whole[:-3]
    return sign + sep.join(reversed(parts))


def fmt_money(amount: Any, locale: str = "fr", symbol: str = "€", cents: bool = True) -> str:
    """
    fr: 2450.5 -> "2 450,50 €"
    en: 2450.5 -> "€2,450.50"
    cents=False rondt af op hele euro's (tranchegrenzen).
    """
    if cents:
        s = f"{qmoney(amount):.2f}"
        whole, frac = s.split(".")
    else:
        whole, frac = f"{amount_or_zero(amount).quantize(Decimal('1'), rounding=ROUND_HALF_UP)}", ""

    if locale == "fr":
        out = _group(whole, " ")
        if frac:
            out = f"{out},{frac}"
        return f"{out} {symbol}"

    out = _group(whole, ",")
    if frac:
        out = f"{out}.{frac}"
    return f"{symbol}{out}"


def fmt_percent(pct: Any, locale: str = "fr") -> str:
    s = plain(amount_or_zero(pct))
    if locale == "fr":
        s = s.replace(".", ",")
    return f"{s}%"


def tranche_label(line: TrancheLine, locale: str = "fr", symbol: str = "€") -> str:
    labels = LABELS.get(locale, LABELS["en"])
    lo = fmt_money(line.min, locale, symbol, cents=False)
    if line.max is None:
        return labels["above"].format(min=lo)
    hi = fmt_money(line.max, locale, symbol, cents=False)
    return labels["range"].format(min=lo, max=hi)


def render_breakdown_lines(
    breakdown: FeeBreakdown,
    *,
    operation_value: Any,
    pipeline_weight: Any,
    locale: str = "fr",
    symbol: str = "€",
) -> List[str]:
    """
    Line-itemized estimate, top to bottom the way the economic-conditions card shows it.
    Without an operation value only the (zero) total is rendered.
    """
    labels = LABELS.get(locale, LABELS["en"])

    def money(x: Any) -> str:
        return fmt_money(x, locale, symbol)

    lines: List[str] = []

    if amount_or_zero(operation_value) > ZERO:
        weight = effective_pipeline_weight(pipeline_weight)
        lines.append(f"{labels['operation_value']} : {money(operation_value)}")
        lines.append(
            f"{labels['weighting'].format(pct=fmt_percent(weight, locale))} : {money(breakdown.weighted_value)}"
        )

    if breakdown.retainer is not None:
        lines.append(f"{labels['retainer']} : +{money(breakdown.retainer)}")

    if breakdown.flat_fee is not None:
        lines.append(f"{labels['flat_fee']} : +{money(breakdown.flat_fee)}")

    sf = breakdown.success_fee
    if isinstance(sf, SimpleSuccessFeeDetail):
        title = labels["success_simple"].format(pct=fmt_percent(sf.percentage, locale), base=sf.base.value)
        lines.append(f"{title} : +{money(sf.amount)}")
    elif isinstance(sf, ProgressiveSuccessFeeDetail):
        lines.append(f"{labels['success_progressive']} : +{money(sf.total)}")
        for li in sf.line_items:
            lines.append(
                f"  {tranche_label(li, locale, symbol)} ({fmt_percent(li.percent, locale)}) : +{money(li.fee)}"
            )

    lines.append(f"{labels['total']} : {money(breakdown.total)}")
    return lines
