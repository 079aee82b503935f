from dataclasses import replace
from decimal import Decimal

from dealdesk.fees.engine import compute_fees
from dealdesk.fees.explain.formatter import (
    fmt_money,
    fmt_percent,
    render_breakdown_lines,
    tranche_label,
)

D = Decimal


def test_fmt_money():
    assert fmt_money(D("2450.5")) == "2 450,50 €"
    assert fmt_money(D("2450.5"), "en") == "€2,450.50"
    assert fmt_money(D("24000000")) == "24 000 000,00 €"
    assert fmt_money(D("10000000"), cents=False) == "10 000 000 €"
    assert fmt_money(D("0.005")) == "0,01 €"
    assert fmt_money(D("-1234")) == "-1 234,00 €"


def test_fmt_percent():
    assert fmt_percent(D("1.5")) == "1,5%"
    assert fmt_percent(D("1.5"), "en") == "1.5%"
    assert fmt_percent(D("80")) == "80%"


def test_simple_estimate_lines(simple_config):
    lines = render_breakdown_lines(
        compute_fees(simple_config),
        operation_value=simple_config.operation_value,
        pipeline_weight=simple_config.pipeline_weight,
    )

    assert lines == [
        "Valeur opération : 30 000 000,00 €",
        "Pondération pipeline (80%) : 24 000 000,00 €",
        "Retainer : +50 000,00 €",
        "Success fee (1,5% sur VE) : +360 000,00 €",
        "Total des fees estimés : 410 000,00 €",
    ]


def test_progressive_estimate_lines_en(progressive_config):
    breakdown = compute_fees(progressive_config)
    lines = render_breakdown_lines(
        breakdown,
        operation_value=progressive_config.operation_value,
        pipeline_weight=progressive_config.pipeline_weight,
        locale="en",
    )

    assert lines[2:] == [
        "Success fee (progressive) : +€380,000.00",
        "  €0 – €10,000,000 (1%) : +€100,000.00",
        "  above €10,000,000 (2%) : +€280,000.00",
        "Estimated total fees : €380,000.00",
    ]
    assert tranche_label(breakdown.success_fee.line_items[1]) == "Au-dessus de 10 000 000 €"


def test_empty_breakdown_renders_only_total(simple_config):
    cfg = replace(simple_config, operation_value=D("0"))
    lines = render_breakdown_lines(compute_fees(cfg), operation_value=cfg.operation_value, pipeline_weight=80)

    assert lines == ["Total des fees estimés : 0,00 €"]
