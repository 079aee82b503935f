from __future__ import annotations

import time
from typing import Any

from fastapi import APIRouter, HTTPException, Request

from dealdesk.core.logging_config import logger
from dealdesk.core.settings import settings
from dealdesk.fees.domain.errors import TrancheLimitReached
from dealdesk.fees.engine import compute_fees
from dealdesk.fees.explain.formatter import render_breakdown_lines
from dealdesk.fees.schemas.fee_input_v1 import MAX_AMOUNT, FeeEstimateInputV1, TrancheTableV1, TrancheV1
from dealdesk.fees.schemas.fee_output_v1 import FeeEstimateOutputV1
from dealdesk.fees.tranche_table import add_tranche
from dealdesk.observability.metrics import (
    fee_estimate_counter,
    latency_hist,
    tranche_suggest_counter,
)

router = APIRouter(prefix="/api/fees", tags=["fees"])


# ----------------------------
# Helpers
# ----------------------------
def get_request_id(request: Request) -> str:
    return getattr(request.state, "request_id", None) or request.headers.get(
        "X-Request-ID", "unknown"
    )


def _log_obs(*, request: Request, event: str, duration_ms: float, **fields: Any) -> None:
    logger.bind(
        request_id=get_request_id(request),
        endpoint=str(request.url.path),
        duration_ms=duration_ms,
        **fields,
    ).info(event)


# ----------------------------
# 1) Quick simulator
# ----------------------------
@router.post(
    "/estimate",
    response_model=FeeEstimateOutputV1,
    response_model_exclude_none=True,
)
def estimate_fees(payload: FeeEstimateInputV1, request: Request) -> FeeEstimateOutputV1:
    t0 = time.time()

    config = payload.to_config()
    breakdown = compute_fees(config)
    lines = render_breakdown_lines(
        breakdown,
        operation_value=config.operation_value,
        pipeline_weight=config.pipeline_weight,
        locale=settings.FEES_LOCALE,
    )

    mode = config.success_fee_mode.value if config.success_fee_mode else "none"
    fee_estimate_counter.labels(mode=mode).inc()

    elapsed = time.time() - t0
    latency_hist.labels(route="/api/fees/estimate").observe(elapsed)
    _log_obs(
        request=request,
        event="fee_estimate",
        duration_ms=round(elapsed * 1000, 2),
        mode=mode,
        tranche_count=len(getattr(config.success_fee, "tranches", ())),
        total=str(breakdown.total),
    )

    return FeeEstimateOutputV1.from_breakdown(
        breakdown, currency=settings.FEES_CURRENCY, lines=lines
    )


# ----------------------------
# 2) Tranche table: add row
# ----------------------------
@router.post("/tranches/next", response_model=TrancheTableV1, response_model_exclude_none=True)
def next_tranche(payload: TrancheTableV1, request: Request) -> TrancheTableV1:
    t0 = time.time()

    try:
        tranches = add_tranche(payload.to_domain(), limit=settings.FEES_MAX_TRANCHES)
    except TrancheLimitReached as e:
        tranche_suggest_counter.labels(result="limit_reached").inc()
        _log_obs(
            request=request,
            event="tranche_suggest",
            duration_ms=round((time.time() - t0) * 1000, 2),
            result="limit_reached",
            tranche_count=len(payload.tranches),
        )
        raise HTTPException(status_code=409, detail=str(e))

    if tranches[-1].max > MAX_AMOUNT:
        tranche_suggest_counter.labels(result="limit_reached").inc()
        _log_obs(
            request=request,
            event="tranche_suggest",
            duration_ms=round((time.time() - t0) * 1000, 2),
            result="amount_ceiling",
            tranche_count=len(payload.tranches),
        )
        raise HTTPException(status_code=409, detail="no room for another tranche below the amount ceiling")

    tranche_suggest_counter.labels(result="success").inc()
    _log_obs(
        request=request,
        event="tranche_suggest",
        duration_ms=round((time.time() - t0) * 1000, 2),
        result="success",
        tranche_count=len(tranches),
    )

    return TrancheTableV1(
        tranches=[TrancheV1(min=t.min, max=t.max, percent=t.percent) for t in tranches]
    )
