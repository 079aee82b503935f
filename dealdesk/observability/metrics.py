# dealdesk/observability/metrics.py
from fastapi import APIRouter
from starlette.responses import Response

from prometheus_client import Counter, Histogram, generate_latest, CONTENT_TYPE_LATEST

router = APIRouter(tags=["observability"])

fee_estimate_counter = Counter(
    "dealdesk_fee_estimate_total",
    "Aantal fee-simulaties",
    ["mode"],  # simple|progressive|none
)

tranche_suggest_counter = Counter(
    "dealdesk_tranche_suggest_total",
    "Aantal 'tranche toevoegen' requests",
    ["result"],  # success|limit_reached
)

latency_hist = Histogram(
    "dealdesk_api_latency_seconds",
    "API latency per route",
    ["route"],  # e.g. /api/fees/estimate
)


@router.get("/metrics", include_in_schema=True)
def metrics() -> Response:
    # Prometheus expects text/plain; version=0.0.4
    return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)
