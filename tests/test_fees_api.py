from decimal import Decimal

ESTIMATE_PATH = "/api/fees/estimate"
NEXT_TRANCHE_PATH = "/api/fees/tranches/next"

D = Decimal


def test_health(client):
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json() == {"status": "ok"}


# -------------------------
# 1) Quick simulator
# -------------------------
def test_estimate_simple_with_retainer(client):
    payload = {
        "operation_value": 30000000,
        "pipeline_weight": 80,
        "retainer_enabled": True,
        "retainer_amount": 50000,
        "success_fee": {"mode": "simple", "percentage": "1.5", "base": "VE"},
    }
    r = client.post(ESTIMATE_PATH, json=payload)
    assert r.status_code == 200
    data = r.json()

    assert data["version"] == "v1"
    assert data["currency"] == "EUR"
    assert D(data["weighted_value"]) == D("24000000")
    assert D(data["retainer"]) == D("50000")
    assert "flat_fee" not in data
    assert data["success_fee"]["mode"] == "simple"
    assert data["success_fee"]["base"] == "VE"
    assert D(data["success_fee"]["amount"]) == D("360000")
    assert D(data["total"]) == D("410000")
    assert data["lines"][-1] == "Total des fees estimés : 410 000,00 €"


def test_estimate_progressive(client, accelerator_payload):
    r = client.post(ESTIMATE_PATH, json=accelerator_payload)
    assert r.status_code == 200
    sf = r.json()["success_fee"]

    assert sf["mode"] == "progressive"
    assert D(sf["total"]) == D("380000")
    first, second = sf["line_items"]
    assert first["range_label"] == "0 – 10000000"
    assert D(first["fee"]) == D("100000")
    assert second["range_label"] == "above 10000000"
    assert "max" not in second  # onbegrensde tranche
    assert D(second["applicable_amount"]) == D("14000000")


def test_estimate_without_operation_value_has_no_components(client):
    payload = {
        "operation_value": 0,
        "retainer_enabled": True,
        "retainer_amount": 50000,
        "success_fee": {"mode": "simple", "percentage": "2"},
    }
    r = client.post(ESTIMATE_PATH, json=payload)
    assert r.status_code == 200
    data = r.json()

    assert D(data["total"]) == D("0")
    for key in ("retainer", "flat_fee", "success_fee"):
        assert key not in data
    assert data["lines"] == ["Total des fees estimés : 0,00 €"]


def test_estimate_rejects_too_many_tranches(client, accelerator_payload):
    accelerator_payload["success_fee"]["tranches"] = [
        {"min": str(i * 1000), "max": str((i + 1) * 1000), "percent": "1"} for i in range(6)
    ]
    r = client.post(ESTIMATE_PATH, json=accelerator_payload)
    assert r.status_code == 422


def test_estimate_rejects_out_of_range_weighting(client, accelerator_payload):
    accelerator_payload["pipeline_weight"] = 120
    r = client.post(ESTIMATE_PATH, json=accelerator_payload)
    assert r.status_code == 422


def test_estimate_rejects_amount_above_ceiling(client, accelerator_payload):
    accelerator_payload["operation_value"] = "1e30"
    r = client.post(ESTIMATE_PATH, json=accelerator_payload)
    assert r.status_code == 422

    accelerator_payload["operation_value"] = "30000000"
    accelerator_payload["success_fee"]["tranches"][1]["min"] = "1e28"
    r = client.post(ESTIMATE_PATH, json=accelerator_payload)
    assert r.status_code == 422


def test_estimate_at_ceiling_is_formatted(client):
    payload = {
        "operation_value": "1000000000000000",
        "success_fee": {"mode": "simple", "percentage": "100"},
    }
    r = client.post(ESTIMATE_PATH, json=payload)
    assert r.status_code == 200
    assert D(r.json()["total"]) == D("1000000000000000")


def test_request_id_is_echoed(client, accelerator_payload):
    r = client.post(ESTIMATE_PATH, json=accelerator_payload, headers={"X-Request-ID": "req-123"})
    assert r.status_code == 200
    assert r.headers["X-Request-ID"] == "req-123"


# -------------------------
# 2) Tranche table
# -------------------------
def test_next_tranche_on_empty_table(client):
    r = client.post(NEXT_TRANCHE_PATH, json={"tranches": []})
    assert r.status_code == 200
    (row,) = r.json()["tranches"]

    assert "min" not in row
    assert D(row["max"]) == D("10000000")
    assert D(row["percent"]) == D("0")


def test_next_tranche_appends_after_last_band(client):
    table = {"tranches": [{"min": None, "max": "10000000", "percent": "1"}]}
    r = client.post(NEXT_TRANCHE_PATH, json=table)
    assert r.status_code == 200
    rows = r.json()["tranches"]

    assert len(rows) == 2
    assert D(rows[1]["min"]) == D("10000000")
    assert D(rows[1]["max"]) == D("20000000")


def test_next_tranche_full_table_conflicts(client):
    table = {
        "tranches": [
            {"min": str(i * 1000), "max": str((i + 1) * 1000), "percent": "1"} for i in range(5)
        ]
    }
    r = client.post(NEXT_TRANCHE_PATH, json=table)
    assert r.status_code == 409
    assert "max 5" in r.json()["detail"]


# -------------------------
# 3) Observability
# -------------------------
def test_metrics_exposes_fee_counters(client, accelerator_payload):
    client.post(ESTIMATE_PATH, json=accelerator_payload)
    r = client.get("/metrics")
    assert r.status_code == 200
    assert 'dealdesk_fee_estimate_total{mode="progressive"}' in r.text


def test_next_tranche_past_amount_ceiling_conflicts(client):
    table = {"tranches": [{"min": None, "max": "1000000000000000", "percent": "1"}]}
    r = client.post(NEXT_TRANCHE_PATH, json=table)
    assert r.status_code == 409
    assert "ceiling" in r.json()["detail"]
