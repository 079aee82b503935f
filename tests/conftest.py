import os
os.environ.setdefault("FEES_LOCALE", "fr")  # vaste locale voor de gerenderde regels
os.environ.setdefault("FEES_MAX_TRANCHES", "5")

import pytest
from fastapi.testclient import TestClient

from dealdesk.main import app


@pytest.fixture(scope="session")
def client():
    return TestClient(app)


@pytest.fixture
def accelerator_payload():
    return {
        "operation_value": "30000000",
        "pipeline_weight": 80,
        "success_fee": {
            "mode": "progressive",
            "tranches": [
                {"min": None, "max": "10000000", "percent": "1"},
                {"min": "10000000", "max": None, "percent": "2"},
            ],
        },
    }
