from __future__ import annotations

from decimal import Decimal

import pytest

from dealdesk.fees.domain.models import (
    FeeConfiguration,
    ProgressiveSuccessFee,
    SimpleSuccessFee,
    SuccessFeeBase,
    Tranche,
)

D = Decimal


@pytest.fixture
def accelerator_tranches():
    # 1% tot 10M, 2% daarboven
    return [
        Tranche(min=None, max=D("10000000"), percent=D("1.0")),
        Tranche(min=D("10000000"), max=None, percent=D("2.0")),
    ]


@pytest.fixture
def simple_config():
    # 30M deal, 80% weging, retainer 50k, 1.5% success fee
    return FeeConfiguration(
        operation_value=D("30000000"),
        pipeline_weight=80,
        retainer_enabled=True,
        retainer_amount=D("50000"),
        success_fee=SimpleSuccessFee(percentage=D("1.5"), base=SuccessFeeBase.VE),
    )


@pytest.fixture
def progressive_config(accelerator_tranches):
    return FeeConfiguration(
        operation_value=D("30000000"),
        pipeline_weight=80,
        success_fee=ProgressiveSuccessFee(tranches=tuple(accelerator_tranches)),
    )
