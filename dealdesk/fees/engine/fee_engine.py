from __future__ import annotations

from decimal import Decimal

from ..calculators import (
    calc_fixed_fee,
    calc_progressive_success_fee,
    calc_simple_success_fee,
    calc_weighted_value,
)
from ..calculators.numbers import ZERO, amount_or_zero
from ..domain.models import (
    FeeBreakdown,
    FeeConfiguration,
    ProgressiveSuccessFee,
    SimpleSuccessFee,
)

D = Decimal


def compute_fees(config: FeeConfiguration) -> FeeBreakdown:
    """
    Estimated advisory fees for one dossier configuration.

    Pure: no I/O, no state between calls, no exceptions for ordinary input.
    Without an operation value there is nothing to compute yet, so the result is
    an empty breakdown with total 0.
    """
    if amount_or_zero(config.operation_value) <= ZERO:
        return FeeBreakdown(total=ZERO)

    weighted_value = calc_weighted_value(config.operation_value, config.pipeline_weight)
    total = ZERO

    retainer = calc_fixed_fee(config.retainer_enabled, config.retainer_amount)
    if retainer is not None:
        total += retainer

    flat_fee = calc_fixed_fee(config.flat_fee_enabled, config.flat_fee_amount)
    if flat_fee is not None:
        total += flat_fee

    success_fee = None
    terms = config.success_fee
    if isinstance(terms, SimpleSuccessFee):
        success_fee = calc_simple_success_fee(weighted_value, terms.percentage, terms.base)
    elif isinstance(terms, ProgressiveSuccessFee):
        success_fee = calc_progressive_success_fee(weighted_value, terms.tranches)

    if success_fee is not None:
        total += success_fee.total

    return FeeBreakdown(
        total=total,
        weighted_value=weighted_value,
        retainer=retainer,
        flat_fee=flat_fee,
        success_fee=success_fee,
    )
