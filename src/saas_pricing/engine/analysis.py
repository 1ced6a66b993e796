"""
Scenario tables built on top of the pricing engine.

Holds every input fixed except one and recomputes the derivation chain for
each candidate value, so the UI can chart and export how metrics move.
"""
from typing import Iterable, Optional

import pandas as pd

from .errors import PricingError
from .models import PricingInputs, PricingResults
from .pricing_engine import PricingEngine

SUMMARY_COLUMNS = [
    'total_customers',
    'recommended_monthly_price',
    'monthly_revenue',
    'total_acquisition_costs',
    'gross_profit',
    'customer_lifetime_value',
    'payback_period_months',
]


def results_frame(results: PricingResults, inputs: Optional[PricingInputs] = None) -> pd.DataFrame:
    """One-row DataFrame of a result, prefixed with its inputs when given."""
    row = {}
    if inputs is not None:
        row.update(inputs.to_dict())
    row.update(results.to_dict())
    return pd.DataFrame([row])


def sensitivity_table(
    inputs: PricingInputs,
    field: str,
    values: Iterable[float],
    engine: Optional[PricingEngine] = None,
) -> pd.DataFrame:
    """
    Recompute metrics for each value of one input.

    Args:
        inputs: Baseline inputs
        field: Name of the PricingInputs field to vary
        values: Candidate values for that field
        engine: Engine to use (a fresh one by default)

    Returns:
        DataFrame indexed by the varied value, one column per summary
        metric plus an ``error`` column (empty when the row computed)
    """
    if field not in PricingInputs.field_names():
        raise KeyError(f"Unknown input field: {field}")

    engine = engine or PricingEngine()
    rows = []
    for value in values:
        row = {field: value, 'error': ''}
        try:
            results = engine.compute(inputs.replace(**{field: float(value)}))
        except PricingError as e:
            row['error'] = e.user_message
            row.update({col: None for col in SUMMARY_COLUMNS})
        else:
            row.update({col: getattr(results, col) for col in SUMMARY_COLUMNS})
        rows.append(row)

    return pd.DataFrame(rows, columns=[field] + SUMMARY_COLUMNS + ['error']).set_index(field)
