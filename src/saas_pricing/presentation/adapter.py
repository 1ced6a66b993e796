"""
Presentation adapter - writes formatted results into display slots.

The adapter owns the references to its display targets (any mutable
mapping of slot name → text), so the engine never touches the page.
"""
from typing import Callable, MutableMapping, Optional

from ..engine.models import PricingResults
from .formatting import format_currency, format_months, format_number

# Slot name → (results attribute, formatter)
DISPLAY_SLOTS: dict[str, tuple[str, Callable[[float], str]]] = {
    'total-customers': ('total_customers', format_number),
    'recommended-price': ('recommended_monthly_price', format_currency),
    'monthly-revenue': ('monthly_revenue', format_currency),
    'profit': ('gross_profit', format_currency),
    'basic-price': ('basic_price', format_currency),
    'pro-price': ('pro_price', format_currency),
    'enterprise-price': ('enterprise_price', format_currency),
    'clv': ('customer_lifetime_value', format_currency),
    'payback-period': ('payback_period_months', format_months),
    'revenue-per-user': ('revenue_per_user', format_currency),
    'gross-revenue': ('gross_revenue', format_currency),
    'acquisition-costs': ('total_acquisition_costs', format_currency),
    'operational-costs-display': ('monthly_operational_costs', format_currency),
}

# Help text shown beside each input
FIELD_HINTS = {
    'monthly_visitors': 'Total number of users who visit your platform monthly',
    'conversion_rate_pct': 'Percentage of visitors who become paying customers',
    'monthly_churn_rate_pct': 'Percentage of customers who cancel their subscription monthly',
    'acquisition_cost_per_customer': 'Average cost to acquire one new customer',
    'monthly_operational_costs': 'Monthly costs for running your business (servers, staff, etc.)',
    'target_margin_pct': 'Desired profit margin as a percentage of revenue',
}

FIELD_LABELS = {
    'monthly_visitors': 'Monthly Visitors',
    'conversion_rate_pct': 'Conversion Rate (%)',
    'monthly_churn_rate_pct': 'Monthly Churn Rate (%)',
    'acquisition_cost_per_customer': 'Customer Acquisition Cost ($)',
    'monthly_operational_costs': 'Monthly Operational Costs ($)',
    'target_margin_pct': 'Target Profit Margin (%)',
}


def format_results(results: PricingResults) -> dict[str, str]:
    """Format every display slot for a result."""
    return {
        slot: formatter(getattr(results, attr))
        for slot, (attr, formatter) in DISPLAY_SLOTS.items()
    }


class PresentationAdapter:
    """Renders results into an injectable set of display targets."""

    def __init__(self, target: Optional[MutableMapping[str, str]] = None):
        self.target = target if target is not None else {}
        self.render_count = 0

    def render(self, results: PricingResults) -> dict[str, str]:
        """Write all slots at once; returns the texts written."""
        texts = format_results(results)
        self.target.update(texts)
        self.render_count += 1
        return texts

    def read(self, slot: str) -> Optional[str]:
        """Current text of a slot, or None before the first render."""
        return self.target.get(slot)
