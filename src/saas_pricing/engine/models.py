"""
Data models for the pricing engine.

Uses frozen dataclasses: a fresh inputs/results pair is built on every
recalculation and never mutated afterwards.
"""
import math
import re
from dataclasses import asdict, dataclass, field, fields
from typing import Any, Mapping, Optional

# Longest numeric prefix, the way a browser parseFloat reads a form value (ASCII digits only)
_NUMBER_PREFIX = re.compile(
    r'[+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)',
    re.ASCII,
)

# Fixed subscription tiers (not derived from inputs)
BASIC_PRICE = 97
PRO_PRICE = 297
ENTERPRISE_PRICE = 497
TIER_PRICES = {
    'basic': BASIC_PRICE,
    'pro': PRO_PRICE,
    'enterprise': ENTERPRISE_PRICE,
}


def parse_number(raw: Any) -> float:
    """
    Parse a raw form value into a float.

    Empty, missing, non-numeric and NaN values all read as 0.
    Trailing garbage is ignored ("12abc" → 12.0).
    """
    if raw is None or isinstance(raw, bool):
        return 0.0
    if isinstance(raw, (int, float)):
        value = float(raw)
    else:
        match = _NUMBER_PREFIX.match(str(raw).lstrip())
        if not match:
            return 0.0
        value = float(match.group(0).replace('Infinity', 'inf'))
    if math.isnan(value):
        return 0.0
    return value


@dataclass(frozen=True)
class TraceStep:
    """A single step in the derivation trace."""
    step: str
    description: str
    value: Optional[str] = None


@dataclass(frozen=True)
class PricingInputs:
    """The six business inputs of a pricing calculation."""
    monthly_visitors: float
    conversion_rate_pct: float
    monthly_churn_rate_pct: float
    acquisition_cost_per_customer: float = 0.0
    monthly_operational_costs: float = 0.0
    target_margin_pct: float = 0.0

    @classmethod
    def field_names(cls) -> tuple[str, ...]:
        return tuple(f.name for f in fields(cls))

    @classmethod
    def from_raw(cls, raw: Mapping[str, Any]) -> 'PricingInputs':
        """Build inputs from raw form values keyed by field name."""
        return cls(**{name: parse_number(raw.get(name)) for name in cls.field_names()})

    def replace(self, **changes) -> 'PricingInputs':
        """Return a copy with some fields changed."""
        values = asdict(self)
        values.update(changes)
        return PricingInputs(**values)

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class PricingResults:
    """Complete result of a pricing calculation."""
    total_customers: int
    customer_lifetime_months: float
    customer_lifetime_value: float
    recommended_monthly_price: int
    monthly_revenue: float
    total_acquisition_costs: float
    gross_profit: float
    payback_period_months: float
    monthly_operational_costs: float
    profit_margin_pct: float
    basic_price: int = BASIC_PRICE
    pro_price: int = PRO_PRICE
    enterprise_price: int = ENTERPRISE_PRICE
    trace: tuple[TraceStep, ...] = field(default=(), compare=False)

    @property
    def revenue_per_user(self) -> int:
        return self.recommended_monthly_price

    @property
    def gross_revenue(self) -> float:
        return self.monthly_revenue

    def get_trace_text(self) -> str:
        """Get human-readable derivation trace as formatted text."""
        lines = []
        for t in self.trace:
            if t.value:
                lines.append(f"• {t.step}: {t.description} = {t.value}")
            else:
                lines.append(f"• {t.step}: {t.description}")
        return "\n".join(lines)

    def to_dict(self) -> dict:
        """Plain dict of every metric (trace excluded) for JSON and tables."""
        data = {f.name: getattr(self, f.name) for f in fields(self) if f.name != 'trace'}
        data['revenue_per_user'] = self.revenue_per_user
        data['gross_revenue'] = self.gross_revenue
        return data
