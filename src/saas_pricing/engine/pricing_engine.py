"""
Pricing Engine - derives SaaS pricing metrics from business inputs.

Pipeline:
- Validate the six inputs (required fields strictly positive)
- Visitors × conversion → paying customers
- Churn → customer lifetime → lifetime value at the target margin
- Lifetime value spread over lifetime → recommended monthly price
- Fixed tiers → revenue, acquisition costs, profit and payback period

Every calculation is pure: no I/O and no state kept between calls.
"""
import logging
import math
from typing import Optional

from .errors import InvalidInputError, UnexpectedComputationError
from .models import (
    BASIC_PRICE,
    ENTERPRISE_PRICE,
    PRO_PRICE,
    PricingInputs,
    PricingResults,
    TraceStep,
)

logger = logging.getLogger(__name__)

AVERAGE_TIER_PRICE = (BASIC_PRICE + PRO_PRICE + ENTERPRISE_PRICE) / 3


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves toward +infinity."""
    whole = math.floor(value)
    # value - whole is exact for floats, unlike value + 0.5
    if value - whole >= 0.5:
        return whole + 1
    return whole


def calculate_clv(total_customers: int, acquisition_cost: float,
                  operational_costs: float, target_margin_pct: float) -> float:
    """Revenue per customer needed to cover all costs at the target margin."""
    total_costs = (acquisition_cost * total_customers) + operational_costs
    target_revenue = total_costs / (1 - (target_margin_pct / 100))
    return target_revenue / total_customers


def calculate_recommended_price(clv: float, customer_lifetime_months: float) -> int:
    """Monthly price that collects the lifetime value over the customer lifetime."""
    return round_half_up(clv / customer_lifetime_months)


class PricingEngine:
    """
    Stateless formula engine.

    Validation runs first and short-circuits; the derivation chain then runs
    once, in a fixed order, with no retries.
    """

    def validate(self, inputs: PricingInputs) -> None:
        """Raise InvalidInputError if any input is out of range."""
        invalid = []
        for name in ('monthly_visitors', 'conversion_rate_pct', 'monthly_churn_rate_pct'):
            if not getattr(inputs, name) > 0:
                invalid.append(name)
        for name in ('acquisition_cost_per_customer', 'monthly_operational_costs', 'target_margin_pct'):
            if getattr(inputs, name) < 0:
                invalid.append(name)
        if inputs.target_margin_pct >= 100:
            invalid.append('target_margin_pct')

        if invalid:
            raise InvalidInputError(fields=invalid)

    def compute(self, inputs: PricingInputs) -> PricingResults:
        """
        Compute all derived metrics.

        Args:
            inputs: PricingInputs with the six business values

        Returns:
            PricingResults with every metric finite

        Raises:
            InvalidInputError: an input is out of range
            UnexpectedComputationError: the chain failed or overflowed
        """
        self.validate(inputs)

        try:
            results = self._derive(inputs)
        except (InvalidInputError, UnexpectedComputationError):
            raise
        except (ArithmeticError, ValueError) as e:
            raise UnexpectedComputationError(f"Derivation failed: {e}") from e

        for name, value in results.to_dict().items():
            if not math.isfinite(value):
                raise UnexpectedComputationError(f"{name} is not finite ({value})")

        logger.debug(
            "Computed pricing: customers=%s price=%s revenue=%.2f",
            results.total_customers, results.recommended_monthly_price, results.monthly_revenue,
        )
        return results

    def _derive(self, inputs: PricingInputs) -> PricingResults:
        trace = []
        acquisition_cost = inputs.acquisition_cost_per_customer
        operational_costs = inputs.monthly_operational_costs

        total_customers = round_half_up(inputs.monthly_visitors * (inputs.conversion_rate_pct / 100))
        trace.append(TraceStep("Customers", "Visitors × conversion rate", str(total_customers)))
        if total_customers == 0:
            raise InvalidInputError(fields=('monthly_visitors', 'conversion_rate_pct'))

        monthly_churn = inputs.monthly_churn_rate_pct / 100
        customer_lifetime_months = 1 / monthly_churn
        trace.append(TraceStep("Lifetime", "1 / monthly churn", f"{customer_lifetime_months:.2f} months"))

        clv = calculate_clv(total_customers, acquisition_cost, operational_costs, inputs.target_margin_pct)
        trace.append(TraceStep("CLV", f"Costs at {inputs.target_margin_pct:g}% margin per customer", f"${clv:.2f}"))

        recommended_price = calculate_recommended_price(clv, customer_lifetime_months)
        trace.append(TraceStep("Recommended Price", "CLV / lifetime", f"${recommended_price}"))

        monthly_revenue = total_customers * AVERAGE_TIER_PRICE
        trace.append(TraceStep("Revenue", f"Customers × average tier price ${AVERAGE_TIER_PRICE:.2f}", f"${monthly_revenue:.2f}"))

        total_acquisition_costs = total_customers * acquisition_cost
        gross_profit = monthly_revenue - total_acquisition_costs - operational_costs
        profit_margin_pct = (gross_profit / monthly_revenue) * 100
        trace.append(TraceStep("Profit", "Revenue - acquisition - operations", f"${gross_profit:.2f}"))

        if recommended_price == 0:
            raise UnexpectedComputationError("Recommended price rounds to $0; payback period is undefined")
        payback_period = acquisition_cost / recommended_price
        trace.append(TraceStep("Payback", "Acquisition cost / recommended price", f"{payback_period:.1f} months"))

        return PricingResults(
            total_customers=total_customers,
            customer_lifetime_months=customer_lifetime_months,
            customer_lifetime_value=clv,
            recommended_monthly_price=recommended_price,
            monthly_revenue=monthly_revenue,
            total_acquisition_costs=total_acquisition_costs,
            gross_profit=gross_profit,
            payback_period_months=payback_period,
            monthly_operational_costs=operational_costs,
            profit_margin_pct=profit_margin_pct,
            trace=tuple(trace),
        )


_default_engine: Optional[PricingEngine] = None


def compute(inputs: PricingInputs) -> PricingResults:
    """Compute with the shared default engine."""
    global _default_engine
    if _default_engine is None:
        _default_engine = PricingEngine()
    return _default_engine.compute(inputs)
