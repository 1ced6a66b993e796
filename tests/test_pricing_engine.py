import math
import os
import sys

import pytest

# Add src to path for internal imports
src_path = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), 'src')
if src_path not in sys.path:
    sys.path.insert(0, src_path)

from saas_pricing.engine import (
    InvalidInputError,
    PricingEngine,
    PricingInputs,
    UnexpectedComputationError,
    compute,
    parse_number,
)
from saas_pricing.engine.errors import INVALID_INPUT_MESSAGE
from saas_pricing.engine.pricing_engine import (
    AVERAGE_TIER_PRICE,
    calculate_clv,
    calculate_recommended_price,
    round_half_up,
)


@pytest.fixture
def engine():
    return PricingEngine()


@pytest.fixture
def baseline():
    return PricingInputs(
        monthly_visitors=10000,
        conversion_rate_pct=2,
        monthly_churn_rate_pct=5,
        acquisition_cost_per_customer=50,
        monthly_operational_costs=5000,
        target_margin_pct=30,
    )


def test_worked_example(engine, baseline):
    """10k visitors at 2% conversion, 5% churn, $50 CAC, $5k ops, 30% margin."""
    result = engine.compute(baseline)

    assert result.total_customers == 200
    assert result.customer_lifetime_months == pytest.approx(20)
    assert result.customer_lifetime_value == pytest.approx(15000 / 0.7 / 200)
    assert result.recommended_monthly_price == 5
    assert result.monthly_revenue == pytest.approx(59400)
    assert result.total_acquisition_costs == pytest.approx(10000)
    assert result.gross_profit == pytest.approx(44400)
    assert result.payback_period_months == pytest.approx(10.0)
    assert result.monthly_operational_costs == 5000
    assert result.profit_margin_pct == pytest.approx(44400 / 59400 * 100)


def test_display_aliases(engine, baseline):
    result = engine.compute(baseline)
    assert result.revenue_per_user == result.recommended_monthly_price
    assert result.gross_revenue == result.monthly_revenue


@pytest.mark.parametrize("field", ['monthly_visitors', 'conversion_rate_pct', 'monthly_churn_rate_pct'])
@pytest.mark.parametrize("value", [0, -1])
def test_required_fields_must_be_positive(engine, baseline, field, value):
    with pytest.raises(InvalidInputError) as exc_info:
        engine.compute(baseline.replace(**{field: value}))

    assert str(exc_info.value) == INVALID_INPUT_MESSAGE
    assert field in exc_info.value.fields


def test_zero_visitors_message(engine, baseline):
    with pytest.raises(InvalidInputError, match="Please enter valid positive numbers for all fields."):
        engine.compute(baseline.replace(monthly_visitors=0))


@pytest.mark.parametrize("field", ['acquisition_cost_per_customer', 'monthly_operational_costs', 'target_margin_pct'])
def test_negative_optional_fields_rejected(engine, baseline, field):
    with pytest.raises(InvalidInputError) as exc_info:
        engine.compute(baseline.replace(**{field: -5}))
    assert field in exc_info.value.fields


def test_zero_optional_fields_allowed(engine, baseline):
    result = engine.compute(baseline.replace(monthly_operational_costs=0, target_margin_pct=0))
    assert result.customer_lifetime_value == pytest.approx(50)


@pytest.mark.parametrize("margin", [100, 150])
def test_margin_of_100_or_more_rejected(engine, baseline, margin):
    with pytest.raises(InvalidInputError) as exc_info:
        engine.compute(baseline.replace(target_margin_pct=margin))
    assert 'target_margin_pct' in exc_info.value.fields


def test_customers_rounding_to_zero_rejected(engine, baseline):
    # 10 visitors × 1% = 0.1 customers
    with pytest.raises(InvalidInputError):
        engine.compute(baseline.replace(monthly_visitors=10, conversion_rate_pct=1))


def test_zero_recommended_price_is_unexpected(engine, baseline):
    """No costs at all → CLV and price of 0, payback undefined."""
    inputs = baseline.replace(acquisition_cost_per_customer=0, monthly_operational_costs=0)
    with pytest.raises(UnexpectedComputationError):
        engine.compute(inputs)


def test_infinite_visitors_is_unexpected(engine, baseline):
    with pytest.raises(UnexpectedComputationError) as exc_info:
        engine.compute(baseline.replace(monthly_visitors=math.inf))
    assert exc_info.value.__cause__ is not None


def test_idempotent(engine, baseline):
    first = engine.compute(baseline)
    second = engine.compute(baseline)
    assert first == second
    assert first.to_dict() == second.to_dict()
    assert first.get_trace_text() == second.get_trace_text()


def test_module_level_compute_matches_engine(engine, baseline):
    assert compute(baseline) == engine.compute(baseline)


def test_more_visitors_never_decreases_volume_metrics(engine, baseline):
    previous = None
    for visitors in range(1000, 50001, 1750):
        result = engine.compute(baseline.replace(monthly_visitors=visitors))
        if previous is not None:
            assert result.total_customers >= previous.total_customers
            assert result.monthly_revenue >= previous.monthly_revenue
            assert result.total_acquisition_costs >= previous.total_acquisition_costs
        previous = result


@pytest.mark.parametrize("visitors,conversion", [(137, 3.3), (99999, 0.7), (1234567, 12.5)])
def test_customer_count_is_rounded_product(engine, baseline, visitors, conversion):
    result = engine.compute(baseline.replace(monthly_visitors=visitors, conversion_rate_pct=conversion))
    assert result.total_customers == round_half_up(visitors * (conversion / 100))


def test_tier_prices_constant(engine, baseline):
    for margin in (0, 10, 90):
        result = engine.compute(baseline.replace(target_margin_pct=margin))
        assert (result.basic_price, result.pro_price, result.enterprise_price) == (97, 297, 497)
    assert AVERAGE_TIER_PRICE == 297


def test_results_are_immutable(engine, baseline):
    result = engine.compute(baseline)
    with pytest.raises(AttributeError):
        result.total_customers = 1


def test_trace_records_each_step(engine, baseline):
    result = engine.compute(baseline)
    steps = [t.step for t in result.trace]
    assert steps == ["Customers", "Lifetime", "CLV", "Recommended Price", "Revenue", "Profit", "Payback"]
    assert "• Customers: Visitors × conversion rate = 200" in result.get_trace_text()


def test_round_half_up():
    assert round_half_up(2.5) == 3
    assert round_half_up(0.5) == 1
    assert round_half_up(5.357) == 5
    assert round_half_up(-2.5) == -2


def test_round_half_up_float_edges():
    # Adding 0.5 first would round these up by one
    assert round_half_up(0.49999999999999994) == 0
    assert round_half_up(4503599627370497.0) == 4503599627370497
    assert round_half_up(-0.5) == 0
    assert round_half_up(10 ** 20) == 10 ** 20


def test_clv_and_price_helpers():
    assert calculate_clv(200, 50, 5000, 30) == pytest.approx(107.142857, rel=1e-6)
    assert calculate_recommended_price(107.142857, 20) == 5


@pytest.mark.parametrize("raw,expected", [
    ("", 0.0),
    (None, 0.0),
    ("abc", 0.0),
    ("  42", 42.0),
    ("12abc", 12.0),
    ("3.5%", 3.5),
    (".5", 0.5),
    ("1e3", 1000.0),
    ("1e", 1.0),
    ("-7", -7.0),
    ("Infinity", math.inf),
    (float('nan'), 0.0),
    (250, 250.0),
    (2.25, 2.25),
    ("١٢", 0.0),
    ("7٣", 7.0),
])
def test_parse_number(raw, expected):
    assert parse_number(raw) == expected


def test_from_raw_reads_missing_fields_as_zero():
    inputs = PricingInputs.from_raw({'monthly_visitors': '5000', 'conversion_rate_pct': '3'})
    assert inputs.monthly_visitors == 5000
    assert inputs.conversion_rate_pct == 3
    assert inputs.monthly_churn_rate_pct == 0
    assert inputs.target_margin_pct == 0
