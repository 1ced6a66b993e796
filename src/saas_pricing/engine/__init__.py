"""Engine subpackage - input validation and derived-metric computation."""
from .pricing_engine import PricingEngine, compute
from .models import PricingInputs, PricingResults, parse_number
from .errors import PricingError, InvalidInputError, UnexpectedComputationError

__all__ = [
    'PricingEngine', 'compute',
    'PricingInputs', 'PricingResults', 'parse_number',
    'PricingError', 'InvalidInputError', 'UnexpectedComputationError',
]
