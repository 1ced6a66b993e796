"""
Error types raised by the pricing engine.

Both kinds are recovered at the boundary (calculator controller, API) and
turned into a user-facing message.
"""
from typing import Iterable

INVALID_INPUT_MESSAGE = "Please enter valid positive numbers for all fields."
UNEXPECTED_ERROR_MESSAGE = "An error occurred during calculation. Please check your inputs."


class PricingError(Exception):
    """Base class for pricing engine failures."""
    user_message = UNEXPECTED_ERROR_MESSAGE


class InvalidInputError(PricingError, ValueError):
    """One or more inputs are outside their allowed range."""
    user_message = INVALID_INPUT_MESSAGE

    def __init__(self, fields: Iterable[str] = (), message: str = INVALID_INPUT_MESSAGE):
        super().__init__(message)
        self.fields = tuple(fields)
        self.message = message


class UnexpectedComputationError(PricingError, ArithmeticError):
    """The derivation chain failed or produced a non-finite value."""

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail
