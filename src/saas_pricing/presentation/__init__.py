"""Presentation subpackage - formatting, display slots, notifications and scheduling."""
from .adapter import DISPLAY_SLOTS, FIELD_HINTS, FIELD_LABELS, PresentationAdapter, format_results
from .calculator import PricingCalculator, clamp_negative_fields
from .formatting import format_currency, format_months, format_number
from .notifications import Notification, NotificationCenter
from .scheduling import Debouncer

__all__ = [
    'DISPLAY_SLOTS', 'FIELD_HINTS', 'FIELD_LABELS', 'PresentationAdapter', 'format_results',
    'PricingCalculator', 'clamp_negative_fields',
    'format_currency', 'format_months', 'format_number',
    'Notification', 'NotificationCenter',
    'Debouncer',
]
