"""
Calculator controller - glue between raw form values, the engine and the display.

Keeps no element handles of its own: the adapter owns the display targets,
the notification center owns the error banners, and the debouncer owns the
recalculation schedule.
"""
import logging
from typing import Any, Mapping, Optional

from ..config.settings import Settings, get_settings
from ..engine.errors import (
    INVALID_INPUT_MESSAGE,
    UNEXPECTED_ERROR_MESSAGE,
    InvalidInputError,
)
from ..engine.models import PricingInputs, PricingResults, parse_number
from ..engine.pricing_engine import PricingEngine
from .adapter import PresentationAdapter
from .notifications import NotificationCenter
from .scheduling import Debouncer

logger = logging.getLogger(__name__)


def clamp_negative_fields(raw_fields: Mapping[str, Any]) -> dict[str, Any]:
    """Replace negative numeric entries with 0, leaving other entries alone."""
    clamped = dict(raw_fields)
    for name, raw in raw_fields.items():
        if parse_number(raw) < 0:
            clamped[name] = 0
    return clamped


class PricingCalculator:
    """
    Runs calculations on behalf of a UI.

    A failed calculation shows a notification and leaves the previously
    rendered results in place.
    """

    def __init__(
        self,
        engine: Optional[PricingEngine] = None,
        adapter: Optional[PresentationAdapter] = None,
        notifications: Optional[NotificationCenter] = None,
        debouncer: Optional[Debouncer] = None,
        settings: Optional[Settings] = None,
    ):
        self.settings = settings or get_settings()
        self.engine = engine or PricingEngine()
        self.adapter = adapter or PresentationAdapter()
        self.notifications = notifications or NotificationCenter(self.settings.notification_seconds)
        self.debouncer = debouncer or Debouncer(self.settings.debounce_seconds)
        self.last_results: Optional[PricingResults] = None
        self.last_inputs: Optional[PricingInputs] = None
        self._pending: Optional[dict[str, Any]] = None

    def calculate(self, raw_fields: Mapping[str, Any]) -> Optional[PricingResults]:
        """
        Parse, compute and render.

        Returns the new results, or None if the calculation failed.
        """
        try:
            inputs = PricingInputs.from_raw(clamp_negative_fields(raw_fields))
            results = self.engine.compute(inputs)
            self.adapter.render(results)
        except InvalidInputError as e:
            logger.info("Rejected inputs: %s", ", ".join(e.fields))
            self.notifications.show(INVALID_INPUT_MESSAGE)
            return None
        except Exception:
            logger.exception("Calculation error")
            self.notifications.show(UNEXPECTED_ERROR_MESSAGE)
            return None

        self.last_results = results
        self.last_inputs = inputs
        return results

    def start(self, raw_fields: Mapping[str, Any]) -> None:
        """Schedule the eager first calculation shortly after load."""
        self._pending = dict(raw_fields)
        self.debouncer.schedule(self.settings.initial_delay_seconds)

    def on_input_change(self, raw_fields: Mapping[str, Any]) -> None:
        """Record the latest form values and restart the quiet interval."""
        self._pending = dict(raw_fields)
        self.debouncer.touch()

    def tick(self) -> Optional[PricingResults]:
        """Run the pending calculation if its deadline has passed."""
        if self._pending is None or not self.debouncer.poll():
            return None
        raw_fields, self._pending = self._pending, None
        return self.calculate(raw_fields)
