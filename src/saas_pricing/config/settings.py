"""
Centralized settings for the pricing calculator.

Defaults live on the Settings dataclass; any of them can be overridden with
a SAAS_PRICING_* environment variable.
"""
import os
from dataclasses import dataclass, field
from typing import Optional

ENV_PREFIX = 'SAAS_PRICING_'


def _default_form_values() -> dict[str, str]:
    return {
        'monthly_visitors': '10000',
        'conversion_rate_pct': '2',
        'monthly_churn_rate_pct': '5',
        'acquisition_cost_per_customer': '50',
        'monthly_operational_costs': '5000',
        'target_margin_pct': '30',
    }


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(ENV_PREFIX + name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError as e:
        raise RuntimeError(f"{ENV_PREFIX}{name} must be a number, got '{raw}'") from e


@dataclass
class Settings:
    """Application settings with sensible defaults."""

    # Recalculation scheduling (seconds)
    debounce_seconds: float = 0.5
    initial_delay_seconds: float = 0.1

    # Error notifications auto-dismiss after this many seconds
    notification_seconds: float = 5.0

    # API server
    api_host: str = '0.0.0.0'
    api_port: int = 8000

    # Values pre-filled in the calculator form
    form_defaults: dict[str, str] = field(default_factory=_default_form_values)

    @classmethod
    def load(cls) -> 'Settings':
        """Load settings from the environment on top of the defaults."""
        defaults = cls()
        form_defaults = defaults.form_defaults
        for name in form_defaults:
            override = os.getenv(ENV_PREFIX + 'DEFAULT_' + name.upper())
            if override is not None:
                form_defaults[name] = override.strip()

        return cls(
            debounce_seconds=_env_float('DEBOUNCE_SECONDS', defaults.debounce_seconds),
            initial_delay_seconds=_env_float('INITIAL_DELAY_SECONDS', defaults.initial_delay_seconds),
            notification_seconds=_env_float('NOTIFICATION_SECONDS', defaults.notification_seconds),
            api_host=os.getenv(ENV_PREFIX + 'API_HOST', defaults.api_host),
            api_port=int(_env_float('API_PORT', defaults.api_port)),
            form_defaults=form_defaults,
        )


# Default settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings.load()
    return _settings


def reset_settings() -> None:
    """Forget the cached settings so the next get_settings() reloads them."""
    global _settings
    _settings = None
