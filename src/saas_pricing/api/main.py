import logging
from typing import Optional, Union

from fastapi import FastAPI, HTTPException
from fastapi.encoders import jsonable_encoder
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from saas_pricing import __version__
from saas_pricing.config.settings import get_settings
from saas_pricing.engine import InvalidInputError, PricingInputs, PricingError
from saas_pricing.engine.errors import UNEXPECTED_ERROR_MESSAGE
from saas_pricing.engine.models import TIER_PRICES
from saas_pricing.engine.pricing_engine import AVERAGE_TIER_PRICE
from saas_pricing.presentation import format_results
from saas_pricing.api.state import engine

logger = logging.getLogger(__name__)

app = FastAPI(
    title="SaaS Pricing API",
    description="Derives recommended pricing and revenue metrics from business inputs",
    version=__version__
)

# Enable CORS for frontend development
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

RawValue = Optional[Union[float, str]]


class CalcRequest(BaseModel):
    """Raw form values; empty or non-numeric entries read as 0."""
    monthly_visitors: RawValue = None
    conversion_rate_pct: RawValue = None
    monthly_churn_rate_pct: RawValue = None
    acquisition_cost_per_customer: RawValue = None
    monthly_operational_costs: RawValue = None
    target_margin_pct: RawValue = None


@app.get("/")
async def root():
    return {"status": "online", "message": "SaaS Pricing API Active"}


@app.post("/calculate")
async def calculate_pricing(req: CalcRequest):
    inputs = PricingInputs.from_raw(req.model_dump())
    try:
        results = engine.compute(inputs)
    except InvalidInputError as e:
        raise HTTPException(status_code=422, detail=e.message)
    except PricingError:
        logger.exception("Calculation error for %s", inputs)
        raise HTTPException(status_code=500, detail=UNEXPECTED_ERROR_MESSAGE)

    return {
        "inputs": jsonable_encoder(inputs),
        "results": jsonable_encoder(results.to_dict()),
        "display": format_results(results),
        "trace": jsonable_encoder(results.trace),
    }


@app.get("/tiers")
async def get_tiers():
    return {
        "tiers": TIER_PRICES,
        "average_price": AVERAGE_TIER_PRICE,
    }


@app.get("/system/status")
async def get_status():
    settings = get_settings()
    return {
        "engine_active": True,
        "version": __version__,
        "debounce_seconds": settings.debounce_seconds,
        "notification_seconds": settings.notification_seconds,
        "form_defaults": settings.form_defaults,
    }
