from fastapi import FastAPI, HTTPException, Depends
from fastapi.encoders import jsonable_encoder
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field
import pandas as pd

from ..config.currencies import SUPPORTED_CURRENCIES, UnknownCurrencyError, get_currency_config
from ..engine.calculator import CalculatorState
from ..engine.currency import convert_between, convert_from_base
from ..engine.models import ContractType, RevenueInput
from ..engine.presets import BASE_PRESETS_EUR, SLIDER_PRESETS_EUR
from ..engine.tiers import DEFAULT_SCHEDULES, detect_current_tier, schedule_frame, tier_boundaries
from ..presentation.breakdown import build_breakdown, get_tier_label
from ..services.preference_service import PreferenceService
from .plans_api import router as plans_router
from .state import get_preferences

app = FastAPI(
    title="Revenue Pricing API",
    description="Backend API for the revenue-tiered pricing calculator",
    version="1.0.0"
)

# Enable CORS for frontend development
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include plan comparison API
app.include_router(plans_router)


class Revenues(BaseModel):
    garage: float = Field(default=0, ge=0)
    shop: float = Field(default=0, ge=0)
    mobile: float = Field(default=0, ge=0)


class CalcRequest(BaseModel):
    revenues: Revenues
    currency: str = "EUR"
    include_mobile: bool = True
    contract_type: ContractType = ContractType.NONE


class ConvertRequest(BaseModel):
    amount: float = Field(ge=0)
    source: str = "EUR"
    target: str = "EUR"


class CurrencyPreference(BaseModel):
    currency: str


def _records(df: pd.DataFrame) -> list[dict]:
    """DataFrame rows as JSON-safe dicts (NaN -> None)."""
    return df.astype(object).where(df.notna(), None).to_dict(orient="records")


@app.get("/")
async def root():
    return {"status": "online", "message": "Revenue Pricing API Active"}


@app.get("/currencies")
async def list_currencies():
    return [jsonable_encoder(config) for config in SUPPORTED_CURRENCIES.values()]


@app.post("/convert")
async def convert(req: ConvertRequest):
    try:
        converted = convert_between(req.amount, req.source, req.target)
    except UnknownCurrencyError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return {
        "amount": req.amount,
        "source": get_currency_config(req.source).code,
        "target": get_currency_config(req.target).code,
        "converted": converted,
    }


@app.post("/calculate")
async def calculate(req: CalcRequest):
    try:
        state = CalculatorState(
            currency=req.currency,
            revenues=RevenueInput(**req.revenues.model_dump()),
            include_mobile=req.include_mobile,
            contract_type=req.contract_type,
        )
        result = state.result()
    except UnknownCurrencyError as e:
        raise HTTPException(status_code=400, detail=str(e))

    payload = result.to_dict()
    payload["trace"] = jsonable_encoder(result.trace)
    return {
        "result": payload,
        "breakdown": jsonable_encoder(build_breakdown(result)),
    }


@app.get("/tiers/detect")
async def detect_tier(revenue: float, currency: str = "EUR"):
    try:
        revenue_eur = convert_between(revenue, currency, "EUR")
    except UnknownCurrencyError as e:
        raise HTTPException(status_code=400, detail=str(e))
    tier = detect_current_tier(revenue_eur)
    return {
        "revenue": revenue,
        "currency": get_currency_config(currency).code,
        "tier": tier,
        "label": get_tier_label(tier),
    }


@app.get("/tiers/{stream}")
async def get_tiers(stream: str):
    schedule = DEFAULT_SCHEDULES.get(stream.lower())
    if schedule is None:
        raise HTTPException(status_code=404, detail=f"Unknown revenue stream '{stream}'")
    return {
        "stream": schedule.name,
        "base_rate": schedule.base_rate,
        "cooldown": schedule.cooldown,
        "boundaries": tier_boundaries(),
        "tiers": _records(schedule_frame(schedule)),
    }


@app.get("/presets")
async def get_presets(currency: str = "EUR"):
    try:
        code = get_currency_config(currency).code
        presets = {
            name: {stream: convert_from_base(value, code) for stream, value in preset.as_dict().items()}
            for name, preset in BASE_PRESETS_EUR.items()
        }
        slider = [convert_from_base(value, code) for value in SLIDER_PRESETS_EUR]
    except UnknownCurrencyError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return {"currency": code, "presets": presets, "slider": slider}


@app.get("/preferences/currency", response_model=CurrencyPreference)
async def get_currency_preference(preferences: PreferenceService = Depends(get_preferences)):
    return CurrencyPreference(currency=preferences.load_currency())


@app.put("/preferences/currency", response_model=CurrencyPreference)
async def set_currency_preference(
    body: CurrencyPreference,
    preferences: PreferenceService = Depends(get_preferences),
):
    try:
        saved = preferences.save_currency(body.currency)
    except UnknownCurrencyError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return CurrencyPreference(currency=saved)
