"""
Plans API - FastAPI router for Launch vs. Scale plan comparison.
"""
from fastapi import APIRouter, Depends, HTTPException
from fastapi.encoders import jsonable_encoder
from pydantic import BaseModel, Field

from ..config.currencies import UnknownCurrencyError, get_currency_config
from ..engine.currency import convert_from_base, convert_to_base
from ..engine.plans import compare_pricing
from ..services.plan_config_service import PlanConfigService
from .state import get_plan_config

router = APIRouter(prefix="/api/plans", tags=["plans"])

# Money fields converted from EUR for display
_MONEY_FIELDS = {
    'fixed_cost_monthly', 'fixed_cost_yearly', 'revenue_cost', 'total_monthly',
    'total_yearly', 'per_department_cost_monthly', 'total_fixed_monthly', 'total_fixed_yearly',
}


class CompareRequest(BaseModel):
    """Request model for a plan comparison."""
    annual_revenue: float = Field(ge=0)
    departments: int = Field(default=1, ge=0)
    currency: str = "EUR"


def _in_currency(plan: dict, currency: str) -> dict:
    return {
        key: convert_from_base(value, currency) if key in _MONEY_FIELDS else value
        for key, value in plan.items()
    }


@router.post("/compare")
async def compare_plans(request: CompareRequest, plans: PlanConfigService = Depends(get_plan_config)):
    """Compare Launch and Scale for a revenue given in any supported currency."""
    try:
        currency = get_currency_config(request.currency).code
        revenue_eur = convert_to_base(request.annual_revenue, currency)
    except UnknownCurrencyError as e:
        raise HTTPException(status_code=400, detail=str(e))

    comparison = compare_pricing(
        revenue_eur,
        request.departments,
        launch_config=plans.launch,
        scale_config=plans.scale,
        scale_tiers=plans.scale_tiers,
    )
    return {
        "currency": currency,
        "launch": _in_currency(jsonable_encoder(comparison.launch), currency),
        "scale": _in_currency(jsonable_encoder(comparison.scale), currency),
        "recommendation": comparison.recommendation,
        "savings_amount": convert_from_base(comparison.savings_amount, currency),
        "savings_percentage": comparison.savings_percentage,
    }


@router.get("/tiers")
async def list_scale_tiers(plans: PlanConfigService = Depends(get_plan_config)):
    """List the active Scale tiers."""
    return jsonable_encoder(plans.scale_tiers)
