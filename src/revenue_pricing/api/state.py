"""
Shared API state - services built once from settings.
"""
from typing import Optional

from ..config.settings import get_settings
from ..services.plan_config_service import PlanConfigService
from ..services.preference_service import PreferenceService

_preferences: Optional[PreferenceService] = None
_plan_config: Optional[PlanConfigService] = None


def get_preferences() -> PreferenceService:
    global _preferences
    if _preferences is None:
        settings = get_settings()
        _preferences = PreferenceService(settings.preferences_path, settings.default_currency)
    return _preferences


def get_plan_config() -> PlanConfigService:
    global _plan_config
    if _plan_config is None:
        settings = get_settings()
        _plan_config = PlanConfigService(settings.plan_config_csv, settings.scale_tiers_csv)
    return _plan_config
