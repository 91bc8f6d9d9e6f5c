"""Services subpackage - preference persistence and plan configuration."""
from .preference_service import PreferenceService
from .plan_config_service import PlanConfigService

__all__ = ['PreferenceService', 'PlanConfigService']
