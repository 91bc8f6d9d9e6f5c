"""
Centralized settings and path configuration for the pricing calculator.
"""
import os
from pathlib import Path
from dataclasses import dataclass
from typing import Optional


def get_project_root() -> Path:
    """Get the project root directory (where pyproject.toml lives)."""
    # Walk up from this file to find the project root
    current = Path(__file__).resolve()
    for parent in current.parents:
        if (parent / 'pyproject.toml').exists():
            return parent
    # Fallback to 3 levels up from this file
    return Path(__file__).resolve().parent.parent.parent.parent


@dataclass
class Settings:
    """Application settings with sensible defaults."""

    # Project paths
    project_root: Path
    data_dir: Path

    # Client-local preference store (last selected currency)
    preferences_path: Path

    # Optional plan overrides (Launch/Scale)
    plan_config_csv: Optional[Path] = None
    scale_tiers_csv: Optional[Path] = None

    # Currency used when no preference has been stored
    default_currency: str = 'EUR'

    # API
    api_host: str = '0.0.0.0'
    api_port: int = 8000

    @classmethod
    def load(cls, project_root: Optional[Path] = None) -> 'Settings':
        """Load settings from the project structure and environment."""
        root = project_root or get_project_root()

        data_dir = Path(os.environ.get('PRICING_DATA_DIR', root / 'src' / 'revenue_pricing' / 'data'))
        preferences_path = Path(
            os.environ.get('PRICING_PREFERENCES_PATH', data_dir / 'preferences.json')
        )

        return cls(
            project_root=root,
            data_dir=data_dir,
            preferences_path=preferences_path,
            plan_config_csv=data_dir / 'plan_config.csv',
            scale_tiers_csv=data_dir / 'scale_tiers.csv',
            default_currency=os.environ.get('PRICING_DEFAULT_CURRENCY', 'EUR').strip().upper(),
            api_host=os.environ.get('PRICING_API_HOST', '0.0.0.0'),
            api_port=int(os.environ.get('PRICING_API_PORT', 8000)),
        )


# Default settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings.load()
    return _settings


def reset_settings():
    """Drop the cached settings so the next get_settings() reloads them."""
    global _settings
    _settings = None
