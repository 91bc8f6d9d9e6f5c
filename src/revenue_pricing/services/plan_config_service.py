"""
Plan Config Service - Loads Launch/Scale plan settings.

Overrides come from optional CSV files (plan_config.csv, scale_tiers.csv);
built-in defaults are used when a file is missing, empty or unreadable.
"""
import logging
from pathlib import Path
from typing import Optional

import pandas as pd

from ..engine.plans import (
    LAUNCH_CONFIG,
    SCALE_CONFIG,
    LaunchConfig,
    ScaleConfig,
    ScaleTier,
    generate_scale_tiers,
)

logger = logging.getLogger(__name__)


def _optional_float(value) -> Optional[float]:
    if value is None or pd.isna(value) or str(value).strip() == '':
        return None
    return float(value)


def _required_float(row: pd.Series, column: str) -> float:
    value = _optional_float(row[column])
    if value is None:
        raise ValueError(f"blank value in column '{column}'")
    return value


class PlanConfigService:
    """
    Plan settings with CSV overrides.

    plan_config.csv columns: tier_type, fixed_monthly_cost, per_department_cost,
    revenue_percentage, is_active
    scale_tiers.csv columns: tier_number, revenue_threshold, take_rate,
    revenue_multiplier, rate_reduction
    """

    def __init__(self, plan_config_csv: Optional[Path] = None, scale_tiers_csv: Optional[Path] = None):
        self.plan_config_csv = plan_config_csv
        self.scale_tiers_csv = scale_tiers_csv
        self.reload()

    def reload(self):
        """Reload all plan data from disk."""
        config_df = self._load_csv(self.plan_config_csv)
        if not config_df.empty and 'is_active' in config_df.columns:
            active = config_df['is_active'].astype(str).str.strip().str.lower().isin(['true', '1', 'yes'])
            config_df = config_df[active]

        self.launch = self._parse_or_default(self._parse_launch, config_df, LAUNCH_CONFIG)
        self.scale = self._parse_or_default(self._parse_scale, config_df, SCALE_CONFIG)
        self.scale_tiers = self._parse_or_default(
            self._parse_scale_tiers,
            self._load_csv(self.scale_tiers_csv),
            generate_scale_tiers(self.scale.base_take_rate),
        )

    def _parse_or_default(self, parse, df: pd.DataFrame, default):
        """Run a parser, falling back to the default when the override is malformed."""
        try:
            return parse(df)
        except (KeyError, TypeError, ValueError) as e:
            logger.warning("Ignoring malformed plan override (%s): %s", parse.__name__, e)
            return default

    def _load_csv(self, path: Optional[Path]) -> pd.DataFrame:
        if not path or not path.exists():
            return pd.DataFrame()
        try:
            df = pd.read_csv(path, dtype=str)
        except (OSError, ValueError) as e:
            logger.warning("Could not read plan overrides from %s: %s", path, e)
            return pd.DataFrame()
        df.columns = [c.strip() for c in df.columns]
        return df

    def _row_for(self, df: pd.DataFrame, tier_type: str) -> Optional[pd.Series]:
        if df.empty or 'tier_type' not in df.columns:
            return None
        match = df[df['tier_type'].astype(str).str.strip().str.lower() == tier_type]
        if match.empty:
            return None
        return match.iloc[0]

    def _parse_launch(self, df: pd.DataFrame) -> LaunchConfig:
        row = self._row_for(df, 'launch')
        if row is None:
            return LAUNCH_CONFIG
        return LaunchConfig(
            fixed_monthly=_required_float(row, 'fixed_monthly_cost'),
            revenue_percentage=_required_float(row, 'revenue_percentage'),
        )

    def _parse_scale(self, df: pd.DataFrame) -> ScaleConfig:
        row = self._row_for(df, 'scale')
        if row is None:
            return SCALE_CONFIG
        return ScaleConfig(
            fixed_monthly=_required_float(row, 'fixed_monthly_cost'),
            per_department=_required_float(row, 'per_department_cost'),
            base_take_rate=_required_float(row, 'revenue_percentage'),
        )

    def _parse_scale_tiers(self, df: pd.DataFrame) -> list[ScaleTier]:
        if df.empty:
            return generate_scale_tiers(self.scale.base_take_rate)

        df = df.copy()
        df['tier_number'] = pd.to_numeric(df['tier_number'], errors='coerce')
        df = df.dropna(subset=['tier_number']).sort_values('tier_number')

        tiers = []
        for _, row in df.iterrows():
            tiers.append(ScaleTier(
                tier=int(row['tier_number']),
                revenue_threshold=_required_float(row, 'revenue_threshold'),
                take_rate=_required_float(row, 'take_rate'),
                revenue_multiplier=_optional_float(row.get('revenue_multiplier')),
                rate_reduction=_optional_float(row.get('rate_reduction')),
            ))
        return tiers or generate_scale_tiers(self.scale.base_take_rate)

    def tiers_frame(self) -> pd.DataFrame:
        """Scale tiers as a DataFrame for display."""
        return pd.DataFrame([
            {
                'Tier': t.tier,
                'Revenue Threshold': t.revenue_threshold,
                'Take Rate %': round(t.take_rate * 100, 4),
            }
            for t in self.scale_tiers
        ])
