#!/usr/bin/env python
"""
Run the Streamlit revenue pricing calculator.

Usage:
    python scripts/run_app.py [PORT]

The selected currency is remembered in the preferences file from
settings (PRICING_PREFERENCES_PATH overrides it).
"""
import importlib.util
import os
import subprocess
import sys

from revenue_pricing.config.settings import get_settings


def main():
    module_spec = importlib.util.find_spec('revenue_pricing.ui.app_streamlit')
    if module_spec is None or module_spec.origin is None:
        print("ERROR: revenue_pricing is not installed (pip install -e .)")
        sys.exit(1)

    settings = get_settings()
    env = dict(os.environ, PRICING_PREFERENCES_PATH=str(settings.preferences_path))

    cmd = [sys.executable, '-m', 'streamlit', 'run', module_spec.origin]
    if len(sys.argv) > 1:
        cmd += ['--server.port', sys.argv[1]]
    print(f"Starting calculator: {' '.join(cmd)}")
    print(f"Currency preference: {settings.preferences_path}")

    try:
        subprocess.run(cmd, cwd=str(settings.project_root), env=env)
    except KeyboardInterrupt:
        print("\nCalculator stopped.")


if __name__ == "__main__":
    main()
