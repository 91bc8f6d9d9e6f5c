#!/usr/bin/env python
"""
Run the pricing API (FastAPI + uvicorn).

Usage:
    python scripts/run_api.py
"""
import subprocess
import sys
from pathlib import Path

from revenue_pricing.config.settings import get_settings


def main():
    project_root = Path(__file__).parent.parent
    settings = get_settings()

    print("Starting Revenue Pricing API (FastAPI)...")
    try:
        subprocess.run([
            sys.executable, "-m", "uvicorn",
            "revenue_pricing.api.main:app",
            "--host", settings.api_host,
            "--port", str(settings.api_port),
            "--reload"
        ], cwd=str(project_root))
    except KeyboardInterrupt:
        print("\nAPI stopped.")


if __name__ == "__main__":
    main()
