#!/usr/bin/env python
"""
Run the Streamlit pricing calculator.

Usage:
    python scripts/run_app.py [--port 8501]
"""
import argparse
import subprocess
import sys
from pathlib import Path


def main():
    parser = argparse.ArgumentParser(description="Launch the SaaS pricing calculator UI")
    parser.add_argument("--port", type=int, default=8501, help="Port for the Streamlit server")
    args = parser.parse_args()

    project_root = Path(__file__).parent.parent
    calculator_page = project_root / 'src' / 'saas_pricing' / 'ui' / 'app_streamlit.py'

    if not calculator_page.exists():
        print(f"ERROR: calculator page not found at {calculator_page}")
        sys.exit(1)

    cmd = [
        sys.executable, '-m', 'streamlit', 'run', str(calculator_page),
        '--server.port', str(args.port),
    ]
    print(f"Starting calculator: {' '.join(cmd)}")

    try:
        subprocess.run(cmd, cwd=str(project_root))
    except KeyboardInterrupt:
        print("\nCalculator stopped.")


if __name__ == "__main__":
    main()
