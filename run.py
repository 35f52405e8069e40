"""
Silence overview runner.

Usage:
    python run.py --github-org my-org --github-team my-team --github-alertmanager-name prod

Environment variables (or .env file) provide the defaults, e.g.:
    GITHUB_TOKEN=... - Token for GitHub
    ALERTMANAGER_ADDR=http://alertmanager:9093 - Address of Alertmanager
    DRY_RUN=true - Render and merge without publishing
"""

import sys

from silence_overview.main import main

if __name__ == "__main__":
    sys.exit(main())
