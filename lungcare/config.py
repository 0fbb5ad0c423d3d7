"""
LungCare: Configuration
========================
Runtime settings for the mapping and scoring engine.
Loads overrides from the project-level .env file.

Only operational settings live here. Confidence tiers, lexicon tables and
risk weights are fixed module-level constants next to the code that uses
them and are not environment-driven.
"""

import os
from pathlib import Path
from typing import Dict, Optional

from dotenv import load_dotenv

# ── Paths ───────────────────────────────────────────────────────────────
PACKAGE_DIR = Path(__file__).resolve().parent                 # lungcare/
PROJECT_ROOT = PACKAGE_DIR.parent

# ── Load .env ───────────────────────────────────────────────────────────
load_dotenv(PROJECT_ROOT / ".env")


def parse_module_levels(raw: str) -> Dict[str, str]:
    """
    "lungcare.core.mapping=DEBUG,lungcare.core.risk=WARNING" → mapping of
    logger name to level. Blank or malformed items are ignored.
    """
    levels: Dict[str, str] = {}
    for item in raw.split(","):
        name, sep, level = item.partition("=")
        if sep and name.strip() and level.strip():
            levels[name.strip()] = level.strip().upper()
    return levels


# ── Logging ─────────────────────────────────────────────────────────────
LOG_LEVEL: str = os.getenv("LUNGCARE_LOG_LEVEL", "INFO")
LOG_FILE: Optional[str] = os.getenv("LUNGCARE_LOG_FILE") or None

# Overrides for individual loggers, e.g. lungcare.core.mapping.merger=DEBUG
LOG_MODULE_LEVELS: Dict[str, str] = parse_module_levels(
    os.getenv("LUNGCARE_LOG_MODULE_LEVELS", "")
)
