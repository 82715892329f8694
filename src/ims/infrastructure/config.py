"""Application settings.

Each setting can be overridden through an ``IMS_*`` environment variable.
"""

from __future__ import annotations

import os
from pathlib import Path

# ---------------- App Info ----------------
APP_NAME = "IMS (Inventory Management System)"

# ---------------- Paths ----------------
# When installed in editable mode the project root is the repo root.
PROJECT_DIR = Path(__file__).resolve().parents[3]

STORE_FILE_NAME = "inventory.json"


def data_dir() -> Path:
    return Path(os.environ.get("IMS_DATA_DIR", PROJECT_DIR / "data"))


def store_path() -> Path:
    return data_dir() / STORE_FILE_NAME


# ---------------- Display ----------------
def currency() -> str:
    return os.environ.get("IMS_CURRENCY", "MWK")


# ---------------- Logging ----------------
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def log_level() -> str:
    return os.environ.get("IMS_LOG_LEVEL", "INFO").upper()
