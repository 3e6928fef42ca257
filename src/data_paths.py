"""Filesystem locations for projector data.

Texts, scenarios and settings live under one data root. Override it with
PROJECTOR_DATA_DIR (e.g. a mounted volume on the projector box).
"""

import os
from pathlib import Path

DATA_DIR = Path(
    os.environ.get("PROJECTOR_DATA_DIR", "")
    or Path(__file__).resolve().parent.parent / "data"
)

TEXTS_DIR = DATA_DIR / "texts"
SCENARIOS_DIR = DATA_DIR / "scenarios"
SETTINGS_PATH = DATA_DIR / "settings" / "config.yaml"
