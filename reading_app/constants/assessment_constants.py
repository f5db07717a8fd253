"""Assessment-related constants shared across UI and core layers."""

import os
from pathlib import Path

TICK_INTERVAL_MS: int = 1000
WARNING_THRESHOLD_SECONDS: int = 5 * 60
CRITICAL_THRESHOLD_SECONDS: int = 60

CATALOG_FILE_NAME: str = "essays.json"
DEFAULT_DATA_DIR: Path = Path(
    os.environ.get("READINGQT_DATA_DIR", Path(__file__).resolve().parents[1] / "data")
)
DEFAULT_PAGE_SIZE: int = 6

# (minimum score, title, message), highest band first
SCORE_BANDS: tuple[tuple[int, str, str], ...] = (
    (90, "Distinguished Scholar", "Exemplary performance! Your analytical prowess demonstrates mastery of comprehension."),
    (75, "Accomplished Reader", "Commendable achievement! Your understanding reflects strong analytical capabilities."),
    (60, "Developing Analyst", "Satisfactory progress! Continue refining your comprehension techniques."),
    (0, "Aspiring Scholar", "Foundation established! Focus on deeper analysis and careful attention to textual details."),
)
