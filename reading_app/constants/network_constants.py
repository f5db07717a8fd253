"""Network configuration constants for the read-only catalog API."""

import os

DEFAULT_HOST: str = "0.0.0.0"
DEFAULT_PORT: int = 8000
API_ENABLED: bool = os.environ.get("READINGQT_API_ENABLED", "0").lower() in ("1", "true", "yes")
