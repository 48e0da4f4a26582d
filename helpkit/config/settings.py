"""
Environment settings loaded from .env file.
"""
import os
from dotenv import load_dotenv

load_dotenv()


# --- Password validation ---
DEFAULT_MAX_LENGTH: int = int(os.getenv("HELPKIT_MAX_LENGTH", "100"))
DEFAULT_MIN_LENGTH: int = int(os.getenv("HELPKIT_MIN_LENGTH", "0"))

# --- Random data ---
# Unset means OS entropy; set it to get reproducible fixtures.
_seed = os.getenv("HELPKIT_RANDOM_SEED", "")
RANDOM_SEED: int | None = int(_seed) if _seed else None

# --- Observability ---
METRICS_ENABLED: bool = os.getenv("HELPKIT_METRICS_ENABLED", "true").lower() == "true"
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
