import logging
import os

# ------------------------------------------------------------
# Config
# ------------------------------------------------------------
# Set API_BASE_URL to point the page at another deployment of the predictor.
API_BASE_URL = os.getenv(
    "API_BASE_URL",
    "https://backend-aprendizado-de-maquinas-production.up.railway.app",
).rstrip("/")
PREDICT_URL = f"{API_BASE_URL}/prever"

HIGHWAY_INPUT_MODES = ("numeric", "catalog")


def _float_env(name, default):
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number of seconds, got {raw!r}") from None
    if value <= 0:
        raise ValueError(f"{name} must be positive, got {raw!r}")
    return value


def _bool_env(name, default=False):
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


REQUEST_TIMEOUT = _float_env("ILESO_REQUEST_TIMEOUT", 20.0)

HIGHWAY_INPUT = os.getenv("ILESO_HIGHWAY_INPUT", "numeric").strip().lower()
if HIGHWAY_INPUT not in HIGHWAY_INPUT_MODES:
    raise ValueError(
        f"ILESO_HIGHWAY_INPUT must be one of {HIGHWAY_INPUT_MODES}, got {HIGHWAY_INPUT!r}"
    )

# Dropdown fields are only checked for non-emptiness unless this is on.
STRICT_CHOICES = _bool_env("ILESO_STRICT_CHOICES")

LOG_LEVEL = os.getenv("ILESO_LOG_LEVEL", "INFO").upper()


def configure_logging(level=None):
    """Configure root logging for the page. Safe to call on every rerun."""
    logging.basicConfig(
        level=level or LOG_LEVEL,
        format="%(asctime)s - %(message)s",
    )
