import logging
import os

from dotenv import load_dotenv

# Configure logging
logger = logging.getLogger(__name__)

# Load environment variables based on ENV setting
env = os.getenv("ENV", "development")
env_file = (
    ".env.production"
    if env == "production"
    else (
        ".env.staging" if env == "staging" else ".env.local"
    )  # Default to local development
)

logger.info(f"Environment: {env}")

if os.path.exists(env_file):
    logger.info(f"Loading environment from {env_file}")
    load_dotenv(dotenv_path=env_file)
elif os.path.exists(".env"):
    logger.info(f"Environment file {env_file} not found, falling back to .env")
    load_dotenv(dotenv_path=".env")
else:
    logger.info("No environment file found, using process environment")


def _get_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        raise EnvironmentError(f"{name} must be a number, got {raw!r}")


APP_NAME = os.getenv("APP_NAME", "FitFlash")

# Deployed builds get their public host from Vercel
VERCEL_URL = os.getenv("VERCEL_URL")
BASE_URL = f"https://{VERCEL_URL}" if VERCEL_URL else "http://localhost:3000"

# Unit preferences
DEFAULT_UNIT_SYSTEM = os.getenv("DEFAULT_UNIT_SYSTEM", "imperial").lower()
if DEFAULT_UNIT_SYSTEM not in ("metric", "imperial"):
    raise EnvironmentError(
        f"DEFAULT_UNIT_SYSTEM must be 'metric' or 'imperial', got {DEFAULT_UNIT_SYSTEM!r}"
    )

SNAP_TOLERANCE_LBS = _get_float("SNAP_TOLERANCE_LBS", 0.5)
if SNAP_TOLERANCE_LBS < 0:
    raise EnvironmentError("SNAP_TOLERANCE_LBS must not be negative")

THEME_COLOR = os.getenv("THEME_COLOR", "#121212")

# Log the values being set
logger.info("Settings loaded:")
logger.info(f"APP_NAME: {APP_NAME}")
logger.info(f"BASE_URL: {BASE_URL}")
logger.info(f"DEFAULT_UNIT_SYSTEM: {DEFAULT_UNIT_SYSTEM}")
logger.info(f"SNAP_TOLERANCE_LBS: {SNAP_TOLERANCE_LBS}")
logger.info(f"THEME_COLOR: {THEME_COLOR}")
