"""Environment-driven settings for the precisionFDA page objects."""
import os


def env_int(name: str, default: int) -> int:
    """Integer environment variable; a bad value names the variable."""
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


BASE_URL = os.environ.get("PFDA_BASE_URL", "https://precision.fda.gov").rstrip("/")
APPS_FEATURED_PATH = "/apps/featured"

# Timeouts (in milliseconds)
PAGE_TIMEOUT_MS = env_int("PFDA_PAGE_TIMEOUT_MS", 10_000)
POLL_INTERVAL_MS = env_int("PFDA_POLL_INTERVAL_MS", 100)
NAVIGATION_TIMEOUT_MS = 30_000

HEADLESS = os.environ.get("PFDA_HEADLESS", "1").lower() not in ("0", "false", "no")


def apps_featured_url(base_url: str = BASE_URL) -> str:
    return f"{base_url.rstrip('/')}{APPS_FEATURED_PATH}"
