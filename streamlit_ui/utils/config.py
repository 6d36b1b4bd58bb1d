"""Streamlit UI configuration."""
import os
from typing import Optional


def get_api_url() -> str:
    """API base URL (no trailing slash). Default: local backend."""
    return os.environ.get("STREAMLIT_API_URL", "http://localhost:8000").rstrip("/")


def get_api_timeout() -> Optional[float]:
    """Request timeout in seconds. Unset (or invalid) means wait indefinitely."""
    raw = os.environ.get("STREAMLIT_API_TIMEOUT", "").strip()
    if not raw:
        return None
    try:
        return float(raw)
    except ValueError:
        return None


def get_items_per_page() -> int:
    """Rows per table page."""
    try:
        value = int(os.environ.get("LOGS_PER_PAGE", "10"))
    except ValueError:
        return 10
    return value if value > 0 else 10


def get_toast_ttl() -> float:
    """Seconds before a notification expires."""
    try:
        return float(os.environ.get("TOAST_TTL_SECONDS", "3"))
    except ValueError:
        return 3.0
