from __future__ import annotations

from sitecrafter.domain.constants import APP_VERSION

USER_AGENT = f"SiteCrafter-Client/{APP_VERSION}"
DEFAULT_TIMEOUT = 30
JSON_HEADERS = {"User-Agent": USER_AGENT, "Content-Type": "application/json"}


def join_url(base_url: str, endpoint: str) -> str:
    """Join a backend base URL and an endpoint without doubling slashes."""
    return f"{base_url.rstrip('/')}/{endpoint.lstrip('/')}"
