"""HTTP retrieval of remote ``index.json`` documents."""

from __future__ import annotations

from typing import Any, Dict, Optional

import requests

from uicons.core.models import INDEX_FILENAME
from uicons.logging import get_logger

LOGGER = get_logger(__name__)

USER_AGENT = "pyuicons/0.1"


class FetchError(RuntimeError):
    """Raised when an index document cannot be retrieved."""

    def __init__(
        self,
        url: str,
        status_code: Optional[int] = None,
        reason: str = "",
    ) -> None:
        self.url = url
        self.status_code = status_code
        self.reason = reason
        if status_code is None:
            message = f"Failed to fetch {url}: {reason}"
        else:
            message = f"Failed to fetch {url} {status_code} {reason}".rstrip()
        super().__init__(message)


def index_url(base_url: str) -> str:
    """Return the location of ``index.json`` under ``base_url``."""

    return f"{base_url.rstrip('/')}/{INDEX_FILENAME}"


def fetch_index(
    base_url: str,
    *,
    timeout: Optional[float] = None,
    session: Optional[requests.Session] = None,
) -> Dict[str, Any]:
    """Download and decode the index document of a remote repository.

    A single GET is issued; there is no retry. ``timeout`` is passed straight
    through to ``requests`` and ``None`` waits indefinitely.
    """

    url = index_url(base_url)
    client = session or requests
    LOGGER.info("fetching index", extra={"url": url})
    try:
        response = client.get(url, timeout=timeout, headers={"User-Agent": USER_AGENT})
    except requests.RequestException as exc:
        raise FetchError(url, reason=str(exc)) from exc
    if not response.ok:
        raise FetchError(url, response.status_code, response.reason or "")
    try:
        payload = response.json()
    except ValueError as exc:
        raise FetchError(url, response.status_code, "response is not valid JSON") from exc
    if not isinstance(payload, dict):
        raise FetchError(url, response.status_code, "index document must be a JSON object")
    return payload
