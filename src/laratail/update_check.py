# update_check.py
from __future__ import annotations

import json
import threading
import urllib.error
import urllib.request
from typing import Optional

from . import settings


def _version_key(version: str) -> tuple:
    parts = []
    for piece in version.split("."):
        digits = "".join(ch for ch in piece if ch.isdigit())
        parts.append(int(digits) if digits else 0)
    return tuple(parts)


def is_newer(latest: str, current: str) -> bool:
    return _version_key(latest) > _version_key(current)


def fetch_latest_version(url: str | None = None, timeout: float | None = None) -> Optional[str]:
    """
    Ask the package index for the latest published version.

    Returns None on any network, HTTP or decoding problem.
    """
    if timeout is None:
        timeout = settings.UPDATE_TIMEOUT
    req = urllib.request.Request(url or settings.UPDATE_URL, headers={"Accept": "application/json"})
    try:
        with urllib.request.urlopen(req, timeout=timeout) as response:
            data = json.loads(response.read().decode("utf-8"))
    except (urllib.error.URLError, OSError, ValueError):
        return None
    version = (data.get("info") or {}).get("version") if isinstance(data, dict) else None
    return version if isinstance(version, str) else None


class UpdateCheck:
    """Fire-and-forget lookup of the latest version on a daemon thread."""

    def __init__(self, current: str, url: str | None = None, timeout: float | None = None):
        self.current = current
        self.url = url
        self.timeout = timeout
        self.latest: Optional[str] = None
        self._thread = threading.Thread(target=self._run, name="laratail-update-check", daemon=True)

    def _run(self) -> None:
        self.latest = fetch_latest_version(self.url, self.timeout)

    def start(self) -> UpdateCheck:
        self._thread.start()
        return self

    def result(self, wait: float = 0.0) -> Optional[str]:
        """Return the newer version if one is known by now, else None."""
        if self._thread.ident is not None:
            self._thread.join(wait)
        if self.latest and is_newer(self.latest, self.current):
            return self.latest
        return None
