"""Template blobs shipped as package data under ``laratail/templates``."""

from __future__ import annotations

from functools import lru_cache
from importlib import resources


@lru_cache(maxsize=None)
def load(name: str) -> str:
    """Return the template `name` (a path inside templates/), trimmed."""
    ref = resources.files("laratail") / "templates"
    for part in name.split("/"):
        ref = ref / part
    return ref.read_text(encoding="utf-8").strip()


def landing_page(head: str) -> str:
    """
    Compose the marketing page from a head blob and the shared body.

    `head` is one of "vite", "mix", "cdn" or "cli", picking how the page
    pulls in its stylesheet.
    """
    return load(f"landing/{head}.head.html") + "\n" + load("landing/body.html")
