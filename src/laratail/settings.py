from __future__ import annotations
import os


def _float_env(name: str, default: float) -> float:
    try:
        return float(os.environ.get(name, default))
    except ValueError:
        return default


COMPOSER = os.environ.get("LARATAIL_COMPOSER", "composer")
NPM = os.environ.get("LARATAIL_NPM", "npm")
NPX = os.environ.get("LARATAIL_NPX", "npx")

UPDATE_CHECK = not os.environ.get("LARATAIL_NO_UPDATE_CHECK")
UPDATE_URL = os.environ.get("LARATAIL_UPDATE_URL", "https://pypi.org/pypi/laratail/json")
UPDATE_TIMEOUT = _float_env("LARATAIL_UPDATE_TIMEOUT", 2.0)
