"""Environment-driven settings, read once at import."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping

TRUTHY: frozenset[str] = frozenset({"1", "true", "yes"})


@dataclass(frozen=True)
class Settings:
    """Process-wide options for backend selection."""

    force_polyfill: bool = False


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Build settings from environ, defaulting to os.environ."""
    if environ is None:
        environ = os.environ
    raw = environ.get("F32ROUND_FORCE_POLYFILL", "0")
    return Settings(force_polyfill=raw.strip().lower() in TRUTHY)


settings = load_settings()
