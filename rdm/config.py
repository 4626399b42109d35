"""Runtime settings read from environment variables.

Environment variable overrides:
  RDM_DAYS            series length (default 365)
  RDM_SEED            integer seed; unset or empty = fresh randomness each session
  RDM_LANG            default language, one of rdm.i18n.LANG_CODES (default id)
  RDM_SLIDER_MAX      early-warning slider upper bound in mm (default 200)
  RDM_SLIDER_DEFAULT  slider initial value (default 50)
  RDM_LOG_LEVEL       logging level name (default WARNING)
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .i18n import DEFAULT_LANG, LANG_CODES

__all__ = ["Settings", "load_settings"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Settings:
    days: int = 365
    seed: Optional[int] = None
    lang: str = DEFAULT_LANG
    slider_max: int = 200
    slider_default: int = 50
    log_level: str = "WARNING"


def _int_env(env: Mapping[str, str], name: str, default: Optional[int]) -> Optional[int]:
    raw = env.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


def load_settings(env: Optional[Mapping[str, str]] = None) -> Settings:
    env = os.environ if env is None else env
    lang = env.get("RDM_LANG", DEFAULT_LANG).strip() or DEFAULT_LANG
    if lang not in LANG_CODES:
        logger.warning("RDM_LANG=%r not supported, falling back to %s", lang, DEFAULT_LANG)
        lang = DEFAULT_LANG
    level = env.get("RDM_LOG_LEVEL", "WARNING").strip().upper() or "WARNING"
    if not isinstance(logging.getLevelName(level), int):
        raise ValueError(f"RDM_LOG_LEVEL must be a logging level name, got {level!r}")
    slider_max = _int_env(env, "RDM_SLIDER_MAX", 200)
    slider_default = _int_env(env, "RDM_SLIDER_DEFAULT", 50)
    if slider_max <= 0:
        raise ValueError("RDM_SLIDER_MAX must be positive")
    return Settings(
        days=_int_env(env, "RDM_DAYS", 365),
        seed=_int_env(env, "RDM_SEED", None),
        lang=lang,
        slider_max=slider_max,
        slider_default=min(max(0, slider_default), slider_max),
        log_level=level,
    )
