# server/config.py
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional, Tuple

from dotenv import load_dotenv


def _float(name: str, default: float) -> float:
    raw = os.getenv(name)
    return float(raw) if raw not in (None, "") else default


@dataclass(frozen=True)
class Settings:
    openai_api_key: str = ""

    # Model routing (single model, no fallback)
    primary_model: str = "gpt-4o-mini"
    temperature: float = 0.9

    # Selection constants
    card_probability: float = 0.35
    two_insights_probability: float = 0.5

    # CORS
    allowed_origins: Tuple[str, ...] = ("*",)

    # Logging
    log_level: str = "INFO"
    log_dir: Optional[str] = None

    @classmethod
    def from_env(cls, dotenv: bool = True) -> "Settings":
        if dotenv:
            load_dotenv()
        return cls(
            openai_api_key=os.getenv("OPENAI_API_KEY", ""),
            primary_model=os.getenv("PRIMARY_MODEL", "gpt-4o-mini"),
            temperature=_float("TEMPERATURE", 0.9),
            card_probability=_float("CARD_PROBABILITY", 0.35),
            two_insights_probability=_float("TWO_INSIGHTS_PROBABILITY", 0.5),
            allowed_origins=tuple(
                o.strip() for o in os.getenv("ALLOWED_ORIGINS", "*").split(",") if o.strip()
            ) or ("*",),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
            log_dir=os.getenv("LOG_DIR") or None,
        )
