# config.py

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List

from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger("portfolio-config")

BASE_DIR = Path(__file__).parent
VIEWS_DIR = BASE_DIR / "views"
PUBLIC_DIR = BASE_DIR / "public"

PAGE_MODES = ("negotiate", "static")
RESUME_DISPOSITIONS = ("inline", "attachment")
LOG_LEVELS = ("debug", "info", "warning", "error", "critical")


def _choice(name: str, allowed: tuple, default: str) -> str:
    value = (os.getenv(name) or default).strip().lower()
    if value not in allowed:
        logger.warning("%s=%r is not one of %s, using %r", name, value, allowed, default)
        return default
    return value


def _port(default: int = 3000) -> int:
    raw = os.getenv("PORT")
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning("PORT=%r is not a number, using %d", raw, default)
        return default


@dataclass(frozen=True)
class Settings:
    db_dir: Path = BASE_DIR / "data"
    db_name: str = "portfolio"
    host: str = "0.0.0.0"
    port: int = 3000
    page_mode: str = "negotiate"
    resume_disposition: str = "inline"
    cors_origins: List[str] = field(default_factory=lambda: ["*"])
    log_level: str = "INFO"

    @property
    def db_path(self) -> Path:
        return self.db_dir / f"{self.db_name}.db"

    @classmethod
    def from_env(cls) -> "Settings":
        origins = os.getenv("CORS_ORIGINS", "*")
        return cls(
            db_dir=Path(os.getenv("PORTFOLIO_DB_DIR") or BASE_DIR / "data"),
            db_name=os.getenv("PORTFOLIO_DB_NAME") or "portfolio",
            host=os.getenv("HOST", "0.0.0.0"),
            port=_port(),
            page_mode=_choice("PAGE_MODE", PAGE_MODES, "negotiate"),
            resume_disposition=_choice("RESUME_DISPOSITION", RESUME_DISPOSITIONS, "inline"),
            cors_origins=["*"] if origins.strip() == "*" else [o.strip() for o in origins.split(",") if o.strip()],
            log_level=_choice("LOG_LEVEL", LOG_LEVELS, "info").upper(),
        )
