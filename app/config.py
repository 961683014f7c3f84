"""Application settings loaded from the environment."""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping, Optional, Tuple

from dotenv import load_dotenv

DEFAULT_CLIENT_URL = "http://localhost:5173"
DEFAULT_CORS_ORIGINS = (
    "https://birthday-wisher-frontend-jylu.vercel.app",
    "http://localhost:5173",
)
DEFAULT_MAX_UPLOAD_SIZE = 100 * 1024 * 1024


def _get_bool(env: Mapping[str, str], name: str, default: bool = False) -> bool:
    """Read a boolean flag ("1", "true", "yes", "on")."""
    value = env.get(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _get_int(env: Mapping[str, str], name: str, default: int) -> int:
    """Read an integer, falling back to the default on bad input."""
    value = env.get(name)
    if value is None:
        return default
    try:
        return int(value.strip())
    except ValueError:
        return default


def _get_list(env: Mapping[str, str], name: str, default: Tuple[str, ...] = ()) -> Tuple[str, ...]:
    """Read a comma separated list such as 'a,b,c'."""
    value = env.get(name)
    if value is None:
        return tuple(default)
    return tuple(item.strip() for item in value.split(",") if item.strip())


@dataclass(frozen=True)
class Settings:
    """Process-wide configuration, built once and handed to the app factory."""

    database_url: str = "sqlite+aiosqlite:///wishwell.db"
    host: str = "0.0.0.0"
    port: int = 5000
    client_url: str = DEFAULT_CLIENT_URL
    cors_origins: Tuple[str, ...] = DEFAULT_CORS_ORIGINS
    upload_dir: Path = field(default_factory=lambda: Path("uploads"))
    frontend_dir: Path = field(default_factory=lambda: Path("frontend") / "dist")
    max_upload_size: int = DEFAULT_MAX_UPLOAD_SIZE
    debug: bool = False
    create_all: bool = True

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "Settings":
        """
        Build settings from environment variables.

        When ``env`` is omitted, a ``.env`` file in the working directory is
        loaded first; variables already present in the process environment win.
        """
        if env is None:
            load_dotenv(".env", override=False)
            env = os.environ

        return cls(
            database_url=env.get("DATABASE_URL", cls.database_url),
            host=env.get("HOST", cls.host),
            port=_get_int(env, "PORT", cls.port),
            client_url=(env.get("CLIENT_URL") or DEFAULT_CLIENT_URL).strip(),
            cors_origins=_get_list(env, "CORS_ORIGINS", DEFAULT_CORS_ORIGINS),
            upload_dir=Path(env.get("UPLOAD_DIR", "uploads")),
            frontend_dir=Path(env.get("FRONTEND_DIR", str(Path("frontend") / "dist"))),
            max_upload_size=_get_int(env, "MAX_UPLOAD_SIZE", DEFAULT_MAX_UPLOAD_SIZE),
            debug=_get_bool(env, "APP_DEBUG", False),
            create_all=_get_bool(env, "DB_CREATE_ALL", True),
        )

    def share_link(self, wish_id: str) -> str:
        """Frontend URL at which a wish can be opened."""
        return f"{self.client_url.rstrip('/')}/wish/{wish_id}"
