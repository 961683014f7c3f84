"""CORS allow-list: framework CORS headers plus a hard gate on unknown origins."""

import logging
from typing import Awaitable, Callable, Tuple

from litestar import Request
from litestar.config.cors import CORSConfig

from app.config import Settings
from app.errors import CorsRejection

logger = logging.getLogger("Wishwell.cors")


def allowed_origins(settings: Settings) -> Tuple[str, ...]:
    """CLIENT_URL first, then the configured origins, without duplicates."""
    origins = []
    for origin in (settings.client_url, *settings.cors_origins):
        origin = origin.strip().rstrip("/")
        if origin and origin not in origins:
            origins.append(origin)
    return tuple(origins)


def build_cors_config(settings: Settings) -> CORSConfig:
    return CORSConfig(
        allow_origins=list(allowed_origins(settings)),
        allow_methods=["*"],
        allow_headers=["*"],
        allow_credentials=True,
    )


def make_cors_gate(settings: Settings) -> Callable[[Request], Awaitable[None]]:
    """
    Build a ``before_request`` hook enforcing the allow-list.

    Requests without an Origin header (same-origin, curl, server-to-server)
    pass; any other origin must be on the list.
    """
    permitted = frozenset(allowed_origins(settings))

    async def enforce_cors_allow_list(request: Request) -> None:
        origin = request.headers.get("origin")
        if not origin or origin.rstrip("/") in permitted:
            return None
        logger.warning(f"Blocked {request.method} {request.url.path} from origin {origin}")
        raise CorsRejection("Not allowed by CORS")

    return enforce_cors_allow_list
