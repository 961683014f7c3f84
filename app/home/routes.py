"""Liveness routes and the catch-all that serves the frontend bundle."""

from pathlib import Path
from typing import Optional

from litestar import get
from litestar.response import Response

from app.config import Settings
from app.frontend import BANNER, frontend_response


@get("/api", sync_to_thread=False, media_type="text/plain")
def api_banner() -> str:
    """Plain-text liveness banner."""
    return BANNER


@get("/healthz", sync_to_thread=False)
def healthz() -> dict:
    return {"status": "ok"}


@get(["/", "/{asset:path}"], sync_to_thread=False, include_in_schema=False)
def frontend(settings: Settings, asset: Optional[Path] = None) -> Response:
    """Serve bundle files, fall back to the SPA entry page for unknown paths."""
    return frontend_response(settings.frontend_dir, str(asset) if asset is not None else None)


routes = [api_banner, healthz, frontend]
