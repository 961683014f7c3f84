"""Request helpers shared by the route handlers."""

from litestar import Request


def get_base_path(request: Request) -> str:
    """
    Return the prefix the app is mounted under (e.g. '/wishwell').

    Taken from the ASGI ``root_path`` (set by ``uvicorn --root-path``);
    empty when the app is served at the host root.
    """
    scope = getattr(request, "scope", None) or {}
    return (scope.get("root_path") or "").rstrip("/")


def get_public_base_url(request: Request) -> str:
    """
    Absolute URL of the app as the client addressed it.

    Scheme and host come from the incoming request, so links to uploaded
    files resolve through whatever host name the client used.
    """
    host = request.headers.get("host") or request.url.netloc
    return f"{request.url.scheme}://{host}{get_base_path(request)}"
