"""HTTP method override for HTML forms."""

from urllib.parse import parse_qs

from starlette.types import ASGIApp, Receive, Scope, Send

OVERRIDABLE_METHODS = frozenset({"PUT", "PATCH", "DELETE"})


def _requested_method(scope: Scope, param: str) -> str | None:
    query = (scope.get("query_string") or b"").decode("latin-1")
    values = parse_qs(query).get(param)
    if not values:
        return None
    method = values[0].strip().upper()
    if method in OVERRIDABLE_METHODS:
        return method
    return None


class MethodOverrideMiddleware:
    """Let a POST request act as PUT/PATCH/DELETE via ``?_method=``."""

    def __init__(self, app: ASGIApp, *, param: str = "_method") -> None:
        self._app = app
        self._param = param

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] == "http" and scope.get("method") == "POST":
            method = _requested_method(scope, self._param)
            if method is not None:
                scope = dict(scope, method=method)
        await self._app(scope, receive, send)
