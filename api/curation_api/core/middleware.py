"""Request middleware enforcing the route access policy.

Invariants:
- Protected requests without a valid bearer access token never reach a handler.
- Tokens are decoded only for protected routes; public routes see a ``None``
  ``request.state.principal``.
"""

from __future__ import annotations

import logging

from fastapi import Request, status
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response
from starlette.types import ASGIApp

from curation_api.core.access_policy import ACCESS_RULES, AccessLevel, AccessRule, resolve_access
from curation_api.core.security import extract_bearer_token, verify_access_token

logger = logging.getLogger("curation_api.core.middleware")


class AccessPolicyMiddleware(BaseHTTPMiddleware):
    """Reject unauthenticated requests to protected routes with 401."""

    def __init__(self, app: ASGIApp, rules: tuple[AccessRule, ...] = ACCESS_RULES) -> None:
        super().__init__(app)
        self.rules = rules

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        request.state.principal = None
        access = resolve_access(request.method, request.url.path, self.rules)
        if access is AccessLevel.PUBLIC:
            return await call_next(request)

        token = extract_bearer_token(request.headers.get("authorization"))
        principal = verify_access_token(token)
        if principal is None:
            logger.info("Rejected unauthenticated request %s %s", request.method, request.url.path)
            return JSONResponse(
                status_code=status.HTTP_401_UNAUTHORIZED,
                content={"detail": "Not authenticated"},
                headers={"WWW-Authenticate": "Bearer"},
            )
        request.state.principal = principal
        return await call_next(request)
