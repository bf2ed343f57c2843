"""FastAPI application entrypoint.

Invariants:
- CORS wraps the access policy, so preflight requests never need credentials.
- The access policy runs before routing; protected handlers only see
  requests that carried a valid bearer access token.
- There is no CSRF layer: credentials travel as bearer tokens, never cookies.
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from curation_api.api.router import api_router
from curation_api.core.config import settings
from curation_api.core.logging_setup import configure_logging
from curation_api.core.middleware import AccessPolicyMiddleware

configure_logging(settings.log_level)


def create_app() -> FastAPI:
    """Build the application with policy enforcement and CORS installed."""
    application = FastAPI(
        title=settings.app_name,
        docs_url="/swagger-ui",
        openapi_url="/v3/api-docs",
        swagger_ui_oauth2_redirect_url="/swagger-ui/oauth2-redirect",
        redoc_url=None,
    )
    # Starlette wraps middleware in reverse order of registration: CORS ends up outermost.
    application.add_middleware(AccessPolicyMiddleware)
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )
    application.include_router(api_router, prefix=settings.api_prefix)
    return application


app = create_app()
