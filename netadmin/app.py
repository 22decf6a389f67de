from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from netadmin.core.config import Settings, get_settings
from netadmin.core.responses import invalid_input
from netadmin.repositories.vlan_store import VLANStore
from netadmin.routers import health as health_router
from netadmin.routers import vlans as vlans_router
from netadmin.services.vlan_service import VLANService

logger = logging.getLogger(__name__)


def _describe_request_errors(exc: RequestValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ()) if p != "body")
        msg = err.get("msg", "invalid value")
        parts.append(f"{loc}: {msg}" if loc else msg)
    return "failed to parse vlan: " + "; ".join(parts)


async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Report undecodable request bodies as 400 INVALID_INPUT instead of FastAPI's 422."""
    return invalid_input(_describe_request_errors(exc))


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the API application around a store loaded from ``settings.vlan_store_path``.

    Raises PersistenceError when the store file cannot be read or holds an
    invalid record; the process must not start in that case.
    """
    settings = settings or get_settings()
    store = VLANStore(settings.vlan_store_path)
    logger.info("Loaded VLAN store from %s", store.path)

    app = FastAPI(title="Network Administration API")
    app.state.settings = settings
    app.state.vlan_service = VLANService(store)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_allow_origins),
        allow_credentials=False,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Accept", "Content-Type"],
    )
    app.add_exception_handler(RequestValidationError, request_validation_handler)

    app.include_router(health_router.router)
    app.include_router(vlans_router.router)
    return app
