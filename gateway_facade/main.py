"""
Gateway Facade — Braintree operations behind a FastAPI application.

The facade is configured once at startup from environment variables
(BRAINTREE_ENVIRONMENT, BRAINTREE_MERCHANT_ID, BRAINTREE_PUBLIC_KEY,
BRAINTREE_PRIVATE_KEY) and handed to every endpoint via Depends(get_facade).
Startup fails if any credential is missing.

Start the server:
    uvicorn gateway_facade.main:app --reload

Without network access (in-memory gateway):
    USE_FAKE_GATEWAY=true uvicorn gateway_facade.main:app
"""

import logging
from contextlib import asynccontextmanager

from braintree.exceptions import NotFoundError
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from gateway_facade.api.health import router as health_router
from gateway_facade.api.merchants import router as merchants_router
from gateway_facade.api.plans import router as plans_router
from gateway_facade.api.transactions import router as transactions_router
from gateway_facade.api.vault import router as vault_router
from gateway_facade.config import Settings, settings
from gateway_facade.engine.errors import RequestError
from gateway_facade.engine.facade import GatewayFacade
from gateway_facade.models.request import Credentials
from gateway_facade.providers.fake_provider import FakeGatewayClient

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)


def build_facade(config: Settings) -> GatewayFacade:
    """Create the facade from settings. Raises ConfigurationError on bad credentials."""
    client = FakeGatewayClient() if config.use_fake_gateway else None
    return GatewayFacade.initialize(
        Credentials.from_settings(config),
        client=client,
        master_merchant_account_id=config.braintree_master_merchant_account_id,
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Configure the payment gateway on startup."""
    if getattr(app.state, "facade", None) is None:
        app.state.facade = build_facade(settings)
    yield


def create_app() -> FastAPI:
    app = FastAPI(
        title="Gateway Facade",
        description=(
            "Braintree sales, vault, merchant account and plan operations "
            "behind a single configured gateway client."
        ),
        version="0.1.0",
        lifespan=lifespan,
    )

    @app.exception_handler(NotFoundError)
    async def not_found_handler(request: Request, exc: NotFoundError):
        return JSONResponse(status_code=404, content={"detail": "Resource not found"})

    @app.exception_handler(RequestError)
    async def request_error_handler(request: Request, exc: RequestError):
        return JSONResponse(status_code=422, content={"detail": str(exc), "field": exc.field})

    app.include_router(health_router)
    app.include_router(transactions_router, prefix="/api")
    app.include_router(vault_router, prefix="/api")
    app.include_router(merchants_router, prefix="/api")
    app.include_router(plans_router, prefix="/api")
    return app


app = create_app()
