"""FastAPI dependencies."""

from fastapi import HTTPException, Request

from gateway_facade.engine.facade import GatewayFacade


def get_facade(request: Request) -> GatewayFacade:
    """The facade built by the application lifespan."""
    facade = getattr(request.app.state, "facade", None)
    if facade is None:
        raise HTTPException(status_code=503, detail="Payment gateway is not configured")
    return facade
