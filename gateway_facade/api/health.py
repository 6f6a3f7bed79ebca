"""Liveness and client token endpoints."""

from fastapi import APIRouter, Depends

from gateway_facade.api.deps import get_facade
from gateway_facade.engine.facade import GatewayFacade

router = APIRouter(tags=["health"])


@router.get("/health")
def health(facade: GatewayFacade = Depends(get_facade)):
    return {
        "status": "ok",
        "environment": facade.environment.value,
        "client": facade.client.name,
    }


@router.get("/api/client-token")
def client_token(facade: GatewayFacade = Depends(get_facade)):
    """Client-side token generated when the facade was initialized."""
    return {"client_token": facade.client_token}
