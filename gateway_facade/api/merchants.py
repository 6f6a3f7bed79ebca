"""
Sub-merchant account endpoints.

POST /merchants       — Create a sub-merchant under the master account.
GET  /merchants/{id}  — Look up a merchant account.
"""

from typing import Any, Optional

from fastapi import APIRouter, Depends, Response
from pydantic import BaseModel, Field

from gateway_facade.api.deps import get_facade
from gateway_facade.api.schemas import ResultOut, created_or_rejected
from gateway_facade.engine.facade import GatewayFacade

router = APIRouter(prefix="/merchants", tags=["merchants"])


class MerchantRequest(BaseModel):
    individual: dict[str, Any]
    business: dict[str, Any] = Field(default_factory=dict)
    funding: dict[str, Any]
    tos_accepted: bool
    id: Optional[str] = None


class MerchantDetail(BaseModel):
    id: str
    status: Optional[str] = None
    master_merchant_account_id: Optional[str] = None


@router.post("", response_model=ResultOut, status_code=201)
def create_merchant(body: MerchantRequest, response: Response, facade: GatewayFacade = Depends(get_facade)):
    result = facade.create_merchant(
        body.individual,
        body.business,
        body.funding,
        body.tos_accepted,
        merchant_account_id=body.id,
    )
    return created_or_rejected(result, "merchant_account", response)


@router.get("/{merchant_account_id}", response_model=MerchantDetail)
def get_merchant(merchant_account_id: str, facade: GatewayFacade = Depends(get_facade)):
    account = facade.find_merchant(merchant_account_id)
    master = getattr(account, "master_merchant_account", None)
    return MerchantDetail(
        id=account.id,
        status=getattr(account, "status", None),
        master_merchant_account_id=getattr(master, "id", None)
        or getattr(account, "master_merchant_account_id", None),
    )
