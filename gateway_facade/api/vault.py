"""
Vault endpoints (customers, credit cards, addresses, nonces).

POST /customers              — Save a customer.
GET  /customers/{id}         — Look up a customer.
POST /credit-cards           — Save a card, optionally with billing address.
POST /addresses              — Save a billing address for a customer.
POST /payment-method-nonces  — Exchange a vaulted card token for a nonce.
"""

from typing import Any, Optional

from fastapi import APIRouter, Depends, Response
from pydantic import BaseModel

from gateway_facade.api.deps import get_facade
from gateway_facade.api.schemas import ResultOut, TransactionRequestIn, created_or_rejected
from gateway_facade.engine.facade import GatewayFacade
from gateway_facade.models.request import GatewayResult

router = APIRouter(tags=["vault"])


class CustomerDetail(BaseModel):
    id: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None


class NonceRequest(BaseModel):
    payment_method_token: str


class NonceOut(BaseModel):
    status: bool
    nonce: Optional[str] = None
    message: Optional[str] = None


@router.post("/customers", response_model=ResultOut, status_code=201)
def create_customer(
    body: TransactionRequestIn,
    response: Response,
    facade: GatewayFacade = Depends(get_facade),
):
    result = facade.save_customer(body.to_request())
    return created_or_rejected(result, "customer", response)


@router.get("/customers/{customer_id}", response_model=CustomerDetail)
def get_customer(customer_id: str, facade: GatewayFacade = Depends(get_facade)):
    customer: Any = facade.find_customer(customer_id)
    return CustomerDetail(
        id=customer.id,
        first_name=getattr(customer, "first_name", None),
        last_name=getattr(customer, "last_name", None),
        email=getattr(customer, "email", None),
    )


@router.post("/credit-cards", response_model=ResultOut, status_code=201)
def create_credit_card(
    body: TransactionRequestIn,
    response: Response,
    facade: GatewayFacade = Depends(get_facade),
):
    result = facade.save_credit_card(body.to_request())
    return created_or_rejected(result, "credit_card", response)


@router.post("/addresses", response_model=ResultOut, status_code=201)
def create_address(
    body: TransactionRequestIn,
    response: Response,
    facade: GatewayFacade = Depends(get_facade),
):
    result = facade.save_address(body.to_request())
    return created_or_rejected(result, "address", response)


@router.post("/payment-method-nonces", response_model=NonceOut, status_code=201)
def create_nonce(body: NonceRequest, response: Response, facade: GatewayFacade = Depends(get_facade)):
    result = GatewayResult.from_vendor(facade.create_payment_method_nonce(body.payment_method_token))
    if not result.status:
        response.status_code = 422
        return NonceOut(status=False, message=getattr(result.result, "message", None))
    return NonceOut(status=True, nonce=result.result.payment_method_nonce.nonce)
