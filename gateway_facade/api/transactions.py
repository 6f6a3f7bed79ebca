"""
Sale endpoints.

POST /transactions/charge            — Sale from a full transaction request.
POST /transactions/nonce-sale        — Settle a payment method nonce.
POST /transactions/service-fee-sale  — Sale on a sub-merchant with a service fee.
GET  /transactions/{id}              — Look up a transaction.
"""

from decimal import Decimal
from typing import Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from gateway_facade.api.deps import get_facade
from gateway_facade.api.schemas import ResultOut, TransactionRequestIn, result_to_out
from gateway_facade.engine.facade import GatewayFacade

router = APIRouter(prefix="/transactions", tags=["transactions"])


class ChargeRequest(TransactionRequestIn):
    submit_for_settlement: bool = True
    store_in_vault_on_success: bool = True


class NonceSaleRequest(BaseModel):
    amount: Decimal
    payment_method_nonce: str


class ServiceFeeSaleRequest(BaseModel):
    merchant_account_id: str
    amount: Decimal
    payment_method_nonce: Optional[str] = None
    service_fee_amount: Decimal


class TransactionDetail(BaseModel):
    id: str
    status: Optional[str] = None
    amount: Optional[Decimal] = None
    customer_id: Optional[str] = None
    merchant_account_id: Optional[str] = None


@router.post("/charge", response_model=ResultOut)
def charge(body: ChargeRequest, facade: GatewayFacade = Depends(get_facade)):
    request = body.to_request()
    result = facade.single_charge(
        request,
        submit_for_settlement=body.submit_for_settlement,
        store_in_vault_on_success=body.store_in_vault_on_success,
    )
    return result_to_out(result, "transaction")


@router.post("/nonce-sale", response_model=ResultOut)
def nonce_sale(body: NonceSaleRequest, facade: GatewayFacade = Depends(get_facade)):
    result = facade.sale_with_payment_nonce(body.amount, body.payment_method_nonce)
    return result_to_out(result, "transaction")


@router.post("/service-fee-sale", response_model=ResultOut)
def service_fee_sale(body: ServiceFeeSaleRequest, facade: GatewayFacade = Depends(get_facade)):
    result = facade.sale_with_service_fee(
        body.merchant_account_id,
        body.amount,
        body.payment_method_nonce,
        body.service_fee_amount,
    )
    return result_to_out(result, "transaction")


@router.get("/{transaction_id}", response_model=TransactionDetail)
def get_transaction(transaction_id: str, facade: GatewayFacade = Depends(get_facade)):
    tx = facade.find_transaction(transaction_id)
    return TransactionDetail(
        id=tx.id,
        status=getattr(tx, "status", None),
        amount=getattr(tx, "amount", None),
        customer_id=getattr(tx, "customer_id", None),
        merchant_account_id=getattr(tx, "merchant_account_id", None),
    )
