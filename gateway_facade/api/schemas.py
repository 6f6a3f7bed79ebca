"""Request and response bodies shared by the API routers."""

from decimal import Decimal
from typing import Any, Optional

from fastapi import Response
from pydantic import BaseModel, Field

from gateway_facade.models.request import GatewayResult, TransactionRequest


class CreditCardIn(BaseModel):
    number: str
    cvv: Optional[str] = None
    expiration_month: Optional[str] = None
    expiration_year: Optional[str] = None
    expiration_date: Optional[str] = None
    cardholder_name: Optional[str] = None


class TransactionRequestIn(BaseModel):
    """Fields for a TransactionRequest. Unknown sale fields go in `extra`."""

    amount: Optional[Decimal] = None
    credit_card: Optional[CreditCardIn] = None
    billing: Optional[dict[str, Any]] = None
    customer: Optional[dict[str, Any]] = None
    customer_id: Optional[str] = None
    payment_method_nonce: Optional[str] = None
    extra: dict[str, Any] = Field(default_factory=dict)

    def to_request(self) -> TransactionRequest:
        fields = set(TransactionRequestIn.model_fields) - {"extra"}
        values = self.model_dump(exclude_none=True, include=fields)
        values.update(self.extra)
        return TransactionRequest().with_options(values)


class ResultOut(BaseModel):
    """Serialized GatewayResult: success flag plus the created resource id."""

    status: bool
    id: Optional[str] = None
    message: Optional[str] = None


def result_to_out(result: GatewayResult, resource: str) -> ResultOut:
    """
    Flatten a GatewayResult for JSON.

    Args:
        result: Envelope returned by the facade.
        resource: Attribute of the vendor result holding the created object
            (e.g. "transaction", "customer", "credit_card").
    """
    created = getattr(result.result, resource, None)
    resource_id = getattr(created, "token", None) if resource == "credit_card" else None
    return ResultOut(
        status=result.status,
        id=resource_id or getattr(created, "id", None),
        message=None if result.status else getattr(result.result, "message", None),
    )


def created_or_rejected(result: GatewayResult, resource: str, response: Response) -> ResultOut:
    """Keep the route's 201 for created resources; answer 422 when the vendor refused."""
    if not result.status:
        response.status_code = 422
    return result_to_out(result, resource)
