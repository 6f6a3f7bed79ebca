"""
Subscription plan endpoints.

GET /plans       — All plans (or just their ids with ?ids_only=true).
GET /plans/{id}  — A single plan.
"""

from decimal import Decimal
from typing import Any, Optional, Union

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import BaseModel

from gateway_facade.api.deps import get_facade
from gateway_facade.engine.facade import GatewayFacade

router = APIRouter(prefix="/plans", tags=["plans"])


class PlanDetail(BaseModel):
    id: str
    name: Optional[str] = None
    price: Optional[Decimal] = None
    billing_frequency: Optional[int] = None
    currency_iso_code: Optional[str] = None


def _plan_to_detail(plan: Any) -> PlanDetail:
    return PlanDetail(
        id=plan.id,
        name=getattr(plan, "name", None),
        price=getattr(plan, "price", None),
        billing_frequency=getattr(plan, "billing_frequency", None),
        currency_iso_code=getattr(plan, "currency_iso_code", None),
    )


@router.get("", response_model=Union[list[PlanDetail], list[str]])
def list_plans(
    ids_only: bool = Query(False, description="Return plan ids only"),
    facade: GatewayFacade = Depends(get_facade),
):
    if ids_only:
        return facade.get_plan_ids()
    return [_plan_to_detail(p) for p in facade.get_all_plans()]


@router.get("/{plan_id}", response_model=PlanDetail)
def get_plan(plan_id: str, facade: GatewayFacade = Depends(get_facade)):
    plan = facade.get_plan_by_id(plan_id)
    if plan is None:
        raise HTTPException(status_code=404, detail=f"Plan not found: {plan_id}")
    return _plan_to_detail(plan)
