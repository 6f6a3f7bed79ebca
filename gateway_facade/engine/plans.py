"""
Subscription plan lookups.

Braintree only offers "list all plans", so id lookups are a linear scan
over whatever the gateway returned, in the gateway's order.
"""

from typing import Any, Iterable, Optional


def plan_ids(plans: Iterable[Any]) -> list[str]:
    """Ids of the given plans, in order."""
    return [plan.id for plan in plans]


def find_plan(plans: Iterable[Any], plan_id: Optional[str]) -> Optional[Any]:
    """
    First plan whose id equals plan_id.

    Returns:
        The matching plan, or None if no plan has that id.
    """
    if plan_id is None:
        return None
    for plan in plans:
        if plan.id == plan_id:
            return plan
    return None
