"""
Audit trail for calls forwarded to the payment gateway.

Every operation the facade forwards gets one log line with:
  - Operation (what was called, e.g. "transaction.sale")
  - Status (success flag of the vendor result, or "-" for lookups)
  - Details (the request payload, with card data masked)

Nothing is persisted; the lines go to the "gateway_facade.audit" logger.
"""

import json
import logging
from typing import Any, Mapping, Optional

logger = logging.getLogger("gateway_facade.audit")

SENSITIVE_KEYS = {"number", "cvv", "private_key", "payment_method_nonce"}


def mask_value(key: str, value: Any) -> Any:
    if value is None:
        return None
    text = str(value)
    if key == "number" and len(text) > 4:
        return "*" * (len(text) - 4) + text[-4:]
    return "***"


def mask_details(details: Any) -> Any:
    """Copy a payload, masking card numbers, CVVs and other secrets."""
    if isinstance(details, Mapping):
        return {
            k: mask_value(k, v) if k in SENSITIVE_KEYS else mask_details(v)
            for k, v in details.items()
        }
    if isinstance(details, (list, tuple)):
        return [mask_details(v) for v in details]
    return details


def _status_label(status: Optional[bool], error: bool) -> str:
    if error:
        return "error"
    if status is None:
        return "-"
    return "ok" if status else "failed"


def log_call(
    operation: str,
    status: Optional[bool] = None,
    details: Optional[Any] = None,
    error: bool = False,
) -> None:
    """
    Write an audit line for a forwarded gateway call.

    Args:
        operation: Vendor call made (e.g. "transaction.sale", "plan.all").
        status: Vendor success flag, or None for calls without one.
        details: Request payload or identifier (masked before logging).
        error: The call raised instead of returning a result.
    """
    logger.info(
        "AUDIT | op=%s status=%s | %s",
        operation,
        _status_label(status, error),
        json.dumps(mask_details(details), default=str)[:200] if details else "",
    )
