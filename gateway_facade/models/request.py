"""
Value objects passed to and returned from the gateway facade.

TransactionRequest is immutable: every with_* method returns a new
instance, so building a charge never leaks state into the next one.
"""

from dataclasses import dataclass, field, replace
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from types import MappingProxyType
from typing import Any, Mapping, Optional

from gateway_facade.engine.errors import RequestError
from gateway_facade.models.enums import CreditCardField

CENTS = Decimal("0.01")

# Keys with a dedicated slot on TransactionRequest (besides amount/credit_card)
REQUEST_FIELDS = ("billing", "customer", "customer_id", "payment_method_nonce")


def _freeze(value: Any) -> Any:
    """Deep, read-only copy: mappings become proxies, lists become tuples."""
    if isinstance(value, Mapping):
        return MappingProxyType({k: _freeze(v) for k, v in value.items()})
    if isinstance(value, (list, tuple)):
        return tuple(_freeze(v) for v in value)
    return value


def _frozen(values: Optional[Mapping[str, Any]]) -> Optional[Mapping[str, Any]]:
    if values is None:
        return None
    return _freeze(values)


def plain(value: Any) -> Any:
    """Deep, mutable copy of a frozen value, as the SDK expects (dicts and lists)."""
    if isinstance(value, Mapping):
        return {k: plain(v) for k, v in value.items()}
    if isinstance(value, tuple):
        return [plain(v) for v in value]
    return value


def round_amount(amount: Any) -> Decimal:
    """Round an amount (no currency sign) to 2 decimal places, half-up."""
    try:
        value = amount if isinstance(amount, Decimal) else Decimal(str(amount))
        if value.is_finite():
            return value.quantize(CENTS, rounding=ROUND_HALF_UP)
    except (InvalidOperation, ValueError) as e:
        raise RequestError(f"Invalid amount: {amount!r}", field="amount") from e
    raise RequestError(f"Invalid amount: {amount!r}", field="amount")


@dataclass(frozen=True)
class Credentials:
    """Merchant credentials for a Braintree environment."""

    environment: Optional[str] = "sandbox"
    merchant_id: Optional[str] = None
    public_key: Optional[str] = None
    private_key: Optional[str] = None

    REQUIRED = ("merchant_id", "public_key", "private_key", "environment")

    @classmethod
    def from_settings(cls, settings) -> "Credentials":
        return cls(
            environment=settings.braintree_environment,
            merchant_id=settings.braintree_merchant_id,
            public_key=settings.braintree_public_key,
            private_key=settings.braintree_private_key,
        )

    def __repr__(self) -> str:
        return (
            f"Credentials(environment={self.environment!r}, "
            f"merchant_id={self.merchant_id!r}, public_key={self.public_key!r}, "
            f"private_key={'***' if self.private_key else None})"
        )


@dataclass(frozen=True)
class TransactionRequest:
    """Fields accumulated for a sale or vault operation."""

    amount: Optional[Decimal] = None
    credit_card: Optional[Mapping[str, Any]] = None
    billing: Optional[Mapping[str, Any]] = None
    customer: Optional[Mapping[str, Any]] = None
    customer_id: Optional[str] = None
    payment_method_nonce: Optional[str] = None
    extra: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))

    def with_amount(self, amount: Any) -> "TransactionRequest":
        return replace(self, amount=round_amount(amount))

    def with_credit_card(self, values: Mapping[str, Any]) -> "TransactionRequest":
        """
        Set the credit card to charge or vault.

        Args:
            values: Must contain 'number'. Optional keys: cvv,
                expiration_month (MM), expiration_year (YYYY),
                expiration_date (MM/YYYY), cardholder_name. Keys with a
                None value are dropped.
        """
        if not values or values.get("number") is None:
            raise RequestError("Credit card number is required", field="credit_card.number")

        credit_card = {"number": values["number"]}
        for name in CreditCardField:
            value = values.get(name.value)
            if value is not None:
                credit_card[name.value] = value
        return replace(self, credit_card=_frozen(credit_card))

    def with_options(self, values: Optional[Mapping[str, Any]]) -> "TransactionRequest":
        """
        Merge a generic bag of fields.

        'amount' and 'credit_card' go through their dedicated setters;
        anything without a slot of its own is sent as-is with the sale.
        """
        if not values:
            return self

        request = self
        extra = dict(self.extra)
        for key, value in values.items():
            if key == "amount":
                request = request.with_amount(value)
            elif key == "credit_card":
                request = request.with_credit_card(value)
            elif key in REQUEST_FIELDS:
                request = replace(request, **{key: _freeze(value)})
            else:
                extra[key] = _freeze(value)
        return replace(request, extra=MappingProxyType(extra))

    def with_billing(self, values: Mapping[str, Any]) -> "TransactionRequest":
        return replace(self, billing=_frozen(values))

    def with_customer(self, values: Mapping[str, Any]) -> "TransactionRequest":
        return replace(self, customer=_frozen(values))

    def with_customer_id(self, customer_id: Optional[str]) -> "TransactionRequest":
        return replace(self, customer_id=customer_id)

    def with_payment_method_nonce(self, nonce: Optional[str]) -> "TransactionRequest":
        return replace(self, payment_method_nonce=nonce)

    def sale_params(self) -> dict[str, Any]:
        """Build the transaction.sale payload. Unset fields are omitted."""
        params: dict[str, Any] = plain(self.extra)
        if self.amount is not None:
            params["amount"] = self.amount
        for key in ("credit_card", "billing", "customer"):
            value = getattr(self, key)
            if value is not None:
                params[key] = plain(value)
        if self.customer_id is not None:
            params["customer_id"] = self.customer_id
        if self.payment_method_nonce is not None:
            params["payment_method_nonce"] = self.payment_method_nonce
        return params


@dataclass(frozen=True)
class GatewayResult:
    """Envelope around a vendor result: its success flag plus the object itself."""

    status: bool
    result: Any

    @classmethod
    def from_vendor(cls, result: Any) -> "GatewayResult":
        return cls(status=bool(getattr(result, "is_success", False)), result=result)
