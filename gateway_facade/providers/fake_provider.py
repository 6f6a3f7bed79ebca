"""
In-memory gateway client for tests and local runs.

Partially follows the Braintree sandbox testing rules:
  - 'fake-valid-nonce' (and nonces issued by this client) are accepted
  - amounts at or above 2000.00 come back processor declined
  - unknown nonces and missing fields come back as validation errors
  - lookups of unknown ids raise braintree.exceptions.NotFoundError

https://developer.paypal.com/braintree/docs/reference/general/testing/python
"""

import uuid
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Optional

from braintree.exceptions import NotFoundError

from gateway_facade.providers.base import GatewayClient

VALID_NONCE = "fake-valid-nonce"
DECLINE_THRESHOLD = Decimal("2000.00")


def _new_id() -> str:
    return uuid.uuid4().hex[:8]


@dataclass
class FakeRecord:
    """Stand-in for a vendor resource (transaction, customer, card...)."""

    id: str
    attributes: dict[str, Any] = field(default_factory=dict)

    def __getattr__(self, name: str) -> Any:
        try:
            return self.__dict__["attributes"][name]
        except KeyError:
            raise AttributeError(name) from None


@dataclass
class FakeResult:
    """Mirrors braintree.SuccessfulResult / braintree.ErrorResult."""

    is_success: bool
    message: Optional[str] = None
    transaction: Optional[FakeRecord] = None
    customer: Optional[FakeRecord] = None
    credit_card: Optional[FakeRecord] = None
    address: Optional[FakeRecord] = None
    merchant_account: Optional[FakeRecord] = None
    payment_method_nonce: Optional[FakeRecord] = None


def _error(message: str) -> FakeResult:
    return FakeResult(is_success=False, message=message)


class FakeGatewayClient(GatewayClient):
    """Deterministic in-memory gateway. Nothing leaves the process."""

    def __init__(
        self,
        plans: Optional[list[FakeRecord]] = None,
        decline_threshold: Decimal = DECLINE_THRESHOLD,
    ):
        self._plans = list(plans or [])
        self._decline_threshold = decline_threshold
        self.transactions: dict[str, FakeRecord] = {}
        self.customers: dict[str, FakeRecord] = {}
        self.credit_cards: dict[str, FakeRecord] = {}
        self.addresses: dict[str, FakeRecord] = {}
        self.merchant_accounts: dict[str, FakeRecord] = {}
        self._issued_nonces: dict[str, str] = {}
        self.calls: list[tuple[str, Any]] = []

    @property
    def name(self) -> str:
        return "fake"

    def generate_client_token(self, params: dict[str, Any] | None = None) -> str:
        self.calls.append(("client_token.generate", params))
        return f"fake-client-token-{_new_id()}"

    # -- transactions ---------------------------------------------------

    def sale(self, params: dict[str, Any]) -> FakeResult:
        self.calls.append(("transaction.sale", params))

        if params.get("amount") is None:
            return _error("Amount is required.")
        amount = Decimal(str(params["amount"]))

        nonce = params.get("payment_method_nonce")
        if nonce is not None:
            if nonce != VALID_NONCE and nonce not in self._issued_nonces:
                return _error("Unknown or expired payment_method_nonce.")
            self._issued_nonces.pop(nonce, None)  # single use
        elif not params.get("credit_card") and not params.get("customer_id"):
            return _error("Payment method is required.")

        options = params.get("options") or {}
        transaction = FakeRecord(
            id=_new_id(),
            attributes={
                "amount": amount,
                "customer_id": params.get("customer_id"),
                "merchant_account_id": params.get("merchant_account_id"),
                "service_fee_amount": params.get("service_fee_amount"),
                "status": "authorized",
            },
        )

        if amount >= self._decline_threshold:
            transaction.attributes["status"] = "processor_declined"
            self.transactions[transaction.id] = transaction
            return FakeResult(is_success=False, message="Do Not Honor", transaction=transaction)

        if options.get("submit_for_settlement"):
            transaction.attributes["status"] = "submitted_for_settlement"
        self.transactions[transaction.id] = transaction
        return FakeResult(is_success=True, transaction=transaction)

    def find_transaction(self, transaction_id: str) -> FakeRecord:
        self.calls.append(("transaction.find", transaction_id))
        return self._find(self.transactions, transaction_id)

    # -- vault ----------------------------------------------------------

    def create_customer(self, params: dict[str, Any]) -> FakeResult:
        self.calls.append(("customer.create", params))
        customer_id = params.get("id") or _new_id()
        if customer_id in self.customers:
            return _error("Customer ID has already been taken.")
        attributes = {k: v for k, v in params.items() if k != "id"}
        customer = FakeRecord(id=customer_id, attributes=attributes)
        self.customers[customer_id] = customer
        return FakeResult(is_success=True, customer=customer)

    def find_customer(self, customer_id: str) -> FakeRecord:
        self.calls.append(("customer.find", customer_id))
        return self._find(self.customers, customer_id)

    def create_credit_card(self, params: dict[str, Any]) -> FakeResult:
        self.calls.append(("credit_card.create", params))
        if params.get("customer_id") not in self.customers:
            return _error("Customer ID is invalid.")
        number = str(params.get("number") or "")
        if not number:
            return _error("Credit card number is required.")

        token = _new_id()
        card = FakeRecord(
            id=token,
            attributes={
                "token": token,
                "customer_id": params["customer_id"],
                "last_4": number[-4:],
                "cardholder_name": params.get("cardholder_name"),
                "billing_address": params.get("billing_address"),
            },
        )
        self.credit_cards[token] = card
        return FakeResult(is_success=True, credit_card=card)

    def create_address(self, params: dict[str, Any]) -> FakeResult:
        self.calls.append(("address.create", params))
        if params.get("customer_id") not in self.customers:
            return _error("Customer ID is invalid.")
        address = FakeRecord(id=_new_id(), attributes=dict(params))
        self.addresses[address.id] = address
        return FakeResult(is_success=True, address=address)

    def create_payment_method_nonce(self, payment_method_token: str) -> FakeResult:
        self.calls.append(("payment_method_nonce.create", payment_method_token))
        self._find(self.credit_cards, payment_method_token)
        nonce = f"fake-nonce-{_new_id()}"
        self._issued_nonces[nonce] = payment_method_token
        return FakeResult(
            is_success=True,
            payment_method_nonce=FakeRecord(id=nonce, attributes={"nonce": nonce}),
        )

    # -- merchant accounts ----------------------------------------------

    def create_merchant_account(self, params: dict[str, Any]) -> FakeResult:
        self.calls.append(("merchant_account.create", params))
        if not params.get("tos_accepted"):
            return _error("Terms Of Service needs to be accepted.")
        if not params.get("master_merchant_account_id"):
            return _error("Master merchant account ID is required.")

        account_id = params.get("id") or _new_id()
        if account_id in self.merchant_accounts:
            return _error("Merchant account ID has already been taken.")
        account = FakeRecord(
            id=account_id,
            attributes={
                "status": "pending",
                "master_merchant_account_id": params["master_merchant_account_id"],
            },
        )
        self.merchant_accounts[account_id] = account
        return FakeResult(is_success=True, merchant_account=account)

    def find_merchant_account(self, merchant_account_id: str) -> FakeRecord:
        self.calls.append(("merchant_account.find", merchant_account_id))
        return self._find(self.merchant_accounts, merchant_account_id)

    # -- plans ----------------------------------------------------------

    def all_plans(self) -> list[FakeRecord]:
        self.calls.append(("plan.all", None))
        return list(self._plans)

    @staticmethod
    def _find(records: dict[str, FakeRecord], record_id: str) -> FakeRecord:
        if not record_id or not record_id.strip() or record_id not in records:
            raise NotFoundError()
        return records[record_id]
