"""
Gateway facade — the single entry point the application talks to.

Loads merchant credentials once at startup, then forwards each operation
to one call on the injected GatewayClient. Per call:

  1. Build the vendor payload from a TransactionRequest (or arguments)
  2. Forward it to the client
  3. Audit the call
  4. Wrap create-style results as GatewayResult(status, result)

There is no retry, no idempotency key and no state between calls: the
request value carries everything an operation needs.
"""

import logging
from typing import Any, Mapping, Optional

from gateway_facade.audit.logger import log_call
from gateway_facade.engine.errors import ConfigurationError, RequestError
from gateway_facade.engine.plans import find_plan, plan_ids
from gateway_facade.models.enums import GatewayEnvironment
from gateway_facade.models.request import Credentials, GatewayResult, TransactionRequest, plain, round_amount
from gateway_facade.providers.base import GatewayClient
from gateway_facade.providers.braintree_provider import BraintreeClient

logger = logging.getLogger("gateway_facade.facade")

DEFAULT_MASTER_MERCHANT_ACCOUNT_ID = "masterMerchantAccount"


def validate_credentials(credentials: Credentials) -> GatewayEnvironment:
    """
    Fail fast on incomplete credentials.

    Raises:
        ConfigurationError: If any required attribute is empty, or the
            environment tag is unknown.
    """
    for attribute in Credentials.REQUIRED:
        if not getattr(credentials, attribute):
            raise ConfigurationError(
                f'"{Credentials.__name__}.{attribute}" cannot be empty.',
                attribute=attribute,
            )
    return GatewayEnvironment.parse(credentials.environment)


class GatewayFacade:
    """Braintree operations behind one configured client."""

    def __init__(
        self,
        client: GatewayClient,
        environment: GatewayEnvironment = GatewayEnvironment.SANDBOX,
        master_merchant_account_id: str = DEFAULT_MASTER_MERCHANT_ACCOUNT_ID,
        client_token: Optional[str] = None,
    ):
        self._client = client
        self.environment = environment
        self.master_merchant_account_id = master_merchant_account_id
        self.client_token = client_token

    @classmethod
    def initialize(
        cls,
        credentials: Credentials,
        client: Optional[GatewayClient] = None,
        master_merchant_account_id: str = DEFAULT_MASTER_MERCHANT_ACCOUNT_ID,
    ) -> "GatewayFacade":
        """
        Validate credentials, configure the client and generate a client token.

        Args:
            credentials: Merchant credentials; all four fields are required.
            client: Client to use. Defaults to a BraintreeClient built from
                the credentials.
            master_merchant_account_id: Parent account for sub-merchants.

        Raises:
            ConfigurationError: On missing or invalid credentials.
        """
        environment = validate_credentials(credentials)
        if client is None:
            client = BraintreeClient(credentials)

        facade = cls(
            client,
            environment=environment,
            master_merchant_account_id=master_merchant_account_id,
        )
        facade.client_token = client.generate_client_token()
        log_call("client_token.generate")

        logger.info(
            "Gateway facade ready (client=%s, environment=%s, merchant=%s)",
            client.name,
            environment.value,
            credentials.merchant_id,
        )
        return facade

    @property
    def client(self) -> GatewayClient:
        return self._client

    # -- sales ----------------------------------------------------------

    def single_charge(
        self,
        request: TransactionRequest,
        submit_for_settlement: bool = True,
        store_in_vault_on_success: bool = True,
    ) -> GatewayResult:
        """Run a sale with everything set on the request."""
        params = request.sale_params()
        options = dict(params.get("options") or {})
        options["submit_for_settlement"] = submit_for_settlement
        options["store_in_vault_on_success"] = store_in_vault_on_success
        params["options"] = options
        return self._forward("transaction.sale", self._client.sale, params)

    def sale_with_payment_nonce(self, amount: Any, payment_method_nonce: str) -> GatewayResult:
        params = {
            "amount": round_amount(amount),
            "payment_method_nonce": payment_method_nonce,
            "options": {
                "submit_for_settlement": True,
                "store_in_vault_on_success": True,
            },
        }
        return self._forward("transaction.sale", self._client.sale, params)

    def sale_with_service_fee(
        self,
        merchant_account_id: str,
        amount: Any,
        payment_method_nonce: Optional[str],
        service_fee_amount: Any,
    ) -> GatewayResult:
        """Sale on a sub-merchant account, keeping service_fee_amount for the master."""
        params = {
            "merchant_account_id": merchant_account_id,
            "amount": round_amount(amount),
            "payment_method_nonce": payment_method_nonce,
            "service_fee_amount": round_amount(service_fee_amount),
        }
        return self._forward("transaction.sale", self._client.sale, params)

    def find_transaction(self, transaction_id: str) -> Any:
        log_call("transaction.find", details={"id": transaction_id})
        return self._client.find_transaction(transaction_id)

    # -- vault ----------------------------------------------------------

    def save_customer(self, request: TransactionRequest) -> GatewayResult:
        params = plain(request.customer) or {}
        if request.customer_id is not None:
            params["id"] = request.customer_id
        return self._forward("customer.create", self._client.create_customer, params)

    def save_credit_card(self, request: TransactionRequest) -> GatewayResult:
        if request.credit_card is None:
            raise RequestError("No credit card set on the request", field="credit_card")

        params = plain(request.credit_card)
        if request.billing is not None:
            params["billing_address"] = plain(request.billing)
        if request.customer_id is not None:
            params["customer_id"] = request.customer_id
        return self._forward("credit_card.create", self._client.create_credit_card, params)

    def save_address(self, request: TransactionRequest) -> GatewayResult:
        if request.billing is None:
            raise RequestError("No billing address set on the request", field="billing")

        params = plain(request.billing)
        if request.customer_id is not None:
            params["customer_id"] = request.customer_id
        return self._forward("address.create", self._client.create_address, params)

    def create_customer_credit_card(self, params: Mapping[str, Any]) -> Any:
        """Vault a card from raw params and return the card itself (None if the vendor refused it)."""
        result = self._client.create_credit_card(plain(params))
        log_call("credit_card.create", getattr(result, "is_success", None), params)
        return getattr(result, "credit_card", None)

    def create_payment_method_nonce(self, payment_method_token: str) -> Any:
        log_call("payment_method_nonce.create", details={"token": payment_method_token})
        return self._client.create_payment_method_nonce(payment_method_token)

    def find_customer(self, customer_id: str) -> Any:
        log_call("customer.find", details={"id": customer_id})
        return self._client.find_customer(customer_id)

    # -- merchant accounts ----------------------------------------------

    def create_merchant(
        self,
        individual: Mapping[str, Any],
        business: Optional[Mapping[str, Any]],
        funding: Mapping[str, Any],
        tos_accepted: bool,
        merchant_account_id: Optional[str] = None,
    ) -> GatewayResult:
        params = {
            "individual": plain(individual) or {},
            "business": plain(business) or {},
            "funding": plain(funding) or {},
            "tos_accepted": tos_accepted,
            "master_merchant_account_id": self.master_merchant_account_id,
        }
        if merchant_account_id is not None:
            params["id"] = merchant_account_id
        return self._forward(
            "merchant_account.create", self._client.create_merchant_account, params
        )

    def find_merchant(self, merchant_account_id: str) -> Any:
        log_call("merchant_account.find", details={"id": merchant_account_id})
        return self._client.find_merchant_account(merchant_account_id)

    # -- plans ----------------------------------------------------------

    def get_all_plans(self) -> list[Any]:
        plans = self._client.all_plans()
        log_call("plan.all", details={"count": len(plans)})
        return plans

    def get_plan_ids(self) -> list[str]:
        return plan_ids(self.get_all_plans())

    def get_plan_by_id(self, plan_id: str) -> Optional[Any]:
        return find_plan(self.get_all_plans(), plan_id)

    def _forward(self, operation: str, call, params: dict[str, Any]) -> GatewayResult:
        try:
            vendor_result = call(params)
        except Exception:
            log_call(operation, details=params, error=True)
            raise
        result = GatewayResult.from_vendor(vendor_result)
        log_call(operation, result.status, params)
        if not result.status:
            logger.warning(
                "%s was not successful: %s",
                operation,
                getattr(result.result, "message", "no message"),
            )
        return result
