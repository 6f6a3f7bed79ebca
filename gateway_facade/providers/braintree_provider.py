"""
Braintree gateway client.

Thin adapter from the capability interface to a braintree.BraintreeGateway
instance. The SDK does all transport, authentication and serialization;
nothing here inspects or reshapes its results.
"""

import logging
from typing import Any

import braintree

from gateway_facade.models.enums import GatewayEnvironment
from gateway_facade.models.request import Credentials
from gateway_facade.providers.base import GatewayClient

logger = logging.getLogger("gateway_facade.providers.braintree")

ENVIRONMENTS = {
    GatewayEnvironment.SANDBOX: braintree.Environment.Sandbox,
    GatewayEnvironment.PRODUCTION: braintree.Environment.Production,
    GatewayEnvironment.DEVELOPMENT: braintree.Environment.Development,
    GatewayEnvironment.QA: braintree.Environment.QA,
}


class BraintreeClient(GatewayClient):
    """GatewayClient backed by the official Braintree Python SDK."""

    def __init__(self, credentials: Credentials):
        environment = GatewayEnvironment.parse(credentials.environment)
        self._gateway = braintree.BraintreeGateway(
            braintree.Configuration(
                environment=ENVIRONMENTS[environment],
                merchant_id=credentials.merchant_id,
                public_key=credentials.public_key,
                private_key=credentials.private_key,
            )
        )
        logger.info(
            "Configured Braintree gateway (environment=%s, merchant=%s)",
            environment.value,
            credentials.merchant_id,
        )

    @property
    def name(self) -> str:
        return "braintree"

    def generate_client_token(self, params: dict[str, Any] | None = None) -> str:
        return self._gateway.client_token.generate(params or {})

    def sale(self, params: dict[str, Any]) -> Any:
        return self._gateway.transaction.sale(params)

    def find_transaction(self, transaction_id: str) -> Any:
        return self._gateway.transaction.find(transaction_id)

    def create_customer(self, params: dict[str, Any]) -> Any:
        return self._gateway.customer.create(params)

    def find_customer(self, customer_id: str) -> Any:
        return self._gateway.customer.find(customer_id)

    def create_credit_card(self, params: dict[str, Any]) -> Any:
        return self._gateway.credit_card.create(params)

    def create_address(self, params: dict[str, Any]) -> Any:
        return self._gateway.address.create(params)

    def create_merchant_account(self, params: dict[str, Any]) -> Any:
        return self._gateway.merchant_account.create(params)

    def find_merchant_account(self, merchant_account_id: str) -> Any:
        return self._gateway.merchant_account.find(merchant_account_id)

    def create_payment_method_nonce(self, payment_method_token: str) -> Any:
        return self._gateway.payment_method_nonce.create(payment_method_token)

    def all_plans(self) -> list[Any]:
        return list(self._gateway.plan.all())
