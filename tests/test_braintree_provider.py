"""Tests for the Braintree SDK adapter, checked against the real SDK gateway objects."""

from unittest.mock import patch

import braintree
import pytest
from braintree.client_token_gateway import ClientTokenGateway

from gateway_facade.engine.errors import ConfigurationError
from gateway_facade.engine.facade import GatewayFacade
from gateway_facade.models.request import Credentials
from gateway_facade.providers.braintree_provider import BraintreeClient

# (client method, argument, SDK resource, SDK method)
SDK_CALLS = [
    ("sale", {"amount": "1.00"}, "transaction", "sale"),
    ("find_transaction", "tx1", "transaction", "find"),
    ("create_customer", {"id": "c1"}, "customer", "create"),
    ("find_customer", "c1", "customer", "find"),
    ("create_credit_card", {"number": "4111111111111111"}, "credit_card", "create"),
    ("create_address", {"customer_id": "c1"}, "address", "create"),
    ("create_merchant_account", {"tos_accepted": True}, "merchant_account", "create"),
    ("find_merchant_account", "m1", "merchant_account", "find"),
    ("create_payment_method_nonce", "tok", "payment_method_nonce", "create"),
    ("generate_client_token", {"customer_id": "c1"}, "client_token", "generate"),
]


@pytest.fixture
def sdk_gateway():
    with patch(
        "gateway_facade.providers.braintree_provider.braintree.BraintreeGateway", autospec=True
    ) as gateway_cls:
        yield gateway_cls


class TestConfiguration:
    def test_sandbox_configuration(self, sdk_gateway, credentials):
        BraintreeClient(credentials)

        config = sdk_gateway.call_args.args[0]
        assert isinstance(config, braintree.Configuration)
        assert config.environment == braintree.Environment.Sandbox
        assert config.merchant_id == "test_merchant"
        assert config.public_key == "test_public"
        assert config.private_key == "test_private"

    def test_production_configuration(self, sdk_gateway):
        BraintreeClient(Credentials("production", "m", "pub", "priv"))
        config = sdk_gateway.call_args.args[0]
        assert config.environment == braintree.Environment.Production

    def test_unknown_environment(self, sdk_gateway):
        with pytest.raises(ConfigurationError):
            BraintreeClient(Credentials("mars", "m", "pub", "priv"))
        sdk_gateway.assert_not_called()

    def test_facade_builds_braintree_client_by_default(self, credentials):
        with patch.object(ClientTokenGateway, "generate", autospec=True, return_value="real-token"):
            facade = GatewayFacade.initialize(credentials)
        assert facade.client.name == "braintree"
        assert facade.client_token == "real-token"


class TestDelegation:
    @pytest.mark.parametrize("client_method,arg,resource,sdk_method", SDK_CALLS)
    def test_sdk_has_method(self, credentials, client_method, arg, resource, sdk_method):
        gateway = BraintreeClient(credentials)._gateway
        assert callable(getattr(getattr(gateway, resource), sdk_method, None))

    @pytest.mark.parametrize("client_method,arg,resource,sdk_method", SDK_CALLS)
    def test_call_forwarded(self, credentials, client_method, arg, resource, sdk_method):
        client = BraintreeClient(credentials)
        sdk_resource = getattr(client._gateway, resource)
        with patch.object(sdk_resource, sdk_method, autospec=True) as sdk_call:
            result = getattr(client, client_method)(arg)
        sdk_call.assert_called_once_with(arg)
        assert result is sdk_call.return_value

    def test_plans_listed(self, credentials):
        client = BraintreeClient(credentials)
        with patch.object(client._gateway.plan, "all", autospec=True, return_value=iter(["a", "b"])):
            assert client.all_plans() == ["a", "b"]
