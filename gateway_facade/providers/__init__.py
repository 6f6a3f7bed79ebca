from gateway_facade.providers.base import GatewayClient
from gateway_facade.providers.braintree_provider import BraintreeClient
from gateway_facade.providers.fake_provider import FakeGatewayClient

__all__ = ["GatewayClient", "BraintreeClient", "FakeGatewayClient"]
