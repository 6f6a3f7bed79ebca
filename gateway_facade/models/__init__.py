from gateway_facade.models.enums import CreditCardField, GatewayEnvironment
from gateway_facade.models.request import Credentials, GatewayResult, TransactionRequest

__all__ = [
    "Credentials",
    "GatewayResult",
    "TransactionRequest",
    "CreditCardField",
    "GatewayEnvironment",
]
