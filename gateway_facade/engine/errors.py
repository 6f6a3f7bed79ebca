"""
Exceptions raised by the gateway facade itself.

Failures coming from the Braintree SDK (braintree.exceptions.*) are not
wrapped here; they propagate to the caller unchanged.
"""


class GatewayFacadeError(Exception):
    """Base exception for facade errors."""


class ConfigurationError(GatewayFacadeError):
    """Missing or invalid merchant credentials. Raised at startup."""

    def __init__(self, message: str, attribute: str | None = None):
        super().__init__(message)
        self.attribute = attribute


class RequestError(GatewayFacadeError, ValueError):
    """A transaction request is missing fields an operation needs."""

    def __init__(self, message: str, field: str | None = None):
        super().__init__(message)
        self.field = field
