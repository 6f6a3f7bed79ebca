"""Enumerations for the gateway facade domain model."""

from enum import Enum

from gateway_facade.engine.errors import ConfigurationError


class GatewayEnvironment(str, Enum):
    """Braintree environments a merchant can be configured against."""

    SANDBOX = "sandbox"
    PRODUCTION = "production"
    DEVELOPMENT = "development"
    QA = "qa"

    @classmethod
    def parse(cls, value: str) -> "GatewayEnvironment":
        """Map a configured environment tag (case-insensitive) onto a member."""
        try:
            return cls((value or "").strip().lower())
        except ValueError:
            raise ConfigurationError(
                f"Unknown Braintree environment: {value!r} "
                f"(expected one of {', '.join(e.value for e in cls)})",
                attribute="environment",
            ) from None


class CreditCardField(str, Enum):
    """Optional credit card fields copied into a request when present.

    Use expiration_month + expiration_year or expiration_date, not both.
    """

    CVV = "cvv"
    EXPIRATION_MONTH = "expiration_month"  # MM
    EXPIRATION_YEAR = "expiration_year"  # YYYY
    EXPIRATION_DATE = "expiration_date"  # MM/YYYY
    CARDHOLDER_NAME = "cardholder_name"
