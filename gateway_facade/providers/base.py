"""
Abstract gateway client interface.

The facade never calls the Braintree SDK's module-level API directly. It is
handed a GatewayClient, composed of one small capability per vendor
resource, so tests and local runs can swap in the in-memory client.

Every create-style method returns the vendor's result object untouched
(something with an `is_success` flag); find-style methods return the
resource or raise braintree.exceptions.NotFoundError.
"""

from abc import ABC, abstractmethod
from typing import Any


class GeneratesClientTokens(ABC):
    @abstractmethod
    def generate_client_token(self, params: dict[str, Any] | None = None) -> str:
        """Client-side token used by Drop-in / hosted fields."""
        ...


class CreatesTransactions(ABC):
    @abstractmethod
    def sale(self, params: dict[str, Any]) -> Any:
        ...

    @abstractmethod
    def find_transaction(self, transaction_id: str) -> Any:
        ...


class CreatesCustomers(ABC):
    @abstractmethod
    def create_customer(self, params: dict[str, Any]) -> Any:
        ...

    @abstractmethod
    def find_customer(self, customer_id: str) -> Any:
        ...


class CreatesCreditCards(ABC):
    @abstractmethod
    def create_credit_card(self, params: dict[str, Any]) -> Any:
        ...


class CreatesAddresses(ABC):
    @abstractmethod
    def create_address(self, params: dict[str, Any]) -> Any:
        ...


class ManagesMerchantAccounts(ABC):
    @abstractmethod
    def create_merchant_account(self, params: dict[str, Any]) -> Any:
        ...

    @abstractmethod
    def find_merchant_account(self, merchant_account_id: str) -> Any:
        ...


class CreatesPaymentMethodNonces(ABC):
    @abstractmethod
    def create_payment_method_nonce(self, payment_method_token: str) -> Any:
        ...


class ListsPlans(ABC):
    @abstractmethod
    def all_plans(self) -> list[Any]:
        ...


class GatewayClient(
    GeneratesClientTokens,
    CreatesTransactions,
    CreatesCustomers,
    CreatesCreditCards,
    CreatesAddresses,
    ManagesMerchantAccounts,
    CreatesPaymentMethodNonces,
    ListsPlans,
):
    """Everything the facade needs from a payment gateway."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Client identifier (e.g. 'braintree', 'fake')."""
        ...
