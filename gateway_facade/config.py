"""Application configuration via environment variables."""

from typing import Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    braintree_environment: Optional[str] = "sandbox"
    braintree_merchant_id: Optional[str] = None
    braintree_public_key: Optional[str] = None
    braintree_private_key: Optional[str] = None
    braintree_master_merchant_account_id: str = "masterMerchantAccount"
    use_fake_gateway: bool = False  # In-memory client, no network calls
    log_level: str = "INFO"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
