from pydantic import SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # chain id -> endpoints tried before the built-in ones
    RPC_URLS: dict[int, list[str]] = {}
    RPC_RANK: bool = True
    RPC_RANK_INTERVAL: float = 60.0
    RPC_REQUEST_TIMEOUT: float = 10.0

    SIGNER_RPC_URL: str | None = None
    PRIVATE_KEY: SecretStr | None = None

    # None waits for the receipt as long as the network takes
    CONFIRMATION_TIMEOUT: float | None = None
    RECEIPT_POLL_INTERVAL: float = 1.0


settings = Settings()
