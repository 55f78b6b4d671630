from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    webhook_token: str = "meu-token-secreto"
    host: str = "localhost"
    port: int = 5000
    callback_base_url: str = "http://127.0.0.1:5001"
    callback_timeout_seconds: float = 5.0
    log_level: str = "INFO"

    @field_validator("webhook_token")
    @classmethod
    def validate_token(cls, value: str) -> str:
        if not value:
            raise ValueError("WEBHOOK_TOKEN must be a non-empty string")
        return value

    @field_validator("port")
    @classmethod
    def validate_port(cls, value: int) -> int:
        if not 0 < value < 65536:
            raise ValueError("PORT must be between 1 and 65535")
        return value

    @field_validator("callback_base_url")
    @classmethod
    def strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @field_validator("callback_timeout_seconds")
    @classmethod
    def validate_callback_timeout(cls, value: float) -> float:
        if value <= 0:
            raise ValueError("CALLBACK_TIMEOUT_SECONDS must be > 0")
        return value


settings = Settings()
