from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    log_level: str = "INFO"
    log_format: Literal["json", "console"] = "console"

    transport: Literal["fake", "http"] = "fake"

    # Remote Pix server
    pix_server_url: str = "http://localhost:8080"
    pix_server_timeout_seconds: float = 5.0

    # Answer given by the in-process fake server
    fake_response_code: str = "SUCCESS"

    # Sandbox HTTP server
    sandbox_host: str = "127.0.0.1"
    sandbox_port: int = 8080


settings = Settings()
