from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# 128 bits of entropy
MIN_REFRESH_TOKEN_BYTES = 16


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # App
    app_name: str = "Events API"
    app_env: str = "development"  # development, testing, production
    debug: bool = False

    # Security
    log_user_emails: bool = False  # Set to False in production for GDPR compliance

    # Database
    database_url: str
    database_pool_size: int = 5
    database_max_overflow: int = 10
    database_create_tables: bool = False  # create_all on startup, no migrations shipped

    # Auth - access tokens
    jwt_secret_key: str
    jwt_algorithm: str = "HS256"
    jwt_issuer: str = "events-api"
    jwt_audience: str = "events-api-clients"
    access_token_expire_minutes: int = 30

    # Auth - refresh tokens
    refresh_token_expire_days: int = 7
    refresh_token_length: int = 64  # bytes of randomness before encoding
    refresh_cookie_name: str = "refresh_token"
    refresh_cookie_secure: bool = True

    # Password hashing
    argon2_time_cost: int = 3
    argon2_memory_cost: int = 65536
    argon2_parallelism: int = 1

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    @field_validator("jwt_secret_key")
    @classmethod
    def validate_jwt_secret(cls, v: str) -> str:
        if v == "change-this-to-a-secure-random-string":
            raise ValueError(
                "JWT_SECRET_KEY must be changed from default value. "
                "Generate a secure secret with: openssl rand -hex 32"
            )
        if len(v) < 32:
            raise ValueError("JWT_SECRET_KEY must be at least 32 characters")
        return v

    @field_validator("refresh_token_length")
    @classmethod
    def validate_refresh_token_length(cls, v: int) -> int:
        if v < MIN_REFRESH_TOKEN_BYTES:
            raise ValueError(
                f"REFRESH_TOKEN_LENGTH must be at least {MIN_REFRESH_TOKEN_BYTES} bytes"
            )
        return v

    @field_validator("cors_origins")
    @classmethod
    def validate_cors_origins(cls, v: list[str]) -> list[str]:
        """Validate CORS origins - reject wildcards when credentials are used."""
        for origin in v:
            if origin == "*":
                raise ValueError(
                    "CORS wildcard '*' is not allowed when allow_credentials=True. "
                    "Specify explicit origins instead."
                )
        return v


@lru_cache
def get_settings() -> Settings:
    return Settings()
