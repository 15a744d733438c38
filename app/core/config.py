"""Application configuration (settings and environment).

Single source of truth for all configuration. Uses pydantic-settings
with .env support. Firebase credentials are optional at load time so the
app (and its tests) can start without them; lifespan skips client
creation when they are absent.
"""

from functools import lru_cache

from pydantic import Field, SecretStr, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ORDER_ASSIGNMENT_STRATEGIES = ("scan", "counter")


class Settings(BaseSettings):
    """Application settings loaded from environment and .env.

    Validation in validate_firebase_and_ordering covers the ordering
    strategy and the storage bucket when credentials are configured.
    """

    # App
    app_name: str = "portodas-api"
    app_version: str = "1.0.0"
    debug: bool = False
    port: int = 5000

    # CORS: comma-separated origins; empty allows any origin.
    cors_origin: str = Field(default="", validation_alias="CORS_ORIGIN")

    # Firebase: use key (env, full JSON) or path (file).
    firebase_service_account_key: SecretStr | None = None
    firebase_service_account_path: str | None = None
    firebase_project_id: str | None = None
    firebase_storage_bucket: str | None = None
    # Only used by scripts/get_id_token.py to exchange custom tokens.
    firebase_web_api_key: SecretStr | None = None

    # Uploads and request bodies
    max_upload_size: int = 10 * 1024 * 1024  # 10MB
    max_json_body_size: int = 5 * 1024 * 1024  # 5MB
    signed_url_expiration_seconds: int = 600

    # Rate limiting (slowapi limit strings)
    rate_limit_enabled: bool = True
    rate_limit: str = "120/minute"
    upload_rate_limit: str = "30/minute"

    # Ordered collections: "scan" (max + 1 over live documents) or "counter" (atomic increment)
    order_assignment_strategy: str = "scan"

    # Request / middleware
    request_id_header: str = "X-Request-ID"
    outbound_timeout_seconds: float = 30.0

    # OpenTelemetry
    telemetry_enabled: bool = False
    telemetry_exporter: str = "console"
    telemetry_otlp_endpoint: str | None = None
    telemetry_sample_rate: float = 1.0
    telemetry_environment: str = "development"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
        populate_by_name=True,
    )

    @property
    def allowed_origins(self) -> list[str]:
        """CORS origins split on commas; ["*"] when none are configured."""
        origins = [o.strip() for o in self.cors_origin.split(",") if o.strip()]
        return origins or ["*"]

    @property
    def has_firebase_credentials(self) -> bool:
        has_key = (
            self.firebase_service_account_key
            and self.firebase_service_account_key.get_secret_value()
        )
        return bool(has_key or self.firebase_service_account_path)

    @model_validator(mode="after")
    def validate_firebase_and_ordering(self) -> "Settings":
        """Validate ordering strategy and storage bucket.

        - ORDER_ASSIGNMENT_STRATEGY must be 'scan' or 'counter'.
        - With Firebase credentials configured, FIREBASE_STORAGE_BUCKET is required.
        """
        if self.order_assignment_strategy not in ORDER_ASSIGNMENT_STRATEGIES:
            raise ValueError(
                "order_assignment_strategy must be 'scan' or 'counter', "
                f"got: {self.order_assignment_strategy!r}"
            )
        if self.has_firebase_credentials and not self.firebase_storage_bucket:
            raise ValueError(
                "FIREBASE_STORAGE_BUCKET is required when Firebase credentials are set. "
                "Set it in environment or .env file."
            )
        if self.max_upload_size <= 0:
            raise ValueError("max_upload_size must be positive")
        if not 1 <= self.signed_url_expiration_seconds <= 604800:
            raise ValueError(
                "signed_url_expiration_seconds must be between 1 and 604800 (7 days)"
            )
        return self


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings (single instance per process).

    Validation runs on first call, not at import time. In tests, call
    get_settings.cache_clear() before overriding env vars so the next
    get_settings() uses the new values.

    Returns:
        Loaded and validated Settings instance.
    """
    return Settings()
