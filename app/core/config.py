"""Application configuration (settings and environment).

Single source of truth for all configuration. Uses pydantic-settings
with .env support. Platform credentials are NOT required at load time:
a missing credential is detected per request so the task endpoint can
answer 500 instead of the process failing to start.
"""

from functools import lru_cache
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import SecretStr, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

NOTIFICATION_BACKENDS = ("realtime", "redis", "none")


class Settings(BaseSettings):
    """Application settings loaded from environment and .env.

    Values that are invalid regardless of deployment (notification backend,
    dashboard time zone) are validated in validate_settings.
    """

    # App
    app_name: str = "taskdesk"
    app_version: str = "1.0.0"
    debug: bool = False

    # Managed platform (Supabase): REST rows + Realtime broadcast
    supabase_url: str = ""
    supabase_service_role_key: SecretStr = SecretStr("")
    supabase_anon_key: SecretStr = SecretStr("")
    platform_timeout_seconds: float = 30.0

    # Notification: "realtime" (platform broadcast), "redis" (pub/sub) or "none"
    notification_backend: str = "realtime"
    notification_topic: str = "tasks"

    # Redis (only used when notification_backend is "redis")
    redis_host: str = "localhost"
    redis_port: int = 6379
    redis_db: int = 0
    redis_password: SecretStr | None = None

    # Dashboard: IANA zone name for "today"; None = server local zone
    dashboard_timezone: str | None = None

    # CORS (task endpoint)
    cors_allow_origin: str = "*"
    cors_allow_headers: str = "authorization, x-client-info, apikey, content-type"

    # Request / middleware
    max_request_body_bytes: int = 1024 * 1024  # 1MB
    request_id_header: str = "X-Request-ID"

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
    )

    @model_validator(mode="after")
    def validate_settings(self) -> "Settings":
        """Validate notification backend and dashboard time zone."""
        if self.notification_backend not in NOTIFICATION_BACKENDS:
            raise ValueError(
                f"notification_backend must be one of {', '.join(NOTIFICATION_BACKENDS)}, "
                f"got: {self.notification_backend!r}"
            )
        if self.dashboard_timezone:
            try:
                ZoneInfo(self.dashboard_timezone)
            except (ZoneInfoNotFoundError, ValueError) as e:
                raise ValueError(
                    f"DASHBOARD_TIMEZONE is not a known IANA time zone: {self.dashboard_timezone!r}"
                ) from e
        self.supabase_url = self.supabase_url.rstrip("/")
        return self

    @property
    def is_service_configured(self) -> bool:
        """True when the platform URL and the privileged key are both set."""
        return bool(self.supabase_url and self.supabase_service_role_key.get_secret_value())

    @property
    def is_dashboard_configured(self) -> bool:
        """True when the platform URL and the restricted (anon) key are both set."""
        return bool(self.supabase_url and self.supabase_anon_key.get_secret_value())


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
