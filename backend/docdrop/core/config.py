from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    app_name: str = "Docdrop Upload API"
    app_env: str = "development"
    api_prefix: str = "/api"
    frontend_origin: str = "http://localhost:3000"
    frontend_origins: str = "http://localhost:3000,http://127.0.0.1:3000"
    sentry_dsn: str = ""
    log_level: str = "INFO"

    database_url: str
    database_name: str
    auto_create_tables: bool = True

    aws_region: str
    aws_access_key_id: str
    aws_secret_access_key: str
    aws_s3_bucket: str
    s3_endpoint_url: str = ""
    public_base_url: str = ""

    @property
    def cors_origins(self) -> list[str]:
        origins: list[str] = []
        if self.frontend_origin:
            origins.append(self.frontend_origin.strip())
        if self.frontend_origins:
            origins.extend(
                [origin.strip() for origin in self.frontend_origins.split(",") if origin.strip()]
            )

        deduped: list[str] = []
        seen: set[str] = set()
        for origin in origins:
            if origin in seen:
                continue
            seen.add(origin)
            deduped.append(origin)
        return deduped


@lru_cache
def get_settings() -> Settings:
    return Settings()
