from __future__ import annotations

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "development"
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    log_level: str = "INFO"

    base_dashboard_url: str = "http://localhost:3000"
    cors_extra_origins: str = ""

    # Unset means an unseeded generator, so scores vary between requests.
    scorer_seed: int | None = None
    # Artificial inference latency added before responding; 0 disables it.
    simulated_latency_ms: int = Field(default=0, ge=0)

    recommend_top_k: int = 4
    match_top_k: int = 6
    products_top_k: int = 8
    stores_top_k: int = 4

    google_vision_api_key: str = ""
    google_vision_url: str = "https://vision.googleapis.com/v1/images:annotate"
    openai_api_key: str = ""
    openai_embeddings_url: str = "https://api.openai.com/v1/embeddings"
    openai_embedding_model: str = "clip"
    external_timeout_sec: float = 15.0

    @field_validator("scorer_seed", mode="before")
    @classmethod
    def _blank_seed_is_unset(cls, value: object) -> object:
        # Treat `SCORER_SEED=` in .env as "not set".
        if isinstance(value, str) and not value.strip():
            return None
        return value


settings = Settings()
