from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    app_name: str = "IPO Screener API"
    log_level: str = "INFO"
    cors_origins: list[str] = ["http://localhost:5173", "http://127.0.0.1:5173"]

    # Batch scoring
    max_batch_size: int = 500

    # Narrative / alert text
    narrative_max_length: int = 500
    alert_max_items: int = 3  # red flags (and positives) listed per alert

    model_config = {"env_file": ".env"}


@lru_cache
def get_settings() -> Settings:
    return Settings()
