import json

from pydantic_settings import BaseSettings
from pydantic import field_validator
from pathlib import Path


class Settings(BaseSettings):
    restcountries_base_url: str = "https://restcountries.com/v3.1"
    request_timeout_seconds: float = 10.0
    hover_preview_delay_ms: int = 750
    preferences_path: str = str(Path(__file__).resolve().parent.parent / "data" / "preferences.json")
    theme_storage_key: str = "theme"
    cors_origins: list[str] = ["http://localhost:8000", "http://127.0.0.1:8000"]
    detail_rate_limit: str = "30/minute"
    log_level: str = "INFO"

    @field_validator("cors_origins", mode="before")
    @classmethod
    def parse_cors_origins(cls, v):
        if isinstance(v, str):
            # Accept JSON array or comma-separated string
            v = v.strip()
            if v.startswith("["):
                return json.loads(v)
            return [s.strip() for s in v.split(",") if s.strip()]
        return v

    model_config = {
        "env_file": str(Path(__file__).resolve().parent.parent / ".env"),
        "env_file_encoding": "utf-8",
    }


settings = Settings()
