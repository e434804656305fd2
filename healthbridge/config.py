"""Central config loaded from environment variables."""
from pathlib import Path

from pydantic_settings import BaseSettings

BASE_DIR = Path(__file__).parent.parent  # repo root

GEMINI_OPENAI_URL = "https://generativelanguage.googleapis.com/v1beta/openai/"


class Settings(BaseSettings):
    # Generative text API (Gemini via its OpenAI-compatible endpoint)
    gemini_api_key: str = ""
    gemini_model: str = "gemini-1.5-pro-latest"
    gemini_base_url: str = GEMINI_OPENAI_URL
    mock_llm: bool = False  # Canned answers, no network

    # Device location
    location_enabled: bool = True
    location_latitude: float | None = None
    location_longitude: float | None = None
    geolocation_url: str = "http://ip-api.com/json"

    # Sessions (one screen each)
    max_sessions: int = 1000

    # Paths
    static_dir: Path = BASE_DIR / "static"

    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"

    @property
    def has_fixed_location(self) -> bool:
        return self.location_latitude is not None and self.location_longitude is not None


settings = Settings()
