import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv

DEFAULT_MODEL = "gemini-2.5-flash"
DEFAULT_BASE_URL = "https://generativelanguage.googleapis.com/v1beta"


@dataclass(frozen=True)
class Settings:
    gemini_api_key: str = ""
    gemini_model: str = DEFAULT_MODEL
    gemini_base_url: str = DEFAULT_BASE_URL
    provider_timeout_seconds: float = 60.0
    port: int = 5000
    frontend_url: str = "*"
    environment: str = "development"

    @property
    def is_serverless(self) -> bool:
        # Hosted deployments import the ASGI app instead of binding a port.
        return self.environment == "production"


def load_settings() -> Settings:
    load_dotenv()
    return Settings(
        gemini_api_key=os.getenv("GEMINI_API_KEY", ""),
        gemini_model=os.getenv("GEMINI_MODEL", DEFAULT_MODEL),
        gemini_base_url=os.getenv("GEMINI_BASE_URL", DEFAULT_BASE_URL).rstrip("/"),
        provider_timeout_seconds=float(os.getenv("GEMINI_TIMEOUT_SECONDS", "60")),
        port=int(os.getenv("PORT", "5000")),
        frontend_url=os.getenv("FRONTEND_URL") or "*",
        environment=os.getenv("APP_ENV", "development"),
    )


@lru_cache
def get_settings() -> Settings:
    return load_settings()
