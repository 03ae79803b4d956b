# app/shared/config.py
from pydantic import BaseModel
import logging
import os

class Settings(BaseModel):
    ENV: str = os.getenv("ENV", "dev")

    # server / logging (uvicorn and logging.basicConfig)
    HOST: str = os.getenv("HOST", "127.0.0.1")
    PORT: int = int(os.getenv("PORT", "3000"))
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # downstream sentiment scorer
    PYTHON_API_URL: str = os.getenv("PYTHON_API_URL", "http://localhost:8000")

    # demo auth controls
    AUTH_DEMO: bool = os.getenv("AUTH_DEMO", "true").lower() == "true"
    DEMO_TOKEN: str = os.getenv("DEMO_TOKEN", "demo")

    # JWT settings (for real mode)
    JWT_KEY: str = os.getenv("JWT_KEY", "dev-secret")
    JWT_ALG: str = os.getenv("JWT_ALG", "HS256")
    JWT_ISS: str | None = os.getenv("JWT_ISS")
    JWT_AUD: str | None = os.getenv("JWT_AUD")
    JWT_EXPIRE_MIN: int = int(os.getenv("JWT_EXPIRE_MIN", "60"))

    @property
    def log_level_no(self) -> int:
        return getattr(logging, self.LOG_LEVEL.upper(), logging.INFO)

settings = Settings()
