"""
애플리케이션 설정
환경 변수 또는 프로젝트 루트의 .env에서 읽음 (대소문자 무시)
"""
from pathlib import Path
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


class Settings(BaseSettings):
    """애플리케이션 설정"""
    model_config = SettingsConfigDict(
        env_file=Path(__file__).resolve().parents[1] / ".env",
        case_sensitive=False,
        extra="ignore",
    )

    database_url: str = "sqlite:///./mentoring.db"
    database_echo: bool = False

    # JWT
    secret_key: str = "change-me-mentoring-secret"
    algorithm: str = "HS256"
    access_token_expire_minutes: int = 60

    app_name: str = "Mentoring Reservation API"
    debug: bool = False
    log_level: str = "INFO"

    allowed_origins: list[str] = ["http://localhost:3000"]

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        v = v.strip().upper()
        if v not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {sorted(_LOG_LEVELS)}")
        return v


settings = Settings()
