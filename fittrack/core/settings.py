# fittrack/core/settings.py
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    ENVIRONMENT: str = "development"
    PORT: int = 9000
    DATABASE_URL: str = "sqlite:///./fittrack.db"
    CORS_ORIGINS: list[str] = ["*"]

    SECRET_KEY: str = "change-me"
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_DAYS: int = 30

    GROK_API_KEY: str | None = None
    AI_BASE_URL: str = "https://api.x.ai/v1"
    AI_MODEL: str = "grok-beta"
    AI_TIMEOUT_SECONDS: float = 30.0
    AI_MASK_FORBIDDEN: bool = True

    IMAGE_BASE_URL: str = "https://raw.githubusercontent.com/yuhonas/free-exercise-db/main/exercises"
    IMAGE_TIMEOUT_SECONDS: float = 8.0

    RAPIDAPI_KEY: str | None = None
    RAPIDAPI_HOST: str = "exercisedb.p.rapidapi.com"
    EXERCISE_TIMEOUT_SECONDS: float = 10.0

    REDIS_URL: str | None = None
    EXERCISE_CACHE_TTL_SECONDS: int = 86400

    FRONTEND_BUILD_DIR: str = "frontend/build"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT.lower() == "production"

settings = Settings()
