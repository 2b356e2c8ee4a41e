from pathlib import Path
from typing import List, Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from judging.core.deletion import DeletePolicy


class Settings(BaseSettings):
    DATABASE_URL: str
    API_PREFIX: str = "/api"
    CORS_ORIGINS: List[str] = ["*"]
    LOG_LEVEL: str = "INFO"

    DB_POOL_SIZE: int = 10
    DB_MAX_OVERFLOW: int = 10

    BCRYPT_ROUNDS: int = 10
    LEADERBOARD_SIZE: int = 10

    # Inclusive bounds, unset means any integer is accepted
    SCORE_MIN: Optional[int] = None
    SCORE_MAX: Optional[int] = None

    DELETE_POLICY: DeletePolicy = DeletePolicy.RESTRICT

    # Go up two levels from core/config.py → project root
    model_config = SettingsConfigDict(env_file=str(Path(__file__).resolve().parents[2] / ".env"))

    @field_validator("BCRYPT_ROUNDS")
    @classmethod
    def check_rounds(cls, value: int) -> int:
        if value < 10:
            raise ValueError("BCRYPT_ROUNDS must be at least 10")
        return value


settings = Settings()
