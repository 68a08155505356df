from pathlib import Path

from pydantic_settings import BaseSettings

_repo_root = Path(__file__).resolve().parent.parent.parent


class Settings(BaseSettings):
    database_url: str = "sqlite:///qna.db"
    secret_key: str = "change-me-in-production"
    access_token_expire_minutes: int = 60
    bcrypt_rounds: int = 10
    environment: str = "development"  # "development" | "production"
    frontend_dist: str = str(_repo_root / "frontend" / "build")
    log_level: str = "INFO"
    default_categories: list[str] = ["General", "Programming", "Science", "Other"]

    class Config:
        env_prefix = "QNA_"


settings = Settings()
