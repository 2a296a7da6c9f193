from pydantic_settings import BaseSettings
from pathlib import Path
from dotenv import load_dotenv

# Load .env file explicitly
# Path from app/core/config.py to the project root .env
env_file = Path(__file__).parent.parent.parent / ".env"
load_dotenv(env_file)


class Settings(BaseSettings):
    # Database settings
    DATABASE_URL: str = "sqlite:///./activities.db"
    SQL_ECHO: bool = False

    # Single browser origin allowed by CORS
    CORS_ORIGIN: str = "http://localhost:3000"

    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = Path(__file__).parent.parent.parent / ".env"
        case_sensitive = False  # Allow case-insensitive environment variables


# Create settings instance
settings = Settings()
