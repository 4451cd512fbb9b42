"""
Configuration management for Profile API
Loads settings from environment variables
"""
from pydantic_settings import BaseSettings, SettingsConfigDict
from pathlib import Path


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    # Database
    DATABASE_URL: str = "sqlite:///./profile_api.db"

    # Security
    SECRET_KEY: str
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60
    BCRYPT_ROUNDS: int = 10

    # File Upload
    UPLOAD_DIR: str = "./uploads"
    UPLOAD_URL_PREFIX: str = "uploads"

    # API Configuration
    PROJECT_NAME: str = "Profile API"
    VERSION: str = "1.0.0"

    # CORS
    FRONTEND_URL: str = "http://localhost:4200"

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 5000

    # Application
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="allow"
    )

    @property
    def upload_path(self) -> Path:
        """Upload directory as a Path"""
        return Path(self.UPLOAD_DIR)


# Global settings instance
settings = Settings()
