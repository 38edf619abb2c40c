from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # App Info
    app_name: str = "ERP API"
    version: str = "1.0.0"
    debug: bool = False

    # Database
    database_url: str = "sqlite:///./erp.db"
    sqlite_busy_timeout: int = 30  # seconds

    # Security
    secret_key: str = "change-me-in-production"
    algorithm: str = "HS256"
    access_token_expire_minutes: int = 480  # 8 hours

    # CORS
    allowed_origins: List[str] = ["http://localhost:3000"]

    # Bootstrap
    seed_demo_data: bool = True
    admin_email: str = "admin@erp.com"
    admin_password: str = "admin123"

    # Logging
    log_level: str = "INFO"

    # Server
    host: str = "0.0.0.0"
    port: int = 8000

settings = Settings()
