# app/core/config.py
from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    APP_NAME: str = "Staff Management API"
    APP_VERSION: str = "0.1.0"
    APP_DESCRIPTION: str = "API de gestión de empleados, roles y proyectos."
    API_PREFIX: str = "/api/v1"

    API_KEY: str = "changeme"
    LOG_LEVEL: str = "INFO"

    # MySQL
    MYSQL_HOST: str = "localhost"
    MYSQL_PORT: int = 3306
    MYSQL_DB: str = "staff"
    MYSQL_USER: str = "root"
    MYSQL_PASSWORD: str = "2023"
    MYSQL_CHARSET: str = "utf8mb4"

    # si está definida, tiene prioridad sobre MYSQL_* (p.ej. sqlite:// en tests)
    DATABASE_URL: str | None = None
    CREATE_TABLES: bool = True

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    @property
    def sqlalchemy_url(self) -> str:
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return (
            f"mysql+pymysql://{self.MYSQL_USER}:{self.MYSQL_PASSWORD}"
            f"@{self.MYSQL_HOST}:{self.MYSQL_PORT}/{self.MYSQL_DB}"
            f"?charset={self.MYSQL_CHARSET}"
        )

@lru_cache
def get_settings() -> Settings:
    return Settings()
