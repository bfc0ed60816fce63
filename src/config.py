# src/config.py
import os
from dotenv import load_dotenv
from pathlib import Path


# Carga el archivo .env
load_dotenv()


def _split_csv(value: str | None) -> list[str]:
    return [item.strip() for item in (value or "").split(",") if item.strip()]


class Settings:
    DB_HOST = os.getenv("DB_HOST", "localhost")
    DB_PORT = os.getenv("DB_PORT", "5432")
    DB_NAME = os.getenv("DB_NAME", "postgres")
    DB_USER = os.getenv("DB_USER", "postgres")
    DB_PASSWORD = os.getenv("DB_PASSWORD", "")

    # Supabase expone el Postgres directo; DATABASE_URL tiene prioridad
    DATABASE_URL = os.getenv(
        "DATABASE_URL",
        f"postgresql+psycopg://{DB_USER}:{DB_PASSWORD}@{DB_HOST}:{DB_PORT}/{DB_NAME}",
    )

    BASE_DIR = Path(__file__).resolve().parent

    SUPABASE_URL: str | None = os.getenv("SUPABASE_URL")
    SUPABASE_ANON_KEY: str | None = os.getenv("SUPABASE_ANON_KEY")
    SUPABASE_SERVICE_KEY: str | None = os.getenv("SUPABASE_SERVICE_KEY")
    IDENTITY_TIMEOUT: float = float(os.getenv("IDENTITY_TIMEOUT", "10"))

    API_PREFIX: str = os.getenv("API_PREFIX", "/api")
    HOST: str = os.getenv("HOST", "127.0.0.1")
    PORT: int = int(os.getenv("PORT", "3000"))

    PASSWORD_RESET_REDIRECT_URL: str = os.getenv(
        "PASSWORD_RESET_REDIRECT_URL", "http://localhost:3000/reset-password"
    )

    PRODUCTION_URL: str | None = os.getenv("PRODUCTION_URL")
    PRODUCTION_URL_WWW: str | None = os.getenv("PRODUCTION_URL_WWW")
    CORS_ORIGINS: list[str] = _split_csv(
        os.getenv("CORS_ORIGINS", "http://localhost:3000,http://localhost:5173")
    )

    @property
    def cors_origins(self) -> list[str]:
        extra = [url for url in (self.PRODUCTION_URL, self.PRODUCTION_URL_WWW) if url]
        return extra + self.CORS_ORIGINS

    @property
    def identity_root(self) -> str:
        return f"{(self.SUPABASE_URL or '').rstrip('/')}/auth/v1"


settings = Settings()
