# fitclub_server/config.py

import os
from dataclasses import dataclass
from dotenv import load_dotenv


load_dotenv()


DEFAULT_DATABASE_URL = "sqlite:///./data/fitclub.db"


@dataclass(frozen=True)
class Settings:
    """
    Runtime configuration for the API server.
    Values come from environment variables (or a local .env file).
    """
    jwt_secret: str
    database_url: str = DEFAULT_DATABASE_URL
    jwt_expire_minutes: int | None = None
    admin_email: str | None = None
    admin_password: str | None = None
    admin_name: str = "Admin"
    cors_origins: tuple[str, ...] = ("*",)
    app_env: str = "development"


def _optional_int(name: str) -> int | None:
    raw = (os.getenv(name) or "").strip()
    if not raw:
        return None
    value = int(raw)
    return value if value > 0 else None


def load_settings() -> Settings:
    secret = (os.getenv("JWT_SECRET") or "").strip()
    if not secret:
        raise RuntimeError("JWT_SECRET is not set. Refusing to start without a signing secret.")

    origins = os.getenv("CORS_ORIGINS", "*")
    return Settings(
        jwt_secret=secret,
        database_url=os.getenv("DATABASE_URL") or DEFAULT_DATABASE_URL,
        jwt_expire_minutes=_optional_int("JWT_EXPIRE_MINUTES"),
        admin_email=os.getenv("ADMIN_EMAIL") or None,
        admin_password=os.getenv("ADMIN_PASSWORD") or None,
        admin_name=os.getenv("ADMIN_NAME", "Admin"),
        cors_origins=tuple(o.strip() for o in origins.split(",") if o.strip()),
        app_env=os.getenv("APP_ENV", "development"),
    )
