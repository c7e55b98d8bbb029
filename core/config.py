from typing import List, Optional
from pydantic_settings import BaseSettings
from pydantic import Field

from models.enums import UnknownRolePolicy


class Settings(BaseSettings):
    # -------------------------------------------------
    # General
    # -------------------------------------------------
    PROJECT_NAME: str = "Back-Office Dashboard API"
    ENV: str = "development"
    LOG_LEVEL: str = Field("INFO", env="LOG_LEVEL")

    # -------------------------------------------------
    # Frontend Domains (CORS)
    # -------------------------------------------------
    FRONTEND_DOMAIN: Optional[str] = Field(None, env="FRONTEND_DOMAIN")

    FRONTEND_DOMAINS: List[str] = [
        "http://localhost:3000",
    ]

    BACKEND_CORS_ORIGINS: List[str] = []

    # -------------------------------------------------
    # Supabase (users, locations, revenue_data, ...)
    # -------------------------------------------------
    SUPABASE_URL: Optional[str] = Field(None, env="SUPABASE_URL")
    SUPABASE_ANON_KEY: Optional[str] = Field(None, env="SUPABASE_ANON_KEY")
    SUPABASE_SERVICE_ROLE_KEY: Optional[str] = Field(None, env="SUPABASE_SERVICE_ROLE_KEY")

    # -------------------------------------------------
    # Session cookie (signed JWT)
    # -------------------------------------------------
    SESSION_SECRET_KEY: Optional[str] = Field(None, env="SESSION_SECRET_KEY")
    SESSION_ALGORITHM: str = "HS256"
    SESSION_EXPIRE_MINUTES: int = 60 * 12  # one working day
    SESSION_COOKIE_NAME: str = "user"
    SESSION_COOKIE_SECURE: bool = False

    # -------------------------------------------------
    # Access control
    # -------------------------------------------------
    # "allow" keeps navigation open for unrecognized roles, "deny" blocks it
    ON_UNKNOWN_ROLE: UnknownRolePolicy = Field(UnknownRolePolicy.allow, env="ON_UNKNOWN_ROLE")

    GUARD_EXEMPT_PREFIXES: List[str] = [
        "/auth",
        "/health",
        "/navigation",
        "/docs",
        "/redoc",
        "/openapi.json",
    ]

    # -------------------------------------------------
    # Login rate limit (per client IP)
    # -------------------------------------------------
    LOGIN_RATE_LIMIT: int = Field(10, env="LOGIN_RATE_LIMIT")
    LOGIN_RATE_WINDOW_SECONDS: int = Field(60, env="LOGIN_RATE_WINDOW_SECONDS")

    # -------------------------------------------------
    # Model Config
    # -------------------------------------------------
    class Config:
        case_sensitive = True


# Instantiate settings
settings = Settings()

# -------------------------------------------------
# Build CORS list dynamically after loading settings
# -------------------------------------------------
cors_origins = []

if settings.FRONTEND_DOMAIN:
    domain = settings.FRONTEND_DOMAIN
    if not domain.startswith("http"):
        domain = f"https://{domain}"
    cors_origins.append(domain.rstrip("/"))

cors_origins.extend([d.rstrip("/") for d in settings.FRONTEND_DOMAINS])

settings.BACKEND_CORS_ORIGINS = sorted(list(set(cors_origins)))
