from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    PROJECT_NAME: str = "Olatech Storefront API"
    DATABASE_URL: str = "sqlite:///./storefront.db"

    # Shared admin secret for catalog mutations
    ADMIN_PASSWORD: str = "admin123"

    # Session cookie
    SESSION_SECRET: str = "olatech_simple_secret"
    SESSION_COOKIE: str = "storefront_session"
    SESSION_MAX_AGE_SECONDS: int = 60 * 60 * 24  # 24 hours

    # Uploaded images arrive inline as data URIs
    MAX_IMAGE_BYTES: int = 10 * 1024 * 1024

    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"
        extra = "ignore"


settings = Settings()
