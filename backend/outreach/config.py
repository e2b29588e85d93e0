from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    database_url: str = "sqlite:///./outreach.db"
    api_prefix: str = "/api"
    host: str = "127.0.0.1"
    port: int = 3000
    log_level: str = "INFO"

    cors_origins: list[str] = ["*"]

    jwt_secret: str = "dev-secret"
    jwt_algorithm: str = "HS256"
    jwt_expires_hours: int = 24

    # Generative-AI provider. Any OpenAI-compatible endpoint works via ai_base_url.
    ai_api_key: str | None = None
    ai_model: str = "gpt-4o-mini"
    # Used for calls that need live web results
    ai_search_model: str = "gpt-4o-search-preview"
    ai_base_url: str | None = None

    gmail_send_url: str = "https://gmail.googleapis.com/gmail/v1/users/me/messages/send"
    http_timeout_seconds: float = 30.0

    seed_admin: bool = True
    admin_username: str = "admin"
    admin_password: str = "admin"

    model_config = {"env_prefix": "OUTREACH_"}


settings = Settings()
