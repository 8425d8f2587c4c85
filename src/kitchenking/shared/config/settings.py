from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # General
    LOG_LEVEL: str = Field(default="INFO", description="Application log level")
    BIND: str = Field(default="0.0.0.0:8076", description="API bind address")

    # CORS
    CORS_ALLOW_ORIGINS: str = Field(default="*", description="Comma-separated list of allowed origins")
    CORS_ALLOW_CREDENTIALS: bool = Field(default=True, description="Allow credentials in CORS")
    CORS_ALLOW_METHODS: str = Field(default="*", description="Allowed CORS methods")
    CORS_ALLOW_HEADERS: str = Field(default="*", description="Allowed CORS headers")

    # LLM
    DEEPSEEK_API_KEY: str = Field(default="", description="Fallback DeepSeek API key when a request carries none")
    DEEPSEEK_BASE_URL: str = Field(default="https://api.deepseek.com/v1", description="DeepSeek base URL")
    CHAT_MODEL: str = Field(default="deepseek-chat", description="Chat model ID")
    MAX_TOKENS: int = Field(default=2000, description="Maximum token count")
    TEMPERATURE: float = Field(default=0.8, description="Temperature")
    LLM_REQUEST_TIMEOUT: float = Field(default=100.0, description="LLM HTTP timeout (seconds)")

    # Kitchen
    MAX_CHEFS: int = Field(default=8, description="Maximum number of chefs cooking in one round")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


settings = Settings()
