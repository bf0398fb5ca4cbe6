from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Local defaults match the single-box deployment
    mongodb_uri: str = "mongodb://localhost:27017"
    database_name: str = "Project_SHASN"
    gemini_collection: str = "GeminiQuestions"
    gpt_collection: str = "GptQuestions"
    server_selection_timeout_ms: int = 10000

    host: str = "0.0.0.0"
    port: int = 8080
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
