from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    DATABASE_URL: str
    CREATE_TABLES: bool = True

    AGIFY_URL: str = "https://api.agify.io/"
    GENDERIZE_URL: str = "https://api.genderize.io/"
    NATIONALIZE_URL: str = "https://api.nationalize.io/"

    LOG_LEVEL: str = "INFO"
    HOST: str = "0.0.0.0"
    PORT: int = 8080
    SHUTDOWN_GRACE_SECONDS: int = 5
