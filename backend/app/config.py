from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    app_name: str = "Error Pipeline Demo API"
    app_version: str = "0.1.0"
    database_url: str = "sqlite:///./local.db"
    log_level: str = "INFO"
    log_json: bool = False
    expose_error_details: bool = False

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")


settings = Settings()
