from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv
from typing import Optional

load_dotenv()


class Settings(BaseSettings):
    # Application settings
    app_name: str = "Multilingual API"
    app_version: str = "1.0.0"
    debug: bool = False

    # Translation settings
    default_translation: Optional[str] = None
    phrases_dir: Optional[str] = None

    # Logging settings
    log_level: str = "INFO"
    log_json: bool = True

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )


settings = Settings()
