# Settings read from the environment (BMSEARCH_*) or a .env file
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..constants.constants import NUM_CHARS


class Settings(BaseSettings):
    # Search
    ALPHABET_SIZE: int = Field(default=NUM_CHARS, ge=1)

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FILE: str = ""  # empty = console only

    # Batch search
    NUM_PROCESSES: int = Field(default=4, ge=1)

    # Trace output
    TRACE_WIDTH: int = Field(default=56, ge=1)

    model_config = SettingsConfigDict(
        env_prefix="BMSEARCH_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


settings = Settings()
