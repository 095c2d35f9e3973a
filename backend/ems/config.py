"""Application settings and configuration helpers."""
from functools import lru_cache
import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field

load_dotenv()


class Settings(BaseModel):
    """Runtime configuration loaded from environment variables."""

    database_url: str = Field(
        default="sqlite+aiosqlite:///./employees.db", alias="DATABASE_URL"
    )
    secret_key: str = Field(default="change-me", alias="JWT_SECRET")
    access_token_expires_minutes: int = Field(
        default=60 * 24, alias="ACCESS_TOKEN_EXPIRES_MINUTES"
    )

    cloudinary_cloud_name: str = Field(default="", alias="CLOUDINARY_CLOUD_NAME")
    cloudinary_api_key: str = Field(default="", alias="CLOUDINARY_API_KEY")
    cloudinary_api_secret: str = Field(default="", alias="CLOUDINARY_API_SECRET")
    upload_folder: str = Field(default="employee_photos", alias="UPLOAD_FOLDER")

    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    host: str = Field(default="0.0.0.0", alias="HOST")
    port: int = Field(default=4000, alias="PORT")

    model_config = {
        "populate_by_name": True,
        "extra": "ignore",
    }


@lru_cache
def get_settings() -> Settings:
    """Return a cached Settings instance built from the environment."""

    values = {}
    for name, field in Settings.model_fields.items():
        raw = os.getenv(field.alias or name.upper())
        if raw is not None:
            values[name] = raw
    return Settings(**values)
