from __future__ import annotations

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from wtc.core.schemas import MarkerStyle

# Character budgets per target platform.
PLATFORM_LIMITS = {
    "xiaohongshu": 900,  # hard limit is 1000
    "twitter": 140,
    "x": 280,
    "bluesky": 300,
    "mastodon": 500,
    "threads": 500,
    "facebook": 500,
}


class Settings(BaseSettings):
    max_chunk_size: int = Field(default=900, description="Character limit per chunk")
    marker_style: MarkerStyle = Field(default="➤", description="Paragraph marker")
    add_markers: bool = Field(default=True, description="Prefix paragraphs with a marker")
    split: bool = Field(default=False, description="Split converted text into chunks")
    log_level: str = Field(default="WARNING", description="Log level for the CLI")
    emoji_map_path: Optional[str] = Field(
        default=None, description="JSON file overriding the bundled emoji table"
    )

    model_config = SettingsConfigDict(
        env_prefix="WTC_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


def get_settings() -> Settings:
    return Settings()
