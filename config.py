"""
Server settings, read from COLORKIT_* environment variables.
"""

import os

from pydantic import BaseModel, Field


class Settings(BaseModel):
    host: str = Field(default_factory=lambda: os.getenv("COLORKIT_HOST", "0.0.0.0"))
    port: int = Field(default_factory=lambda: int(os.getenv("COLORKIT_PORT", "8973")))
    log_level: str = Field(default_factory=lambda: os.getenv("COLORKIT_LOG_LEVEL", "INFO").upper())
    mcp_enabled: bool = Field(
        default_factory=lambda: os.getenv("COLORKIT_MCP_ENABLED", "true").lower() in ("1", "true", "yes")
    )


def get_settings() -> Settings:
    return Settings()
