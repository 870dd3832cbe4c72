"""Configuration management."""

import logging
import math
import os
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field
from dotenv import load_dotenv

from .models.request import Provider

logger = logging.getLogger(__name__)

# Load environment variables
load_dotenv()


def _optional_timeout(name: str) -> Optional[float]:
    """Read a positive number of seconds; anything else means no timeout."""
    value = os.getenv(name, "").strip()
    if not value:
        return None
    try:
        seconds = float(value)
    except ValueError:
        logger.warning(f"Ignoring {name}={value!r}: not a number")
        return None
    if not math.isfinite(seconds) or seconds <= 0:
        logger.warning(f"Ignoring {name}={value!r}: must be a positive number")
        return None
    return seconds


class Config(BaseModel):
    """Application configuration."""

    # API Keys
    gemini_api_key: str = Field(
        default_factory=lambda: os.getenv("GEMINI_API_KEY") or os.getenv("API_KEY", ""),
        description="Google Gemini API key (also read from API_KEY)"
    )
    openai_api_key: str = Field(
        default_factory=lambda: os.getenv("OPENAI_API_KEY", ""),
        description="OpenAI API key"
    )
    deepseek_api_key: str = Field(
        default_factory=lambda: os.getenv("DEEPSEEK_API_KEY", ""),
        description="DeepSeek API key"
    )

    # Paths
    workspace: Path = Field(
        default_factory=lambda: Path(os.getenv("PROMPTFORGE_WORKSPACE", ".")),
        description="Workspace directory"
    )
    history_file: str = Field(
        default="promptforge_history.yaml",
        description="History log file name inside the workspace"
    )
    history_limit: int = Field(
        default=10,
        description="Maximum number of projects kept in the history log",
        gt=0
    )

    # Model settings
    validation_model: str = Field(
        default="gemini-3-flash-preview",
        description="Lightweight Gemini model used to check API keys"
    )
    request_timeout: Optional[float] = Field(
        default_factory=lambda: _optional_timeout("PROMPTFORGE_REQUEST_TIMEOUT"),
        description="HTTP timeout in seconds for OpenAI/DeepSeek (None = no timeout)",
        gt=0
    )

    class Config:
        """Pydantic config."""
        frozen = False

    @property
    def history_path(self) -> Path:
        """Return the full path of the history log."""
        return self.workspace / self.history_file

    def api_key_for(self, provider: Provider) -> str:
        """Return the configured API key for a provider."""
        if provider == Provider.GEMINI:
            return self.gemini_api_key
        if provider == Provider.OPENAI:
            return self.openai_api_key
        return self.deepseek_api_key


# Global config instance
config = Config()
