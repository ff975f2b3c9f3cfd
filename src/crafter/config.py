"""
Runtime settings.

Settings are loaded once at startup (from an optional JSON file) and carried
by the AppContext; nothing reads them from module globals.
"""

import json
import logging
from pathlib import Path
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


class Settings(BaseModel):
    """
    Configuration for builders and the CLI.

    Attributes:
        strict: Reject finalize() when required fields are unset
        log_level: Root logging level name
        output_dir: Default directory for written products
    """

    model_config = ConfigDict(extra="forbid")

    strict: bool = Field(default=False, description="Enable required-field checks")
    log_level: str = Field(default="WARNING", description="Logging level name")
    output_dir: Optional[Path] = Field(default=None, description="Default output directory")

    @field_validator("log_level")
    @classmethod
    def _check_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return level


def load_settings(path: Optional[Union[str, Path]] = None, **overrides) -> Settings:
    """
    Load settings from a JSON file, then apply overrides.

    Args:
        path: Optional JSON file with Settings fields
        **overrides: Field values that win over the file; None values are ignored

    Returns:
        Validated Settings

    Raises:
        FileNotFoundError: If ``path`` does not exist
        pydantic.ValidationError: If the values are invalid
    """
    data: dict = {}
    if path is not None:
        path = Path(path)
        with open(path) as f:
            data = json.load(f)
        logger.debug(f"Loaded settings from {path}")

    data.update({key: value for key, value in overrides.items() if value is not None})
    return Settings(**data)
