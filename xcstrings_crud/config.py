"""Configuration management for xcstrings-crud."""

import os
from dataclasses import dataclass, field
from typing import List
from dotenv import load_dotenv

load_dotenv()


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


@dataclass
class Config:
    """Application configuration."""

    # Catalog defaults
    source_language: str = field(
        default_factory=lambda: os.getenv("XCSTRINGS_SOURCE_LANGUAGE", "en")
    )
    version: str = field(default_factory=lambda: os.getenv("XCSTRINGS_VERSION", "1.0"))
    indent: int = field(default_factory=lambda: int(os.getenv("XCSTRINGS_INDENT", "2")))

    # Logging
    log_level: str = field(
        default_factory=lambda: os.getenv("XCSTRINGS_LOG_LEVEL", "WARNING").upper()
    )

    # Tool server settings
    tools_host: str = field(
        default_factory=lambda: os.getenv("XCSTRINGS_TOOLS_HOST", "127.0.0.1")
    )
    tools_port: int = field(
        default_factory=lambda: int(os.getenv("XCSTRINGS_TOOLS_PORT", "8765"))
    )
    compact_stats: bool = field(
        default_factory=lambda: _env_bool("XCSTRINGS_COMPACT_STATS", "true")
    )

    # Marker Xcode writes for keys it no longer finds in source code
    STALE_STATE: str = "stale"

    # Variation slots accepted by the structural decoder
    PLURAL_CATEGORIES: tuple = ("zero", "one", "two", "few", "many", "other")
    DEVICE_CLASSES: tuple = ("iphone", "ipad", "mac", "applewatch", "appletv", "other")

    def validate(self) -> List[str]:
        """Validate configuration and return list of errors."""
        errors = []
        if not self.source_language:
            errors.append("XCSTRINGS_SOURCE_LANGUAGE must not be empty")
        if not self.version:
            errors.append("XCSTRINGS_VERSION must not be empty")
        if self.indent < 0:
            errors.append("XCSTRINGS_INDENT must be zero or positive")
        if not 0 < self.tools_port < 65536:
            errors.append("XCSTRINGS_TOOLS_PORT must be between 1 and 65535")
        return errors


# Global config instance
config = Config()
