"""Configuration management for Secure Window."""

import logging
from pathlib import Path
from typing import Optional
from enum import Enum

from pydantic import BaseModel, Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

# Config directory
CONFIG_DIR = Path.home() / ".config" / "secure-window"
CONFIG_FILE = CONFIG_DIR / "config.toml"

DEFAULT_CHANNEL = "secure_window"


class BackendName(str, Enum):
    """Display-privacy backends."""
    AUTO = "auto"
    WIN32 = "win32"
    X11 = "x11"
    MEMORY = "memory"


class ChannelSettings(BaseModel):
    """Command channel settings."""
    name: str = DEFAULT_CHANNEL


class BackendSettings(BaseModel):
    """Platform backend settings."""
    name: BackendName = BackendName.AUTO
    x11_display: Optional[str] = None  # None uses $DISPLAY


class AppConfig(BaseSettings):
    """Main application configuration."""

    model_config = SettingsConfigDict(
        env_prefix="SECURE_WINDOW_",
        env_nested_delimiter="__",
    )

    channel: ChannelSettings = Field(default_factory=ChannelSettings)
    backend: BackendSettings = Field(default_factory=BackendSettings)

    log_level: str = "WARNING"

    # Turn secure mode on as soon as the plugin is registered
    secure_on_start: bool = False

    @classmethod
    def load(cls, path: Optional[Path] = None) -> "AppConfig":
        """Load configuration from file."""
        path = path or CONFIG_FILE

        if path.exists():
            import tomli
            try:
                with open(path, "rb") as f:
                    data = tomli.load(f)
                return cls(**data)
            except (OSError, tomli.TOMLDecodeError, ValidationError) as e:
                logger.warning("Ignoring unreadable config file %s: %s", path, e)

        return cls()

    def save(self, path: Optional[Path] = None) -> None:
        """Save configuration to file."""
        path = path or CONFIG_FILE
        path.parent.mkdir(parents=True, exist_ok=True)

        import tomli_w

        # TOML has no null
        data = self.model_dump(mode="json", exclude_none=True)

        with open(path, "wb") as f:
            tomli_w.dump(data, f)


# Global config instance
_config: Optional[AppConfig] = None


def get_config() -> AppConfig:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = AppConfig.load()
    return _config


def set_config(config: Optional[AppConfig]) -> None:
    """Set the global configuration instance."""
    global _config
    _config = config
