"""Configuration management for typetrainer."""

import logging
from pathlib import Path
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from utils.themes import COLOR_KEYS, THEMES, is_valid_hex

log = logging.getLogger("typetrainer.config")

DEFAULT_CONFIG_PATH = Path.home() / ".ttrc"


class AppSettings(BaseModel):
    """Settings read from ~/.ttrc with validation."""

    theme: str = Field(default="default", description="Base colour theme")

    # Individual colour overrides applied on top of the theme
    bgcol: Optional[str] = Field(default=None, description="Background colour")
    fgcol: Optional[str] = Field(default=None, description="Untyped text colour")
    hicol: Optional[str] = Field(default=None, description="Correctly typed text colour")
    hicol2: Optional[str] = Field(default=None, description="Cursor colour")
    hicol3: Optional[str] = Field(default=None, description="Status and report colour")
    errcol: Optional[str] = Field(default=None, description="Mistake colour")

    # Defaults for command line options
    noskip: bool = Field(default=False, description="Disable word skipping")
    timeout: int = Field(default=-1, ge=-1, description="Time limit in seconds (-1 = none)")
    wrap: int = Field(default=80, gt=0, description="Wrap width in columns")

    model_config = ConfigDict(extra="ignore")

    @field_validator(*COLOR_KEYS)
    @classmethod
    def validate_color(cls, v):
        """Colours must be #rrggbb."""
        if v is not None and not is_valid_hex(v):
            raise ValueError(f"{v!r} is not a #rrggbb colour")
        return v

    @field_validator("timeout")
    @classmethod
    def validate_timeout(cls, v):
        """Timeout is a positive number of seconds, or -1 for none."""
        if v == 0:
            raise ValueError("timeout must be positive or -1")
        return v


class Config:
    """Configuration manager backed by a `key: value` text file."""

    def __init__(self, path: Path = DEFAULT_CONFIG_PATH):
        """Initialize config from file.

        A missing or unreadable file yields the defaults.

        Args:
            path: Path to the configuration file
        """
        self.path = path
        self.raw = self._read_file()
        self.settings = self._validate(self.raw)

    def _read_file(self) -> Dict[str, str]:
        """Parse `key: value` lines. Lines without a colon are ignored."""
        values: Dict[str, str] = {}
        try:
            text = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return values
        except OSError as e:
            log.warning(f"Cannot read config file {self.path}: {e}")
            return values

        for line in text.splitlines():
            key, sep, value = line.partition(":")
            if sep:
                values[key.strip()] = value.strip()
        return values

    def _validate(self, raw: Dict[str, str]) -> AppSettings:
        """Validate settings, dropping invalid values one key at a time."""
        known = {k: v for k, v in raw.items() if k in AppSettings.model_fields}
        try:
            return AppSettings(**known)
        except ValidationError as e:
            for error in e.errors():
                key = error["loc"][0]
                log.warning(f"Ignoring invalid setting {key}={known.get(key)!r}: {error['msg']}")
                known.pop(key, None)
            return AppSettings(**known)

    def get(self, key: str, default: Optional[Any] = None) -> Any:
        """Get a validated setting.

        Args:
            key: Setting key (a field of AppSettings)
            default: Default value if the key is unknown or unset

        Returns:
            Setting value
        """
        value = getattr(self.settings, key, None)
        return default if value is None else value

    def get_int(self, key: str, default: int = 0) -> int:
        """Get integer configuration value."""
        value = self.get(key, default)
        return value if isinstance(value, int) and not isinstance(value, bool) else default

    def get_bool(self, key: str, default: bool = False) -> bool:
        """Get boolean configuration value."""
        value = self.get(key, default)
        return value if isinstance(value, bool) else default

    def get_all(self) -> Dict[str, Any]:
        """Get all validated settings as dictionary."""
        return self.settings.model_dump()

    def resolve_theme(self, name: Optional[str] = None) -> Dict[str, str]:
        """Resolve the colours to use.

        An explicit theme name (from the command line) is used as-is and
        must exist. Otherwise the configured theme is used, falling back to
        the default theme if unknown, and individual colour overrides from
        the file are applied on top.

        Args:
            name: Theme name requested on the command line

        Returns:
            Mapping of colour key to #rrggbb

        Raises:
            KeyError: If an explicitly requested theme does not exist
        """
        if name:
            if name not in THEMES:
                raise KeyError(name)
            return dict(THEMES[name])

        theme_name = self.settings.theme
        if theme_name not in THEMES:
            log.warning(f"Unknown theme {theme_name!r} in {self.path}, using default")
            theme_name = "default"

        colors = dict(THEMES[theme_name])
        for key in COLOR_KEYS:
            override = getattr(self.settings, key)
            if override is not None:
                colors[key] = override
        return colors
