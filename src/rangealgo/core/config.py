import os
from typing import Self
from pathlib import Path
from dataclasses import dataclass

__all__ = ['Config', 'LOG_LEVELS']

LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


@dataclass(kw_only=True, slots=True)
class Config:
    """
    Library configuration

    The algorithms themselves are not configurable, only the ambient parts are. It is read from
    the environment at import time, and can be loaded from a TOML file, e.g.::

        [logging]
        level = "DEBUG"
        color = false
    """
    log_level: str = 'WARNING'
    color_log: bool = True

    def __post_init__(self):
        self.log_level = self.log_level.upper()
        if self.log_level not in LOG_LEVELS:
            raise ValueError(f"Invalid log level: {self.log_level!r}, must be one of {', '.join(LOG_LEVELS)}")

    @classmethod
    def from_env(cls) -> Self:
        """
        Create config from environment variables

        ``RANGEALGO_LOG_LEVEL`` sets the log level, ``RANGEALGO_NO_COLOR_LOG=1`` disables rich output.
        An invalid level falls back to WARNING, so a bad environment never prevents importing.

        :return: Config instance
        """
        log_level = os.environ.get('RANGEALGO_LOG_LEVEL', 'WARNING')
        if log_level.upper() not in LOG_LEVELS:
            log_level = 'WARNING'
        return cls(
            log_level=log_level,
            color_log=os.environ.get('RANGEALGO_NO_COLOR_LOG', '') != '1',
        )

    @classmethod
    def load_toml(cls, path: Path) -> Self:
        """
        Load config from TOML file.

        :param path: Path to the TOML file
        :return: Config instance
        :raises ValueError: If the [logging] section is missing or invalid
        """
        import tomllib

        with open(path, 'rb') as f:
            data = tomllib.load(f)

        if 'logging' not in data:
            raise ValueError("Missing [logging] section in TOML")

        section = data['logging']
        defaults = cls()
        log_level = section.get('level', defaults.log_level)
        if not isinstance(log_level, str):
            raise ValueError(f"Invalid log level: {log_level!r}, must be a string")
        color_log = section.get('color', defaults.color_log)
        if not isinstance(color_log, bool):
            raise ValueError(f"Invalid color setting: {color_log!r}, must be true or false")
        return cls(log_level=log_level, color_log=color_log)
