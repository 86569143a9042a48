from __future__ import annotations

import logging
import os
import re
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Mapping, Protocol

from dotenv import dotenv_values

logger = logging.getLogger(__name__)

# Configuration key that selects the order of amount and currency code in formatted text
TO_STRING_FORMAT_ORDER_KEY = "toStringFormatOrder"


# region Interface


class ConfigProvider(Protocol):
    """Read-only key/value source for process-wide settings."""

    def lookup(self, key: str) -> str | None:
        """Return the value stored under $key, or None when it is not configured."""
        ...


# endregion

# region Implementations


class MappingConfig:
    """Configuration backed by a fixed mapping.

    The mapping is copied at construction, so later changes to the source dict
    are not visible.
    """

    __slots__ = ("_values",)

    def __init__(self, values: Mapping[str, str] | None = None) -> None:
        self._values = MappingProxyType(dict(values or {}))

    def lookup(self, key: str) -> str | None:
        return self._values.get(key)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({dict(self._values)})"


class EnvironmentConfig:
    """Configuration read from environment variables and an optional `.env` file.

    Keys are mapped to prefixed upper snake case variable names, e.g. with the
    default prefix `toStringFormatOrder` is read from
    `SUITE_MONEY_TO_STRING_FORMAT_ORDER`. Values from the process environment
    win over values from the `.env` file.

    A snapshot is taken at construction; the environment is not consulted again.

    Args:
        dotenv_path: Optional path to a `.env` file. Missing files are ignored.
        prefix: Prefix prepended to every variable name.
    """

    __slots__ = ("_prefix", "_values")

    DEFAULT_PREFIX = "SUITE_MONEY_"

    def __init__(self, dotenv_path: str | Path | None = None, prefix: str = DEFAULT_PREFIX) -> None:
        values: dict[str, str] = {}

        if dotenv_path is not None:
            if Path(dotenv_path).is_file():
                file_values = dotenv_values(dotenv_path)
                values.update({name: value for name, value in file_values.items() if value is not None})
                logger.debug(f"Loaded {len(file_values)} value(s) from $dotenv_path '{dotenv_path}'")
            else:
                logger.debug(f"Skipped missing $dotenv_path '{dotenv_path}'")

        values.update(os.environ)

        self._prefix = prefix
        self._values = MappingProxyType(values)

    @staticmethod
    def to_variable_name(key: str, prefix: str = DEFAULT_PREFIX) -> str:
        """Convert a camelCase $key into its environment variable name."""
        snake = re.sub(r"(?<=[a-z0-9])(?=[A-Z])", "_", key)
        return f"{prefix}{snake.upper()}"

    def lookup(self, key: str) -> str | None:
        return self._values.get(self.to_variable_name(key, self._prefix))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(prefix='{self._prefix}')"


# endregion


@lru_cache(maxsize=1)
def default_config() -> EnvironmentConfig:
    """Return the process-wide configuration, created on first use."""
    return EnvironmentConfig()
