"""Runtime configuration model for linkfs.

This module owns all environment variable parsing and validation.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

from dataclasses import dataclass
import os

from core.constants import (
    DEFAULT_LOG_LEVEL,
    DEFAULT_PROMPT,
    FALSE_VALUES,
    SUPPORTED_LOG_LEVELS,
    TRUE_VALUES,
)
from core.errors import LinkFsConfigError


@dataclass(frozen=True)
class LinkFsConfig:
    """Validated runtime configuration.

    Attributes:
        prompt: Text written before each interactive command.
        show_prompt: Whether the shell writes the prompt at all.
        log_level: Minimum structured log level name.
    """

    prompt: str
    show_prompt: bool
    log_level: str

    @classmethod
    def from_env(cls) -> "LinkFsConfig":
        """Build config from process environment variables.

        Returns:
            A validated config object.

        Raises:
            LinkFsConfigError: If environment values are invalid.
        """
        prompt = os.getenv("LINKFS_PROMPT", DEFAULT_PROMPT)
        show_prompt = parse_bool(os.getenv("LINKFS_SHOW_PROMPT", "false"), "LINKFS_SHOW_PROMPT")
        log_level = parse_log_level(os.getenv("LINKFS_LOG_LEVEL", DEFAULT_LOG_LEVEL))
        return cls(prompt=prompt, show_prompt=show_prompt, log_level=log_level)


def parse_bool(raw_value: str, variable_name: str) -> bool:
    """Parse a boolean environment value.

    Args:
        raw_value: Raw string from environment.
        variable_name: Variable name used in error messages.

    Returns:
        Parsed boolean.

    Raises:
        LinkFsConfigError: If value is not a recognized boolean word.
    """
    normalized_value = raw_value.strip().lower()
    if normalized_value in TRUE_VALUES:
        return True
    if normalized_value in FALSE_VALUES:
        return False
    raise LinkFsConfigError(
        f"Invalid {variable_name} value: expected boolean, got '{raw_value}'. "
        f"Use one of: {', '.join(TRUE_VALUES + FALSE_VALUES)}."
    )


def parse_log_level(raw_value: str) -> str:
    """Parse and normalize a log level name.

    Args:
        raw_value: Raw level name, any case.

    Returns:
        Upper-case level name.

    Raises:
        LinkFsConfigError: If the level is not supported.
    """
    level = raw_value.strip().upper()
    if level not in SUPPORTED_LOG_LEVELS:
        raise LinkFsConfigError(
            f"Invalid LINKFS_LOG_LEVEL value: got '{raw_value}'. "
            f"Set LINKFS_LOG_LEVEL to one of: {', '.join(SUPPORTED_LOG_LEVELS)}."
        )
    return level
