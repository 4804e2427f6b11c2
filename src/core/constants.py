"""Core constants used across linkfs modules.

This module centralizes non-domain-specific constants.
Keeping values here avoids magic literals in business logic.
"""

from __future__ import annotations

PATH_SEPARATOR = "/"
ROOT_PATH = "/"
ROOT_LINK_NAME = "/"
DEFAULT_PROMPT = "Command?"
DEFAULT_LOG_LEVEL = "WARNING"
SUPPORTED_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")
TRUE_VALUES = ("1", "true", "yes", "on")
FALSE_VALUES = ("0", "false", "no", "off")
LISTING_ROW_TEMPLATE = "%-20s%2s%10s"
DIRECTORY_FLAG = "d"
QUIT_COMMAND = "quit"
ECHO_PREFIX = '"'
INVALID_VERSION_MESSAGE = "Invalid version number."
UNKNOWN_COMMAND_MESSAGE = "Command not understood."
SCRIPT_VERSION = 1
