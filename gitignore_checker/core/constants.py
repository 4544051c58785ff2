"""
gitignore-checker: Constants and Type Definitions

This module provides package-wide constants, error codes, and type aliases
shared by the tokenizer, the pattern compiler and the rule matchers.
"""
from enum import IntEnum
from typing import Optional, TypeAlias

# Version information
GITIGNORE_CHECKER_VERSION = "1.0.0"


class ErrorCode(IntEnum):
    """Standardized error codes for gitignore-checker operations."""

    SUCCESS = 0  # Operation completed successfully
    INVALID_INPUT = 1  # Bad rule, invalid configuration
    NOT_FOUND = 2  # Config file or resource doesn't exist
    INTERNAL_ERROR = 6  # Bug in gitignore-checker


# Type aliases for clarity
MatchIndex: TypeAlias = Optional[int]

# Segment separator for both rules and paths
SEPARATOR = "/"

# Rule segments exempt from the ordering constraint.
# "**" is deliberately the same as "*": no recursive-glob expansion.
WILDCARD = "*"
WILDCARD_SEGMENTS = (WILDCARD, "**")

# Regex fragments used by the pattern compiler
ANY_SEQUENCE = ".*"
NEVER_MATCHES = "(?!)"  # Empty negative lookahead fails everywhere
ESCAPED_DOT = r"\."

# Logging / configuration
LOGGER_NAME = "gitignore_checker"
CONFIG_ROOT_KEY = "gitignore_checker"
ENV_PREFIX = "GITIGNORE_CHECKER_"
CONFIG_FILE_ENV = "GITIGNORE_CHECKER_CONFIG"
