"""
gitignore-checker: Path string utilities.

Splitting rules and paths into segments and inspecting their "/" anchors.
All functions are pure and work on plain strings; nothing touches the
filesystem.
"""
from typing import List

from gitignore_checker.core.constants import SEPARATOR
from gitignore_checker.core.errors import InternalInvariantError


def tokenize(value: str) -> List[str]:
    """Split a rule or path into its segments.

    Empty segments produced by leading, trailing or doubled separators are
    dropped. Order is preserved.

    Args:
        value: Rule or path string

    Returns:
        List of non-empty segments

    Example:
        >>> tokenize("/foo//bar/")
        ['foo', 'bar']
    """
    return [token for token in value.split(SEPARATOR) if token != ""]


def has_leading_slash(value: str) -> bool:
    """Check if string starts with the separator."""
    return value.startswith(SEPARATOR)


def has_trailing_slash(value: str) -> bool:
    """Check if string ends with the separator."""
    return value.endswith(SEPARATOR)


def ensure_trailing_slash(value: str) -> str:
    """Add a trailing separator if missing.

    Args:
        value: Input string

    Returns:
        value unchanged if it ends with "/", otherwise value + "/"
    """
    if has_trailing_slash(value):
        return value
    return f"{value}{SEPARATOR}"


def remove_leading_slash(value: str) -> str:
    """Strip leading separators.

    Args:
        value: Input string

    Returns:
        value without any leading "/"; value itself when it has none

    Raises:
        InternalInvariantError: If the stripped result still starts with "/"
    """
    if not has_leading_slash(value):
        return value

    result = value.lstrip(SEPARATOR)
    if has_leading_slash(result) or not value.endswith(result):
        raise InternalInvariantError(f"Failed to remove leading separator from {value!r}")

    return result


def remove_trailing_slash(value: str) -> str:
    """Strip trailing separators.

    Args:
        value: Input string

    Returns:
        value without any trailing "/"; value itself when it has none

    Raises:
        InternalInvariantError: If the stripped result still ends with "/"
    """
    if not has_trailing_slash(value):
        return value

    result = value.rstrip(SEPARATOR)
    if has_trailing_slash(result) or not value.startswith(result):
        raise InternalInvariantError(f"Failed to remove trailing separator from {value!r}")

    return result
