"""
gitignore-checker: Error types.

Every error carries an ErrorCode. InvalidArgumentError is the only error a
caller is expected to recover from; InternalInvariantError signals a bug.
"""
from typing import Optional

from gitignore_checker.core.constants import ErrorCode


class GitIgnoreCheckerError(Exception):
    """Base exception for gitignore-checker errors."""

    def __init__(self, message: str, error_code: ErrorCode = ErrorCode.INVALID_INPUT):
        """Initialize GitIgnoreCheckerError.

        Args:
            message: Error message
            error_code: Associated error code
        """
        self.message = message
        self.error_code = error_code
        super().__init__(message)


class InvalidArgumentError(GitIgnoreCheckerError, ValueError):
    """A rule was handed to a matcher that cannot evaluate it.

    Raised by the simple matcher for rules spanning several segments; route
    those rules to the complex matcher instead.
    """

    def __init__(self, message: str, rule: Optional[str] = None):
        super().__init__(message, ErrorCode.INVALID_INPUT)
        self.rule = rule


class InternalInvariantError(GitIgnoreCheckerError):
    """A post-condition inside gitignore-checker did not hold."""

    def __init__(self, message: str):
        super().__init__(message, ErrorCode.INTERNAL_ERROR)
