"""gitignore-checker: decide whether a path matches a gitignore-like rule.

Example:
    >>> from gitignore_checker import rule_matches_path
    >>> rule_matches_path("/foo/ignore_me", "/foo/ignore_me")
    True
"""

from gitignore_checker.core.constants import GITIGNORE_CHECKER_VERSION
from gitignore_checker.core.errors import (
    GitIgnoreCheckerError,
    InternalInvariantError,
    InvalidArgumentError,
)
from gitignore_checker.core.path_utils import (
    ensure_trailing_slash,
    has_leading_slash,
    has_trailing_slash,
    remove_leading_slash,
    remove_trailing_slash,
    tokenize,
)
from gitignore_checker.rules import (
    Rule,
    SegmentPattern,
    TargetPath,
    compile_segment,
    rule_is_multi_segment,
    rule_matches_path,
    rule_matches_path_complex,
    rule_matches_path_simple,
)

__version__ = GITIGNORE_CHECKER_VERSION

__all__ = [
    "__version__",
    # Errors
    "GitIgnoreCheckerError",
    "InvalidArgumentError",
    "InternalInvariantError",
    # Path utilities
    "tokenize",
    "has_leading_slash",
    "has_trailing_slash",
    "ensure_trailing_slash",
    "remove_leading_slash",
    "remove_trailing_slash",
    # Rules
    "Rule",
    "TargetPath",
    "SegmentPattern",
    "compile_segment",
    "rule_is_multi_segment",
    "rule_matches_path",
    "rule_matches_path_simple",
    "rule_matches_path_complex",
]
