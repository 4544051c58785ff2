"""gitignore-checker Core - constants, errors and path string utilities.

Import specific functions from submodules:
    from gitignore_checker.core import constants
    from gitignore_checker.core import errors
    from gitignore_checker.core import path_utils
"""

from gitignore_checker.core import constants, errors, path_utils

__all__ = [
    "constants",
    "errors",
    "path_utils",
]
