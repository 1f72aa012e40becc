"""Domain-level exceptions for deploygate.

Raised by the internal path checks and caught by the public validation
operations, which render them once and hand back a bool or a verdict.
"""


class PathValidationError(Exception):
    """Base class for a rejected deployment path."""

    exit_code: int = 1

    def __init__(self, message: str, *, path: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.path = path


class ArityError(PathValidationError):
    """Raised when more than one path is given."""


class PathNotFoundError(PathValidationError):
    """Raised when a path does not exist or cannot be inspected."""


class NotADirectoryPathError(PathValidationError):
    """Raised when a path exists but is not a directory."""


class SingleFileDeploymentError(NotADirectoryPathError):
    """Raised when a single file is given as the deployment path."""

    def __init__(self, message: str, *, path: str | None = None, link: str) -> None:
        super().__init__(message, path=path)
        self.link = link


class OutsideProjectError(PathValidationError):
    """Raised when a root directory does not start with the project path."""


class UserCancelled(PathValidationError):
    """Raised when the user declines a confirmation. Not a failure."""

    exit_code = 0
