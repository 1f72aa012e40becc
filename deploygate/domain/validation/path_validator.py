"""
Deployment path validation for deploygate.

Gates a deploy command on:
- Path arity (exactly one path per deployment)
- Existence and directory checks
- Root directory containment within the project
- Confirmation before deploying the user's home directory

The ``check_*`` methods raise PathValidationError subclasses. The
``validate_*`` methods render those errors through the Output sink and
return a bool or a verdict; nothing escapes them.
"""

import logging
import os
import stat
from collections.abc import Sequence
from pathlib import Path

from deploygate.domain.errors import (
    ArityError,
    NotADirectoryPathError,
    OutsideProjectError,
    PathNotFoundError,
    PathValidationError,
    SingleFileDeploymentError,
    UserCancelled,
)
from deploygate.domain.models import InvalidVerdict, PathStatus, ValidVerdict, Verdict
from deploygate.domain.output import Output, to_human_path
from deploygate.domain.prompt import Confirm, click_confirm

logger = logging.getLogger(__name__)


SINGLE_FILE_DEPLOYMENTS_LINK = "https://vercel.link/no-single-file-deployments"
HOME_DIRECTORY_PROMPT = "You are deploying your home directory. Do you want to continue?"


class PathValidator:
    """Validates deployment paths against the filesystem.

    Args:
        output: Sink for user-facing messages
        home_dir: The current user's home directory
        confirm: Yes/no prompt, called as ``confirm(message, default)``
    """

    def __init__(
        self,
        output: Output,
        *,
        home_dir: str,
        confirm: Confirm = click_confirm,
    ) -> None:
        self._output = output
        self._home_dir = home_dir
        self._confirm = confirm

    @staticmethod
    def get_path_status(path: str) -> PathStatus:
        """
        Inspect a path without following symlinks.

        Any failure (missing, permission denied, invalid name) is reported
        as MISSING.
        """
        try:
            st = os.lstat(path)
        except (OSError, ValueError) as e:
            logger.debug(f"lstat failed for {path!r}: {e}")
            return PathStatus.MISSING

        if stat.S_ISDIR(st.st_mode):
            return PathStatus.DIRECTORY
        return PathStatus.FILE

    def _display(self, path: str) -> str:
        return self._output.highlight(f"“{to_human_path(path, self._home_dir)}”")

    def check_root_directory(self, cwd: str, path: str) -> None:
        """
        Check that ``path`` is an existing directory inside ``cwd``.

        Containment is a literal string prefix test: ``..`` segments,
        symlinks and case are not normalised.

        Raises:
            PathNotFoundError: If path cannot be inspected
            NotADirectoryPathError: If path is not a directory
            OutsideProjectError: If path does not start with cwd
        """
        status = self.get_path_status(path)
        display = self._display(path)

        if status is PathStatus.MISSING:
            raise PathNotFoundError(
                f"The provided path {display} does not exist.", path=path
            )

        if status is not PathStatus.DIRECTORY:
            raise NotADirectoryPathError(
                f"The provided path {display} is a file, but expected a directory.",
                path=path,
            )

        if not path.startswith(cwd):
            raise OutsideProjectError(
                f"The provided path {display} is outside of the project.", path=path
            )

    def check_paths(self, paths: Sequence[str]) -> str:
        """
        Pick the single deployment path and check it.

        Returns:
            The deployment path, unchanged

        Raises:
            ValueError: If no path is given
            ArityError: If more than one path is given
            PathNotFoundError: If the path cannot be inspected
            SingleFileDeploymentError: If the path is not a directory
            UserCancelled: If the user declines deploying the home directory
        """
        if not paths:
            raise ValueError("At least one path is required")

        if len(paths) > 1:
            raise ArityError("Can't deploy more than one path.")

        path = paths[0]
        status = self.get_path_status(path)

        if status is PathStatus.MISSING:
            raise PathNotFoundError(f"Could not find {self._display(path)}", path=path)

        if status is not PathStatus.DIRECTORY:
            raise SingleFileDeploymentError(
                "Support for single file deployments has been removed.",
                path=path,
                link=SINGLE_FILE_DEPLOYMENTS_LINK,
            )

        if path == self._home_dir:
            logger.debug(f"{path!r} is the home directory, asking for confirmation")
            if not self._confirm(HOME_DIRECTORY_PROMPT, False):
                raise UserCancelled("Aborted", path=path)

        return path

    def validate_root_directory(self, cwd: str, path: str, error_suffix: str = "") -> bool:
        """
        Validate a configured root directory.

        Args:
            cwd: Project path the root directory must live under
            path: Absolute root directory path
            error_suffix: Extra context appended to the error line

        Returns:
            True if usable; otherwise False after printing one error line
        """
        try:
            self.check_root_directory(cwd, path)
        except PathValidationError as e:
            logger.debug(f"Root directory rejected ({type(e).__name__}): {path!r}")
            suffix = f" {error_suffix}" if error_suffix else ""
            self._output.error(f"{e.message}{suffix}")
            return False
        return True

    def validate_paths(self, paths: Sequence[str]) -> Verdict:
        """
        Validate the path(s) given to a deploy command.

        Args:
            paths: Paths as supplied on the command line (already absolute)

        Returns:
            ValidVerdict with the path, or InvalidVerdict with the exit code
            the process should use (0 when the user cancelled)

        Examples:
            >>> validator.validate_paths(["/srv/site"])
            ValidVerdict(valid=True, path='/srv/site')
            >>> validator.validate_paths(["/srv/a", "/srv/b"])
            InvalidVerdict(valid=False, exit_code=1)
        """
        try:
            path = self.check_paths(paths)
        except UserCancelled as e:
            self._output.print(e.message)
            return InvalidVerdict(exit_code=e.exit_code)
        except SingleFileDeploymentError as e:
            self._output.pretty_error(e.message, link=e.link)
            return InvalidVerdict(exit_code=e.exit_code)
        except PathValidationError as e:
            logger.debug(f"Deployment path rejected ({type(e).__name__}): {e.path!r}")
            self._output.error(e.message)
            return InvalidVerdict(exit_code=e.exit_code)

        return ValidVerdict(path=path)


# Convenience functions for common validations

def validate_paths(
    paths: Sequence[str],
    *,
    output: Output | None = None,
    home_dir: str | None = None,
    confirm: Confirm = click_confirm,
) -> Verdict:
    """Validate deployment paths - convenience wrapper."""
    validator = PathValidator(
        output or Output(),
        home_dir=home_dir if home_dir is not None else str(Path.home()),
        confirm=confirm,
    )
    return validator.validate_paths(paths)


def validate_root_directory(
    cwd: str,
    path: str,
    error_suffix: str = "",
    *,
    output: Output | None = None,
    home_dir: str | None = None,
) -> bool:
    """Validate a root directory - convenience wrapper."""
    validator = PathValidator(
        output or Output(),
        home_dir=home_dir if home_dir is not None else str(Path.home()),
    )
    return validator.validate_root_directory(cwd, path, error_suffix)
