"""Domain validation utilities."""

from .path_validator import (
    PathValidator,
    validate_paths,
    validate_root_directory,
)

__all__ = [
    "PathValidator",
    "validate_paths",
    "validate_root_directory",
]
