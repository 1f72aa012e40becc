from enum import Enum


class PathStatus(str, Enum):
    """What the filesystem reports for a path. Never cached."""

    MISSING = "missing"        # lstat failed for any reason
    FILE = "file"              # exists, not a directory (symlinks included)
    DIRECTORY = "directory"
