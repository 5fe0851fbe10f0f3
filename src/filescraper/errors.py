"""Exceptions raised by File Scraper."""

from pathlib import Path


class FileScraperError(Exception):
    """Base class for all File Scraper errors."""


class ConfigError(FileScraperError):
    """Invalid configuration; fatal before traversal begins."""


class ItemError(FileScraperError):
    """A failure scoped to a single filesystem entry."""

    action = "process"

    def __init__(self, path: Path, cause: BaseException | str):
        self.path = Path(path)
        self.cause = cause
        super().__init__(f"Failed to {self.action} {self.path} due to {cause}")


class AccessError(ItemError):
    """An entry could not be read during traversal."""

    action = "access"


class PathMappingError(ItemError):
    """A source path is not rooted under the configured source root."""

    action = "map"


class DirectoryCreationError(ItemError):
    """The target's parent directory chain could not be created."""

    action = "create parent directories for"


class CopyIOError(ItemError):
    """The data copy itself failed."""

    action = "copy"
