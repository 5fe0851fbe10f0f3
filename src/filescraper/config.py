"""Configuration management for File Scraper."""

import logging
import os
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path

from .errors import ConfigError
from .filters import normalize_extensions
from .models import FilterKind, FilterMode

# Fallback worker count when the CPU count is unknown
DEFAULT_WORKERS = 4

# Verbosity steps, from -qq to -vv
_LOG_LEVELS = {
    -2: logging.CRITICAL,
    -1: logging.ERROR,
    0: logging.WARNING,
    1: logging.INFO,
    2: logging.DEBUG,
}


def _filter_mode(kind: FilterKind | str | None, values: Iterable[str]) -> FilterMode:
    if kind is None:
        return FilterMode.default()
    try:
        kind = FilterKind(kind)
    except ValueError as e:
        raise ConfigError(f"Unknown filter mode: {kind!r}") from e
    return FilterMode(kind, frozenset(values))


@dataclass(frozen=True)
class Config:
    """Application configuration. Built once, shared read-only by workers."""

    source_root: Path
    target_root: Path

    # Filters
    extensions: FilterMode = field(default_factory=FilterMode.default)
    folders: FilterMode = field(default_factory=FilterMode.default)

    # Traversal
    follow_links: bool = False

    # Output
    verbosity: int = 0
    log_file: Path | None = None
    show_progress: bool = True

    dry_run: bool = False

    @classmethod
    def build(
        cls,
        source_root: str | os.PathLike,
        target_root: str | os.PathLike,
        extension_mode: FilterKind | str | None = None,
        extension_values: Iterable[str] = (),
        folder_mode: FilterKind | str | None = None,
        folder_values: Iterable[str] = (),
        **options,
    ) -> "Config":
        """
        Create config from raw user input.

        Extension tokens are normalized to carry a leading dot. A missing
        mode means no filter for that dimension.

        Raises:
            ConfigError: A filter mode is not "ignore" or "target"
        """
        return cls(
            source_root=Path(source_root),
            target_root=Path(target_root),
            extensions=_filter_mode(extension_mode, normalize_extensions(extension_values)),
            folders=_filter_mode(folder_mode, (value.strip() for value in folder_values)),
            **options,
        )

    @property
    def log_level(self) -> int:
        """Map verbosity to a logging level."""
        clamped = max(-2, min(2, self.verbosity))
        return _LOG_LEVELS[clamped]

    @property
    def max_workers(self) -> int:
        """Worker pool size, matched to available hardware parallelism."""
        return os.cpu_count() or DEFAULT_WORKERS

    def validate(self) -> list[str]:
        """Validate configuration. Returns list of errors."""
        errors = []

        if not self.source_root.exists():
            errors.append(f"Source directory does not exist: {self.source_root}")
        elif not self.source_root.is_dir():
            errors.append(f"Source exists but is not a directory: {self.source_root}")

        if self.target_root.exists() and not self.target_root.is_dir():
            errors.append(f"Target exists but is not a directory: {self.target_root}")

        source = self.source_root.resolve()
        target = self.target_root.resolve()
        if source == target:
            errors.append("Source and target directories must differ")
        elif target.is_relative_to(source):
            # The scan would pick up earlier copies and nest them again
            errors.append(f"Target directory must not be inside the source directory: {self.target_root}")

        return errors

    def ensure_target_exists(self) -> Path:
        """Ensure target directory exists. Returns Path."""
        self.target_root.mkdir(parents=True, exist_ok=True)
        return self.target_root
