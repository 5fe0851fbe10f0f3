"""Data models for File Scraper."""

import enum
import time
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path
from threading import Lock

from .errors import ItemError


class FilterKind(enum.Enum):
    """Whether a filter's values are ignored or targeted."""

    EXCLUDING = "ignore"
    INCLUDING = "target"


@dataclass(frozen=True)
class FilterMode:
    """
    A two-variant filter over a set of string features.

    ``EXCLUDING`` accepts a feature that is not in ``values``;
    ``INCLUDING`` accepts a feature that is. ``Excluding(∅)`` accepts
    everything and ``Including(∅)`` accepts nothing.
    """

    kind: FilterKind = FilterKind.EXCLUDING
    values: frozenset[str] = frozenset()

    @classmethod
    def excluding(cls, values: Iterable[str] = ()) -> "FilterMode":
        return cls(FilterKind.EXCLUDING, frozenset(values))

    @classmethod
    def including(cls, values: Iterable[str] = ()) -> "FilterMode":
        return cls(FilterKind.INCLUDING, frozenset(values))

    @classmethod
    def default(cls) -> "FilterMode":
        """The no-filter mode: include everything."""
        return cls.excluding()

    @property
    def is_including(self) -> bool:
        return self.kind is FilterKind.INCLUDING

    @property
    def is_default(self) -> bool:
        return self.kind is FilterKind.EXCLUDING and not self.values

    def matches(self, feature: str) -> bool:
        """Decide a single feature (e.g. a file extension)."""
        if self.kind is FilterKind.INCLUDING:
            return feature in self.values
        return feature not in self.values

    def matches_any(self, features: Iterable[str]) -> bool:
        """Decide a group of features (e.g. the segments of a folder path)."""
        hit = any(feature in self.values for feature in features)
        if self.kind is FilterKind.INCLUDING:
            return hit
        return not hit

    def describe(self) -> str:
        """Short human-readable form for the startup summary."""
        if self.is_default:
            return "all"
        shown = ", ".join(sorted(repr(v) if not v else v for v in self.values)) or "nothing"
        verb = "only" if self.is_including else "all except"
        return f"{verb} {shown}"


@dataclass(frozen=True)
class CandidateEntry:
    """A filesystem entry that passed filtering and is queued for copying."""

    path: Path
    is_dir: bool = False
    is_symlink: bool = False


@dataclass(frozen=True)
class CopyOutcome:
    """Result of processing one candidate."""

    entry: CandidateEntry
    target: Path | None = None
    error: ItemError | None = None
    bytes_copied: int = 0

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class ScanStats:
    """Counters for the traversal phase."""

    entries_seen: int = 0
    skipped_filter: int = 0
    skipped_error: int = 0


@dataclass
class CopyStats:
    """Track copy statistics with thread safety."""

    files_total: int = 0
    files_processed: int = 0
    files_copied: int = 0
    dirs_created: int = 0
    files_failed: int = 0
    bytes_copied: int = 0
    start_time: float = field(default_factory=time.monotonic)

    _lock: Lock = field(default_factory=Lock, repr=False)

    def record(self, outcome: CopyOutcome) -> None:
        """Fold one outcome into the counters. Called once per candidate."""
        with self._lock:
            self.files_processed += 1
            if not outcome.ok:
                self.files_failed += 1
            elif outcome.entry.is_dir:
                self.dirs_created += 1
            else:
                self.files_copied += 1
                self.bytes_copied += outcome.bytes_copied

    def reset_clock(self) -> None:
        self.start_time = time.monotonic()

    @property
    def elapsed_seconds(self) -> float:
        """Get total elapsed time since the copy started."""
        return max(0.0, time.monotonic() - self.start_time)

    @property
    def speed_bps(self) -> float:
        """Get overall copy speed in bytes per second."""
        if self.elapsed_seconds < 0.1:
            return 0.0
        return self.bytes_copied / self.elapsed_seconds

    @property
    def progress_percent(self) -> float:
        if self.files_total <= 0:
            return 100.0
        return (self.files_processed / self.files_total) * 100
