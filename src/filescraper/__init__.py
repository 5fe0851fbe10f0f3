"""
File Scraper - Recursively scrape files from one directory tree into another.

Features:
- Extension filters that ignore or target specific file types
- Folder filters that prune or target folders by name
- Optional following of symbolic links
- Parallel copying with per-file failure isolation
- Terminal progress and timing report
"""

__version__ = "1.0.0"

from .config import Config
from .copier import Copier, copy_all
from .errors import (
    AccessError,
    ConfigError,
    CopyIOError,
    DirectoryCreationError,
    FileScraperError,
    PathMappingError,
)
from .filters import should_copy
from .models import CandidateEntry, CopyOutcome, CopyStats, FilterKind, FilterMode, ScanStats
from .paths import map_target_path
from .scanner import gather_files_for_copying

__all__ = [
    "AccessError",
    "CandidateEntry",
    "Config",
    "ConfigError",
    "CopyIOError",
    "CopyOutcome",
    "CopyStats",
    "Copier",
    "DirectoryCreationError",
    "FileScraperError",
    "FilterKind",
    "FilterMode",
    "PathMappingError",
    "ScanStats",
    "copy_all",
    "gather_files_for_copying",
    "map_target_path",
    "should_copy",
    "__version__",
]
