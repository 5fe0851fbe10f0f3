"""Source tree scanning functionality."""

import logging
import os
from pathlib import Path

from .config import Config
from .errors import AccessError
from .filters import file_in_allowed_folder, should_copy, should_descend
from .models import CandidateEntry, ScanStats

logger = logging.getLogger(__name__)

_DirKey = tuple[int, int]


def _dir_key(path: Path | os.DirEntry) -> _DirKey:
    st = path.stat()
    return st.st_dev, st.st_ino


def _list_directory(directory: Path) -> list[os.DirEntry]:
    """List a directory sorted by name. Raises AccessError."""
    try:
        with os.scandir(directory) as it:
            return sorted(it, key=lambda e: e.name)
    except OSError as e:
        raise AccessError(directory, e) from e


def _inspect(entry: os.DirEntry, follow_links: bool) -> tuple[bool, bool]:
    """Return (is_dir, is_symlink) for an entry. Raises AccessError."""
    try:
        is_symlink = entry.is_symlink()
        is_dir = entry.is_dir(follow_symlinks=follow_links)
        if follow_links and is_symlink and not os.path.exists(entry.path):
            raise AccessError(Path(entry.path), "broken symbolic link")
    except OSError as e:
        raise AccessError(Path(entry.path), e) from e
    return is_dir, is_symlink


def gather_files_for_copying(config: Config, stats: ScanStats | None = None) -> list[CandidateEntry]:
    """
    Walk the source tree and collect every entry that passes the filters.

    The walk is depth-first and single-threaded. Symbolic links are only
    descended when ``config.follow_links`` is set; otherwise they are
    leaf entries. Unreadable entries are skipped and the walk continues
    with their siblings. Excluded directories are pruned.

    Args:
        config: Application config
        stats: Optional counters updated during the walk

    Returns:
        Materialized list of candidates, including the source root itself
        when it passes the folder filter
    """
    stats = stats if stats is not None else ScanStats()
    root = config.source_root
    candidates: list[CandidateEntry] = []

    stats.entries_seen += 1
    if should_copy(config, root, is_dir=True):
        candidates.append(CandidateEntry(root, is_dir=True))
    else:
        stats.skipped_filter += 1
        logger.debug("Skipped copying for %s", root)

    if not should_descend(config, root):
        return candidates

    ancestors: tuple[_DirKey, ...] = ()
    if config.follow_links:
        try:
            ancestors = (_dir_key(root),)
        except OSError as e:
            logger.debug("Could not access %s: %s", root, e)
            stats.skipped_error += 1
            return candidates

    # Each pending directory carries the identities of its ancestors so
    # that followed links cannot loop forever.
    pending: list[tuple[Path, tuple[_DirKey, ...]]] = [(root, ancestors)]

    while pending:
        directory, ancestors = pending.pop()

        try:
            entries = _list_directory(directory)
        except AccessError as e:
            logger.debug("Could not access %s: %s", e.path, e.cause)
            stats.skipped_error += 1
            continue

        subdirs: list[tuple[Path, tuple[_DirKey, ...]]] = []

        for entry in entries:
            path = Path(entry.path)
            stats.entries_seen += 1

            try:
                is_dir, is_symlink = _inspect(entry, config.follow_links)
                key = None
                if is_dir and config.follow_links:
                    try:
                        key = _dir_key(entry)
                    except OSError as e:
                        raise AccessError(path, e) from e
                    if key in ancestors:
                        raise AccessError(path, "file system loop detected")
            except AccessError as e:
                logger.debug("Could not access %s: %s", e.path, e.cause)
                stats.skipped_error += 1
                continue

            if is_dir:
                if should_copy(config, path, is_dir=True):
                    candidates.append(CandidateEntry(path, is_dir=True, is_symlink=is_symlink))
                else:
                    stats.skipped_filter += 1
                    logger.debug("Skipped copying for %s", path)

                if should_descend(config, path):
                    branch = ancestors + (key,) if key is not None else ancestors
                    subdirs.append((path, branch))
                continue

            if file_in_allowed_folder(config, path) and should_copy(config, path, is_dir=False):
                candidates.append(CandidateEntry(path, is_dir=False, is_symlink=is_symlink))
            else:
                stats.skipped_filter += 1
                logger.debug("Skipped copying for %s", path)

        # Reverse so the first subdirectory by name is walked first
        pending.extend(reversed(subdirs))

    return candidates
