"""Parallel copy engine for File Scraper."""

import logging
import shutil
import time
from concurrent.futures import ThreadPoolExecutor, as_completed

from .config import Config
from .display import ProgressDisplay
from .errors import CopyIOError, DirectoryCreationError, ItemError
from .models import CandidateEntry, CopyOutcome, CopyStats
from .paths import map_target_path

logger = logging.getLogger(__name__)


class Copier:
    """Copies individual candidates into the target tree."""

    def __init__(self, config: Config):
        self.config = config

    def copy_entry(self, entry: CandidateEntry) -> CopyOutcome:
        """
        Copy a single candidate.

        Failures are returned in the outcome instead of raised, so one
        broken entry never stops its siblings.

        Args:
            entry: Candidate found by the scanner

        Returns:
            Outcome with the target path and, on failure, the error
        """
        target = None
        try:
            target = map_target_path(self.config.source_root, self.config.target_root, entry.path)

            if self.config.dry_run:
                logger.info("Would copy %s to %s", entry.path, target)
                return CopyOutcome(entry, target)

            # Concurrent workers may race on shared parents; exist_ok covers it
            created = target if entry.is_dir else target.parent
            try:
                created.mkdir(parents=True, exist_ok=True)
            except OSError as e:
                raise DirectoryCreationError(created, e) from e

            copied = 0
            if not entry.is_dir:
                try:
                    if entry.is_symlink and not self.config.follow_links and target.is_symlink():
                        # Links are recreated, not written through
                        target.unlink()
                    shutil.copy2(entry.path, target, follow_symlinks=self.config.follow_links)
                    copied = target.lstat().st_size
                except OSError as e:
                    raise CopyIOError(entry.path, e) from e

        except ItemError as e:
            logger.warning("%s", e)
            return CopyOutcome(entry, target, error=e)

        logger.debug("Successfully copied %s", entry.path)
        return CopyOutcome(entry, target, bytes_copied=copied)


def copy_all(
    config: Config,
    candidates: list[CandidateEntry],
    stats: CopyStats | None = None,
    show_progress: bool | None = None,
) -> float:
    """
    Copy all candidates with a worker pool sized to the host's CPUs.

    Each candidate is an independent task. Failures are logged and counted
    but never abort the batch. There is no cancellation or timeout.

    Args:
        config: Application config
        candidates: Entries produced by the scanner
        stats: Optional statistics tracker, updated once per candidate
        show_progress: Render a progress bar; defaults to config.show_progress

    Returns:
        Elapsed wall-clock seconds for the whole batch
    """
    start_time = time.monotonic()
    stats = stats if stats is not None else CopyStats()
    stats.files_total = len(candidates)
    stats.reset_clock()

    if show_progress is None:
        show_progress = config.show_progress

    copier = Copier(config)
    display = ProgressDisplay(stats) if show_progress else None

    logger.info("Beginning copy-process...")
    if display:
        display.start()

    try:
        with ThreadPoolExecutor(max_workers=config.max_workers) as executor:
            futures = {executor.submit(copier.copy_entry, entry): entry for entry in candidates}

            for future in as_completed(futures):
                try:
                    outcome = future.result()
                except Exception as e:
                    entry = futures[future]
                    logger.error("Unexpected error processing %s: %s", entry.path, e)
                    outcome = CopyOutcome(entry, error=CopyIOError(entry.path, e))
                stats.record(outcome)
    finally:
        if display:
            display.stop()

    logger.info("Finished copying all files!")
    logger.info(
        "Copied %d files, %d directories, %d failed",
        stats.files_copied,
        stats.dirs_created,
        stats.files_failed,
    )
    return max(0.0, time.monotonic() - start_time)
