"""Source-to-target path mapping."""

from pathlib import Path, PurePath

from .errors import PathMappingError


def map_target_path(
    source_root: str | PurePath,
    target_root: str | PurePath,
    source_path: str | PurePath,
) -> Path:
    """
    Rebase ``source_path`` from ``source_root`` onto ``target_root``.

    Purely lexical; the filesystem is not consulted.

    Raises:
        PathMappingError: ``source_path`` is not rooted under ``source_root``
    """
    try:
        remainder = PurePath(source_path).relative_to(PurePath(source_root))
    except ValueError as e:
        raise PathMappingError(Path(source_path), e) from e
    return Path(target_root) / remainder
