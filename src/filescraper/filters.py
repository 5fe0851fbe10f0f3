"""Filtering logic for File Scraper."""

import os
import re
from collections.abc import Iterable
from pathlib import Path, PurePath
from typing import TYPE_CHECKING

from .models import FilterMode

if TYPE_CHECKING:
    from .config import Config

_SEPARATORS = re.compile(
    "[" + re.escape("/" + os.sep + (os.altsep or "")) + "]"
)


def normalize_extension(token: str) -> str:
    """
    Normalize an extension token to carry exactly one leading dot.

    ``"jpg"`` and ``".jpg"`` both become ``".jpg"``. Case is kept, since
    matching is case-sensitive. An empty token stays ``""`` so files
    without an extension can be listed explicitly.
    """
    token = token.strip().lstrip(".")
    if not token:
        return ""
    return "." + token


def normalize_extensions(tokens: Iterable[str]) -> set[str]:
    return {normalize_extension(token) for token in tokens}


def file_extension(file_name: str) -> str:
    """Get the text after the last dot, prefixed with a dot; "" if none."""
    _, dot, ext = file_name.rpartition(".")
    if not dot:
        return ""
    return "." + ext


def path_segments(path: str | PurePath) -> list[str]:
    """Split a path into its non-empty folder segments."""
    return [part for part in _SEPARATORS.split(str(path)) if part]


def folder_matches(folders: FilterMode, path: str | PurePath) -> bool:
    return folders.matches_any(path_segments(path))


def extension_matches(extensions: FilterMode, file_name: str) -> bool:
    return extensions.matches(file_extension(file_name))


def should_copy(config: "Config", path: str | PurePath, is_dir: bool | None = None) -> bool:
    """
    Decide whether a filesystem entry should be copied.

    Directories are judged by the folder filter over every segment of
    their path. Files are judged by the extension filter over their name.
    An entry whose file name cannot be determined is excluded.

    Args:
        config: Application config
        path: Entry path
        is_dir: Entry kind; looked up on disk when omitted

    Returns:
        True if the entry passes the filter
    """
    if is_dir is None:
        is_dir = Path(path).is_dir()

    if is_dir:
        return folder_matches(config.folders, path)

    file_name = PurePath(path).name
    if not file_name or file_name in (".", ".."):
        return False
    return extension_matches(config.extensions, file_name)


def should_descend(config: "Config", path: str | PurePath) -> bool:
    """
    Decide whether traversal continues below a directory.

    An excluded folder prunes its subtree. Pruning applies only to ignoring
    (excluding) folder filters; a targeting filter never prunes, because a
    targeted folder may sit anywhere below.
    """
    if config.folders.is_including:
        return True
    return folder_matches(config.folders, path)


def file_in_allowed_folder(config: "Config", path: str | PurePath) -> bool:
    """Check the folder filter against the directory holding a file."""
    if config.folders.is_default:
        return True
    return folder_matches(config.folders, PurePath(path).parent)
