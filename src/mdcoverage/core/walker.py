import asyncio
import logging
import os
from pathlib import Path

from mdcoverage.core.errors import DirectoryNotFoundError

logger = logging.getLogger(__name__)

METADATA_SUFFIX = "-meta.xml"


def is_metadata_file(path: str | Path) -> bool:
    return Path(path).name.endswith(METADATA_SUFFIX)


def _scan(directory: Path, found: list[Path]) -> None:
    try:
        with os.scandir(directory) as it:
            entries = sorted(it, key=lambda entry: entry.name)
    except OSError as exc:
        raise DirectoryNotFoundError(directory, exc.strerror or str(exc)) from exc

    for entry in entries:
        if entry.is_symlink():
            continue
        path = directory / entry.name
        if entry.is_dir():
            _scan(path, found)
        elif entry.is_file() and is_metadata_file(entry.name):
            found.append(path)


def _list_metadata_files(root: Path) -> list[Path]:
    if not root.exists():
        raise DirectoryNotFoundError(root, "no such directory")
    if not root.is_dir():
        raise DirectoryNotFoundError(root, "not a directory")
    found: list[Path] = []
    _scan(root, found)
    return found


async def walk_metadata_files(root: str | Path) -> list[Path]:
    """List every ``-meta.xml`` file below ``root`` in sorted traversal order."""
    files = await asyncio.to_thread(_list_metadata_files, Path(root))
    logger.debug("Found %d metadata file(s) in %s", len(files), root)
    return files
