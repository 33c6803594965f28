import asyncio
import logging
from pathlib import Path

from mdcoverage.core.classifier import classify_metadata_file
from mdcoverage.core.errors import ConfigurationError
from mdcoverage.core.walker import METADATA_SUFFIX, walk_metadata_files
from mdcoverage.models import MetadataFile

logger = logging.getLogger(__name__)


def _file_name(path: Path) -> str:
    return path.name.removesuffix(METADATA_SUFFIX)


async def _index_file(path: Path) -> MetadataFile:
    metadata_type = await classify_metadata_file(path)
    return MetadataFile(
        path=str(path),
        file_name=_file_name(path),
        folder=str(path.parent),
        type=metadata_type,
    )


async def _index_directory(directory: str | Path) -> list[MetadataFile]:
    paths = await walk_metadata_files(directory)
    return list(await asyncio.gather(*(_index_file(path) for path in paths)))


async def find_metadata_files(*directories: str | Path) -> list[MetadataFile]:
    """Find and classify all metadata files below the given directories.

    Directories are processed concurrently, the result keeps the order of
    ``directories`` and, within each, the order files were discovered.
    The first walk or classification error aborts the whole search.
    """
    if not directories:
        raise ConfigurationError("no directories with metadata files")

    logger.debug("Searching metadata files in %s", ", ".join(str(d) for d in directories))
    per_directory = await asyncio.gather(*(_index_directory(d) for d in directories))
    return [metadata_file for files in per_directory for metadata_file in files]
