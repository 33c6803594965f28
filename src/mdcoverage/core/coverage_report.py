import logging
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass, field
from pathlib import Path

from mdcoverage.core.channels import ChannelFlag, select_channels
from mdcoverage.core.metadata_files import find_metadata_files
from mdcoverage.core.ports.coverage import CoverageMatrixSource
from mdcoverage.core.report import build_coverage_report
from mdcoverage.messages import Messages
from mdcoverage.models import MetadataFile, MetadataFileCoverage

logger = logging.getLogger(__name__)


@dataclass
class CoverageReportResult:
    channels: list[ChannelFlag]
    metadata_files: list[MetadataFile] = field(default_factory=list)
    rows: list[MetadataFileCoverage] = field(default_factory=list)


def _noop_status(_: str) -> None:
    return None


async def run_coverage_report(
    source: CoverageMatrixSource,
    directories: Sequence[str | Path],
    messages: Messages,
    api_version: str | None = None,
    requested_channels: Iterable[str] = (),
    show_uncovered: bool = False,
    on_status: Callable[[str], None] = _noop_status,
) -> CoverageReportResult:
    """Find metadata files and join them with the coverage matrix.

    The coverage matrix is only fetched when at least one metadata file exists.
    """
    channels = select_channels(requested_channels)

    on_status(messages.get("statusSearchingMetadataMessage"))
    metadata_files = await find_metadata_files(*directories)
    if not metadata_files:
        return CoverageReportResult(channels=channels)

    on_status(messages.get("statusFetchMetadataCoverageMessage"))
    matrix = await source.fetch(api_version)

    on_status(messages.get("statusFindingMetadataCoverageMessage"))
    rows = build_coverage_report(metadata_files, matrix, channels, messages, show_uncovered)
    logger.debug("Reporting %d of %d metadata file(s)", len(rows), len(metadata_files))
    return CoverageReportResult(channels=channels, metadata_files=metadata_files, rows=rows)
