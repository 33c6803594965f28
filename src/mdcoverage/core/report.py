import logging
from collections.abc import Iterable, Sequence

from mdcoverage.core.channels import ChannelFlag
from mdcoverage.messages import Messages
from mdcoverage.models import CoverageMatrix, MetadataFile, MetadataFileCoverage

logger = logging.getLogger(__name__)


def join_coverage(
    metadata_files: Iterable[MetadataFile],
    matrix: CoverageMatrix,
    channels: Sequence[ChannelFlag],
    messages: Messages,
) -> list[MetadataFileCoverage]:
    """Pair each metadata file with its type's coverage on the selected channels.

    Files whose type is missing from the matrix are logged and left out.
    """
    result: list[MetadataFileCoverage] = []
    for metadata_file in metadata_files:
        type_coverage = matrix.get(metadata_file.type)
        if type_coverage is None or type_coverage.channels is None:
            logger.warning(
                messages.get("logMessageNoCoverageInformation", metadata_file.path, metadata_file.type)
            )
            continue
        coverage = {
            channel.channel_key: type_coverage.channels.get(channel.channel_key, False) for channel in channels
        }
        result.append(MetadataFileCoverage(file=metadata_file, coverage=coverage))
    return result


def filter_uncovered(rows: Iterable[MetadataFileCoverage], show_uncovered: bool) -> list[MetadataFileCoverage]:
    if not show_uncovered:
        return list(rows)
    return [row for row in rows if not row.covered]


def build_coverage_report(
    metadata_files: Iterable[MetadataFile],
    matrix: CoverageMatrix,
    channels: Sequence[ChannelFlag],
    messages: Messages,
    show_uncovered: bool = False,
) -> list[MetadataFileCoverage]:
    rows = join_coverage(metadata_files, matrix, channels, messages)
    return filter_uncovered(rows, show_uncovered)
