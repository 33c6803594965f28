"""User-facing message table for the coverage report command."""

from collections.abc import Mapping

_DEFAULT_MESSAGES: dict[str, str] = {
    "commandDescription": (
        "Find metadata files in the project's package directories and report which deployment "
        "and packaging channels support their metadata types."
    ),
    "sourcePathFlagDescription": (
        "Comma-separated list of directories with metadata files. Overrides the project's package directories."
    ),
    "showUncoveredFlagDescription": "Only show metadata files not supported by at least one selected channel.",
    "apiVersionFlagDescription": "API version of the metadata coverage report. Defaults to the project setting.",
    "jsonFlagDescription": "Print the result as JSON.",
    "checkMetadataApiFlagDescription": "Check coverage for the Metadata API.",
    "checkSourceTrackingFlagDescription": "Check coverage for source tracking.",
    "checkUnlockedPackagingWithoutNamespaceFlagDescription": (
        "Check coverage for unlocked packaging without namespace."
    ),
    "checkUnlockedPackagingWithNamespaceFlagDescription": "Check coverage for unlocked packaging with namespace.",
    "checkManagedPackagingFlagDescription": "Check coverage for managed packaging.",
    "checkChangeSetsFlagDescription": "Check coverage for change sets.",
    "columnTypeLabel": "Type",
    "columnNameLabel": "Name",
    "columnFolderLabel": "Folder",
    "columnMetadataApiLabel": "Metadata Api",
    "columnSourceTrackingLabel": "Source Tracking",
    "columnUnlockedPackagingWithoutNamespaceLabel": "Unlocked Packaging (without Namespace)",
    "columnUnlockedPackagingWithNamespaceLabel": "Unlocked Packaging (with Namespace)",
    "columnManagedPackagingLabel": "Managed Packaging",
    "columnChangeSetsLabel": "Change Sets",
    "statusSearchingMetadataMessage": "Searching metadata files...",
    "statusFetchMetadataCoverageMessage": "Fetching metadata coverage report...",
    "statusFindingMetadataCoverageMessage": "Finding metadata coverage information for metadata files...",
    "statusFinishedMessage": "done",
    "warnNoMetadataFiles": "No metadata files found - exiting",
    "logMessageNoCoverageInformation": "No coverage information for metadata file %s of type %s",
    "errorMessage": "Error: %s",
}


class Messages:
    """Message lookup with ``%s`` placeholder formatting."""

    def __init__(self, table: Mapping[str, str] | None = None) -> None:
        self._table = dict(_DEFAULT_MESSAGES)
        if table:
            self._table.update(table)

    def get(self, key: str, *args: object) -> str:
        try:
            template = self._table[key]
        except KeyError:
            raise KeyError(f"Missing message for key '{key}'") from None
        return template % args if args else template

    def __contains__(self, key: object) -> bool:
        return key in self._table


def load_messages() -> Messages:
    return Messages()
