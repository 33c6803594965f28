from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True)
class ChannelFlag:
    flag_name: str
    channel_key: str
    column_label: str
    flag_description: str


# Canonical report column order.
CHECK_CHANNEL_FLAGS: tuple[ChannelFlag, ...] = (
    ChannelFlag(
        "checkmetadataapi",
        "metadataApi",
        "columnMetadataApiLabel",
        "checkMetadataApiFlagDescription",
    ),
    ChannelFlag(
        "checksourcetracking",
        "sourceTracking",
        "columnSourceTrackingLabel",
        "checkSourceTrackingFlagDescription",
    ),
    ChannelFlag(
        "checkunlockedpackagingwithoutnamespace",
        "unlockedPackagingWithoutNamespace",
        "columnUnlockedPackagingWithoutNamespaceLabel",
        "checkUnlockedPackagingWithoutNamespaceFlagDescription",
    ),
    ChannelFlag(
        "checkunlockedpackagingwithnamespace",
        "unlockedPackagingWithNamespace",
        "columnUnlockedPackagingWithNamespaceLabel",
        "checkUnlockedPackagingWithNamespaceFlagDescription",
    ),
    ChannelFlag(
        "checkmanagedpackaging",
        "managedPackaging",
        "columnManagedPackagingLabel",
        "checkManagedPackagingFlagDescription",
    ),
    ChannelFlag(
        "checkchangesets",
        "changeSets",
        "columnChangeSetsLabel",
        "checkChangeSetsFlagDescription",
    ),
)

CHANNEL_KEYS: tuple[str, ...] = tuple(flag.channel_key for flag in CHECK_CHANNEL_FLAGS)


def channel_flag(flag_name: str) -> ChannelFlag:
    for flag in CHECK_CHANNEL_FLAGS:
        if flag.flag_name == flag_name:
            return flag
    raise KeyError(flag_name)


def select_channels(requested: Iterable[str] = ()) -> list[ChannelFlag]:
    """Return the channels to report on, in canonical order.

    ``requested`` holds channel keys (e.g. ``metadataApi``). An empty
    selection means every channel.
    """
    wanted = set(requested)
    unknown = wanted.difference(CHANNEL_KEYS)
    if unknown:
        raise ValueError(f"Unknown channel(s) {sorted(unknown)}. Supported: {list(CHANNEL_KEYS)}")
    if not wanted:
        return list(CHECK_CHANNEL_FLAGS)
    return [flag for flag in CHECK_CHANNEL_FLAGS if flag.channel_key in wanted]
