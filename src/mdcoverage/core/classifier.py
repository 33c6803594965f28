import asyncio
import contextlib
import xml.etree.ElementTree as ET
from pathlib import Path
from xml.parsers import expat

from mdcoverage.core.errors import MetadataFileReadError

_NO_ELEMENTS = expat.errors.codes[expat.errors.XML_ERROR_NO_ELEMENTS]


def local_name(tag: str) -> str:
    """Strip a ``{namespace}`` prefix from an ElementTree tag."""
    return tag.rsplit("}", 1)[-1]


def _has_element(content: bytes) -> bool:
    parser = ET.XMLPullParser(events=("start",))
    parser.feed(content)
    with contextlib.suppress(ET.ParseError):
        for _event in parser.read_events():
            return True
    return False


def _is_elementless(content: bytes, error: ET.ParseError) -> bool:
    # expat also reports "no element found" for an unclosed root element
    return error.code == _NO_ELEMENTS and not _has_element(content)


def parse_metadata_type(path: str | Path, content: bytes) -> str:
    if not content.strip():
        raise MetadataFileReadError(path)
    try:
        root = ET.fromstring(content)
    except ET.ParseError as exc:
        if _is_elementless(content, exc):
            raise MetadataFileReadError(path) from exc
        raise MetadataFileReadError(path, str(exc)) from exc
    return local_name(root.tag)


async def classify_metadata_file(path: str | Path) -> str:
    """Return the metadata type of a descriptor file, i.e. its XML root element name."""
    try:
        content = await asyncio.to_thread(Path(path).read_bytes)
    except OSError as exc:
        raise MetadataFileReadError(path, exc.strerror or str(exc)) from exc
    return parse_metadata_type(path, content)
