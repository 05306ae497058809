"""
Property list helpers for macOS terminal preferences.

Terminal.app stores fonts as NSKeyedArchiver blobs nested inside its
preferences plist; ``font_name_from_keyed_archive`` decodes just enough of
that archive format to recover the font name.
"""

import plistlib
from typing import Any
from xml.parsers.expat import ExpatError

# Errors plistlib raises on malformed input
PLIST_ERRORS = (
    plistlib.InvalidFileException,
    ExpatError,
    ValueError,
    TypeError,
    OverflowError,
)


def parse_root_dictionary(data: bytes) -> dict[str, Any]:
    """
    Parse plist bytes (XML or binary) and return the root dictionary.

    Raises:
        ValueError: If the data is not a plist or its root is not a dictionary
    """
    try:
        root = plistlib.loads(data)
    except PLIST_ERRORS as e:
        raise ValueError(f"failed to read plist: {e}") from e

    if not isinstance(root, dict):
        raise ValueError("plist root is not a dictionary")
    return root


def _uid_index(value: Any) -> int | None:
    if isinstance(value, plistlib.UID):
        return value.data
    return None


def font_name_from_keyed_archive(blob: bytes) -> str | None:
    """
    Extract the font name from an archived NSFont.

    The archive's ``$top.root`` UID points into ``$objects`` at the font
    object, whose ``NSName`` UID points at the name string.

    Returns:
        The font name, or None if the blob is not a recognizable archive
    """
    try:
        archive = plistlib.loads(blob)
    except PLIST_ERRORS:
        return None

    if not isinstance(archive, dict):
        return None

    objects = archive.get("$objects")
    top = archive.get("$top")
    if not isinstance(objects, list) or not isinstance(top, dict):
        return None

    root_index = _uid_index(top.get("root"))
    if root_index is None or root_index >= len(objects):
        return None

    root = objects[root_index]
    if not isinstance(root, dict):
        return None

    name_index = _uid_index(root.get("NSName"))
    if name_index is None or name_index >= len(objects):
        return None

    name = objects[name_index]
    return name if isinstance(name, str) else None
