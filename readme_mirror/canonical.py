"""Removal of hosting-service rendering artifacts from README text."""

from __future__ import annotations

import re

from bs4 import BeautifulSoup

RAW_MARKER = "?raw=true"
SOURCE_SELECTOR = "img[src], link[href], script[src]"
SOURCE_ATTRIBUTES = ("src", "href")

# A run of markers only counts when it ends a reference or precedes a fragment.
_RAW_MARKER_PATTERN = re.compile("(?:" + re.escape(RAW_MARKER) + r")+(?=[)\"'>#\s]|$)")
# `.` never crosses a newline, so this stays on the heading's line.
_HEADING_ANCHOR_PATTERN = re.compile(r"## <a .*></a>")


def strip_raw_marker(text: str) -> str:
    """Drop ``?raw=true`` suffixes from references in ``text``."""
    return _RAW_MARKER_PATTERN.sub("", text)


def remove_heading_anchors(text: str) -> str:
    """Collapse ``## <a ...></a>`` wrappers to a bare level-2 heading marker."""
    return _HEADING_ANCHOR_PATTERN.sub("## ", text)


def canonicalize_text(text: str) -> str:
    return remove_heading_anchors(strip_raw_marker(text))


def canonicalize_tree(soup: BeautifulSoup) -> BeautifulSoup:
    """Strip the raw marker from source attributes of ``soup`` in place."""
    for element in soup.select(SOURCE_SELECTOR):
        for attribute in SOURCE_ATTRIBUTES:
            value = element.get(attribute)
            if isinstance(value, str) and RAW_MARKER in value:
                element[attribute] = value.replace(RAW_MARKER, "")
    return soup
