from __future__ import annotations

"""
Tag Matcher.

Recognizes the three markers of the reference syntax in raw content:

- ``<el-component src="NAME">FALLBACK</el-component>``
- ``<el-layout name="NAME">BODY</el-layout>``
- ``<el-content/>``

Matching is a single non-recursive scan of the given text. Nested
references are resolved by the resolver recursing into the referenced
file, never by re-scanning the outer text.
"""

import re
from dataclasses import dataclass
from typing import List, Optional

from elbuilder.domain.constants import (
    COMPONENT_TAG,
    HTML_EXTENSION,
    LAYOUT_TAG,
    PLACEHOLDER_TAG,
)

# -----------------------------------------------------------------------------
# PATTERNS
# -----------------------------------------------------------------------------

COMPONENT_RX: re.Pattern = re.compile(
    rf'<{COMPONENT_TAG}\s+src="([^"]*)"\s*>(.*?)</{COMPONENT_TAG}>',
    re.DOTALL,
)

LAYOUT_RX: re.Pattern = re.compile(
    rf'<{LAYOUT_TAG}\s+name="([^"]*)"\s*>(.*?)</{LAYOUT_TAG}>',
    re.DOTALL,
)

PLACEHOLDER_RX: re.Pattern = re.compile(rf"<{PLACEHOLDER_TAG}\s*/>")


# -----------------------------------------------------------------------------
# MATCH MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class ComponentRef:
    """
    A component reference found in raw content.

    Attributes:
        name: Normalized component file name (always ends in ``.html``).
        fallback: Inner text between the tags. Captured, never emitted.
        span_text: The full matched tag text.
        start: Offset of the match in the scanned text.
        end: End offset (exclusive) of the match in the scanned text.
    """
    name: str
    fallback: str
    span_text: str
    start: int
    end: int


@dataclass(frozen=True)
class LayoutRef:
    """
    The layout reference of a page.

    Attributes:
        name: Normalized layout file name.
        body: Inner text to inject at the layout placeholder.
    """
    name: str
    body: str


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def normalize_name(name: str) -> str:
    """Strip one trailing ``.html`` (if any) and re-append it."""
    if name.endswith(HTML_EXTENSION):
        name = name[: -len(HTML_EXTENSION)]
    return name + HTML_EXTENSION


def find_component_refs(text: str) -> List[ComponentRef]:
    """
    Extract every component reference, in left-to-right order.

    Args:
        text: Raw content to scan.

    Returns:
        List[ComponentRef]: One entry per occurrence, duplicates included.
    """
    return [
        ComponentRef(
            name=normalize_name(m.group(1)),
            fallback=m.group(2),
            span_text=m.group(0),
            start=m.start(),
            end=m.end(),
        )
        for m in COMPONENT_RX.finditer(text)
    ]


def find_layout_ref(text: str) -> Optional[LayoutRef]:
    """
    Return the first layout reference in ``text``, or None.

    Later occurrences are ignored without error.
    """
    m = LAYOUT_RX.search(text)
    if m is None:
        return None
    return LayoutRef(name=normalize_name(m.group(1)), body=m.group(2))


def replace_placeholder(layout_text: str, body: str) -> str:
    """
    Substitute the first layout placeholder with ``body``.

    If the layout has no placeholder the body is dropped and the layout
    text is returned verbatim.
    """
    # A callable replacement keeps backslashes in the body literal
    return PLACEHOLDER_RX.sub(lambda _m: body, layout_text, count=1)
