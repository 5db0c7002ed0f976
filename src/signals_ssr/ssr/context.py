"""Classification of interpolation points from already-emitted markup.

This is a bounded heuristic, not a markup parser: it is enough for templates
that interpolate a single value per attribute. Keep all of it behind
``classify_interpolation_point`` so a real incremental tokenizer can replace
it without touching the renderer.

Known limitations:

- any attribute whose name contains "on" counts as an event handler;
- a ">" inside an earlier attribute value (literal or interpolated) reads as
  the end of the tag, so a later interpolation in the same tag is treated as
  content and gets text markers.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional

# Attribute name, '=', optional opening quote, at the very end of the buffer
ATTRIBUTE_VALUE_RE = re.compile(r"([a-zA-Z_:][-a-zA-Z0-9_:.]*)\s*=\s*[\"']?$")

# Any attribute name containing this is treated as an event handler
# (onclick, oncontextmenu, ... but also e.g. "content"; a known limitation)
EVENT_ATTRIBUTE_MARK = "on"


class PointKind(str, Enum):
    CONTENT = "content"
    ATTRIBUTE = "attribute"
    EVENT_ATTRIBUTE = "event_attribute"


@dataclass(frozen=True)
class InterpolationPoint:
    kind: PointKind
    attribute: Optional[str] = None

    @property
    def in_attribute(self) -> bool:
        return self.kind is not PointKind.CONTENT


CONTENT_POINT = InterpolationPoint(PointKind.CONTENT)


def open_tag_suffix(html_so_far: str) -> Optional[str]:
    """Text after the last '<' if that tag is still open, else None.

    Quoting is not tracked: a ">" inside an attribute value closes the tag.
    """
    lt = html_so_far.rfind("<")
    if lt == -1 or html_so_far.rfind(">") > lt:
        return None
    return html_so_far[lt:]


def classify_interpolation_point(html_so_far: str) -> InterpolationPoint:
    """Classify the position right after ``html_so_far``."""
    suffix = open_tag_suffix(html_so_far)
    if suffix is None:
        return CONTENT_POINT

    match = ATTRIBUTE_VALUE_RE.search(suffix)
    if not match:
        return CONTENT_POINT

    name = match.group(1)
    if EVENT_ATTRIBUTE_MARK in name.lower():
        return InterpolationPoint(PointKind.EVENT_ATTRIBUTE, name)
    return InterpolationPoint(PointKind.ATTRIBUTE, name)
