from __future__ import annotations

from lc.models.listing import ClassCollection

DEFAULT_MAX_LINE_WIDTH = 118


def render_collection(collection: ClassCollection, title: str, max_line_width: int = DEFAULT_MAX_LINE_WIDTH) -> str:
    """Render one class as a titled block of left-justified, fixed-width fields.

    Fields are packed left to right and wrapped before any field that would
    push the line past *max_line_width*. A field wider than the limit is
    written whole on a line of its own. Empty collections render nothing.
    """
    if collection.count == 0:
        return ""

    width = collection.max_name_length + 1
    parts: list[str] = ["\n", f"{title} [{collection.count}]\n"]
    line_width = 0
    for entry in collection.entries:
        if line_width > 0 and line_width + width > max_line_width:
            parts.append("\n")
            line_width = 0
        parts.append(entry.name.ljust(width))
        line_width += width
    parts.append("\n")
    return "".join(parts)
