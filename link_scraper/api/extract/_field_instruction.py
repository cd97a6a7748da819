"""Parse HYPERLINK field instructions shared by RTF and WordprocessingML."""

import re

_HYPERLINK_QUOTED = re.compile(r'^\s*HYPERLINK\s+(?:\\[a-zA-Z]\s+)*"([^"]*)"', re.IGNORECASE)
_HYPERLINK_BARE = re.compile(r"^\s*HYPERLINK\s+([^\s\\\"]\S*)", re.IGNORECASE)


def _parse_field_instruction(instruction: str) -> str | None:
    """Return the target of a ``HYPERLINK`` field instruction.

    Field codes look like:
    - HYPERLINK "http://example.com"
    - HYPERLINK http://example.com
    - HYPERLINK \\l "BookmarkName" (local bookmark, no target)

    Returns:
        The literal URI argument, or None for other fields and bookmark-only links
    """
    if not instruction:
        return None
    quoted = _HYPERLINK_QUOTED.match(instruction)
    if quoted:
        if re.match(r"^\s*HYPERLINK\s+\\l\b", instruction, re.IGNORECASE):
            return None
        target = quoted.group(1).strip()
        return target or None
    bare = _HYPERLINK_BARE.match(instruction)
    if bare:
        return bare.group(1).strip() or None
    return None
