"""Split an RTF stream into group, control and text tokens.

striprtf only returns flattened text: it drops the ``\\fldinst`` field
instructions that carry HYPERLINK targets, along with token offsets. Field
detection needs both, so the stream is tokenized here.
"""

import re
from collections.abc import Iterator
from enum import Enum
from typing import NamedTuple

_CONTROL_WORD = re.compile(r"\\([a-zA-Z]{1,32})(-?\d{1,10})? ?")
_HEX_ESCAPE = re.compile(r"\\'([0-9a-fA-F]{2})")
_TEXT = re.compile(r"[^\\{}\r\n]+")


class TokenKind(str, Enum):
    OPEN = "open"
    CLOSE = "close"
    WORD = "word"
    SYMBOL = "symbol"
    HEX = "hex"
    TEXT = "text"


class _RtfToken(NamedTuple):
    kind: TokenKind
    offset: int
    value: str = ""
    param: int | None = None


def _tokenize_rtf(text: str) -> Iterator[_RtfToken]:
    """Tokenize a latin-1 decoded RTF stream.

    Offsets are character offsets, which equal byte offsets for latin-1.
    ``\\binN`` payloads are skipped and raw line breaks are dropped, as RTF
    readers ignore them. A hex escape's value is the single decoded byte as
    a latin-1 character.
    """
    pos = 0
    length = len(text)
    while pos < length:
        char = text[pos]
        if char == "{":
            yield _RtfToken(TokenKind.OPEN, pos)
            pos += 1
        elif char == "}":
            yield _RtfToken(TokenKind.CLOSE, pos)
            pos += 1
        elif char in "\r\n":
            pos += 1
        elif char == "\\":
            word = _CONTROL_WORD.match(text, pos)
            if word is not None:
                param = int(word.group(2)) if word.group(2) else None
                yield _RtfToken(TokenKind.WORD, pos, word.group(1), param)
                pos = word.end()
                if word.group(1) == "bin" and param:
                    pos += max(param, 0)
                continue
            hex_escape = _HEX_ESCAPE.match(text, pos)
            if hex_escape is not None:
                yield _RtfToken(TokenKind.HEX, pos, chr(int(hex_escape.group(1), 16)))
                pos = hex_escape.end()
            elif pos + 1 < length:
                yield _RtfToken(TokenKind.SYMBOL, pos, text[pos + 1])
                pos += 2
            else:
                # Lone backslash at end of stream
                pos += 1
        else:
            match = _TEXT.match(text, pos)
            yield _RtfToken(TokenKind.TEXT, pos, match.group(0))
            pos = match.end()
