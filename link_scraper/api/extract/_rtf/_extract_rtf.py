"""RTF extractor."""

import codecs
import logging
import re
from dataclasses import dataclass

from ...config.ScraperConfig import ScraperConfig
from ...link.ExtractionResult import ExtractionResult
from ...link.Link import Link
from ...link.Location import Location
from ...link.PartialError import PartialError
from ...scan.scan_text import scan_text
from ...sniff.FormatTag import FormatTag
from .._field_instruction import _parse_field_instruction
from .._structural_link import _structural_link
from ..ContainerUnreadable import ContainerUnreadable
from ._tokenize_rtf import TokenKind, _RtfToken, _tokenize_rtf

logger = logging.getLogger(__name__)

_PREAMBLE = re.compile(rb"^(?:\xef\xbb\xbf)?[ \t\r\n]*\{\\rtf")

_DEFAULT_CODEPAGE = "cp1252"

# Destinations whose content is never rendered
_HIDDEN_DESTINATIONS = frozenset(
    {
        "colorschememapping",
        "colortbl",
        "datastore",
        "filetbl",
        "fonttbl",
        "generator",
        "info",
        "latentstyles",
        "listoverridetable",
        "listtable",
        "object",
        "objdata",
        "pict",
        "revtbl",
        "rsidtbl",
        "stylesheet",
        "themedata",
        "xmlnstbl",
    }
)

_RUN_BREAKS = frozenset({"par", "line", "page", "sect", "cell", "row"})

_CHARACTER_WORDS = {
    "tab": "\t",
    "emdash": "\u2014",
    "endash": "\u2013",
    "lquote": "\u2018",
    "rquote": "\u2019",
    "ldblquote": "\u201c",
    "rdblquote": "\u201d",
    "bullet": "\u2022",
    "emspace": "\u2003",
    "enspace": "\u2002",
}

_CHARACTER_SYMBOLS = {"~": "\u00a0", "-": "", "_": "-", "\\": "\\", "{": "{", "}": "}"}


@dataclass
class _Group:
    start: int
    hidden: bool = False
    uc: int = 1
    instruction: list[str] | None = None
    owns_instruction: bool = False
    ignorable: bool = False
    at_destination: bool = True

    def nested(self, start: int) -> "_Group":
        return _Group(start=start, hidden=self.hidden, uc=self.uc, instruction=self.instruction)


def _codepage(number: int | None) -> str:
    name = f"cp{number}" if number else _DEFAULT_CODEPAGE
    try:
        codecs.lookup(name)
    except LookupError:
        logger.debug("Unknown RTF code page %s, using %s", name, _DEFAULT_CODEPAGE)
        return _DEFAULT_CODEPAGE
    return name


def _join_run(parts: list[str]) -> str:
    # \uN pairs may have produced surrogate halves
    return "".join(parts).encode("utf-16", "surrogatepass").decode("utf-16", "replace")


class _RtfReader:
    """Interpret an RTF token stream as visible runs and field instructions."""

    def __init__(self, brace_recovery: int):
        self.brace_recovery = brace_recovery
        self.codepage = _DEFAULT_CODEPAGE
        self.stack: list[_Group] = []
        self.links: list[Link] = []
        self.errors: list[PartialError] = []
        self.stray_closes = 0
        self.run: list[str] = []
        self.run_start: int | None = None
        self.pending_bytes = bytearray()
        self.pending_bytes_offset = 0
        self.fallback_skip = 0

    def read(self, text: str) -> ExtractionResult:
        for token in _tokenize_rtf(text):
            if token.kind is not TokenKind.HEX:
                self._flush_bytes()
            if not self._dispatch(token, text):
                break
        else:
            if self.stack:
                self._flush_bytes()
            self._finish(len(text))
        self._flush_run()
        return ExtractionResult.of(self.links, self.errors)

    def _dispatch(self, token: _RtfToken, text: str) -> bool:
        if token.kind is TokenKind.OPEN:
            self.fallback_skip = 0
            parent = self.stack[-1] if self.stack else _Group(start=token.offset)
            self.stack.append(parent.nested(token.offset))
            return True
        if token.kind is TokenKind.CLOSE:
            self.fallback_skip = 0
            return self._close(token, text)
        if not self.stack:
            # Outside the document group
            return True

        group = self.stack[-1]
        if token.kind is TokenKind.SYMBOL and token.value == "*":
            group.ignorable = True
            return True
        at_destination, group.at_destination = group.at_destination, False

        if token.kind is TokenKind.WORD:
            self._control_word(group, token, at_destination)
        elif token.kind is TokenKind.SYMBOL:
            self.fallback_skip = 0
            if token.value in "\r\n":
                self._flush_run()
            elif token.value in _CHARACTER_SYMBOLS:
                self._emit(group, _CHARACTER_SYMBOLS[token.value], token.offset)
        elif token.kind is TokenKind.HEX:
            if self.fallback_skip:
                self.fallback_skip -= 1
            elif not group.hidden:
                if not self.pending_bytes:
                    self.pending_bytes_offset = token.offset
                self.pending_bytes.append(ord(token.value))
        else:
            value = token.value
            if self.fallback_skip:
                skipped = min(self.fallback_skip, len(value))
                value = value[skipped:]
                self.fallback_skip -= skipped
            if value:
                self._emit(group, value.encode("latin-1").decode(self.codepage, "replace"), token.offset)
        return True

    def _control_word(self, group: _Group, token: _RtfToken, at_destination: bool) -> None:
        name = token.value
        if name != "u":
            self.fallback_skip = 0

        if at_destination and name == "fldinst":
            group.instruction = []
            group.owns_instruction = True
            return
        if at_destination and (group.ignorable or name in _HIDDEN_DESTINATIONS):
            group.hidden = True
            return

        if name == "ansicpg":
            self.codepage = _codepage(token.param)
        elif name == "mac":
            self.codepage = "mac_roman"
        elif name == "uc" and token.param is not None:
            group.uc = max(token.param, 0)
        elif name == "u" and token.param is not None:
            code = token.param + 0x10000 if token.param < 0 else token.param
            self._emit(group, chr(code), token.offset)
            self.fallback_skip = group.uc
        elif name in _RUN_BREAKS:
            if not group.hidden and group.instruction is None:
                self._flush_run()
        elif name in _CHARACTER_WORDS:
            self._emit(group, _CHARACTER_WORDS[name], token.offset)

    def _close(self, token: _RtfToken, text: str) -> bool:
        if not self.stack:
            return self._stray_close(token)
        if len(self.stack) == 1 and text[token.offset + 1 :].strip(" \t\r\n\x00"):
            # Closing the document group with content still to come
            return self._stray_close(token)
        group = self.stack.pop()
        if group.owns_instruction:
            self._flush_instruction(group)
        return True

    def _stray_close(self, token: _RtfToken) -> bool:
        self.stray_closes += 1
        if self.stray_closes <= self.brace_recovery:
            logger.debug("Ignoring stray closing brace at offset %d", token.offset)
            return True
        self.errors.append(
            PartialError(
                location=Location.of(f"offset[{token.offset}]"),
                message=f"Unbalanced closing brace; {self.stray_closes} stray braces exceed "
                f"recovery window of {self.brace_recovery}, remainder of stream not scanned",
            )
        )
        return False

    def _finish(self, end: int) -> None:
        for group in reversed(self.stack):
            if group.owns_instruction:
                self._flush_instruction(group)
        if len(self.stack) > self.brace_recovery:
            self.errors.append(
                PartialError(
                    location=Location.of(f"offset[{end}]"),
                    message=f"{len(self.stack)} unclosed groups at end of stream",
                )
            )

    def _emit(self, group: _Group, value: str, offset: int) -> None:
        if group.instruction is not None:
            group.instruction.append(value)
        elif not group.hidden:
            if self.run_start is None:
                self.run_start = offset
            self.run.append(value)

    def _flush_bytes(self) -> None:
        if not self.pending_bytes:
            return
        value = bytes(self.pending_bytes).decode(self.codepage, "replace")
        self.pending_bytes.clear()
        self._emit(self.stack[-1], value, self.pending_bytes_offset)

    def _flush_run(self) -> None:
        if self.run_start is not None:
            self.links.extend(scan_text(_join_run(self.run), Location.of(f"offset[{self.run_start}]")))
        self.run = []
        self.run_start = None

    def _flush_instruction(self, group: _Group) -> None:
        target = _parse_field_instruction(_join_run(group.instruction or []))
        if target is None:
            return
        link = _structural_link(target, Location.of(f"offset[{group.start}]"))
        if link is not None:
            self.links.append(link)


def _extract_rtf(data: bytes, config: ScraperConfig) -> ExtractionResult:
    """Extract ``HYPERLINK`` field targets and scan visible text runs.

    Raises:
        ContainerUnreadable: If the buffer lacks the ``{\\rtf`` preamble
    """
    if not _PREAMBLE.match(data):
        raise ContainerUnreadable(FormatTag.RTF, "missing {\\rtf preamble")
    return _RtfReader(config.rtf_brace_recovery).read(data.decode("latin-1"))
