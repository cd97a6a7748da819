"""Recovering XML parse."""

from dataclasses import dataclass

from lxml import etree


@dataclass(frozen=True)
class _XmlIssue:
    line: int
    column: int
    message: str

    def __str__(self):
        return f"line {self.line}, column {self.column}: {self.message}"


def _parse_xml(data: bytes) -> tuple[etree._Element | None, list[_XmlIssue]]:
    """Parse bytes into an element tree, recovering from malformed markup.

    Entities are not resolved and no network access happens. Errors the
    parser recovered from are returned alongside the root.

    Returns:
        (root, issues); root is None when nothing could be recovered
    """
    parser = etree.XMLParser(
        recover=True,
        resolve_entities=False,
        no_network=True,
        remove_comments=False,
        remove_pis=True,
    )
    try:
        root = etree.fromstring(data, parser)
    except etree.XMLSyntaxError as exc:
        line, column = exc.position if exc.position else (0, 0)
        return None, [_XmlIssue(line=line, column=column, message=str(exc.msg or exc))]

    issues = [
        _XmlIssue(line=entry.line, column=entry.column, message=entry.message.strip())
        for entry in parser.error_log
        if entry.level >= etree.ErrorLevels.ERROR
    ]
    return root, issues
