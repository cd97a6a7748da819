"""Element tree walker shared by the XML family of extractors."""

from collections.abc import Callable, Iterable

from lxml import etree

from ...link.ExtractionResult import ExtractionResult
from ...link.Link import Link
from ...link.LinkKind import LinkKind
from ...link.Location import Location
from ...link.normalize_uri import classify_kind
from ...link.PartialError import PartialError
from ...scan.scan_text import scan_text
from .._structural_link import _structural_link
from ._parse_xml import _XmlIssue

XML_NAMESPACE = "http://www.w3.org/XML/1998/namespace"

# (element, attribute name in Clark notation, value) -> is the value an explicit reference?
AttributePolicy = Callable[[etree._Element, str, str], bool]

# (element, location, ancestors) -> extra findings for that element
ElementHook = Callable[[etree._Element, Location, tuple[etree._Element, ...]], Iterable[Link | PartialError]]

DEFAULT_STRUCTURAL_ATTRIBUTES = frozenset({"href", "src"})


def local_name(name: str) -> str:
    return name.rsplit("}", 1)[-1]


def namespace_of(name: str) -> str | None:
    if name.startswith("{"):
        return name[1:].split("}", 1)[0]
    return None


def display_name(name: str, nsmap: dict[str | None, str]) -> str:
    """Render a Clark-notation name with its prefix (``{ns}href`` -> ``xlink:href``)."""
    namespace = namespace_of(name)
    local = local_name(name)
    if namespace is None:
        return local
    if namespace == XML_NAMESPACE:
        return f"xml:{local}"
    for prefix, uri in nsmap.items():
        if uri == namespace and prefix:
            return f"{prefix}:{local}"
    return local


def href_or_src(element: etree._Element, name: str, value: str) -> bool:  # noqa: ARG001
    return local_name(name) in DEFAULT_STRUCTURAL_ATTRIBUTES


class _XmlWalker:
    """Walk a parsed tree emitting structural and textual links.

    Attributes accepted by ``is_structural`` become structural links; all
    other attribute values, text runs and (optionally) comments are routed
    through the plaintext scanner.
    """

    def __init__(
        self,
        *,
        is_structural: AttributePolicy = href_or_src,
        scan_attributes: bool = True,
        scan_comments: bool = True,
        include_namespaces: bool = False,
        element_hook: ElementHook | None = None,
    ):
        self.is_structural = is_structural
        self.scan_attributes = scan_attributes
        self.scan_comments = scan_comments
        self.include_namespaces = include_namespaces
        self.element_hook = element_hook

    def walk(self, root: etree._Element, issues: Iterable[_XmlIssue] = ()) -> ExtractionResult:
        links: list[Link] = []
        errors: list[PartialError] = []
        visited: list[tuple[int, Location]] = []

        document = Location.of("/")
        for sibling in reversed(list(root.itersiblings(preceding=True))):
            links.extend(self._scan_comment(sibling, document))

        root_location = Location.of(f"/{display_name(root.tag, root.nsmap)}")
        stack: list[tuple[etree._Element, Location, tuple[etree._Element, ...]]] = [(root, root_location, ())]
        while stack:
            element, location, ancestors = stack.pop()
            visited.append((element.sourceline or 0, location))
            self._visit(element, location, ancestors, links, errors)
            if ancestors:
                links.extend(self._scan_tail(element, location))

            children = []
            counts: dict[str, int] = {}
            for child in element:
                if not isinstance(child.tag, str):
                    links.extend(self._scan_comment(child, location))
                    links.extend(self._scan_tail(child, location))
                    continue
                name = display_name(child.tag, child.nsmap)
                counts[name] = counts.get(name, 0) + 1
                child_location = Location.of(f"{location.parts[0]}/{name}[{counts[name]}]")
                children.append((child, child_location, ancestors + (element,)))
            # Reverse so the first child is visited next
            stack.extend(reversed(children))

        for sibling in root.itersiblings():
            links.extend(self._scan_comment(sibling, document))

        errors.extend(self._locate_issues(issues, visited))
        return ExtractionResult.of(links, errors)

    def _visit(
        self,
        element: etree._Element,
        location: Location,
        ancestors: tuple[etree._Element, ...],
        links: list[Link],
        errors: list[PartialError],
    ) -> None:
        for name, value in element.attrib.items():
            attribute_location = location.child(f"@{display_name(name, element.nsmap)}")
            if self.is_structural(element, name, value):
                link = _structural_link(value, attribute_location)
                if link is not None:
                    links.append(link)
            elif self.scan_attributes:
                links.extend(scan_text(value, attribute_location))

        if self.include_namespaces:
            links.extend(self._namespace_links(element, location, ancestors))

        if element.text:
            links.extend(scan_text(element.text, location.child("text()")))

        if self.element_hook is not None:
            for finding in self.element_hook(element, location, ancestors):
                if isinstance(finding, PartialError):
                    errors.append(finding)
                else:
                    links.append(finding)

    def _namespace_links(
        self, element: etree._Element, location: Location, ancestors: tuple[etree._Element, ...]
    ) -> list[Link]:
        inherited = ancestors[-1].nsmap if ancestors else {}
        found = []
        for prefix, uri in element.nsmap.items():
            if inherited.get(prefix) == uri or classify_kind(uri) is not LinkKind.URL:
                continue
            declaration = f"@xmlns:{prefix}" if prefix else "@xmlns"
            link = _structural_link(uri, location.child(declaration))
            if link is not None:
                found.append(link)
        return found

    def _scan_comment(self, node: etree._Element, location: Location) -> list[Link]:
        if not self.scan_comments or node.tag is not etree.Comment or not node.text:
            return []
        return list(scan_text(node.text, location.child("comment()")))

    @staticmethod
    def _scan_tail(node: etree._Element, location: Location) -> list[Link]:
        if not node.tail:
            return []
        return list(scan_text(node.tail, location.child("tail()")))

    @staticmethod
    def _locate_issues(issues: Iterable[_XmlIssue], visited: list[tuple[int, Location]]) -> list[PartialError]:
        """Attach each recovered parse error to the last element opened at or before it."""
        errors = []
        for issue in issues:
            location = Location.of("/")
            for line, candidate in visited:
                if line > issue.line:
                    break
                location = candidate
            errors.append(PartialError(location=location, message=f"Recovered XML error at {issue}"))
        return errors
