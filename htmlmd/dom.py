"""A small mutable HTML node tree with parsing and traversal helpers."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Iterator, List, Optional

import html5lib


class NodeType(enum.Enum):
    """The kind of a node in the tree."""

    ERROR = enum.auto()
    TEXT = enum.auto()
    DOCUMENT = enum.auto()
    ELEMENT = enum.auto()
    COMMENT = enum.auto()
    DOCTYPE = enum.auto()


@dataclass
class Attribute:
    """An attribute of an element node."""

    key: str
    value: str
    namespace: str = ""


class Node:
    """A node linked to its parent, children and siblings."""

    __slots__ = (
        "type",
        "data",
        "attrs",
        "namespace",
        "parent",
        "first_child",
        "last_child",
        "prev_sibling",
        "next_sibling",
    )

    def __init__(
        self,
        node_type: NodeType,
        data: str = "",
        attrs: Optional[List[Attribute]] = None,
        namespace: str = "",
    ) -> None:
        self.type = node_type
        self.data = data
        self.attrs: List[Attribute] = list(attrs) if attrs else []
        self.namespace = namespace
        self.parent: Optional[Node] = None
        self.first_child: Optional[Node] = None
        self.last_child: Optional[Node] = None
        self.prev_sibling: Optional[Node] = None
        self.next_sibling: Optional[Node] = None

    def __repr__(self) -> str:
        return f"Node({self.type.name}, {self.data!r})"

    def _check_detached(self, child: Node) -> None:
        if (
            child.parent is not None
            or child.prev_sibling is not None
            or child.next_sibling is not None
        ):
            raise ValueError("node already has a parent or siblings")

    def append_child(self, child: Node) -> None:
        """Add ``child`` as the last child of this node."""
        self.insert_before(child, None)

    def insert_before(self, child: Node, reference: Optional[Node]) -> None:
        """Insert ``child`` before ``reference``; append when ``reference`` is None."""
        self._check_detached(child)
        if reference is None:
            previous = self.last_child
            if previous is not None:
                previous.next_sibling = child
            else:
                self.first_child = child
            self.last_child = child
            child.prev_sibling = previous
        else:
            if reference.parent is not self:
                raise ValueError("reference node is not a child of this node")
            previous = reference.prev_sibling
            if previous is not None:
                previous.next_sibling = child
            else:
                self.first_child = child
            reference.prev_sibling = child
            child.prev_sibling = previous
            child.next_sibling = reference
        child.parent = self

    def remove_child(self, child: Node) -> None:
        """Detach ``child`` from this node."""
        if child.parent is not self:
            raise ValueError("node is not a child of this node")
        if self.first_child is child:
            self.first_child = child.next_sibling
        if child.next_sibling is not None:
            child.next_sibling.prev_sibling = child.prev_sibling
        if self.last_child is child:
            self.last_child = child.prev_sibling
        if child.prev_sibling is not None:
            child.prev_sibling.next_sibling = child.next_sibling
        child.parent = None
        child.prev_sibling = None
        child.next_sibling = None

    def child_nodes(self) -> List[Node]:
        """Return the direct children as a list."""
        children = []
        child = self.first_child
        while child is not None:
            children.append(child)
            child = child.next_sibling
        return children


_SPECIAL_NAMES = {
    NodeType.ERROR: "#error",
    NodeType.TEXT: "#text",
    NodeType.DOCUMENT: "#document",
    NodeType.COMMENT: "#comment",
    NodeType.DOCTYPE: "#doctype",
}

_BLOCK_NAMES = frozenset(
    {
        "address", "article", "aside", "blockquote", "details", "dialog",
        "dd", "div", "dl", "dt", "fieldset", "figcaption", "figure",
        "footer", "form", "h1", "h2", "h3", "h4", "h5", "h6", "header",
        "hgroup", "hr", "li", "main", "nav", "ol", "p", "pre", "section",
        "table", "ul",
    }
)


def node_name(node: Optional[Node]) -> str:
    """Return the tag name of an element, or a ``#``-name for other nodes."""
    if node is None:
        return ""
    return _SPECIAL_NAMES.get(node.type, node.data)


def is_block_name(name: str) -> bool:
    """Report whether ``name`` is a block-level element name."""
    return name in _BLOCK_NAMES


def all_nodes(node: Node) -> List[Node]:
    """Return ``node`` and all of its descendants in document order."""
    return list(_iter_preorder(node))


def _iter_preorder(node: Node) -> Iterator[Node]:
    stack = [node]
    while stack:
        current = stack.pop()
        yield current
        stack.extend(reversed(current.child_nodes()))


def next_neighbor_node_excluding_own_child(node: Node) -> Optional[Node]:
    """Return the next sibling, or the next sibling of the nearest ancestor."""
    current: Optional[Node] = node
    while current is not None:
        if current.next_sibling is not None:
            return current.next_sibling
        current = current.parent
    return None


def next_neighbor_node(node: Node) -> Optional[Node]:
    """Return the node that follows ``node`` in document order."""
    if node.first_child is not None:
        return node.first_child
    return next_neighbor_node_excluding_own_child(node)


def prev_neighbor_node_excluding_own_child(node: Node) -> Optional[Node]:
    """Return the previous sibling, or the previous sibling of the nearest ancestor."""
    current: Optional[Node] = node
    while current is not None:
        if current.prev_sibling is not None:
            return current.prev_sibling
        current = current.parent
    return None


def prev_neighbor_node(node: Node) -> Optional[Node]:
    """Mirror of ``next_neighbor_node``: the last child first, then backwards."""
    if node.last_child is not None:
        return node.last_child
    return prev_neighbor_node_excluding_own_child(node)


def next_neighbor_element(node: Node) -> Optional[Node]:
    """Return the next element node in document order."""
    current = next_neighbor_node(node)
    while current is not None and current.type is not NodeType.ELEMENT:
        current = next_neighbor_node(current)
    return current


def remove_node(node: Node) -> None:
    """Detach ``node`` from its parent, if it has one."""
    if node.parent is not None:
        node.parent.remove_child(node)


def unwrap_node(node: Node) -> None:
    """Replace ``node`` by its children."""
    parent = node.parent
    if parent is None:
        raise ValueError("cannot unwrap a node without a parent")
    for child in node.child_nodes():
        node.remove_child(child)
        parent.insert_before(child, node)
    parent.remove_child(node)


def wrap_node(node: Node, wrapper: Node) -> Node:
    """Put ``wrapper`` in the place of ``node`` and move ``node`` into it."""
    parent = node.parent
    if parent is not None:
        parent.insert_before(wrapper, node)
        parent.remove_child(node)
    wrapper.append_child(node)
    return wrapper


def next_text_node(node: Node) -> Optional[Node]:
    """Return the text node directly after ``node``, looking through spans."""
    current = next_neighbor_node_excluding_own_child(node)
    while current is not None:
        if current.type is NodeType.TEXT:
            return current
        if node_name(current) != "span":
            return None
        # A span has no special meaning, so its content counts as adjacent.
        current = next_neighbor_node(current)
    return None


def prev_text_node(node: Node) -> Optional[Node]:
    """Return the text node directly before ``node``, looking through spans."""
    current = prev_neighbor_node_excluding_own_child(node)
    while current is not None:
        if current.type is NodeType.TEXT:
            return current
        if node_name(current) != "span":
            return None
        current = prev_neighbor_node(current)
    return None


# - - - - - - - - parsing - - - - - - - - #


def _split_tag(tag: str) -> tuple[str, str]:
    if tag.startswith("{") and "}" in tag:
        namespace, _, local = tag[1:].partition("}")
        return namespace, local
    return "", tag


def _from_etree(element) -> Node:
    if not isinstance(element.tag, str):
        return Node(NodeType.COMMENT, element.text or "")

    namespace, name = _split_tag(element.tag)
    attrs = []
    for key, value in element.attrib.items():
        attr_namespace, attr_key = _split_tag(key)
        attrs.append(Attribute(attr_key, value, attr_namespace))
    node = Node(NodeType.ELEMENT, name, attrs, namespace)

    if element.text:
        node.append_child(Node(NodeType.TEXT, element.text))
    for child in element:
        node.append_child(_from_etree(child))
        if child.tail:
            node.append_child(Node(NodeType.TEXT, child.tail))
    return node


def parse(raw_html: str, start_from: str = "body") -> Node:
    """Parse HTML and return the first node named ``start_from``."""
    start_from = start_from or "body"
    root = html5lib.parse(
        raw_html.strip(), treebuilder="etree", namespaceHTMLElements=False
    )
    document = Node(NodeType.DOCUMENT)
    document.append_child(_from_etree(root))

    for node in _iter_preorder(document):
        if node_name(node) == start_from:
            return node
    raise LookupError(f"could not find a node named {start_from!r}")


# - - - - - - - - representation - - - - - - - - #

_ESCAPES = {
    "\a": "\\a",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\v": "\\v",
    "\\": "\\\\",
    '"': '\\"',
}


def _quote(text: str) -> str:
    parts = []
    for char in text:
        if char in _ESCAPES:
            parts.append(_ESCAPES[char])
        elif char.isprintable():
            parts.append(char)
        else:
            code = ord(char)
            if code < 0x80:
                parts.append(f"\\x{code:02x}")
            elif code <= 0xFFFF:
                parts.append(f"\\u{code:04x}")
            else:
                parts.append(f"\\U{code:08x}")
    return '"' + "".join(parts) + '"'


def _describe(node: Node) -> str:
    name = node_name(node)
    if node.type in (NodeType.TEXT, NodeType.COMMENT):
        return f"{name} {_quote(node.data)}"
    if node.type is NodeType.ELEMENT and node.attrs:
        attrs = " ".join(f"{attr.key}={_quote(attr.value)}" for attr in node.attrs)
        return f"{name} ({attrs})"
    return name


def render_representation(node: Node) -> str:
    """Render the tree below ``node`` as an indented outline.

    A detached node is shown as the root of its tree; a node that sits
    inside a larger tree is shown as a branch of it.
    """
    lines = []
    stack = [(node, 0 if node.parent is None else 1)]
    while stack:
        current, depth = stack.pop()
        prefix = "" if depth == 0 else "│ " * (depth - 1) + "├─"
        lines.append(prefix + _describe(current))
        stack.extend((child, depth + 1) for child in reversed(current.child_nodes()))
    return "\n".join(lines) + "\n"