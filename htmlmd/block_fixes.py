"""Tree fixes that keep block content renderable as markdown."""

from __future__ import annotations

import enum
from typing import Callable, Dict

from .dom import (
    Node,
    NodeType,
    all_nodes,
    is_block_name,
    next_neighbor_element,
    next_neighbor_node,
    next_neighbor_node_excluding_own_child,
    node_name,
    remove_node,
    wrap_node,
)

LIST_END_COMMENT_DATA = "THE END"


class _Structure(enum.Enum):
    CONTAINER_BLOCK = enum.auto()
    LEAF_BLOCK = enum.auto()
    INLINE = enum.auto()
    OTHER = enum.auto()


_CONTAINER_NAMES = frozenset(
    {"#document", "html", "head", "body", "blockquote", "ul", "ol", "li"}
)
_LEAF_NAMES = frozenset({"hr", "pre", "h1", "h2", "h3", "h4", "h5", "h6"})
_INLINE_NAMES = frozenset(
    {"#text", "span", "code", "b", "strong", "i", "em", "a", "img", "br"}
)


def _markdown_structure(name: str) -> _Structure:
    if name in _CONTAINER_NAMES:
        # A container block can also contain other blocks.
        return _Structure.CONTAINER_BLOCK
    if name in _LEAF_NAMES:
        # Leaf blocks can contain inline content but not other blocks.
        return _Structure.LEAF_BLOCK
    if name in _INLINE_NAMES:
        return _Structure.INLINE
    return _Structure.OTHER


def _heading_alternative(node: Node) -> None:
    node.data = "strong"
    node.parent.insert_before(Node(NodeType.ELEMENT, "br"), node.next_sibling)


def _blockquote_alternative(node: Node) -> None:
    node.parent.insert_before(Node(NodeType.TEXT, ' "'), node)
    node.data = "span"
    node.parent.insert_before(Node(NodeType.TEXT, '" '), node.next_sibling)


def _pre_alternative(node: Node) -> None:
    node.data = "code"


_ALTERNATIVES: Dict[str, Callable[[Node], None]] = {
    "h1": _heading_alternative,
    "h2": _heading_alternative,
    "h3": _heading_alternative,
    "h4": _heading_alternative,
    "h5": _heading_alternative,
    "h6": _heading_alternative,
    "blockquote": _blockquote_alternative,
    "pre": _pre_alternative,
    "hr": remove_node,
}


def leaf_block_alternatives(doc: Node) -> None:
    """Replace blocks inside leaf blocks or inline content by inline alternatives.

    A heading inside a link becomes bold text with a line break, a quote
    becomes quoted text, and so on.
    """
    stack = [(doc, False, False)]
    while stack:
        node, inside_leaf, inside_inline = stack.pop()
        name = node_name(node)
        structure = _markdown_structure(name)

        is_block = structure in (_Structure.CONTAINER_BLOCK, _Structure.LEAF_BLOCK)
        if is_block and (inside_leaf or inside_inline):
            alternative = _ALTERNATIVES.get(name)
            if alternative is not None:
                alternative(node)
            else:
                node.data = "span"

        if structure is _Structure.LEAF_BLOCK:
            inside_leaf = True
        if structure is _Structure.INLINE:
            inside_inline = True

        stack.extend((child, inside_leaf, inside_inline) for child in node.child_nodes())


def _is_list(node: Node) -> bool:
    return node_name(node) in ("ul", "ol")


def _next_is_list(start: Node) -> bool:
    node = next_neighbor_node_excluding_own_child(start)
    while node is not None:
        name = node_name(node)
        if name in ("ul", "ol"):
            return True
        if name == "li":
            return False
        if name == "#comment" and node.data == LIST_END_COMMENT_DATA:
            return False
        # Text between two lists already separates them.
        if node.type is NodeType.TEXT:
            return False
        # So does a divider.
        if name == "hr":
            return False
        node = next_neighbor_node(node)
    return False


def add_list_end_comments(doc: Node) -> None:
    """Insert a comment after every list that is directly followed by another list."""
    node = doc
    while node is not None:
        if _is_list(node) and _next_is_list(node):
            comment = Node(NodeType.COMMENT, LIST_END_COMMENT_DATA)
            node.parent.insert_before(comment, node.next_sibling)
        node = next_neighbor_element(node)


def _move_into_items(list_node: Node) -> None:
    previous_item = None
    for child in list_node.child_nodes():
        if child.type is NodeType.ELEMENT and child.data == "li":
            previous_item = child
        elif child.type is NodeType.TEXT and not child.data.strip():
            # Only formatting whitespace of the source.
            pass
        elif previous_item is not None:
            list_node.remove_child(child)
            previous_item.append_child(child)
        else:
            previous_item = wrap_node(child, Node(NodeType.ELEMENT, "li"))


def move_list_items(node: Node) -> None:
    """Move content of ``ol``/``ul`` that is not inside an ``li`` into one."""
    stack = [node]
    while stack:
        current = stack.pop()
        if current.type is NodeType.ELEMENT and current.data in ("ol", "ul"):
            _move_into_items(current)
        stack.extend(reversed(current.child_nodes()))


def _is_fake_span(node: Node) -> bool:
    if node_name(node) != "span":
        return False
    return any(is_block_name(node_name(inner)) for inner in all_nodes(node))


def rename_fake_spans(doc: Node) -> None:
    """Rename every ``span`` that contains a block element to ``div``."""
    for node in all_nodes(doc):
        if _is_fake_span(node):
            node.data = "div"