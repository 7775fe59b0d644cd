"""Tree fixes that keep inline formatting renderable as markdown."""

from __future__ import annotations

from typing import Callable, List, Optional

from .dom import (
    Node,
    NodeType,
    all_nodes,
    next_neighbor_element,
    next_neighbor_node,
    next_neighbor_node_excluding_own_child,
    next_text_node,
    node_name,
    prev_neighbor_node,
    prev_text_node,
    remove_node,
    unwrap_node,
)

NodeMatcher = Callable[[Node], bool]
PairMatcher = Callable[[Node, Node], bool]


# - - - - - - - - spaces - - - - - - - - #


def _first_child_matching(start: Node, match: NodeMatcher) -> Optional[Node]:
    node = start.first_child
    while node is not None:
        if node_name(node) == "span":
            # A span has no special meaning, so it is looked through.
            node = next_neighbor_node(node)
        elif match(node):
            return node
        else:
            return None
    return None


def _last_child_matching(start: Node, match: NodeMatcher) -> Optional[Node]:
    node = start.last_child
    while node is not None:
        if node_name(node) == "span":
            node = prev_neighbor_node(node)
        elif match(node):
            return node
        else:
            return None
    return None


def add_space(doc: Node, is_outer_node: NodeMatcher, is_inner_node: NodeMatcher) -> None:
    """Separate outer nodes from surrounding text when they start or end with an inner node.

    A space is appended to the text directly before the outer node if its
    first child is an inner node, and prepended to the text directly after
    it if its last child is an inner node.
    """
    node: Optional[Node] = doc
    while node is not None:
        if is_outer_node(node):
            if _first_child_matching(node, is_inner_node) is not None:
                previous = prev_text_node(node)
                if previous is not None:
                    previous.data += " "
            if _last_child_matching(node, is_inner_node) is not None:
                following = next_text_node(node)
                if following is not None:
                    following.data = " " + following.data
        node = next_neighbor_element(node)


# - - - - - - - - adjacent - - - - - - - - #


def _collect_adjacent(node: Node, match: NodeMatcher) -> List[Node]:
    collected = []
    current = node.next_sibling
    while current is not None:
        if node_name(current) == "span":
            current = next_neighbor_node(current)
        elif match(current):
            collected.append(current)
            current = next_neighbor_node_excluding_own_child(current)
        else:
            break
    return collected


def _merge_children(destination: Node, nodes: List[Node]) -> None:
    for node in nodes:
        for child in node.child_nodes():
            remove_node(child)
            destination.append_child(child)
        remove_node(node)


def merge_adjacent(doc: Node, match: NodeMatcher) -> None:
    """Merge matching nodes that directly follow each other into the first one."""
    node: Optional[Node] = doc
    while node is not None:
        if match(node):
            _merge_children(node, _collect_adjacent(node, match))
        node = next_neighbor_element(node)


def merge_adjacent_text_nodes(node: Optional[Node]) -> None:
    """Join neighbouring text nodes everywhere below ``node``."""
    if node is None:
        return
    stack = [node]
    while stack:
        current = stack.pop()
        previous: Optional[Node] = None
        for child in current.child_nodes():
            if (
                child.type is NodeType.TEXT
                and previous is not None
                and previous.type is NodeType.TEXT
            ):
                previous.data += child.data
                current.remove_child(child)
            else:
                stack.append(child)
                previous = child


# - - - - - - - - empty code - - - - - - - - #


def _has_text(node: Node) -> bool:
    return any(
        inner.type is NodeType.TEXT and inner.data != "" for inner in all_nodes(node)
    )


def remove_empty_code(doc: Node) -> None:
    """Remove every ``code`` element that holds no text at all."""
    node: Optional[Node] = doc
    while node is not None:
        if node_name(node) == "code" and not _has_text(node):
            following = next_neighbor_node_excluding_own_child(node)
            remove_node(node)
            node = following
            continue
        node = next_neighbor_node(node)


# - - - - - - - - redundant - - - - - - - - #


def _has_same_type_ancestor(node: Node, match: PairMatcher) -> bool:
    if not match(node, node):
        return False
    ancestor = node.parent
    while ancestor is not None:
        if match(node, ancestor):
            return True
        ancestor = ancestor.parent
    return False


def remove_redundant(doc: Node, match: PairMatcher) -> None:
    """Unwrap every node that has an ancestor of the same kind, as told by ``match``."""
    for node in all_nodes(doc):
        if _has_same_type_ancestor(node, match):
            unwrap_node(node)


# - - - - - - - - swap - - - - - - - - #


def swap_tags_of_nodes(first: Node, second: Node) -> None:
    """Exchange tag name and attributes of two elements, keeping their places."""
    if first.type is not NodeType.ELEMENT or second.type is not NodeType.ELEMENT:
        raise ValueError("swap only works with element nodes")
    first.data, second.data = second.data, first.data
    first.attrs, second.attrs = second.attrs, first.attrs


def _is_empty_text(node: Node) -> bool:
    return node.type is NodeType.TEXT and node.data.strip() == ""


def swap_tags(doc: Node, is_outer_node: NodeMatcher, is_inner_node: NodeMatcher) -> None:
    """Swap an outer node with its only inner child, ignoring blank text around it."""
    stack = [doc]
    while stack:
        node = stack.pop()
        if is_outer_node(node):
            children = [child for child in node.child_nodes() if not _is_empty_text(child)]
            if len(children) == 1 and is_inner_node(children[0]):
                swap_tags_of_nodes(node, children[0])
                continue
        stack.extend(reversed(node.child_nodes()))