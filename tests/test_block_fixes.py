import pytest

from htmlmd.block_fixes import (
    LIST_END_COMMENT_DATA,
    add_list_end_comments,
    leaf_block_alternatives,
    move_list_items,
    rename_fake_spans,
)
from htmlmd.dom import node_name, parse


def _shape(node):
    """Describe a tree as nested tuples: text nodes become their data."""
    name = node_name(node)
    if name == "#text":
        return node.data
    label = name
    attrs = getattr(node, "attrs", None) or []
    if attrs:
        label += "[" + " ".join(f"{a.key}={a.value}" for a in attrs) + "]"
    return (label, *(_shape(child) for child in node.child_nodes()))


PAGE_LINK = "a[href=/page.html]"


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("<h3>Heading<hr /></h3>", ("body", ("h3", "Heading"))),
        (
            '<a href="/page.html"><h3>Heading</h3></a>',
            ("body", (PAGE_LINK, ("strong", "Heading"), ("br",))),
        ),
        (
            '<a href="/page.html"><h4>Heading A</h4><h3>Heading B</h3></a>',
            (
                "body",
                (
                    PAGE_LINK,
                    ("strong", "Heading A"),
                    ("br",),
                    ("strong", "Heading B"),
                    ("br",),
                ),
            ),
        ),
        (
            '\n<a href="/page.html">\n\t<h4>Heading A</h4>\n\t<h3>Heading B</h3>\n</a>\n',
            (
                "body",
                (
                    PAGE_LINK,
                    "\n\t",
                    ("strong", "Heading A"),
                    ("br",),
                    "\n\t",
                    ("strong", "Heading B"),
                    ("br",),
                    "\n",
                ),
            ),
        ),
    ],
    ids=["divider in heading", "simple", "two headings", "two headings formatted"],
)
def test_leaf_block_alternatives(raw, expected):
    doc = parse(raw, "")
    leaf_block_alternatives(doc)
    assert _shape(doc) == expected


@pytest.mark.parametrize(
    "raw, expected",
    [
        (
            "<div><ul><li>A</li><li>B</li><li>C</li></ul></div>",
            ("body", ("div", ("ul", ("li", "A"), ("li", "B"), ("li", "C")))),
        ),
        ("<ul><li>A</li>B</ul>", ("body", ("ul", ("li", "A", "B")))),
        (
            "<ul><li>A</li><div>B</div></ul>",
            ("body", ("ul", ("li", "A", ("div", "B")))),
        ),
        (
            "<ul><li>A</li><ol><li>B</li></ol></ul>",
            ("body", ("ul", ("li", "A", ("ol", ("li", "B"))))),
        ),
        (
            "<ul><span>A</span><span>B</span></ul>",
            ("body", ("ul", ("li", ("span", "A"), ("span", "B")))),
        ),
        (
            "\n<ol>\n\t<li>One</li>\n\t<li>Two</li>\n\t<ol>\n\t\t<li>Two point one</li>"
            "\n\t\t<li>Two point two</li>\n\t</ol>\n</ol>\n",
            (
                "body",
                (
                    "ol",
                    "\n\t",
                    ("li", "One"),
                    "\n\t",
                    (
                        "li",
                        "Two",
                        (
                            "ol",
                            "\n\t\t",
                            ("li", "Two point one"),
                            "\n\t\t",
                            ("li", "Two point two"),
                            "\n\t",
                        ),
                    ),
                    "\n\t",
                    "\n",
                ),
            ),
        ),
    ],
    ids=[
        "not needed in normal list",
        "text moves into previous li",
        "div moves into previous li",
        "ol moves into previous li",
        "no existing li",
        "basic moved list",
    ],
)
def test_move_list_items(raw, expected):
    doc = parse(raw, "")
    move_list_items(doc)
    assert _shape(doc) == expected


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("<p>a</p> <p>b</p>", ("body", ("p", "a"), " ", ("p", "b"))),
        ("<span>a</span>", ("body", ("span", "a"))),
        (
            "<span><a>link content</a></span>",
            ("body", ("span", ("a", "link content"))),
        ),
        (
            "<span><p>paragraph content</p></span>",
            ("body", ("div", ("p", "paragraph content"))),
        ),
        (
            "<span><span><p>paragraph content</p></span></span>",
            ("body", ("div", ("div", ("p", "paragraph content")))),
        ),
    ],
    ids=[
        "other tags",
        "simple span",
        "span with inline element",
        "span with block element",
        "multiple spans with block element",
    ],
)
def test_rename_fake_spans(raw, expected):
    doc = parse(raw, "")
    rename_fake_spans(doc)
    assert _shape(doc) == expected


def test_list_end_comment_between_lists():
    doc = parse("<ul><li>A</li></ul><ul><li>B</li></ul>")
    add_list_end_comments(doc)
    children = doc.child_nodes()
    assert [node_name(child) for child in children] == ["ul", "#comment", "ul"]
    assert children[1].data == LIST_END_COMMENT_DATA


def test_list_end_comment_is_idempotent():
    doc = parse("<ul><li>A</li></ul><ol><li>B</li></ol>")
    add_list_end_comments(doc)
    add_list_end_comments(doc)
    assert [node_name(child) for child in doc.child_nodes()] == ["ul", "#comment", "ol"]


@pytest.mark.parametrize(
    "raw, names",
    [
        ("<ul><li>A</li></ul>text<ul><li>B</li></ul>", ["ul", "#text", "ul"]),
        ("<ul><li>A</li></ul><hr><ol><li>B</li></ol>", ["ul", "hr", "ol"]),
        ("<ul><li>A<ul><li>B</li></ul></li><li>C</li></ul>", ["ul"]),
    ],
    ids=["text between", "divider between", "nested list"],
)
def test_no_list_end_comment(raw, names):
    doc = parse(raw)
    add_list_end_comments(doc)
    assert [node_name(child) for child in doc.child_nodes()] == names
    assert all(node_name(node) != "#comment" for node in doc.first_child.child_nodes())