# htmlmd

Building blocks for converting HTML into Markdown. The package provides a
small DOM tree and passes that clean up awkward HTML before it is rendered.
It also has detectors that find characters which would be read as Markdown
syntax, and helpers for shaping Markdown text.

## Installation

```
pip install htmlmd
```

The package depends on `html5lib` for parsing HTML.

## Modules

### `htmlmd.dom`

This module holds a simple linked node tree made of `Node`, `NodeType` and
`Attribute`. A `Node` has the methods `append_child`, `insert_before`,
`remove_child` and `child_nodes`.

`parse(raw_html, start_from="body")` parses HTML with html5lib and returns the
first node with the given name. If no such node exists it raises `LookupError`.

`render_representation(node)` draws the tree as an indented outline. This is
handy for seeing what a pass changed:

```python
from htmlmd.dom import parse, render_representation

body = parse("<strong>a</strong><strong>b</strong>", "body")
print(render_representation(body))
# ├─body
# │ ├─strong
# │ │ ├─#text "a"
# │ ├─strong
# │ │ ├─#text "b"
```

The module also has helpers for walking and changing the tree:

- `node_name` and `is_block_name`
- `all_nodes`
- `next_neighbor_node`, `next_neighbor_node_excluding_own_child`,
  `prev_neighbor_node`, `prev_neighbor_node_excluding_own_child` and
  `next_neighbor_element`
- `next_text_node` and `prev_text_node`, which look through `span` elements
- `remove_node`, `unwrap_node` and `wrap_node`

### `htmlmd.block_fixes`

These passes make the block structure renderable as Markdown:

- `leaf_block_alternatives(doc)` replaces blocks that cannot sit inside
  headings or inline elements:
  - a heading becomes `strong` followed by a `br`;
  - a blockquote becomes a quoted `span`;
  - `pre` becomes `code`;
  - `hr` is removed;
  - any other block becomes a `span`.
- `add_list_end_comments(doc)` inserts a `THE END` comment after a list that
  is directly followed by another list.
- `move_list_items(node)` moves stray content inside `ul`/`ol` into the
  previous `li`. If there is no previous `li`, it wraps the content in a new
  one.
- `rename_fake_spans(doc)` renames `span` elements that contain block
  elements to `div`.

### `htmlmd.inline_fixes`

These passes work on inline content:

- `merge_adjacent(doc, match)` joins neighbouring matching elements, such as
  `<strong>a</strong><strong>b</strong>`.
- `remove_redundant(doc, match)` unwraps nodes that have an ancestor of the
  same kind, such as `<strong><strong>a</strong></strong>`.
- `swap_tags(doc, is_outer_node, is_inner_node)` swaps an outer element with
  its only inner child. For example, `<code><pre>` becomes `<pre><code>`.
  `swap_tags_of_nodes(first, second)` exchanges the tag name and attributes
  of two elements.
- `add_space(doc, is_outer_node, is_inner_node)` adds spaces to the
  surrounding text when an outer element starts or ends with an inner one.
- `remove_empty_code(doc)` removes `code` elements that contain no text.
- `merge_adjacent_text_nodes(node)` joins neighbouring text nodes.

```python
from htmlmd.dom import node_name, parse
from htmlmd.inline_fixes import merge_adjacent

body = parse("<em>a</em><em>b</em>", "body")
merge_adjacent(body, lambda n: node_name(n) in ("strong", "em"))
```

### `htmlmd.escape`

Detectors that look at one position of UTF-8 encoded Markdown text (`bytes`)
and report whether the character there would start Markdown syntax:

- `is_atx_header` and `is_setext_header`
- `is_divider`
- `is_fenced_code` and `is_inline_code`
- `is_image_or_link`
- `is_italic_or_bold`
- `is_unordered_list` and `is_ordered_list`
- `is_block_quote`
- `is_backslash`

Each detector returns the length of the match in bytes, or `-1` when there is
none. While looking around, the detectors skip the placeholder byte from
`htmlmd.marker`.

```python
from htmlmd.escape import is_atx_header

is_atx_header(b"# a", 0)   # 1
is_atx_header(b"a # b", 2) # -1
```

The module also has these helpers:

- `is_space` and `is_digit` test byte values.
- `get_prev` and `get_next` return the neighbouring byte, or `0` when there
  is none.
- `get_prev_as_rune` and `get_next_as_rune` return the neighbouring
  character, or `""` when there is none.

### `htmlmd.textutils`

Text helpers for Markdown strings:

```python
from htmlmd.textutils import calculate_code_fence, prefix_lines, trim_consecutive_newlines

calculate_code_fence("`", "code with ``` inside")  # "````"
prefix_lines("line 1\nline 2", "> ")                # "> line 1\n> line 2"
trim_consecutive_newlines("a\n\n\n\nb")             # "a\n\nb"
```

The module also has these helpers:

- `calculate_code_fence_occurrences`
- `collapse_inline_code_content`
- `trim_unnecessary_hard_line_breaks`
- `delimiter_for_every_line`
- `escape_multiline`
- `surround_by`
- `surround_by_quotes`
- `surrounding_spaces`

### `htmlmd.marker`

This module holds the characters used to mark escaping positions
(`MARKER_ESCAPING`) and code-block newlines (`MARKER_CODE_BLOCK_NEWLINE`),
along with their UTF-8 bytes. `check_marker(char, encoded)` raises
`ValueError` if a character does not encode to the given bytes.

## What it does not do

The package offers separate passes and helpers. It has no single function
that takes an HTML document and returns finished Markdown, and no
command-line tool. To build a complete converter, combine the pieces
yourself.

## Running the tests

```
pip install -e ".[test]"
pytest
```