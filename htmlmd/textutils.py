"""Text helpers used while assembling markdown output."""

_DOUBLE_QUOTE = '"'
_SINGLE_QUOTE = "'"

# Python's str.isspace also counts the information separators U+001C..U+001F,
# which are not whitespace in the Unicode White_Space sense.
_NOT_SPACE = frozenset("\x1c\x1d\x1e\x1f")


def _is_space(char: str) -> bool:
    return char.isspace() and char not in _NOT_SPACE


def _lstrip_space(text: str) -> str:
    for index, char in enumerate(text):
        if not _is_space(char):
            return text[index:]
    return ""


def _rstrip_space(text: str) -> str:
    end = len(text)
    while end > 0 and _is_space(text[end - 1]):
        end -= 1
    return text[:end]


def calculate_code_fence_occurrences(fence_char: str, content: str) -> int:
    """Return the longest run of ``fence_char`` found in ``content``."""
    longest = 0
    run = 0
    for char in content:
        if char == fence_char:
            run += 1
        else:
            longest = max(longest, run)
            run = 0
    return max(longest, run)


def calculate_code_fence(fence_char: str, content: str) -> str:
    """Return a fence long enough to enclose ``content`` as a code block.

    The fence is one character longer than any run inside the content and
    at least three characters long.
    """
    repeat = calculate_code_fence_occurrences(fence_char, content) + 1
    return fence_char * max(repeat, 3)


def collapse_inline_code_content(content: str) -> str:
    """Put code content on a single line with single spaces."""
    content = content.replace("\n", " ").replace("\t", " ")
    content = _rstrip_space(_lstrip_space(content))

    chars = []
    previous_space = False
    for char in content:
        is_space = char == " "
        if is_space and previous_space:
            continue
        chars.append(char)
        previous_space = is_space
    return "".join(chars)


def trim_unnecessary_hard_line_breaks(content: str) -> str:
    """Drop hard line breaks that are followed by a blank line anyway."""
    content = content.replace("  \n\n", "\n\n")
    content = content.replace("  \n  \n", "\n\n")
    content = content.replace("  \n \n", "\n\n")
    return content


def trim_consecutive_newlines(content: str) -> str:
    """Keep at most two newlines in a row, dropping spaces between extra ones."""
    result = []
    newline_count = 0
    spaces = []

    for char in content:
        if char == "\n":
            newline_count += 1
            if newline_count <= 2:
                result.extend(spaces)
                result.append("\n")
            spaces.clear()
        elif char == " ":
            spaces.append(char)
        else:
            newline_count = 0
            result.extend(spaces)
            result.append(char)
            spaces.clear()

    result.extend(spaces)
    return "".join(result)


def delimiter_for_every_line(text: str, delimiter: str) -> str:
    """Wrap the content of every non-blank line in ``delimiter``.

    Whitespace around each line stays outside the delimiters, so bold and
    italic markers are still recognised when the text spans several lines.
    """
    lines = []
    for line in text.split("\n"):
        left, trimmed, right = surrounding_spaces(line)
        if trimmed:
            lines.append(f"{left}{delimiter}{trimmed}{delimiter}{right}")
        else:
            lines.append(left + right)
    return "\n".join(lines)


def escape_multiline(content: str) -> str:
    """Make multi-line content safe inside a link or a heading."""
    parts = content.split("\n")
    if len(parts) == 1:
        return content

    output = []
    last = len(parts) - 1
    for position, part in enumerate(parts):
        trimmed = _lstrip_space(part)
        if not trimmed:
            # A blank line would interrupt the link, so it is escaped.
            output.append("\\\n")
        elif position == last:
            output.append(trimmed)
        elif trimmed.endswith("  "):
            output.append(trimmed + "\n")
        else:
            output.append(trimmed + "  \n")
    return "".join(output)


def prefix_lines(source: str, prefix: str) -> str:
    """Put ``prefix`` at the start of every line, including a trailing empty one."""
    return prefix + source.replace("\n", "\n" + prefix)


def surround_by(content: str, chars: str) -> str:
    """Put ``chars`` on both sides of ``content``."""
    return f"{chars}{content}{chars}"


def surround_by_quotes(content: str) -> str:
    """Quote ``content`` for use as a link title; empty content stays empty."""
    if not content:
        return ""

    has_double = _DOUBLE_QUOTE in content
    has_single = _SINGLE_QUOTE in content

    if has_double and has_single:
        return surround_by(content.replace('"', '\\"'), _DOUBLE_QUOTE)
    if has_double:
        return surround_by(content, _SINGLE_QUOTE)
    return surround_by(content, _DOUBLE_QUOTE)


def surrounding_spaces(content: str) -> tuple[str, str, str]:
    """Split ``content`` into leading whitespace, the rest, and trailing whitespace."""
    right_trimmed = _rstrip_space(content)
    right = content[len(right_trimmed):]
    trimmed = _lstrip_space(right_trimmed)
    left = right_trimmed[: len(right_trimmed) - len(trimmed)]
    return left, trimmed, right