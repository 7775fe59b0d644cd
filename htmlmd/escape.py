"""Detectors for markdown syntax that would need escaping in plain text.

Every ``is_*`` detector looks at ``chars[index]`` of UTF-8 encoded text and
returns how many bytes the markdown construct starting there spans, or -1
when no construct starts there. The placeholder byte (the escaping marker)
is skipped wherever it may sit between the characters of a construct.
"""

from .marker import BYTES_MARKER_ESCAPING, MARKER_ESCAPING

PLACEHOLDER_CHAR = MARKER_ESCAPING

# Internally the placeholder is assumed to be exactly one byte wide.
PLACEHOLDER_BYTE = BYTES_MARKER_ESCAPING[0]

NO_MATCH = -1

_NEWLINE = ord("\n")
_SPACE = ord(" ")
_TAB = ord("\t")
_CARRIAGE_RETURN = ord("\r")
_BACKSLASH = ord("\\")
_BACKTICK = ord("`")
_TILDE = ord("~")
_DASH = ord("-")
_UNDERSCORE = ord("_")
_STAR = ord("*")
_PLUS = ord("+")
_HASH = ord("#")
_EQUALS = ord("=")
_EXCLAMATION = ord("!")
_OPEN_BRACKET = ord("[")
_CLOSE_BRACKET = ord("]")
_DOT = ord(".")
_CLOSE_PAREN = ord(")")
_GREATER = ord(">")

_SPACE_BYTES = frozenset(b"\t\n\v\f\r \x85\xa0")
_DIGIT_BYTES = frozenset(b"0123456789")

# str.isspace also counts U+001C..U+001F, which are not Unicode White_Space.
_NOT_SPACE = frozenset("\x1c\x1d\x1e\x1f")

_REPLACEMENT_CHAR = "\ufffd"
_UTF8_MAX = 4


def is_space(b: int) -> bool:
    """Report whether the byte value ``b`` is a whitespace character."""
    return b in _SPACE_BYTES


def is_digit(b: int) -> bool:
    """Report whether the byte value ``b`` is an ASCII digit."""
    return b in _DIGIT_BYTES


def _is_unicode_space(char: str) -> bool:
    return char.isspace() and char not in _NOT_SPACE


def _decode_first(data: bytes) -> str:
    """Decode the first character of ``data``; invalid input gives U+FFFD."""
    return data[:_UTF8_MAX].decode("utf-8", errors="replace")[0]


def _decode_last(data: bytes) -> str:
    """Decode the last character of ``data``; invalid input gives U+FFFD."""
    end = len(data)
    limit = max(0, end - _UTF8_MAX)
    start = end - 1
    while start >= limit and (data[start] & 0xC0) == 0x80:
        start -= 1
    if start < limit:
        return _REPLACEMENT_CHAR
    try:
        text = bytes(data[start:end]).decode("utf-8")
    except UnicodeDecodeError:
        return _REPLACEMENT_CHAR
    return text if len(text) == 1 else _REPLACEMENT_CHAR


def get_prev(chars: bytes, index: int) -> int:
    """Return the byte before ``index`` skipping placeholders, or 0 if none."""
    for b in reversed(chars[:index]):
        if b != PLACEHOLDER_BYTE:
            return b
    return 0


def get_next(chars: bytes, index: int) -> int:
    """Return the byte after ``index`` skipping placeholders, or 0 if none."""
    for b in chars[index + 1:]:
        if b != PLACEHOLDER_BYTE:
            return b
    return 0


def get_prev_as_rune(chars: bytes, index: int) -> str:
    """Return the character ending before ``index`` skipping placeholders.

    Returns an empty string when there is none.
    """
    for position in range(index - 1, -1, -1):
        if chars[position] != PLACEHOLDER_BYTE:
            return _decode_last(chars[: position + 1])
    return ""


def get_next_as_rune(chars: bytes, index: int) -> str:
    """Return the character starting after ``index`` skipping placeholders.

    Returns an empty string when there is none.
    """
    for position in range(index + 1, len(chars)):
        if chars[position] != PLACEHOLDER_BYTE:
            return _decode_first(chars[position:])
    return ""


def _line_prefix_is_blank(chars: bytes, index: int, allowed: bytes = b" ") -> bool:
    """Report whether only ``allowed`` bytes and placeholders precede ``index`` on its line."""
    for b in reversed(chars[:index]):
        if b == _NEWLINE:
            return True
        if b == PLACEHOLDER_BYTE or b in allowed:
            continue
        return False
    return True


def is_backslash(chars: bytes, index: int) -> int:
    """Match a backslash."""
    return 1 if chars[index] == _BACKSLASH else NO_MATCH


def is_fenced_code(chars: bytes, index: int) -> int:
    """Match a code fence of at least three backticks or tildes at a line start."""
    if chars[index] not in (_BACKTICK, _TILDE):
        return NO_MATCH
    if not _line_prefix_is_blank(chars, index):
        return NO_MATCH

    count = 1
    position = index + 1
    while position < len(chars):
        b = chars[position]
        if b in (_BACKTICK, _TILDE):
            count += 1
        elif b != PLACEHOLDER_BYTE:
            break
        position += 1

    if count < 3:
        return NO_MATCH
    return position - index


def is_inline_code(chars: bytes, index: int) -> int:
    """Match a backtick."""
    return 1 if chars[index] == _BACKTICK else NO_MATCH


def is_divider(chars: bytes, index: int) -> int:
    """Match a thematic break made of three or more ``-``, ``_`` or ``*``."""
    marker = chars[index]
    if marker not in (_DASH, _UNDERSCORE, _STAR):
        return NO_MATCH
    if not _line_prefix_is_blank(chars, index):
        return NO_MATCH

    count = 1
    last = len(chars)
    for position in range(index + 1, len(chars)):
        b = chars[position]
        if b == PLACEHOLDER_BYTE or b == _SPACE:
            continue
        if b == marker:
            count += 1
            continue
        if b == _NEWLINE:
            last = position
            break
        return NO_MATCH

    if count >= 3:
        return last - index
    return NO_MATCH


def is_atx_header(chars: bytes, index: int) -> int:
    """Match one to six ``#`` at a line start followed by whitespace."""
    if chars[index] != _HASH:
        return NO_MATCH
    if not _line_prefix_is_blank(chars, index):
        return NO_MATCH

    pound_signs = 1
    for position in range(index + 1, len(chars)):
        b = chars[position]
        if b == _HASH:
            pound_signs += 1
            if pound_signs > 6:
                return NO_MATCH
            continue
        if b == PLACEHOLDER_BYTE:
            continue
        if b in (_SPACE, _TAB, _NEWLINE, _CARRIAGE_RETURN):
            return position - index
        return NO_MATCH
    return 1


def is_setext_header(chars: bytes, index: int) -> int:
    """Match ``=`` or ``-`` on the line directly below some content."""
    if chars[index] not in (_EQUALS, _DASH):
        return NO_MATCH

    newlines = 0
    for b in reversed(chars[:index]):
        if b == PLACEHOLDER_BYTE or b == _SPACE:
            continue
        if b == _NEWLINE:
            newlines += 1
            continue
        # Content on the same line means the delimiter is inside normal text;
        # content exactly one line above makes it a heading underline.
        return 1 if newlines == 1 else NO_MATCH
    return NO_MATCH


def is_image_or_link(chars: bytes, index: int) -> int:
    """Match ``![`` or a ``[`` that is closed by ``]`` on the same line."""
    b = chars[index]
    if b == _EXCLAMATION:
        following = index + 1
        if following < len(chars) and chars[following] == _OPEN_BRACKET:
            return 1
        return NO_MATCH
    if b == _OPEN_BRACKET:
        for other in chars[index + 1:]:
            if other == _NEWLINE:
                return NO_MATCH
            if other == _CLOSE_BRACKET:
                return 1
        return NO_MATCH
    return NO_MATCH


def is_italic_or_bold(chars: bytes, index: int) -> int:
    """Match ``*`` or ``_`` that is not followed by whitespace."""
    if chars[index] not in (_STAR, _UNDERSCORE):
        return NO_MATCH

    following = get_next_as_rune(chars, index)
    if not following or following == "\x00" or _is_unicode_space(following):
        return NO_MATCH
    return 1


def is_unordered_list(chars: bytes, index: int) -> int:
    """Match a ``-``, ``*`` or ``+`` bullet at a line start."""
    if chars[index] not in (_DASH, _STAR, _PLUS):
        return NO_MATCH
    if not _line_prefix_is_blank(chars, index):
        return NO_MATCH

    following = get_next(chars, index)
    if is_space(following) or following == 0:
        return 1
    return NO_MATCH


def is_ordered_list(chars: bytes, index: int) -> int:
    """Match the ``.`` or ``)`` after a number at a line start."""
    if chars[index] not in (_DOT, _CLOSE_PAREN):
        return NO_MATCH

    if not get_prev_as_rune(chars, index).isdecimal():
        return NO_MATCH
    if not _line_prefix_is_blank(chars, index, b" 0123456789"):
        return NO_MATCH

    following = get_next(chars, index)
    if is_space(following) or following == 0:
        return 1
    return NO_MATCH


def is_block_quote(chars: bytes, index: int) -> int:
    """Match a ``>`` at a line start."""
    if chars[index] != _GREATER:
        return NO_MATCH
    if not _line_prefix_is_blank(chars, index):
        return NO_MATCH
    return 1