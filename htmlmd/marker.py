"""Private-use characters that mark spots in intermediate markdown output."""

# A character that is one byte wide and hardly used outside of terminals:
# the bell character.
MARKER_ESCAPING = "\a"

MARKER_CODE_BLOCK_NEWLINE = "\uf002"

BYTES_MARKER_ESCAPING = bytes([7])

BYTES_MARKER_CODE_BLOCK_NEWLINE = bytes([239, 128, 130])


def check_marker(char: str, encoded: bytes) -> None:
    """Raise ValueError unless ``char`` encodes to exactly ``encoded`` in UTF-8."""
    if char.encode("utf-8") != encoded:
        raise ValueError(
            "the character and the byte string do not represent the same character"
        )


check_marker(MARKER_ESCAPING, BYTES_MARKER_ESCAPING)
check_marker(MARKER_CODE_BLOCK_NEWLINE, BYTES_MARKER_CODE_BLOCK_NEWLINE)