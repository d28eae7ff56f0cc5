from __future__ import annotations

"""
Source File Reading Component.

Reads page, component and layout sources as text. Decoding is strict:
a file that is not valid UTF-8 is reported as unreadable instead of being
emitted with substituted characters.
"""

# -----------------------------------------------------------------------------
# TEXT READING OPERATIONS
# -----------------------------------------------------------------------------

def read_source_text(file_path: str) -> str:
    """
    Read the whole content of a source file.

    Args:
        file_path: Absolute path to the target file.

    Returns:
        str: The decoded file content.

    Raises:
        OSError: If the file is missing or cannot be opened.
        UnicodeDecodeError: If the content is not valid UTF-8.
        ValueError: If the path cannot name a file (e.g. an embedded NUL).
    """
    # newline="" keeps line endings byte-identical in the output
    with open(file_path, "r", encoding="utf-8", newline="") as f:
        return f.read()
