"""Text helpers for search input and object type tags."""

import re

NUMERIC_ID_PATTERN = re.compile(r'[0-9]+')


def clean_search_text(text: str) -> str:
    """
    Normalize caller search text.

    Args:
        text: Raw search text (may be None)

    Returns:
        Text with surrounding whitespace removed
    """
    if not text:
        return ""
    return text.strip()


def is_numeric_id(text: str) -> bool:
    """Check if trimmed text is an all-ASCII-digit object id."""
    return bool(NUMERIC_ID_PATTERN.fullmatch(clean_search_text(text)))


def tagify(tag: str) -> int:
    """
    Encode a four character object type tag as an integer.

    Tags are stored big-endian, so ``tagify("CREO") == 0x4352454F``.

    Args:
        tag: Four ASCII characters

    Returns:
        Integer tag value

    Raises:
        ValueError: If tag is not four ASCII characters
    """
    if len(tag) != 4:
        raise ValueError(f"Object type tag must be 4 characters: {tag!r}")
    try:
        encoded = tag.encode('ascii')
    except UnicodeEncodeError:
        raise ValueError(f"Object type tag must be ASCII: {tag!r}")
    return int.from_bytes(encoded, 'big')


PLAYER_CREATURE_TAG = tagify("CREO")
