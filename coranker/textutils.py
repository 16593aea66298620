"""Word normalisation helpers shared by indexing and querying."""

_ASCII_UPPER = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
_LOWER_TABLE = str.maketrans(_ASCII_UPPER, _ASCII_UPPER.lower())


def to_lower(text: str) -> str:
    """Lower-case the ASCII letters of ``text``, leaving every other character alone."""
    return text.translate(_LOWER_TABLE)


def clean_word(word: str) -> str:
    """Lower-case ``word`` and drop every character that is not an ASCII letter or digit."""
    return "".join(c for c in to_lower(word) if c.isascii() and c.isalnum())