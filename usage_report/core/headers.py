"""
Header normalization for usage report columns.

Turns human readable column headers into camel-case keys.
"""

import re

_SEPARATOR_RUN = re.compile(r"[^a-zA-Z0-9]+(.)")
_EDGE_SEPARATORS = re.compile(r"^[^a-zA-Z0-9]+|[^a-zA-Z0-9]+$")
_NORMALIZED = re.compile(r"^[a-z0-9][a-zA-Z0-9]*$")


def normalize_header(name: str) -> str:
    """Convert a raw column header into a camel-case key.

    The header is lower-cased; every run of non-alphanumeric characters
    is dropped and the character following it is upper-cased. Separators
    at either end (whitespace, a BOM, a trailing "($)") are discarded.
    Already normalized keys are returned unchanged.

    Examples:
        "Price Per Unit" -> "pricePerUnit"
        "Repository Slug" -> "repositorySlug"
        "Price Per Unit ($)" -> "pricePerUnit"

    Args:
        name: Raw header text

    Returns:
        Normalized key, empty for empty input
    """
    if _NORMALIZED.match(name):
        return name
    trimmed = _EDGE_SEPARATORS.sub("", name).lower()
    return _SEPARATOR_RUN.sub(lambda m: m.group(1).upper(), trimmed)
