"""
Utility functions for schema_to_doc.
"""

import re

# Regex pattern to split text into words, handling camelCase boundaries
_WORD_PATTERN = re.compile(r"[a-z]+|[A-Z]+(?![a-z])|[A-Z][a-z]*|[0-9]+")


def _normalize_separators(text: str) -> str:
    """Normalize separators (underscores, hyphens) to spaces."""
    return text.replace("_", " ").replace("-", " ")


def _split_into_words(text: str) -> list[str]:
    """Split text into words, handling camelCase boundaries."""
    return _WORD_PATTERN.findall(_normalize_separators(text))


def snake_to_pascal_case(text: str) -> str:
    """Convert snake_case, camelCase, or space-separated text to PascalCase.

    Examples:
        "first_name" -> "FirstName"
        "actionTemplate" -> "ActionTemplate"
        "first 3 rows" -> "First3Rows"
    """
    return "".join(word.capitalize() for word in _split_into_words(text))


def snake_to_camel_case(text: str) -> str:
    """Convert text to camelCase, e.g. "first_name" -> "firstName"."""
    pascal = snake_to_pascal_case(text)
    return pascal[:1].lower() + pascal[1:]


def to_snake_case(text: str) -> str:
    """Convert text to snake_case, e.g. "FirstName" -> "first_name"."""
    return "_".join(word.lower() for word in _split_into_words(text))


def to_kebab_case(text: str) -> str:
    """Convert text to kebab-case, e.g. "FirstName" -> "first-name"."""
    return "-".join(word.lower() for word in _split_into_words(text))


# Names accepted by ``rename_all``, mapped to their conversion
RENAME_RULES = {
    "lowercase": str.lower,
    "UPPERCASE": str.upper,
    "PascalCase": snake_to_pascal_case,
    "camelCase": snake_to_camel_case,
    "snake_case": to_snake_case,
    "SCREAMING_SNAKE_CASE": lambda text: to_snake_case(text).upper(),
    "kebab-case": to_kebab_case,
    "SCREAMING-KEBAB-CASE": lambda text: to_kebab_case(text).upper(),
}


def rename(text: str, rule: str | None) -> str:
    """Apply a ``rename_all`` rule to a field or variant name.

    Args:
        text: The declared name
        rule: One of ``RENAME_RULES`` keys, or None to keep the name

    Returns:
        The renamed text
    """
    if rule is None:
        return text
    return RENAME_RULES[rule](text)
