"""
Naming utilities for type names and enum member names.
"""

import re

# Regex pattern to split text into words, handling camelCase boundaries
_WORD_PATTERN = re.compile(r"[a-z]+|[A-Z][a-z]*|[0-9]+")

# Separators removed by upper camel case conversion
_SEPARATOR_PATTERN = re.compile(r"[_\-\s/.]+")

# Position between a lowercase letter and a capital
_LOWER_UPPER_BOUNDARY = re.compile(r"(?<=[a-z])(?=[A-Z])")


def _normalize_separators(text: str) -> str:
    """Normalize separators (underscores, hyphens) to spaces."""
    return text.replace("_", " ").replace("-", " ")


def _split_into_words(text: str) -> list[str]:
    """Split text into words, handling camelCase boundaries."""
    return _WORD_PATTERN.findall(text)


def _capitalize_and_join(words: list[str]) -> str:
    """Capitalize each word and join them together."""
    return "".join(word.capitalize() for word in words if word)


def snake_to_pascal_case(text: str) -> str:
    """Convert snake_case, camelCase, or space-separated text to PascalCase.

    Examples:
        "first_name" -> "FirstName"
        "FIRST_NAME" -> "FirstName"
        "actionTemplate" -> "ActionTemplate"
        "first 3 rows" -> "First3Rows"

    Args:
        text: The text to convert (snake_case, camelCase, UPPER_SNAKE_CASE, or space-separated)

    Returns:
        PascalCase string
    """
    if not text:
        return ""
    normalized = _normalize_separators(text)
    words = _split_into_words(normalized)
    return _capitalize_and_join(words)


def to_upper_camel_case(text: str, force_first_upper: bool = True) -> str:
    """Convert an identifier to UpperCamelCase, keeping the case of the rest.

    Unlike snake_to_pascal_case, existing capitals are preserved, so enum
    member names written as "inProgress" or "HTTPError" keep their shape.

    Examples:
        "medium" -> "Medium"
        "in_progress" -> "InProgress"
        "in-progress" -> "InProgress"
        "HTTPError" -> "HTTPError"
        "2nd" -> "_2nd"

    Args:
        text: The identifier to convert
        force_first_upper: Upper-case the first character regardless of its case

    Returns:
        The converted identifier
    """
    if not text:
        return ""

    segments = [segment for segment in _SEPARATOR_PATTERN.split(text) if segment]
    if not segments:
        return ""

    result = "".join(segment[0].upper() + segment[1:] for segment in segments)
    if not force_first_upper:
        result = segments[0][0] + result[1:]

    if result[0].isdigit():
        return "_" + result
    return result


def pascal_to_upper_snake_case(text: str) -> str:
    """Convert PascalCase or camelCase text to UPPER_SNAKE_CASE.

    Words are only split where a lowercase letter is followed by a capital, so
    digit runs and acronyms stay attached to their neighbours.

    Examples:
        "InProgress" -> "IN_PROGRESS"
        "Medium" -> "MEDIUM"
        "V2" -> "V2"
        "HTTPError" -> "HTTPERROR"
        "First3Rows" -> "FIRST3ROWS"
        "_2nd" -> "_2ND"
    """
    return _LOWER_UPPER_BOUNDARY.sub("_", text).upper()
