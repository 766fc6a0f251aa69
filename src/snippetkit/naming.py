"""Case conversion utilities used for placeholder substitution."""

from __future__ import annotations

import re
from enum import Enum
from types import MappingProxyType
from typing import Callable, Mapping

__all__ = [
    "CONVERTERS",
    "CaseStyle",
    "convert",
    "split_words",
    "to_camel_case",
    "to_lower_kebab_case",
    "to_lower_snake_case",
    "to_pascal_case",
    "to_upper_kebab_case",
    "to_upper_snake_case",
]


_SEPARATORS = re.compile(r"[\s_\-]+")
# lower or digit followed by upper, and an acronym run followed by a capitalised word
_CASE_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")


class CaseStyle(str, Enum):
    """Naming conventions a template may reference."""

    CAMEL = "camelCase"
    PASCAL = "pascalCase"
    LOWER_KEBAB = "lowerKebabCase"
    UPPER_KEBAB = "upperKebabCase"
    LOWER_SNAKE = "lowerSnakeCase"
    UPPER_SNAKE = "upperSnakeCase"


def split_words(token: str) -> list[str]:
    """Split ``token`` into words.

    Words are separated by whitespace, hyphens, underscores and case
    boundaries, so ``"my widget"``, ``"my-widget"``, ``"MY_WIDGET"`` and
    ``"myWidget"`` all yield ``["my", "widget"]`` up to casing.
    """

    words: list[str] = []
    for chunk in _SEPARATORS.split(token):
        if not chunk:
            continue
        words.extend(part for part in _CASE_BOUNDARY.split(chunk) if part)
    return words


def _is_compound(token: str) -> bool:
    return len([chunk for chunk in _SEPARATORS.split(token) if chunk]) > 1


def _capitalize(word: str, keep_acronyms: bool) -> str:
    if keep_acronyms and word.isupper():
        return word
    return word.capitalize()


def to_camel_case(token: str) -> str:
    words = split_words(token)
    if not words:
        return ""
    # acronyms written without separators ("HTTPServer", "aBC") are kept verbatim
    keep_acronyms = not _is_compound(token)
    head, *tail = words
    return head.lower() + "".join(_capitalize(word, keep_acronyms) for word in tail)


def to_pascal_case(token: str) -> str:
    keep_acronyms = not _is_compound(token)
    return "".join(_capitalize(word, keep_acronyms) for word in split_words(token))


def to_lower_kebab_case(token: str) -> str:
    return "-".join(word.lower() for word in split_words(token))


def to_upper_kebab_case(token: str) -> str:
    return "-".join(word.upper() for word in split_words(token))


def to_lower_snake_case(token: str) -> str:
    return "_".join(word.lower() for word in split_words(token))


def to_upper_snake_case(token: str) -> str:
    return "_".join(word.upper() for word in split_words(token))


CONVERTERS: Mapping[CaseStyle, Callable[[str], str]] = MappingProxyType(
    {
        CaseStyle.CAMEL: to_camel_case,
        CaseStyle.PASCAL: to_pascal_case,
        CaseStyle.LOWER_KEBAB: to_lower_kebab_case,
        CaseStyle.UPPER_KEBAB: to_upper_kebab_case,
        CaseStyle.LOWER_SNAKE: to_lower_snake_case,
        CaseStyle.UPPER_SNAKE: to_upper_snake_case,
    }
)


def convert(token: str, style: CaseStyle | str) -> str:
    """Render ``token`` in ``style``.

    ``style`` may be a :class:`CaseStyle` or its string value, e.g.
    ``"lowerKebabCase"``.
    """

    return CONVERTERS[CaseStyle(style)](token)
