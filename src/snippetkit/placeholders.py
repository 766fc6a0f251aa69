"""Catalog of the placeholder tokens recognised inside templates."""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Mapping

from .naming import CaseStyle

__all__ = [
    "OPTIONAL_KINDS",
    "PlaceholderKind",
    "all_spellings",
    "spellings_for",
]


class PlaceholderKind(str, Enum):
    """Semantic role a placeholder plays in generated output."""

    PREFIX = "prefix"
    NAME = "name"
    SUFFIX = "suffix"


OPTIONAL_KINDS: tuple[PlaceholderKind, ...] = (PlaceholderKind.PREFIX, PlaceholderKind.SUFFIX)

_STYLE_MARKERS: Mapping[CaseStyle, str] = {
    CaseStyle.CAMEL: "CAMEL",
    CaseStyle.PASCAL: "PASCAL",
    CaseStyle.LOWER_KEBAB: "KEBAB",
    CaseStyle.UPPER_KEBAB: "UPPER_KEBAB",
    CaseStyle.LOWER_SNAKE: "SNAKE",
    CaseStyle.UPPER_SNAKE: "UPPER_SNAKE",
}


def _build_catalog() -> Mapping[PlaceholderKind, Mapping[CaseStyle, str]]:
    catalog = {}
    for kind in PlaceholderKind:
        catalog[kind] = MappingProxyType(
            {style: f"{{{{{kind.name}_{marker}}}}}" for style, marker in _STYLE_MARKERS.items()}
        )
    return MappingProxyType(catalog)


# e.g. {{NAME_PASCAL}}, {{PREFIX_KEBAB}}, {{SUFFIX_UPPER_SNAKE}}
_CATALOG = _build_catalog()


def spellings_for(kind: PlaceholderKind | str) -> Mapping[CaseStyle, str]:
    """Return the token spelling of ``kind`` for every case style."""

    return _CATALOG[PlaceholderKind(kind)]


def all_spellings() -> list[str]:
    """Return every token spelling across all kinds and styles."""

    return [spelling for kind in PlaceholderKind for spelling in _CATALOG[kind].values()]
