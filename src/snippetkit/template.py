"""Placeholder probing and substitution for snippet templates."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping

from .errors import TemplateEncodingError
from .naming import convert
from .placeholders import PlaceholderKind, spellings_for

__all__ = [
    "ProbeResult",
    "TemplateRenderer",
    "iter_template_files",
    "probe_template",
    "read_template",
]


LOGGER = logging.getLogger(__name__)


def iter_template_files(root: str | Path) -> list[Path]:
    """Return every regular file below ``root`` in a stable order."""

    root = Path(root)
    if not root.is_dir():
        raise FileNotFoundError(root)
    return sorted(path for path in root.rglob("*") if path.is_file())


def read_template(path: str | Path) -> str:
    """Read ``path`` as UTF-8 text without translating newlines."""

    path = Path(path)
    data = path.read_bytes()
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise TemplateEncodingError(path, str(exc)) from exc


@dataclass(frozen=True, slots=True)
class ProbeResult:
    """Which optional placeholder kinds occur in a template."""

    has_prefix: bool = False
    has_suffix: bool = False

    def required_fields(self) -> tuple[str, ...]:
        """Return the option fields that must be collected for this template."""

        fields: list[str] = []
        if self.has_prefix:
            fields.append(PlaceholderKind.PREFIX.value)
        if self.has_suffix:
            fields.append(PlaceholderKind.SUFFIX.value)
        return tuple(fields)


def _contains_any(text: str, kind: PlaceholderKind) -> bool:
    return any(spelling in text for spelling in spellings_for(kind).values())


def probe_template(root: str | Path) -> ProbeResult:
    """Report whether prefix and suffix placeholders appear under ``root``.

    The name placeholder is assumed to be present and is never probed.
    """

    has_prefix = False
    has_suffix = False
    for path in iter_template_files(root):
        text = read_template(path)
        has_prefix = has_prefix or _contains_any(text, PlaceholderKind.PREFIX)
        has_suffix = has_suffix or _contains_any(text, PlaceholderKind.SUFFIX)
        if has_prefix and has_suffix:
            break

    result = ProbeResult(has_prefix=has_prefix, has_suffix=has_suffix)
    LOGGER.debug("probed %s: %s", root, result)
    return result


@dataclass(slots=True)
class TemplateRenderer:
    """Replace placeholder tokens with case-converted values.

    The name placeholder is always substituted. Prefix and suffix tokens are
    only substituted when their value is non-empty; otherwise they are left in
    the output untouched.
    """

    name: str
    prefix: str = ""
    suffix: str = ""
    table: dict[str, str] = field(init=False, repr=False)
    _pattern: re.Pattern[str] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("name must not be empty")

        values: Mapping[PlaceholderKind, str] = {
            PlaceholderKind.PREFIX: self.prefix,
            PlaceholderKind.NAME: self.name,
            PlaceholderKind.SUFFIX: self.suffix,
        }
        self.table = {}
        for kind, value in values.items():
            if not value:
                continue
            for style, spelling in spellings_for(kind).items():
                self.table[spelling] = convert(value, style)

        alternatives = sorted(self.table, key=len, reverse=True)
        self._pattern = re.compile("|".join(re.escape(spelling) for spelling in alternatives))

    def render_string(self, content: str) -> str:
        """Substitute every placeholder in ``content`` in a single pass."""

        return self._pattern.sub(lambda match: self.table[match.group(0)], content)

    def render_file(self, template_path: str | Path) -> str:
        """Read ``template_path`` and return its rendered content."""

        return self.render_string(read_template(template_path))
