"""Destination path derivation for rendered template files."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path, PurePath

from .config import GenerationOptions
from .errors import PreconditionError
from .naming import CaseStyle, convert
from .template import TemplateRenderer

__all__ = ["ResolvedPaths", "resolve_paths"]


_SEPARATORS = tuple(sep for sep in (os.sep, os.altsep, "/") if sep)


def _check_segment(segment: str, relative: PurePath) -> str:
    if segment in {"", ".", ".."} or any(sep in segment for sep in _SEPARATORS):
        raise PreconditionError(f"rendered path segment '{segment}' of {relative} is not a valid name")
    return segment


@dataclass(frozen=True, slots=True)
class ResolvedPaths:
    """Nested and flat destinations of one template file."""

    target_dir: Path
    target_file: Path
    flat_target_dir: Path
    flat_target_file: Path

    def directory(self, is_flat: bool) -> Path:
        """Return the directory written to in the selected layout."""

        return self.flat_target_dir if is_flat else self.target_dir

    def file(self, is_flat: bool) -> Path:
        """Return the file written in the selected layout."""

        return self.flat_target_file if is_flat else self.target_file


def resolve_paths(
    relative: str | PurePath,
    options: GenerationOptions,
    renderer: TemplateRenderer,
    *,
    directory_style: CaseStyle = CaseStyle.PASCAL,
) -> ResolvedPaths:
    """Compute where the template file at ``relative`` is written.

    ``relative`` is the file path relative to the template root. Placeholders
    in directory and file names are substituted with ``renderer``. No
    filesystem access happens here.
    """

    relative = PurePath(relative)
    if relative.is_absolute():
        raise ValueError(f"template path must be relative: {relative}")
    if not relative.name:
        raise ValueError("template path must name a file")

    base = Path(options.path) / _check_segment(convert(options.name, directory_style), relative)
    file_name = _check_segment(renderer.render_string(relative.name), relative)
    segments = [_check_segment(renderer.render_string(part), relative) for part in relative.parent.parts]

    target_dir = base.joinpath(*segments)
    return ResolvedPaths(
        target_dir=target_dir,
        target_file=target_dir / file_name,
        flat_target_dir=base,
        flat_target_file=base / file_name,
    )
