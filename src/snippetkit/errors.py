"""Exception types raised while generating snippets."""

from __future__ import annotations

from pathlib import Path

__all__ = [
    "ConflictError",
    "PreconditionError",
    "SnippetError",
    "TemplateEncodingError",
]


class SnippetError(RuntimeError):
    """Base class for every failure reported by snippetkit."""


class PreconditionError(SnippetError):
    """Raised when generation cannot start (missing root, option or snippet)."""

    def __init__(self, message: str, *, field: str | None = None) -> None:
        super().__init__(message)
        self.field = field


class ConflictError(SnippetError, FileExistsError):
    """Raised when a destination file already exists."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        super().__init__(f"{self.path} already exists")

    def __str__(self) -> str:
        return f"{self.path} already exists"


class TemplateEncodingError(SnippetError):
    """Raised when a template file is not valid UTF-8 text."""

    def __init__(self, path: str | Path, reason: str) -> None:
        self.path = Path(path)
        super().__init__(f"cannot decode template file {self.path}: {reason}")
