"""Configuration helpers shared by the snippet generator and CLI."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .errors import PreconditionError
from .naming import CaseStyle, split_words

__all__ = [
    "CONFIG_FILENAME",
    "DEFAULT_ROOT_NAME",
    "GenerationOptions",
    "ROOT_ENV_VAR",
    "SnippetConfig",
    "default_config_root",
    "list_snippets",
    "load_snippet_config",
]


DEFAULT_ROOT_NAME = ".create-snippet"
ROOT_ENV_VAR = "SNIPPETKIT_ROOT"
CONFIG_FILENAME = "snippet.json"


def default_config_root(environ: Mapping[str, str] | None = None) -> Path:
    """Return the configuration root, honouring :data:`ROOT_ENV_VAR`."""

    env = os.environ if environ is None else environ
    override = env.get(ROOT_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return Path.cwd() / DEFAULT_ROOT_NAME


class SnippetConfig(BaseModel):
    """Settings for a single snippet, read from ``snippet.json``."""

    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)

    snippet_name: str = Field(..., alias="snippetName", min_length=1, description="Name the snippet is selected by.")
    path_to_snippet: str = Field(
        "template",
        alias="pathToSnippet",
        min_length=1,
        description="Template directory, relative to the snippet directory unless absolute.",
    )
    directory_case: CaseStyle = Field(
        CaseStyle.PASCAL,
        alias="directoryCase",
        description="Case style of the directory created for the generated files.",
    )
    description: str = Field("", description="Short human readable summary.")

    def template_root(self, config_root: str | Path) -> Path:
        """Return the template directory for this snippet."""

        path = Path(self.path_to_snippet).expanduser()
        if path.is_absolute():
            return path
        return Path(config_root) / self.snippet_name / path


def list_snippets(config_root: str | Path) -> list[str]:
    """Return the snippet names available under ``config_root``."""

    root = Path(config_root)
    if not root.is_dir():
        raise PreconditionError(f"configuration root {root} does not exist; run 'snippetkit --init'")
    return sorted(child.name for child in root.iterdir() if child.is_dir())


def load_snippet_config(config_root: str | Path, snippet_name: str) -> SnippetConfig:
    """Load the configuration of ``snippet_name``.

    A snippet directory without ``snippet.json`` uses the defaults of
    :class:`SnippetConfig`.
    """

    snippet_dir = Path(config_root) / snippet_name
    if not snippet_name or not snippet_dir.is_dir():
        raise PreconditionError(f"unknown snippet '{snippet_name}'", field="snippet_name")

    config_path = snippet_dir / CONFIG_FILENAME
    if not config_path.is_file():
        return SnippetConfig(snippet_name=snippet_name)

    try:
        config = SnippetConfig.model_validate_json(config_path.read_text(encoding="utf-8"))
    except ValidationError as exc:
        raise PreconditionError(f"invalid snippet configuration {config_path}: {exc}") from exc

    if config.snippet_name != snippet_name:
        raise PreconditionError(
            f"{config_path} declares snippet '{config.snippet_name}' but lives in '{snippet_name}'"
        )
    return config


@dataclass(slots=True)
class GenerationOptions:
    """Answers describing a single generation run.

    Attributes
    ----------
    snippet_name:
        The snippet to generate from.
    name:
        The value substituted for the name placeholders.
    path:
        Directory under which the generated tree is created.
    is_flat:
        When ``True`` every file lands in one directory.
    prefix, suffix:
        Optional values, only collected when the template uses them.
    """

    snippet_name: str = ""
    name: str = ""
    path: str = ""
    is_flat: bool = False
    prefix: str = ""
    suffix: str = ""

    def validate(self) -> None:
        """Raise :class:`PreconditionError` if a mandatory field is empty or wordless."""

        for field_name in ("snippet_name", "name", "path"):
            if not getattr(self, field_name).strip():
                raise PreconditionError(
                    f"specify the required argument {field_name}=example", field=field_name
                )

        # substituted values must contain at least one word to render
        for field_name in ("name", "prefix", "suffix"):
            value = getattr(self, field_name)
            if value and not split_words(value):
                raise PreconditionError(
                    f"{field_name} '{value}' contains only separators", field=field_name
                )
