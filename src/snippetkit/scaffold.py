"""Snippet generation: options, probing and writing the rendered tree."""

from __future__ import annotations

import json
import logging
from enum import Enum
from pathlib import Path

from .config import CONFIG_FILENAME, GenerationOptions, list_snippets, load_snippet_config
from .errors import ConflictError, PreconditionError
from .paths import resolve_paths
from .prompts import OptionCollector
from .template import TemplateRenderer, iter_template_files, probe_template

__all__ = ["GenerationState", "SnippetGenerator", "init_config_root"]


LOGGER = logging.getLogger(__name__)


EXAMPLE_SNIPPET = "example"

EXAMPLE_FILES: dict[str, str] = {
    "{{NAME_KEBAB}}.md": "# {{NAME_PASCAL}}\n\nGenerated from the {{NAME_SNAKE}} example snippet.\n",
    "src/{{NAME_SNAKE}}.py": (
        '"""{{NAME_PASCAL}} module."""\n\n'
        '{{NAME_UPPER_SNAKE}}_ID = "{{NAME_UPPER_KEBAB}}"\n\n\n'
        "class {{NAME_PASCAL}}:\n"
        "    def __init__(self) -> None:\n"
        "        self.{{NAME_SNAKE}} = None\n"
    ),
}


class GenerationState(str, Enum):
    """Phases of a generation run."""

    INIT = "init"
    COLLECTING_OPTIONS = "collecting_options"
    PROBING = "probing"
    GENERATING = "generating"
    DONE = "done"
    FAILED = "failed"


class SnippetGenerator:
    """Render a configured snippet into the directory chosen by the user."""

    def __init__(self, config_root: str | Path, collector: OptionCollector) -> None:
        self.config_root = Path(config_root)
        self.collector = collector
        self.state = GenerationState.INIT
        self.options: GenerationOptions | None = None

    def _enter(self, state: GenerationState) -> None:
        LOGGER.debug("generation state %s -> %s", self.state.value, state.value)
        self.state = state

    def generate(self) -> list[Path]:
        """Run a full generation and return the files written.

        Any failure aborts the run; files written before the failure are
        left in place.
        """

        try:
            return self._run()
        except Exception:
            self._enter(GenerationState.FAILED)
            raise

    def _run(self) -> list[Path]:
        if not self.config_root.is_dir():
            raise PreconditionError(
                f"configuration root {self.config_root} does not exist; run 'snippetkit --init'"
            )

        self._enter(GenerationState.COLLECTING_OPTIONS)
        options = self.collector.collect_core(list_snippets(self.config_root))
        options.validate()
        config = load_snippet_config(self.config_root, options.snippet_name)
        template_root = config.template_root(self.config_root)
        if not template_root.is_dir():
            raise PreconditionError(
                f"template directory {template_root} of snippet '{config.snippet_name}' does not exist"
            )

        self._enter(GenerationState.PROBING)
        required = probe_template(template_root).required_fields()
        if required:
            self._enter(GenerationState.COLLECTING_OPTIONS)
            options = self.collector.collect_optional(options, required)
        self.options = options

        self._enter(GenerationState.GENERATING)
        renderer = TemplateRenderer(name=options.name, prefix=options.prefix, suffix=options.suffix)
        written: list[Path] = []
        for source in iter_template_files(template_root):
            content = renderer.render_file(source)
            paths = resolve_paths(
                source.relative_to(template_root),
                options,
                renderer,
                directory_style=config.directory_case,
            )
            for destination in (paths.target_file, paths.flat_target_file):
                if destination.exists():
                    raise ConflictError(destination)

            paths.directory(options.is_flat).mkdir(parents=True, exist_ok=True)
            destination = paths.file(options.is_flat)
            destination.write_bytes(content.encode("utf-8"))
            LOGGER.info("created %s", destination)
            written.append(destination)

        self._enter(GenerationState.DONE)
        return written


def init_config_root(config_root: str | Path) -> Path:
    """Create ``config_root`` containing an example snippet."""

    root = Path(config_root)
    if root.exists():
        raise ConflictError(root)

    snippet_dir = root / EXAMPLE_SNIPPET
    template_dir = snippet_dir / "template"
    for relative_path, content in EXAMPLE_FILES.items():
        destination = template_dir / relative_path
        destination.parent.mkdir(parents=True, exist_ok=True)
        destination.write_text(content, encoding="utf-8")

    config = {
        "snippetName": EXAMPLE_SNIPPET,
        "pathToSnippet": "template",
        "directoryCase": "pascalCase",
        "description": "Example snippet created by 'snippetkit --init'.",
    }
    (snippet_dir / CONFIG_FILENAME).write_text(json.dumps(config, indent=2) + "\n", encoding="utf-8")
    LOGGER.info("initialised configuration root %s", root)
    return root
