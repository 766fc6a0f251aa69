"""Collection of generation options, interactive or preset."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from dataclasses import replace
from typing import Callable, Iterable, Sequence, TextIO

from .config import GenerationOptions
from .errors import PreconditionError

__all__ = ["OptionCollector", "PromptCollector", "StaticCollector"]


_YES = {"y", "yes", "true", "1"}
_NO = {"n", "no", "false", "0", ""}


class OptionCollector(ABC):
    """Source of :class:`GenerationOptions` answers.

    Options are gathered in two phases: the core fields first, then the
    optional fields reported as required by probing the chosen template.
    """

    @abstractmethod
    def collect_core(self, snippets: Sequence[str]) -> GenerationOptions:
        """Return options with snippet name, name, path and layout filled in."""

    @abstractmethod
    def collect_optional(self, options: GenerationOptions, fields: Iterable[str]) -> GenerationOptions:
        """Return ``options`` with each of ``fields`` (prefix, suffix) filled in."""


class StaticCollector(OptionCollector):
    """Answer every question from preset values."""

    def __init__(self, options: GenerationOptions) -> None:
        self._options = options

    def collect_core(self, snippets: Sequence[str]) -> GenerationOptions:
        return replace(self._options, prefix="", suffix="")

    def collect_optional(self, options: GenerationOptions, fields: Iterable[str]) -> GenerationOptions:
        return replace(options, **{name: getattr(self._options, name) for name in fields})


class PromptCollector(OptionCollector):
    """Ask for each option on a terminal.

    Values present in ``preset`` are used as given and their question is
    skipped.
    """

    def __init__(
        self,
        preset: GenerationOptions | None = None,
        *,
        flat_preset: bool = False,
        input_func: Callable[[str], str] | None = None,
        output: TextIO | None = None,
    ) -> None:
        self._preset = preset or GenerationOptions()
        self._flat_preset = flat_preset
        self._input = input_func or input
        self._output = output or sys.stdout

    def _ask(self, message: str) -> str:
        return self._input(f"{message}: ").strip()

    def _choose_snippet(self, snippets: Sequence[str]) -> str:
        if not snippets:
            raise PreconditionError("no snippets configured", field="snippet_name")
        for index, snippet in enumerate(snippets, start=1):
            print(f"  {index}) {snippet}", file=self._output)
        answer = self._ask(f"Pick a snippet [1-{len(snippets)}, default 1]")
        if not answer:
            return snippets[0]
        if answer.isdigit() and 1 <= int(answer) <= len(snippets):
            return snippets[int(answer) - 1]
        if answer in snippets:
            return answer
        raise PreconditionError(f"unknown snippet '{answer}'", field="snippet_name")

    def _confirm(self, message: str) -> bool:
        answer = self._ask(f"{message} [y/N]").lower()
        if answer in _YES:
            return True
        if answer in _NO:
            return False
        raise PreconditionError(f"expected yes or no, got '{answer}'", field="is_flat")

    def collect_core(self, snippets: Sequence[str]) -> GenerationOptions:
        preset = self._preset
        snippet_name = preset.snippet_name or self._choose_snippet(snippets)
        name = preset.name or self._ask("Pick a name")
        path = preset.path or self._ask("Pick a path")
        if self._flat_preset:
            is_flat = preset.is_flat
        else:
            is_flat = self._confirm("Create a flat file structure?")
        return GenerationOptions(snippet_name=snippet_name, name=name, path=path, is_flat=is_flat)

    def collect_optional(self, options: GenerationOptions, fields: Iterable[str]) -> GenerationOptions:
        answers = {}
        for name in fields:
            answers[name] = getattr(self._preset, name) or self._ask(f"Pick a {name}")
        return replace(options, **answers)
