"""Generate files and directories from placeholder snippets.

A snippet is a directory tree whose file contents and names contain tokens
such as ``{{NAME_PASCAL}}`` or ``{{PREFIX_KEBAB}}``. The package converts a
user supplied name (and optional prefix and suffix) into six case styles,
substitutes every token in one pass, and writes the result either nested like
the template or flattened into one directory.
"""

from __future__ import annotations

from .config import GenerationOptions, SnippetConfig, list_snippets, load_snippet_config
from .errors import ConflictError, PreconditionError, SnippetError, TemplateEncodingError
from .naming import CaseStyle, convert, split_words
from .paths import ResolvedPaths, resolve_paths
from .placeholders import PlaceholderKind, all_spellings, spellings_for
from .prompts import OptionCollector, PromptCollector, StaticCollector
from .scaffold import GenerationState, SnippetGenerator, init_config_root
from .template import ProbeResult, TemplateRenderer, iter_template_files, probe_template

__all__ = [
    "CaseStyle",
    "ConflictError",
    "GenerationOptions",
    "GenerationState",
    "OptionCollector",
    "PlaceholderKind",
    "PreconditionError",
    "ProbeResult",
    "PromptCollector",
    "ResolvedPaths",
    "SnippetConfig",
    "SnippetError",
    "SnippetGenerator",
    "StaticCollector",
    "TemplateEncodingError",
    "TemplateRenderer",
    "all_spellings",
    "convert",
    "init_config_root",
    "iter_template_files",
    "list_snippets",
    "load_snippet_config",
    "probe_template",
    "resolve_paths",
    "spellings_for",
    "split_words",
]

__version__ = "0.1.0"
