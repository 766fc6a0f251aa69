"""Command line interface for snippetkit."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Sequence

from .config import GenerationOptions, default_config_root
from .errors import SnippetError
from .prompts import OptionCollector, PromptCollector, StaticCollector
from .scaffold import SnippetGenerator, init_config_root


LOGGER = logging.getLogger(__name__)


class _ScriptParser(argparse.ArgumentParser):
    def error(self, message: str) -> None:  # type: ignore[override]
        self.print_usage(sys.stderr)
        self.exit(2, f"{self.prog}: error: no script: {message}\n")


def build_parser() -> argparse.ArgumentParser:
    parser = _ScriptParser(prog="snippetkit", description="Generate files from placeholder snippets")
    scripts = parser.add_mutually_exclusive_group(required=True)
    scripts.add_argument("--generate", action="store_true", help="generate files from a snippet")
    scripts.add_argument("--init", action="store_true", help="create the snippet configuration root")

    parser.add_argument(
        "--root",
        type=Path,
        help="Snippet configuration root (default: $SNIPPETKIT_ROOT or ./.create-snippet)",
    )
    parser.add_argument("--snippet", default="", help="Snippet to generate from")
    parser.add_argument("--name", default="", help="Value substituted for the name placeholders")
    parser.add_argument("--path", default="", help="Directory the generated files are placed under")
    parser.add_argument(
        "--flat",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Place every generated file in a single directory",
    )
    parser.add_argument("--prefix", default="", help="Value substituted for the prefix placeholders")
    parser.add_argument("--suffix", default="", help="Value substituted for the suffix placeholders")
    parser.add_argument(
        "--no-input",
        action="store_true",
        help="Never prompt; options missing from the command line are treated as empty",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def _build_collector(args: argparse.Namespace) -> OptionCollector:
    preset = GenerationOptions(
        snippet_name=args.snippet,
        name=args.name,
        path=args.path,
        is_flat=bool(args.flat),
        prefix=args.prefix,
        suffix=args.suffix,
    )
    if args.no_input:
        return StaticCollector(preset)
    return PromptCollector(preset, flat_preset=args.flat is not None)


def _handle_generate(args: argparse.Namespace, root: Path) -> int:
    generator = SnippetGenerator(root, _build_collector(args))
    written = generator.generate()
    print(f"Generated {len(written)} file(s) from snippet '{generator.options.snippet_name}'")
    return 0


def _handle_init(root: Path) -> int:
    init_config_root(root)
    print(f"Snippet configuration created at {root}")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    root = args.root or default_config_root()

    try:
        if args.init:
            return _handle_init(root)
        return _handle_generate(args, root)
    except (SnippetError, OSError) as exc:
        LOGGER.debug("generation aborted", exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
