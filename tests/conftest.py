from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


@pytest.fixture()
def config_root(tmp_path: Path) -> Path:
    """Configuration root holding a ``widget`` snippet with one file."""

    root = tmp_path / ".create-snippet"
    template = root / "widget" / "template"
    template.mkdir(parents=True)
    (template / "index.txt").write_text("Hello {{NAME_PASCAL}}", encoding="utf-8")
    return root
