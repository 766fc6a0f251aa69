from __future__ import annotations

from pathlib import Path

import pytest

from snippetkit.cli import build_parser, main


def test_requires_a_script():
    with pytest.raises(SystemExit) as excinfo:
        build_parser().parse_args([])
    assert excinfo.value.code == 2


def test_unknown_flag_is_no_script(capsys: pytest.CaptureFixture[str]):
    with pytest.raises(SystemExit) as excinfo:
        main(["--deploy"])
    assert excinfo.value.code == 2
    assert "no script" in capsys.readouterr().err


def test_scripts_are_exclusive():
    with pytest.raises(SystemExit):
        build_parser().parse_args(["--generate", "--init"])


def test_init_then_generate(tmp_path: Path, capsys: pytest.CaptureFixture[str]):
    root = tmp_path / "snippets"
    assert main(["--init", "--root", str(root)]) == 0
    assert (root / "example" / "snippet.json").is_file()

    exit_code = main(
        [
            "--generate",
            "--root",
            str(root),
            "--snippet",
            "example",
            "--name",
            "order line",
            "--path",
            str(tmp_path / "out"),
            "--flat",
            "--no-input",
        ]
    )
    assert exit_code == 0
    assert (tmp_path / "out" / "OrderLine" / "order_line.py").is_file()
    assert (tmp_path / "out" / "OrderLine" / "order-line.md").is_file()
    assert "Generated 2 file(s)" in capsys.readouterr().out


def test_init_twice_fails(tmp_path: Path, capsys: pytest.CaptureFixture[str]):
    root = tmp_path / "snippets"
    assert main(["--init", "--root", str(root)]) == 0
    assert main(["--init", "--root", str(root)]) == 1
    assert "already exists" in capsys.readouterr().err


def test_generate_without_root_reports_init(tmp_path: Path, capsys: pytest.CaptureFixture[str]):
    exit_code = main(["--generate", "--root", str(tmp_path / "missing"), "--no-input"])
    assert exit_code == 1
    assert "--init" in capsys.readouterr().err


def test_generate_uses_environment_root(
    config_root: Path, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
):
    monkeypatch.setenv("SNIPPETKIT_ROOT", str(config_root))
    exit_code = main(
        ["--generate", "--snippet", "widget", "--name", "demo", "--path", str(tmp_path / "out"), "--no-input"]
    )
    assert exit_code == 0
    assert (tmp_path / "out" / "Demo" / "index.txt").read_text(encoding="utf-8") == "Hello Demo"


def test_generate_prompts_for_missing_values(
    config_root: Path, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
):
    answers = iter(["", "demo", str(tmp_path / "out"), "n"])
    monkeypatch.setattr("builtins.input", lambda message: next(answers))
    assert main(["--generate", "--root", str(config_root)]) == 0
    assert (tmp_path / "out" / "Demo" / "index.txt").is_file()


def test_generate_conflict_exit_code(config_root: Path, tmp_path: Path):
    argv = [
        "--generate",
        "--root",
        str(config_root),
        "--snippet",
        "widget",
        "--name",
        "demo",
        "--path",
        str(tmp_path / "out"),
        "--no-input",
    ]
    assert main(argv) == 0
    assert main(argv) == 1
