from __future__ import annotations

import json
from pathlib import Path

import pytest

from snippetkit.config import GenerationOptions
from snippetkit.errors import ConflictError, PreconditionError, TemplateEncodingError
from snippetkit.prompts import StaticCollector
from snippetkit.scaffold import GenerationState, SnippetGenerator, init_config_root


def make_generator(config_root: Path, **overrides) -> SnippetGenerator:
    values = {"snippet_name": "widget", "name": "my widget", "path": str(config_root.parent / "out")}
    values.update(overrides)
    return SnippetGenerator(config_root, StaticCollector(GenerationOptions(**values)))


def test_generates_nested_file(config_root: Path):
    generator = make_generator(config_root)
    written = generator.generate()
    expected = config_root.parent / "out" / "MyWidget" / "index.txt"
    assert written == [expected]
    assert expected.read_text(encoding="utf-8") == "Hello MyWidget"
    assert generator.state is GenerationState.DONE


def test_flat_and_nested_differ_only_in_directory(config_root: Path):
    template = config_root / "widget" / "template"
    (template / "{{NAME_KEBAB}}").mkdir()
    (template / "{{NAME_KEBAB}}" / "{{NAME_SNAKE}}.py").write_text("x = '{{NAME_CAMEL}}'", encoding="utf-8")

    nested = make_generator(config_root, path=str(config_root.parent / "nested")).generate()
    flat = make_generator(config_root, path=str(config_root.parent / "flat"), is_flat=True).generate()

    nested_root = config_root.parent / "nested" / "MyWidget"
    flat_root = config_root.parent / "flat" / "MyWidget"
    assert sorted(nested) == sorted([nested_root / "index.txt", nested_root / "my-widget" / "my_widget.py"])
    assert sorted(flat) == sorted([flat_root / "index.txt", flat_root / "my_widget.py"])
    for nested_file, flat_file in zip(sorted(nested), sorted(flat), strict=True):
        assert nested_file.read_bytes() == flat_file.read_bytes()


def test_second_run_conflicts_without_overwriting(config_root: Path):
    output = config_root.parent / "out" / "MyWidget" / "index.txt"
    make_generator(config_root).generate()
    output.write_text("edited", encoding="utf-8")

    generator = make_generator(config_root)
    with pytest.raises(ConflictError) as excinfo:
        generator.generate()
    assert excinfo.value.path == output
    assert isinstance(excinfo.value, FileExistsError)
    assert output.read_text(encoding="utf-8") == "edited"
    assert generator.state is GenerationState.FAILED


def test_flat_destination_conflicts_in_nested_mode(config_root: Path):
    flat_copy = config_root.parent / "out" / "MyWidget" / "deep.txt"
    (config_root / "widget" / "template" / "sub").mkdir()
    (config_root / "widget" / "template" / "sub" / "deep.txt").write_text("deep", encoding="utf-8")
    flat_copy.parent.mkdir(parents=True)
    flat_copy.write_text("existing", encoding="utf-8")

    with pytest.raises(ConflictError):
        make_generator(config_root).generate()


def test_suffix_not_collected_when_unused(config_root: Path):
    template = config_root / "widget" / "template"
    (template / "index.txt").write_text("{{PREFIX_KEBAB}}-{{NAME_KEBAB}}", encoding="utf-8")
    generator = make_generator(config_root, prefix="app", suffix="list item")
    written = generator.generate()
    assert written[0].read_text(encoding="utf-8") == "app-my-widget"
    assert generator.options.prefix == "app"
    assert generator.options.suffix == ""


def test_suffix_collected_when_present(config_root: Path):
    template = config_root / "widget" / "template"
    (template / "index.txt").write_text("{{NAME_PASCAL}}{{SUFFIX_PASCAL}}", encoding="utf-8")
    written = make_generator(config_root, suffix="view").generate()
    assert written[0].read_text(encoding="utf-8") == "MyWidgetView"


def test_missing_config_root(tmp_path: Path):
    generator = make_generator(tmp_path / "missing")
    with pytest.raises(PreconditionError, match="--init"):
        generator.generate()
    assert generator.state is GenerationState.FAILED


@pytest.mark.parametrize("field_name", ["snippet_name", "name", "path"])
def test_empty_mandatory_option(config_root: Path, field_name: str):
    with pytest.raises(PreconditionError) as excinfo:
        make_generator(config_root, **{field_name: ""}).generate()
    assert excinfo.value.field == field_name


def test_unknown_snippet(config_root: Path):
    with pytest.raises(PreconditionError):
        make_generator(config_root, snippet_name="missing").generate()


def test_missing_template_directory(config_root: Path):
    (config_root / "widget" / "snippet.json").write_text(
        json.dumps({"snippetName": "widget", "pathToSnippet": "nowhere"}), encoding="utf-8"
    )
    with pytest.raises(PreconditionError):
        make_generator(config_root).generate()


def test_binary_template_file_aborts(config_root: Path):
    (config_root / "widget" / "template" / "logo.png").write_bytes(b"\x89PNG\xff")
    with pytest.raises(TemplateEncodingError):
        make_generator(config_root).generate()


def test_directory_case_from_config(config_root: Path):
    (config_root / "widget" / "snippet.json").write_text(
        json.dumps({"snippetName": "widget", "directoryCase": "lowerSnakeCase"}), encoding="utf-8"
    )
    written = make_generator(config_root).generate()
    assert written == [config_root.parent / "out" / "my_widget" / "index.txt"]


def test_init_config_root_creates_usable_example(tmp_path: Path):
    root = init_config_root(tmp_path / ".create-snippet")
    generator = SnippetGenerator(
        root,
        StaticCollector(GenerationOptions(snippet_name="example", name="user card", path=str(tmp_path / "out"))),
    )
    written = generator.generate()
    base = tmp_path / "out" / "UserCard"
    assert sorted(written) == sorted([base / "user-card.md", base / "src" / "user_card.py"])
    assert "class UserCard:" in (base / "src" / "user_card.py").read_text(encoding="utf-8")


def test_init_config_root_refuses_existing_root(config_root: Path):
    with pytest.raises(ConflictError):
        init_config_root(config_root)


def test_wordless_name_is_rejected(config_root: Path):
    generator = make_generator(config_root, name="---")
    with pytest.raises(PreconditionError) as excinfo:
        generator.generate()
    assert excinfo.value.field == "name"
    assert not (config_root.parent / "out").exists()


@pytest.mark.parametrize("name", ["../escaped", "a/b"])
def test_name_cannot_leave_output_path(config_root: Path, name: str):
    generator = make_generator(config_root, name=name)
    with pytest.raises(PreconditionError):
        generator.generate()
    assert generator.state is GenerationState.FAILED
    assert not (config_root.parent / "escaped").exists()
    assert not (config_root.parent / "out").exists()
