from pathlib import Path

import pytest

from propenum.codegen.core.templates import TemplateEngine, TemplateError


@pytest.fixture
def template_dir(tmp_path: Path) -> Path:
    templates = tmp_path / "templates"
    templates.mkdir()
    return templates


def test_file_templates_keep_whitespace_exact(template_dir: Path) -> None:
    (template_dir / "list.j2").write_text(
        "{% for item in items %}\n- {{ item }}\n{% endfor %}\n", encoding="utf-8"
    )

    engine = TemplateEngine(template_dir)

    assert engine.template_exists("list.j2")
    assert engine.render_template("list.j2", {"items": ["a", "b"]}) == "- a\n- b\n"


def test_output_is_not_html_escaped(template_dir: Path) -> None:
    (template_dir / "text.j2").write_text("{{ text }}", encoding="utf-8")

    engine = TemplateEngine(template_dir)

    assert engine.render_template("text.j2", {"text": '<a href="x">'}) == '<a href="x">'


def test_custom_filters_are_available(template_dir: Path) -> None:
    (template_dir / "shout.j2").write_text("{{ 'hi' | shout }}", encoding="utf-8")
    engine = TemplateEngine(template_dir)
    engine.add_filter("shout", lambda value: value.upper() + "!")

    assert engine.render_template("shout.j2", {}) == "HI!"


def test_missing_variables_raise_template_error(template_dir: Path) -> None:
    (template_dir / "attr.j2").write_text("{{ missing.attr }}", encoding="utf-8")

    with pytest.raises(TemplateError):
        TemplateEngine(template_dir).render_template("attr.j2", {})


def test_missing_template_raises_template_error(template_dir: Path) -> None:
    engine = TemplateEngine(template_dir)

    assert not engine.template_exists("nope")
    with pytest.raises(TemplateError):
        engine.render_template("nope", {})


def test_missing_template_directory_raises_template_error(tmp_path: Path) -> None:
    with pytest.raises(TemplateError):
        TemplateEngine(tmp_path / "absent")
