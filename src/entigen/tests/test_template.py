import logging

import pytest

from entigen.common.template import Templates, get_jinja_env


@pytest.fixture
def templates(tmp_path):
    template_dir = tmp_path / "templates" / "sample"
    template_dir.mkdir(parents=True)
    (template_dir / "class.tpl").write_text(
        "public class {{Name}} {\n"
        "    {{Members}}\n"
        "    // {{Missing}}\n"
        "}\n"
    )
    (template_dir / "ignored.txt").write_text("not a template")
    (template_dir / "greeting.j2").write_text("Hello {{ name | uppercase_first }}{{ suffix | pool_prefix }}\n")
    return tmp_path


def test_list_templates(templates):
    assert Templates(templates, "sample").list() == ["class"]


def test_render_inline_and_standalone(templates, caplog):
    with caplog.at_level(logging.WARNING):
        lines = Templates(templates, "sample").render("class", {"Name": "Foo", "Members": ["int a;", "", "int b;"]})

    assert lines == ["public class Foo {", "    int a;", "    int b;", "}"]
    assert "Missing" in caplog.text


def test_render_standalone_string_is_split(templates):
    lines = Templates(templates, "sample").render("class", {"Name": "Foo", "Members": "int a;\nint b;", "Missing": ""})
    assert lines[1:3] == ["    int a;", "    int b;"]
    assert lines[3] == "    // "


def test_unknown_template(templates):
    with pytest.raises(RuntimeError):
        Templates(templates, "sample").render("nothing", {})


def test_jinja_env_filters(templates):
    env = get_jinja_env(templates, "sample")
    assert env.get_template("greeting.j2").render(name="world", suffix="Enemy") == "Hello WorldEnemy\n"
    assert env.get_template("greeting.j2").render(name="world", suffix="Pool") == "Hello World\n"


def test_unknown_template_lists_available(templates):
    with pytest.raises(RuntimeError) as exc_info:
        Templates(templates, "sample").render("nothing", {})
    assert "available templates: class" in str(exc_info.value)
