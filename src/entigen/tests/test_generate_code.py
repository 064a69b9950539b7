import sys

import pytest

from entigen import generate_code as cli


def test_generate_code(schema_file, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    target = tmp_path / "Assets"

    assert cli.generate_code(str(schema_file), str(target)) == 0

    generated = sorted(p.name for p in (target / "Generated").iterdir())
    assert generated == [
        "BlueprintsGeneratedExtension.cs",
        "ComponentIds.cs",
        "EnemyAttribute.cs",
        "EnemyComponentIds.cs",
        "PlayerComponentGeneratedExtension.cs",
        "Pools.cs",
        "PositionComponentGeneratedExtension.cs",
    ]


def test_generate_code_uses_config(schema_file, tmp_path):
    config = tmp_path / "entigen.yaml"
    config.write_text(f"target_directory: {tmp_path / 'Configured'}\ncode_generators: [pools]\n")

    assert cli.generate_code(str(schema_file), config_file=str(config)) == 0
    assert [p.name for p in (tmp_path / "Configured" / "Generated").iterdir()] == ["Pools.cs"]


def test_generate_code_reports_errors(tmp_path, caplog, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert cli.generate_code(str(tmp_path / "missing.yaml"), str(tmp_path)) == 1
    assert "Error during code generation" in caplog.text
    assert not (tmp_path / "Generated").exists()


def test_main_usage(monkeypatch, capsys):
    monkeypatch.setattr(sys, "argv", ["entigen"])
    with pytest.raises(SystemExit) as exc_info:
        cli.main()
    assert exc_info.value.code == 1
    assert "Usage" in capsys.readouterr().out


def test_main(schema_file, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(sys, "argv", ["entigen", str(schema_file), str(tmp_path)])
    with pytest.raises(SystemExit) as exc_info:
        cli.main()
    assert exc_info.value.code == 0
    assert (tmp_path / "Generated" / "Pools.cs").exists()


def test_generate_code_rejects_malformed_components(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    schema = tmp_path / "schema.yaml"
    schema.write_text("_components:\n  PositionComponent:\n    fields: [x, y]\n")

    assert cli.generate_code(str(schema), str(tmp_path)) == 1
    assert not (tmp_path / "Generated").exists()


def test_generate_code_rejects_file_as_target(schema_file, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "Generated").write_text("not a directory")

    assert cli.generate_code(str(schema_file), str(tmp_path)) == 1
    assert (tmp_path / "Generated").read_text() == "not a directory"
