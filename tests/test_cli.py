"""Tests for the rawini command line."""

import json

import yaml
from typer.testing import CliRunner

from rawini import __version__
from rawini.cli.app import app
from rawini.cli.commands.init import DEFAULT_CONFIG_TOML

runner = CliRunner()

SAMPLE = """\
name=demo

[server]
host = example.org
port = 80\\
80
alias=a
alias=b

[empty]
"""


def test_version():
    result = runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_check_ok(ini_file):
    path = ini_file(SAMPLE)
    result = runner.invoke(app, ["check", str(path)])
    assert result.exit_code == 0
    assert "OK" in result.output


def test_check_reports_each_file(ini_file):
    good = ini_file(SAMPLE, "good.ini")
    bad = ini_file("a=1\n[broken\n", "bad.ini")
    result = runner.invoke(app, ["check", str(good), str(bad)])
    assert result.exit_code == 1
    assert "OK" in result.output
    assert "FAIL" in result.output
    assert "line 2: no section header end character found" in result.output


def test_show_json(ini_file):
    path = ini_file(SAMPLE)
    result = runner.invoke(app, ["show", str(path), "--format", "json"])
    assert result.exit_code == 0
    data = json.loads(result.output)
    assert list(data) == ["", "server", "empty"]
    assert data["server"] == {"host": ["example.org"], "port": ["8080"], "alias": ["a", "b"]}
    assert data[""] == {"name": ["demo"]}


def test_show_yaml_single_section(ini_file):
    path = ini_file(SAMPLE)
    result = runner.invoke(app, ["show", str(path), "-f", "yaml", "--section", "server"])
    assert result.exit_code == 0
    assert yaml.safe_load(result.output) == {
        "server": {"host": ["example.org"], "port": ["8080"], "alias": ["a", "b"]}
    }


def test_show_table(ini_file):
    path = ini_file(SAMPLE)
    result = runner.invoke(app, ["show", str(path)])
    assert result.exit_code == 0
    assert "[server]" in result.output
    assert "example.org" in result.output
    assert "(global)" in result.output


def test_show_uses_repo_config(ini_file, tmp_path):
    path = ini_file(SAMPLE)
    cfg = tmp_path / "work" / ".rawini" / "config.toml"
    cfg.parent.mkdir(parents=True)
    cfg.write_text('[output]\nformat = "json"\nshow_global = false\n', encoding="utf-8")

    result = runner.invoke(app, ["show", str(path)])
    assert result.exit_code == 0
    assert list(json.loads(result.output)) == ["server", "empty"]


def test_show_merges_files(ini_file):
    one = ini_file("[s]\nk=1\n", "one.ini")
    two = ini_file("k=2\n[t]\n", "two.ini")
    result = runner.invoke(app, ["show", str(one), str(two), "--format", "json"])
    assert result.exit_code == 0
    assert json.loads(result.output) == {"s": {"k": ["1", "2"]}, "t": {}}


def test_show_parse_error(ini_file):
    path = ini_file("[a]\n[a]\n")
    result = runner.invoke(app, ["show", str(path)])
    assert result.exit_code == 1
    assert "duplicate section name 'a'" in result.output


def test_show_missing_section(ini_file):
    path = ini_file(SAMPLE)
    result = runner.invoke(app, ["show", str(path), "--section", "nope"])
    assert result.exit_code == 2


def test_show_bad_format(ini_file):
    path = ini_file(SAMPLE)
    result = runner.invoke(app, ["show", str(path), "--format", "xml"])
    assert result.exit_code == 2


def test_get_values(ini_file):
    path = ini_file(SAMPLE)
    result = runner.invoke(app, ["get", str(path), "alias", "--section", "server"])
    assert result.exit_code == 0
    assert result.output.splitlines() == ["a", "b"]


def test_get_global_value(ini_file):
    path = ini_file(SAMPLE)
    result = runner.invoke(app, ["get", str(path), "name"])
    assert result.exit_code == 0
    assert result.output.strip() == "demo"


def test_get_number(ini_file):
    path = ini_file("n=1\nn=2\n")
    result = runner.invoke(app, ["get", str(path), "n", "--number"])
    assert result.exit_code == 0
    assert result.output.strip() == "1 2"


def test_get_missing(ini_file):
    path = ini_file(SAMPLE)
    assert runner.invoke(app, ["get", str(path), "nope"]).exit_code == 2
    assert runner.invoke(app, ["get", str(path), "host", "-s", "nope"]).exit_code == 2


def test_init_writes_config(tmp_path):
    result = runner.invoke(app, ["init", str(tmp_path)])
    assert result.exit_code == 0
    cfg = tmp_path / ".rawini" / "config.toml"
    assert cfg.read_text(encoding="utf-8") == DEFAULT_CONFIG_TOML

    cfg.write_text("# mine\n", encoding="utf-8")
    runner.invoke(app, ["init", str(tmp_path)])
    assert cfg.read_text(encoding="utf-8") == "# mine\n"

    runner.invoke(app, ["init", str(tmp_path), "--force"])
    assert cfg.read_text(encoding="utf-8") == DEFAULT_CONFIG_TOML


def test_check_reports_unreadable_file_and_continues(tmp_path, ini_file):
    bad = tmp_path / "bad.ini"
    bad.write_bytes(b"name=\xff\n")
    good = ini_file(SAMPLE, "good.ini")
    result = runner.invoke(app, ["check", str(bad), str(good)])
    assert result.exit_code == 1
    assert result.exception is None or isinstance(result.exception, SystemExit)
    assert "cannot read" in result.output
    assert "OK" in result.output


def test_check_open_continuation_at_end_of_file(ini_file):
    path = ini_file("a=\\\n")
    result = runner.invoke(app, ["check", str(path)])
    assert result.exit_code == 1
    assert "line 1: continuation at end of file" in result.output


def test_show_unreadable_file(tmp_path):
    bad = tmp_path / "bad.ini"
    bad.write_bytes(b"name=\xff\n")
    result = runner.invoke(app, ["show", str(bad)])
    assert result.exit_code == 1
    assert "cannot read" in result.output


def test_get_unreadable_file(tmp_path):
    bad = tmp_path / "bad.ini"
    bad.write_bytes(b"name=\xff\n")
    result = runner.invoke(app, ["get", str(bad), "name"])
    assert result.exit_code == 1
    assert "cannot read" in result.output


def test_get_missing_property_warns(ini_file):
    path = ini_file(SAMPLE)
    result = runner.invoke(app, ["get", str(path), "nope"])
    assert result.exit_code == 2
    assert "No property named 'nope'" in result.output
