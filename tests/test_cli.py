from typer.testing import CliRunner

from oreminer.cli.play import app

runner = CliRunner()

GAME = "\n".join(
    [
        "3 1",
        "0 0",
        "? 0 2 0 ? 0",
        "1 2 0",
        "0 0 0 0 -1",
    ]
) + "\n"


def test_cli_plays_from_stdin(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    config = tmp_path / "oreminer.yaml"
    config.write_text("engine:\n  fleet_size: 1\n", encoding="utf-8")
    result = runner.invoke(app, [], input=GAME)
    assert result.exit_code == 0
    assert "DIG 1 0" in result.stdout.splitlines()


def test_cli_exits_on_protocol_error(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    result = runner.invoke(app, [], input="3 1\n0 0\n? 0\n")
    assert result.exit_code == 2


def test_cli_missing_config(tmp_path):
    result = runner.invoke(app, ["--config", str(tmp_path / "missing.yaml")], input="")
    assert result.exit_code == 1
