"""Tests for the command-line interface."""

from typer.testing import CliRunner

from farmstand.cli import app

runner = CliRunner()


def test_categories_command():
    result = runner.invoke(app, ["categories"])

    assert result.exit_code == 0
    for category in ("fruit", "vegetable", "dairy"):
        assert category in result.output


def test_init_db_command():
    result = runner.invoke(app, ["init-db"])

    assert result.exit_code == 0
    assert "Tables created" in result.output


def test_serve_command_starts_uvicorn(mocker):
    run = mocker.patch("farmstand.cli.uvicorn.run")

    result = runner.invoke(app, ["serve", "--port", "3001"])

    assert result.exit_code == 0
    assert "Listening on port 3001!" in result.output
    run.assert_called_once()
    assert run.call_args.args[0] == "farmstand.main:app"
    assert run.call_args.kwargs["port"] == 3001
