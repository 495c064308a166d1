from typer.testing import CliRunner

from header_dump import __version__
from header_dump.cli import app, main

runner = CliRunner()


def test_no_arguments_prints_one_line_with_values():
    result = runner.invoke(app, [])

    assert result.exit_code == 0
    lines = result.stdout.splitlines()
    assert len(lines) == 1
    assert "foo" in lines[0]
    assert "-2593" in lines[0]
    assert "29384" in lines[0]
    assert result.stdout.endswith("\n")


def test_output_is_deterministic():
    first = runner.invoke(app, [])
    second = runner.invoke(app, [])
    assert first.stdout_bytes == second.stdout_bytes


def test_format_option_selects_rendering():
    result = runner.invoke(app, ["--format", "go"])
    assert result.exit_code == 0
    assert result.stdout == '&main.header{value1:"foo", value2:-2593, value3:0x72c8}\n'


def test_unknown_format_is_usage_error():
    result = runner.invoke(app, ["--format", "xml"])
    assert result.exit_code == 2


def test_version_flag():
    result = runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert result.stdout.strip() == f"v{__version__}"


def test_main_writes_only_record_to_stdout(capsys):
    main(["--verbose", "-f", "json"])

    captured = capsys.readouterr()
    assert captured.out == '{"value1": "foo", "value2": -2593, "value3": 29384}\n'
    assert captured.err == "Rendering Header as json\n"


def test_main_without_arguments(capsys):
    assert not main([])
    assert capsys.readouterr().out == "Header(value1='foo', value2=-2593, value3=29384)\n"
