"""Unit tests for CLI command behavior."""

from __future__ import annotations

import pytest
from typer.testing import CliRunner

from leveldbutil.cli import cli as cli_module
from leveldbutil.errors import DecoderPluginError
from leveldbutil.plugins.builtins import HexDumpDecoder

runner = CliRunner()


@pytest.fixture
def captured_dispatch(monkeypatch: pytest.MonkeyPatch) -> dict[str, object]:
    """Replace the dispatcher and record what the CLI forwards to it."""
    called: dict[str, object] = {}

    def fake_dispatch(args, *, env, decoder, console=None, on_error=None) -> int:
        called.update(args=list(args), env=env, decoder=decoder, on_error=on_error)
        return int(called.get("code", 0))

    monkeypatch.setattr(cli_module, "dispatch", fake_dispatch)
    return called


def test_help_shows_syntax() -> None:
    """Top-level help describes the dump syntax."""
    result = runner.invoke(cli_module.app, ["--help"])
    assert result.exit_code == 0
    assert "Dump LevelDB" in result.output
    assert "--decoder" in result.output


def test_no_arguments_prints_usage_and_fails() -> None:
    """Running without arguments prints usage and exits 1."""
    result = runner.invoke(cli_module.app, [])
    assert result.exit_code == 1
    assert "Usage: leveldbutil command..." in result.output


def test_unknown_command_prints_usage(tmp_path) -> None:
    """A first token other than --dump prints usage regardless of the rest."""
    log_file = tmp_path / "000003.log"
    log_file.write_bytes(b"x")
    result = runner.invoke(cli_module.app, ["--list", str(log_file)])
    assert result.exit_code == 1
    assert "--dump files... --path filepath" in result.output


def test_dump_tokens_are_forwarded_in_order(captured_dispatch: dict[str, object]) -> None:
    """--dump and --path reach the dispatcher untouched and in order."""
    result = runner.invoke(
        cli_module.app, ["--dump", "db/A.log", "B.log", "--path", "out/"]
    )
    assert result.exit_code == 0, result.output
    assert captured_dispatch["args"] == ["--dump", "db/A.log", "B.log", "--path", "out/"]
    assert isinstance(captured_dispatch["decoder"], HexDumpDecoder)


def test_dispatch_exit_code_is_propagated(captured_dispatch: dict[str, object]) -> None:
    """A failing dispatch becomes a failing process exit code."""
    captured_dispatch["code"] = 1
    result = runner.invoke(cli_module.app, ["--dump", "A.log"])
    assert result.exit_code == 1


def test_options_are_not_forwarded(captured_dispatch: dict[str, object]) -> None:
    """Known CLI options are consumed before dispatch."""
    result = runner.invoke(
        cli_module.app,
        ["--log-level", "debug", "--decoder", "hexdump", "--dump", "A.log"],
    )
    assert result.exit_code == 0, result.output
    assert captured_dispatch["args"] == ["--dump", "A.log"]


def test_unknown_decoder_fails_cleanly(captured_dispatch: dict[str, object]) -> None:
    """An unknown decoder name is reported without dispatching."""
    result = runner.invoke(cli_module.app, ["--decoder", "nope", "--dump", "A.log"])
    assert result.exit_code == 1
    assert "DecoderPluginError" in result.output
    assert "Unknown decoder 'nope'" in result.output
    assert "args" not in captured_dispatch


def test_decoder_from_environment_variable(
    captured_dispatch: dict[str, object], monkeypatch: pytest.MonkeyPatch
) -> None:
    """LEVELDBUTIL_DECODER selects the decoder."""
    monkeypatch.setenv("LEVELDBUTIL_DECODER", "missing-from-env")
    result = runner.invoke(cli_module.app, ["--dump", "A.log"])
    assert result.exit_code == 1
    assert "missing-from-env" in result.output


def test_decoder_module_is_loaded(
    captured_dispatch: dict[str, object], tmp_path
) -> None:
    """--decoder-module registers extra decoders that --decoder can select."""
    module_file = tmp_path / "extra_decoders.py"
    module_file.write_text(
        "class D:\n"
        "    name = 'extra'\n"
        "    def decode(self, env, input_path, sink):\n"
        "        return None\n"
        "DECODER = D()\n",
        encoding="utf-8",
    )
    result = runner.invoke(
        cli_module.app,
        ["--decoder-module", str(module_file), "--decoder", "extra", "--dump", "A.log"],
    )
    assert result.exit_code == 0, result.output
    assert captured_dispatch["decoder"].name == "extra"


def test_invalid_log_level_is_rejected() -> None:
    """Unknown logging levels are a parameter error."""
    result = runner.invoke(cli_module.app, ["--log-level", "chatty", "--dump", "A.log"])
    assert result.exit_code != 0
    assert "Unknown log level" in result.output


def test_unexpected_error_prints_type_and_traceback_in_debug(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    """Unexpected crashes show a clean message; --debug adds the traceback."""

    def boom(*_args: object, **_kwargs: object) -> int:
        raise RuntimeError("boom")

    monkeypatch.setattr(cli_module, "dispatch", boom)

    plain = runner.invoke(cli_module.app, ["--dump", "A.log"])
    assert plain.exit_code == 1
    assert "RuntimeError: boom" in plain.output
    assert "Traceback" not in plain.output

    debug = runner.invoke(cli_module.app, ["--debug", "--dump", "A.log"])
    assert debug.exit_code == 1
    assert "Traceback" in debug.output


def test_print_error_uses_custom_exit_code(capsys: pytest.CaptureFixture[str]) -> None:
    """Return the error's exit code when it is positive."""
    error = DecoderPluginError("bad module")
    error.exit_code = 3
    assert cli_module._print_error(error, debug=False) == 3
    assert "DecoderPluginError: bad module" in capsys.readouterr().err
