"""Unit tests for navcheck.cli._handle_stage_result."""

from types import SimpleNamespace

import pytest
import typer

from navcheck.api.StageResult import StageResult
from navcheck.cli._handle_stage_result import _extract_display_format, _handle_stage_result


def _ctx(obj, parent=None):
    return SimpleNamespace(obj=obj, parent=parent)


def test_display_format_defaults_to_text():
    assert _extract_display_format(_ctx(None)) == "text"
    assert _extract_display_format(None) == "text"


def test_display_format_found_on_parent():
    root = _ctx({"display_format": "json"})
    assert _extract_display_format(_ctx(None, parent=root)) == "json"


def test_innermost_display_format_wins():
    root = _ctx({"display_format": "json"})
    assert _extract_display_format(_ctx({"display_format": "yaml"}, parent=root)) == "yaml"


def test_invalid_display_format_raises():
    with pytest.raises(ValueError, match="xml"):
        _extract_display_format(_ctx({"display_format": "xml"}))
    with pytest.raises(ValueError, match="xml"):
        _handle_stage_result(lambda: None, display_format="xml")


def _cmd_ok() -> StageResult:
    def do_work(result_obj):
        yield (1.0, "Complete")
        result_obj.result = "Done"
        result_obj.output = {"value": 1}
        result_obj.success = True

    return StageResult(announce="Working...", progress_callback=do_work)


def test_json_output_goes_to_stdout(capsys):
    with pytest.raises(typer.Exit) as exc_info:
        _handle_stage_result(_cmd_ok, display_format="json")()
    assert exc_info.value.exit_code == 0
    captured = capsys.readouterr()
    assert captured.out == '{\n  "value": 1\n}\n'
    assert "Done" in captured.err


def test_text_output_uses_result_printer(capsys):
    printed = []
    with pytest.raises(typer.Exit):
        _handle_stage_result(_cmd_ok, result_printer=printed.append, quiet=True)()
    assert printed == [{"value": 1}]
    assert capsys.readouterr().err == ""
