"""Unit tests for the command-line query loop."""

from __future__ import annotations

import io
import json
import logging

import pytest

from term_autocomplete import cli
from term_autocomplete.cli import _collect_overrides, build_argument_parser, main, run_queries
from term_autocomplete.search.term_store import TermStore
from term_autocomplete.service import AutocompleteService


pytestmark = pytest.mark.unit


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def dictionary(write_dictionary):
    return write_dictionary("4\n3 ant\n1 ape\n5 apex\n2 bee\n")


def _json_lines(text: str) -> list[dict]:
    return [json.loads(line) for line in text.splitlines() if line.startswith("{")]


def test_build_argument_parser_defaults() -> None:
    args = build_argument_parser().parse_args([])
    assert args.dictionary is None
    assert args.queries is None
    assert args.limit is None
    assert args.metrics is False


def test_collect_overrides(tmp_path) -> None:
    args = build_argument_parser().parse_args(
        [str(tmp_path / "d.txt"), "-k", "3", "--log-level", "debug", "--plain-logs"]
    )
    assert _collect_overrides(args) == {
        "dictionary_path": str(tmp_path / "d.txt"),
        "result_limit": 3,
        "log_level": "debug",
        "log_json": False,
    }


def test_collect_overrides_empty() -> None:
    assert _collect_overrides(build_argument_parser().parse_args([])) == {}


def test_run_queries_writes_json_lines() -> None:
    service = AutocompleteService(TermStore.build([("ant", 3.0), ("ape", 1.0), ("apex", 5.0)]))
    out = io.StringIO()

    answered = run_queries(service, ["ap", "zz"], out)

    assert answered == 2
    first, second = _json_lines(out.getvalue())
    assert first["suggestions"] == [{"text": "apex", "weight": 5.0}, {"text": "ape", "weight": 1.0}]
    assert second == {"prefix": "zz", "total_matches": 0, "suggestions": []}


def test_main_with_queries(dictionary, capsys) -> None:
    exit_code = main([str(dictionary), "-q", "ap", "-q", "b"])

    assert exit_code == 0
    results = _json_lines(capsys.readouterr().out)
    assert [r["prefix"] for r in results] == ["ap", "b"]
    assert [s["text"] for s in results[0]["suggestions"]] == ["apex", "ape"]
    assert results[1]["suggestions"] == [{"text": "bee", "weight": 2.0}]


def test_main_reads_prefixes_from_stdin(dictionary, capsys, monkeypatch) -> None:
    monkeypatch.setattr(cli.sys, "stdin", io.StringIO("a\nap\r\n\n"))

    exit_code = main([str(dictionary), "-k", "1"])

    assert exit_code == 0
    results = _json_lines(capsys.readouterr().out)
    assert [r["prefix"] for r in results] == ["a", "ap", ""]
    assert results[0]["total_matches"] == 3
    assert results[0]["suggestions"] == [{"text": "apex", "weight": 5.0}]
    assert results[2]["total_matches"] == 4


def test_main_uses_dictionary_from_env(dictionary, capsys, monkeypatch) -> None:
    monkeypatch.setenv("DICTIONARY_PATH", str(dictionary))

    assert main(["-q", "an"]) == 0
    assert _json_lines(capsys.readouterr().out)[0]["suggestions"] == [{"text": "ant", "weight": 3.0}]


def test_main_without_dictionary(capsys) -> None:
    assert main(["--plain-logs", "-q", "a"]) == 1
    assert "No dictionary configured" in capsys.readouterr().err


def test_main_missing_dictionary(tmp_path, capsys) -> None:
    assert main([str(tmp_path / "missing.txt"), "--plain-logs", "-q", "a"]) == 1
    assert "Dictionary not found" in capsys.readouterr().err


def test_main_malformed_dictionary(write_dictionary, capsys) -> None:
    path = write_dictionary("3\n1 only\n")
    assert main([str(path), "-q", "a"]) == 1

    err_lines = _json_lines(capsys.readouterr().err)
    assert err_lines[-1]["level"] == "ERROR"
    assert "declared 3 entries but found 1" in err_lines[-1]["message"]


def test_main_invalid_log_level(dictionary, capsys) -> None:
    assert main([str(dictionary), "--log-level", "loud", "--plain-logs", "-q", "a"]) == 1
    assert "Invalid configuration" in capsys.readouterr().err


def test_main_negative_limit_is_usage_error(dictionary) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main([str(dictionary), "-k", "-1"])
    assert excinfo.value.code == 2


def test_main_prints_metrics(dictionary, capsys) -> None:
    assert main([str(dictionary), "-q", "ap", "--metrics"]) == 0
    out = capsys.readouterr().out
    assert "autocomplete_queries_total" in out
    assert "autocomplete_dictionary_terms 4.0" in out


def test_main_replaces_undecodable_prefix(dictionary, capsys) -> None:
    assert main([str(dictionary), "-q", "a\udcff"]) == 0
    captured = capsys.readouterr()
    (line,) = _json_lines(captured.out)
    assert line["prefix"].startswith("a")
    assert "\ufffd" in line["prefix"]
    assert line["total_matches"] == 0
    assert line["suggestions"] == []
    assert "undecodable bytes replaced" in captured.err


def test_main_writes_infinite_weights_as_strings(write_dictionary, capsys) -> None:
    path = write_dictionary("3\ninf ant\n-inf ape\n2 apex\n")
    assert main([str(path), "-q", "a"]) == 0
    (line,) = _json_lines(capsys.readouterr().out)
    assert line["suggestions"] == [
        {"text": "ant", "weight": "Infinity"},
        {"text": "apex", "weight": 2.0},
        {"text": "ape", "weight": "-Infinity"},
    ]
