import json
from pathlib import Path

from tabparse.cli import EXIT_OK, EXIT_PARSE_ERROR, EXIT_USAGE, main

DATA = Path(__file__).parent / "data"


def test_lines_output(capsys):
    assert main([str(DATA / "test1.csv")]) == EXIT_OK
    out = capsys.readouterr().out.splitlines()
    assert out[:3] == ["line 1: 1", "line 1: 2", "line 1: 3"]
    assert out[-1] == "line 3: 9"
    assert len(out) == 9


def test_json_output_with_custom_dialect(capsys):
    rc = main([str(DATA / "test3.csv"), "--delimiter", "-", "--quote", "|", "--format", "json"])
    assert rc == EXIT_OK
    assert json.loads(capsys.readouterr().out) == [["1", "2", "3"], ["4", "5", "6"], ["7", "|8|", ",9"]]


def test_escaped_tab_delimiter(tmp_path, capsys):
    path = tmp_path / "data.tsv"
    path.write_bytes(b"a\tb\n1\t2\n")
    assert main([str(path), "--delimiter", "\\t", "--format", "json"]) == EXIT_OK
    assert json.loads(capsys.readouterr().out) == [["a", "b"], ["1", "2"]]


def test_parse_error_exit_code(tmp_path, capsys):
    path = tmp_path / "bad.csv"
    path.write_bytes(b'"ab"c,d\n')
    assert main([str(path)]) == EXIT_PARSE_ERROR
    assert "after closing quote" in capsys.readouterr().err


def test_invalid_dialect_exit_code(capsys):
    assert main([str(DATA / "test1.csv"), "--delimiter", "|", "--quote", "|"]) == EXIT_USAGE
    assert "invalid dialect" in capsys.readouterr().err


def test_missing_file_exit_code(tmp_path, capsys):
    assert main([str(tmp_path / "nope.csv")]) == EXIT_USAGE
    assert "nope.csv" in capsys.readouterr().err


def test_raw_encoding(tmp_path, capsys):
    path = tmp_path / "latin.csv"
    path.write_bytes(b"caf\xe9,x\n")
    assert main([str(path), "--encoding", "raw", "--format", "json"]) == EXIT_OK
    assert json.loads(capsys.readouterr().out) == [["café", "x"]]
