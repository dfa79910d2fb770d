import io
import json
import logging

import pytest

from tweetsplit.cli.main import escape_chunk, main
from tweetsplit.core.chunking import DEFAULT_MAX_LENGTH


def test_escape_chunk():
    assert escape_chunk('say "hi"\nit\'s a\\b\t.') == 'say \\"hi\\"\\nit\\\'s a\\\\b\\t.'


def test_prints_one_chunk_per_line(capsys):
    main(["-l", "10", "aaaaaaaaa bbbbbbbbb ccc"])

    out = capsys.readouterr().out
    assert out.splitlines() == ["aaaaaaaaa", "bbbbbbbbb", "ccc"]


def test_newlines_inside_a_chunk_are_escaped(capsys):
    main(["-l", "20", "one\ntwo"])

    assert capsys.readouterr().out.splitlines() == ["one\\ntwo"]


def test_reads_input_file(tmp_path, capsys):
    path = tmp_path / "in.txt"
    path.write_text("alpha beta gamma\n", encoding="utf-8")

    main(["-i", str(path), "-l", "10"])

    assert capsys.readouterr().out.splitlines() == ["alpha beta", "gamma"]


def test_reads_stdin_with_default_limit(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("short text from a pipe\n"))

    main([])

    assert capsys.readouterr().out.splitlines() == ["short text from a pipe"]


def test_writes_json_report(tmp_path, capsys):
    out_path = tmp_path / "reports" / "chunks.json"

    main(["-l", "5", "--out", str(out_path), "ab cd ef"])

    data = json.loads(out_path.read_text(encoding="utf-8"))
    assert data["source"] == "<string>"
    assert data["max_length"] == 5
    assert [c["text"] for c in data["chunks"]] == ["ab cd", "ef"]
    assert capsys.readouterr().out.splitlines() == ["ab cd", "ef"]


@pytest.mark.parametrize("argv", [["-l", "3", "abcd efgh"], ["-l", "0", "abc"]])
def test_limit_too_small_exits_2(argv, capsys):
    with pytest.raises(SystemExit) as exc_info:
        main(argv)

    assert exc_info.value.code == 2
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "max_length" in captured.err


def test_missing_input_file_exits_2(tmp_path, capsys):
    with pytest.raises(SystemExit) as exc_info:
        main(["-i", str(tmp_path / "missing.txt")])

    assert exc_info.value.code == 2
    assert "Could not read" in capsys.readouterr().err


def test_form_feed_and_vertical_tab_gaps_survive_printing(capsys):
    main(["-l", "20", "ab\x0ccd \x0bef"])

    assert capsys.readouterr().out == "ab\\fcd \\vef\n"


def test_logging_level_follows_each_call():
    main(["--verbose", "a b"])
    assert logging.getLogger().level == logging.DEBUG

    main(["a b"])
    assert logging.getLogger().level == logging.WARNING


def test_default_limit_is_shared_with_core(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(" ".join(["ab"] * 150)))

    main([])

    assert DEFAULT_MAX_LENGTH == 280
    assert [len(line) for line in capsys.readouterr().out.splitlines()] == [278, 170]
