import logging
from pathlib import Path

import pytest

from graph import Edge, find_minimal_weight_path
from loader import (
    GraphFormatError,
    GraphLoadError,
    GraphNotFoundError,
    load_edges,
    parse_edges,
    parse_line,
)


def write_graph(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "graph.txt"
    path.write_text(text, encoding="utf-8")
    return path


def test_load_edges_strips_quotes_and_parses_weights(tmp_path):
    path = write_graph(tmp_path, '"A" 1 "B"\nB\t2.5   C\n"A" 5 C\n')

    edges = load_edges(path)

    assert edges == [Edge("A", 1.0, "B"), Edge("B", 2.5, "C"), Edge("A", 5.0, "C")]


def test_loaded_file_answers_query(tmp_path):
    path = write_graph(tmp_path, "A 1 B\nB 2 C\nA 5 C\n")

    result = find_minimal_weight_path(load_edges(str(path)), "A", "C")

    assert result.weight == 3.0
    assert result.path == ["A", "B", "C"]


def test_duplicates_and_self_loops_are_kept(tmp_path):
    path = write_graph(tmp_path, "A 1 B\nA 1 B\nA 0 A\n")

    assert load_edges(path) == [Edge("A", 1.0, "B"), Edge("A", 1.0, "B"), Edge("A", 0.0, "A")]


def test_extra_tokens_are_ignored():
    assert parse_line("A 2 B trailing words") == Edge("A", 2.0, "B")


def test_quotes_inside_tokens_are_removed():
    assert parse_line('"New"York" 3 "Boston"') == Edge("NewYork", 3.0, "Boston")


def test_short_line_fails_whole_load(tmp_path):
    path = write_graph(tmp_path, "A 1 B\nA 1\nB 2 C\n")

    with pytest.raises(GraphFormatError) as exc:
        load_edges(path)
    assert exc.value.line_number == 2
    assert "line 2" in str(exc.value)


def test_blank_line_is_malformed():
    with pytest.raises(GraphFormatError):
        parse_edges(["A 1 B\n", "\n", "B 1 C\n"])


@pytest.mark.parametrize("weight", ["heavy", "1,5", "nan", "inf", "1_000"])
def test_bad_weight_is_a_format_error(weight):
    with pytest.raises(GraphFormatError) as exc:
        parse_line(f"A {weight} B", line_number=7, source="g.txt")
    assert str(exc.value).startswith("g.txt, line 7:")
    assert isinstance(exc.value, ValueError)


def test_scientific_notation_weight():
    assert parse_line("A 1e-3 B").weight == pytest.approx(0.001)


def test_missing_file(tmp_path):
    missing = tmp_path / "nope.txt"

    with pytest.raises(GraphNotFoundError) as exc:
        load_edges(missing)
    assert exc.value.filename == str(missing)
    assert isinstance(exc.value, FileNotFoundError)
    assert isinstance(exc.value, GraphLoadError)


def test_directory_is_not_a_graph_file(tmp_path):
    with pytest.raises(GraphNotFoundError):
        load_edges(tmp_path)


def test_empty_file_has_no_edges(tmp_path):
    assert load_edges(write_graph(tmp_path, "")) == []


def test_negative_weight_is_loaded_with_warning(caplog):
    with caplog.at_level(logging.WARNING, logger="pathfinder"):
        edges = parse_edges(["A -1 B"], source="neg.txt")

    assert edges == [Edge("A", -1.0, "B")]
    assert "negative weight" in caplog.text


def test_unreadable_file_is_not_found(monkeypatch, tmp_path):
    path = write_graph(tmp_path, "A 1 B\n")

    def _denied(self, *args, **kwargs):
        raise PermissionError(13, "Permission denied", str(self))

    monkeypatch.setattr(Path, "open", _denied)

    with pytest.raises(GraphNotFoundError) as exc:
        load_edges(path)
    assert exc.value.filename == str(path)


def test_undecodable_line_is_a_format_error(tmp_path):
    path = tmp_path / "latin.txt"
    path.write_bytes(b"A 1 B\n\xff\xfe 2 C\n")

    with pytest.raises(GraphFormatError) as exc:
        load_edges(path)
    assert exc.value.line_number == 2
    assert "UTF-8" in str(exc.value)


def test_windows_line_endings(tmp_path):
    path = tmp_path / "crlf.txt"
    path.write_bytes(b"A 1 B\r\nB 2 C\r\n")

    assert load_edges(path) == [Edge("A", 1.0, "B"), Edge("B", 2.0, "C")]
