"""Tests for point text parsing and writing."""

import io

import pytest

from closest_pair.points_io import PointFormatError, load_points, parse_points, write_points


def test_parse_plain_pairs():
    text = "0 0\n3 4\n  1.5   -2e3\n"
    assert parse_points(text) == [(0.0, 0.0), (3.0, 4.0), (1.5, -2000.0)]


def test_pairs_may_span_lines_and_carry_comments():
    text = "# sample\n0 0 1\n1 # trailing\n\n2 2\n"
    assert parse_points(text) == [(0.0, 0.0), (1.0, 1.0), (2.0, 2.0)]


def test_empty_input_gives_no_points():
    assert parse_points("") == []
    assert parse_points("   \n# nothing\n") == []


def test_header_format():
    assert parse_points("2\n0 0\n3 4\n", header=True) == [(0.0, 0.0), (3.0, 4.0)]


@pytest.mark.parametrize(
    "text, header, match",
    [
        ("0 0\n3\n", False, "incomplete"),
        ("0 zero\n", False, "not a number"),
        ("0 nan\n", False, "non-finite"),
        ("inf 1\n", False, "non-finite"),
        ("", True, "missing point count"),
        ("two\n0 0\n", True, "bad point count"),
        ("-1\n", True, "negative"),
        ("3\n0 0\n1 1\n", True, "header says 3"),
    ],
)
def test_malformed_input(text, header, match):
    with pytest.raises(PointFormatError, match=match):
        parse_points(text, header=header)


def test_error_names_the_line():
    with pytest.raises(PointFormatError, match="line 3"):
        parse_points("0 0\n1 1\n2 x\n")


def test_point_format_error_is_value_error():
    assert issubclass(PointFormatError, ValueError)


def test_write_then_load(tmp_path):
    pts = [(0.1, 0.2), (1 / 3, -2 / 7), (1e-300, 1e300)]
    path = tmp_path / "nested" / "pts.pts"
    write_points(pts, path)
    assert path.read_text(encoding="utf-8").splitlines()[0] == "3"
    assert load_points(path, header=True) == pts
    assert load_points(str(path), header=True) == pts


def test_write_without_header(tmp_path):
    path = tmp_path / "pts.txt"
    write_points([(1.0, 2.0)], path, header=False)
    assert path.read_text(encoding="utf-8") == "1 2\n"


def test_load_from_stream():
    assert load_points(io.StringIO("5 6\n7 8\n")) == [(5.0, 6.0), (7.0, 8.0)]


def test_non_utf8_file_is_a_format_error(tmp_path):
    path = tmp_path / "binary.txt"
    path.write_bytes(b"0 0\n\xff\xfe 1\n")
    with pytest.raises(PointFormatError, match="not UTF-8 text"):
        load_points(path)
