#!/usr/bin/env python3
"""Übergabe an ReportLab: Umbruch, Seitenteilung und PDF-Ausgabe."""
from wrt2pdf.fonts import make_text_style
from wrt2pdf.geometry import resolve_geometry
from wrt2pdf.options import normalize, parse_args
from wrt2pdf.render import PlainTextLines, layout_lines, render_pdf, wrap_line


def _geometry(font, *extra):
    return resolve_geometry(normalize(parse_args(["-I", *extra])), font)


def test_wrap_line_by_width():
    assert wrap_line("X" * 10, "Courier", 10, 30) == ["XXXXX", "XXXXX"]
    assert wrap_line("X" * 5, "Courier", 10, 30) == ["XXXXX"]
    assert wrap_line("", "Courier", 10, 30) == [""]
    # mindestens ein Zeichen pro Zeile, auch wenn es nicht passt
    assert wrap_line("XX", "Courier", 10, 1) == ["X", "X"]


def test_layout_expands_tabs_and_keeps_blanks(courier):
    geo = _geometry(courier)
    out = layout_lines(["a\tb", "", "", "c"], courier, geo)
    assert out == ["a       b", "", "", "c"]


def test_layout_wraps_long_lines(courier):
    geo = _geometry(courier)
    out = layout_lines(["X" * (geo.max_columns + 3)], courier, geo)
    assert out == ["X" * geo.max_columns, "XXX"]


def test_split_by_whole_lines(courier):
    style = make_text_style(courier, 10)
    flow = PlainTextLines(["l%d" % i for i in range(5)], style)
    assert flow.wrap(100, 1000) == (100, 50)
    first, rest = flow.split(100, 35)
    assert first.lines == ["l0", "l1", "l2"]
    assert rest.lines == ["l3", "l4"]
    assert flow.split(100, 5) == []
    assert flow.split(100, 50) == [flow]


def test_render_pdf(courier, tmp_path):
    geo = _geometry(courier)
    out = tmp_path / "out.pdf"
    lines = ["line %d" % i for i in range(geo.max_lines * 2 + 1)]
    assert render_pdf(lines, str(out), courier, geo, doc_name="in.txt") == str(out)
    data = out.read_bytes()
    assert data.startswith(b"%PDF")
    assert b"wrt2pdf v" in data


def test_render_empty_input(courier, tmp_path):
    out = tmp_path / "empty.pdf"
    render_pdf([], str(out), courier, _geometry(courier))
    assert out.read_bytes().startswith(b"%PDF")
