#!/usr/bin/env python3
"""Seitenkapazität aus Format, Rändern und Font."""
import pytest
from reportlab.lib.units import mm
from reportlab.pdfbase import pdfmetrics

from wrt2pdf.errors import GeometryError
from wrt2pdf.geometry import resolve_geometry
from wrt2pdf.options import normalize, parse_args


def _config(*extra):
    return normalize(parse_args(["-I", *extra]))


def test_a4_courier(courier):
    geo = resolve_geometry(_config(), courier)
    ascent, descent = pdfmetrics.getAscentDescent("Courier", 10)
    width = 210 * mm
    assert geo.char_width == 6.0
    assert geo.max_columns == int((geo.page_width - 10 * mm) / 6.0)
    assert geo.max_columns == 94
    assert geo.max_lines == int((geo.page_height - 10 * mm) / (ascent - descent))
    assert geo.page_width == pytest.approx(width, abs=0.5)
    assert geo.has_print_area


def test_landscape_swaps(courier):
    portrait = resolve_geometry(_config(), courier)
    landscape = resolve_geometry(_config("-l"), courier)
    assert landscape.page_width == portrait.page_height
    assert landscape.max_columns > portrait.max_columns
    assert landscape.max_lines < portrait.max_lines


def test_margins_reduce_capacity(courier):
    base = resolve_geometry(_config(), courier)
    wide = resolve_geometry(_config("-m", "30,30"), courier)
    assert wide.max_columns < base.max_columns
    assert wide.max_lines == base.max_lines
    assert wide.left == pytest.approx(30 * mm)


def test_no_print_area(courier):
    geo = resolve_geometry(_config("-m", "150,150"), courier)
    assert geo.max_columns == 0
    assert not geo.has_print_area
    with pytest.raises(GeometryError, match="No print area"):
        geo.require_print_area()


def test_bigger_font_fewer_columns(catalog):
    small = resolve_geometry(_config(), catalog.resolve("Courier", "", 10))
    big = resolve_geometry(_config(), catalog.resolve("Courier", "", 20))
    assert big.max_columns < small.max_columns
    assert big.max_lines < small.max_lines


def test_no_lines_only(courier):
    """Spalten genug, aber keine einzige Zeile."""
    geo = resolve_geometry(_config("-m", "0,0,150,150"), courier)
    assert geo.max_columns > 0
    assert geo.max_lines == 0
    with pytest.raises(GeometryError, match="No print area"):
        geo.require_print_area()
