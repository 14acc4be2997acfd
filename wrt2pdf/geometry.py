#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
wrt2pdf/geometry.py
-------------------
Seitenkapazität aus Papierformat, Rändern und Font-Metriken.

- Spalten: bedruckbare Breite / Vorschubbreite von "X"
- Zeilen : bedruckbare Höhe / (Ascent - Descent)

Bei Proportionalschrift sind das nur Näherungswerte.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from reportlab.lib.units import mm

from .errors import GeometryError
from .fonts import ResolvedFont, char_advance, line_height
from .options import Configuration

log = logging.getLogger(__name__)

REFERENCE_CHAR = "X"


@dataclass(frozen=True)
class PageGeometry:
    page_width: float          # pt, Ausrichtung berücksichtigt
    page_height: float
    left: float                # Ränder in pt
    right: float
    top: float
    bottom: float
    char_width: float          # Vorschub des Referenzzeichens
    line_height: float
    max_columns: int
    max_lines: int

    @property
    def printable_width(self) -> float:
        return self.page_width - self.left - self.right

    @property
    def printable_height(self) -> float:
        return self.page_height - self.top - self.bottom

    @property
    def has_print_area(self) -> bool:
        return self.max_columns >= 1 and self.max_lines >= 1

    def require_print_area(self) -> None:
        if not self.has_print_area:
            raise GeometryError("No print area")


def mm_to_points(value: float) -> float:
    return value * mm


def _capacity(extent: float, unit: float) -> int:
    # max(0, ...) gegen negative Werte bei seltsamen Rändern
    if unit <= 0:
        return 0
    return int(max(0.0, extent / unit))


def resolve_geometry(config: Configuration, font: ResolvedFont) -> PageGeometry:
    width, height = config.page_size.oriented(config.landscape)
    left, right, top, bottom = (mm_to_points(m) for m in config.margins)

    advance = char_advance(font.font_name, font.size, REFERENCE_CHAR)
    leading = line_height(font.font_name, font.size)

    geo = PageGeometry(
        page_width=width,
        page_height=height,
        left=left,
        right=right,
        top=top,
        bottom=bottom,
        char_width=advance,
        line_height=leading,
        max_columns=_capacity(width - left - right, advance),
        max_lines=_capacity(height - top - bottom, leading),
    )
    log.debug("Page %.2f x %.2f pt, printable %.2f x %.2f pt, char %.3f pt, line %.3f pt",
              geo.page_width, geo.page_height, geo.printable_width, geo.printable_height,
              geo.char_width, geo.line_height)
    return geo
