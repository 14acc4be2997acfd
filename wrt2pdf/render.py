#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
wrt2pdf/render.py
-----------------
Übergabe an ReportLab (platypus):
- Die Textzeilen (mit "\\n" verbunden, Tabs expandiert) werden als ein
  zeilenweise teilbares Flowable gesetzt. Leerzeilen bleiben erhalten, auch am
  Seitenanfang (Preformatted würde sie dort wegschneiden).
- Die Ränder sitzen auf Seitenebene (Frame-Position), der Frame selbst hat
  keinerlei Innenabstand – das Dokument hat also Rand 0.
- Zeilenabstand = Font-Zeilenhöhe, damit pro Seite genau max_lines Zeilen passen.
- Zu lange Zeilen werden an der bedruckbaren Breite hart umbrochen.
- Seitenumbruch und PDF-Erzeugung erledigt BaseDocTemplate.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from reportlab.lib.styles import ParagraphStyle
from reportlab.pdfbase import pdfmetrics
from reportlab.platypus import BaseDocTemplate, Flowable, Frame, PageTemplate

from . import PROG_NAME, __version__
from .fonts import ResolvedFont, make_text_style
from .geometry import PageGeometry

log = logging.getLogger(__name__)

TAB_SIZE = 8


class PlainTextLines(Flowable):
    """Zeilen in einem Font mit festem Zeilenabstand; split() teilt nach ganzen Zeilen."""

    def __init__(self, lines: Sequence[str], style: ParagraphStyle) -> None:
        super().__init__()
        self.lines = list(lines)
        self.style = style

    def wrap(self, availWidth, availHeight):
        self.width = availWidth
        self.height = self.style.leading * len(self.lines)
        return self.width, self.height

    def split(self, availWidth, availHeight):
        fit = int(availHeight / self.style.leading)
        if fit <= 0:
            return []
        if fit >= len(self.lines):
            return [self]
        return [
            PlainTextLines(self.lines[:fit], self.style),
            PlainTextLines(self.lines[fit:], self.style),
        ]

    def draw(self):
        st = self.style
        ascent, _descent = pdfmetrics.getAscentDescent(st.fontName, st.fontSize)
        tx = self.canv.beginText(0, self.height - ascent)
        tx.setFont(st.fontName, st.fontSize, st.leading)
        for line in self.lines:
            tx.textLine(line)
        self.canv.drawText(tx)


def wrap_line(line: str, font_name: str, size: float, max_width: float) -> List[str]:
    """Harter Umbruch nach gemessener Breite; mindestens ein Zeichen pro Zeile."""
    if not line or pdfmetrics.stringWidth(line, font_name, size) <= max_width:
        return [line]
    out: List[str] = []
    start = 0
    width = 0.0
    for i, ch in enumerate(line):
        w = pdfmetrics.stringWidth(ch, font_name, size)
        if i > start and width + w > max_width:
            out.append(line[start:i])
            start = i
            width = 0.0
        width += w
    out.append(line[start:])
    return out


def layout_lines(lines: Sequence[str], font: ResolvedFont, geo: PageGeometry) -> List[str]:
    text = "\n".join(lines).expandtabs(TAB_SIZE)
    out: List[str] = []
    for line in text.split("\n"):
        out.extend(wrap_line(line, font.font_name, font.size, geo.printable_width))
    return out


def _frame(geo: PageGeometry) -> Frame:
    return Frame(
        geo.left, geo.bottom, geo.printable_width, geo.printable_height,
        leftPadding=0, rightPadding=0, topPadding=0, bottomPadding=0,
        id="text", showBoundary=0,
    )


def build_story(lines: Sequence[str], font: ResolvedFont, geo: PageGeometry) -> List[Flowable]:
    style = make_text_style(font, geo.line_height)
    return [PlainTextLines(layout_lines(lines, font, geo), style)]


def render_pdf(
    lines: Sequence[str],
    out_pdf: str,
    font: ResolvedFont,
    geo: PageGeometry,
    *,
    doc_name: Optional[str] = None,
) -> str:
    """Schreibt das PDF nach out_pdf und gibt den Pfad zurück."""
    doc = BaseDocTemplate(
        out_pdf,
        pagesize=(geo.page_width, geo.page_height),
        leftMargin=geo.left,
        rightMargin=geo.right,
        topMargin=geo.top,
        bottomMargin=geo.bottom,
        title=doc_name or "",
        creator=f"{PROG_NAME} v{__version__}",
    )
    doc.addPageTemplates([PageTemplate(id="plain", frames=[_frame(geo)])])

    log.debug("Render %d lines to %s (font=%s %s)", len(lines), out_pdf,
              font.font_name, font.size)
    doc.build(build_story(lines, font, geo))
    return out_pdf
