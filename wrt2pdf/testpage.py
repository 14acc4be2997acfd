#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
wrt2pdf/testpage.py
-------------------
Inhalt der Testseite (-T): genau eine Seite, die ihre eigene Geometrie zeigt.

Aufbau (breite Variante, Beispiel 40 Spalten / 10 Zeilen):

    < 1   40 char/line, 10 lines/page      >
      2  Used Font : Courier
      3  Used Style: Regular
      4  Used Size : 10
      5
      ...
    < 10                         last line >

Ist die Seite nicht mindestens 6 Spalten breiter als das Banner, wird die
schmale Variante mit zwei Kopfzeilen und Kurzbezeichnungen benutzt.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from .fonts import ResolvedFont

log = logging.getLogger(__name__)

MIN_GAP = 6          # Mindestüberstand für das breite Banner
MIN_INFO_LINES = 8   # darunter keine Font-/Optionsangaben
MIN_INFO_COLS = 20   # dito, nur schmale Variante


def _right(text: str, n: int) -> str:
    """Die letzten n Zeichen; bei n < 0 oder n >= len der ganze Text."""
    if n < 0 or n >= len(text):
        return text
    return text[len(text) - n:]


def _narrow_banner(max_columns: int, max_lines: int) -> List[str]:
    head = f"< 1  {max_columns} char/line"[:max(0, max_columns - 2)]
    head = head + " >".rjust(max_columns - len(head))
    return [head, f"  2  {max_lines} lines/page"]


def _wide_banner(max_columns: int, banner: str) -> str:
    gap = max_columns - len(banner)
    s = "< 1 ".ljust(gap // 2) + banner
    return s + " >".rjust(max_columns - len(s))


def build_test_page(
    max_columns: int,
    max_lines: int,
    font: ResolvedFont,
    *,
    margins_option: Optional[str] = None,
    font_option: Optional[str] = None,
) -> List[str]:
    """Erzeugt die Zeilen der Testseite; jede Zeile ist höchstens max_columns lang."""
    if max_columns < 3 or max_lines < 2:
        log.warning("Note: Print area very limited, the test page may look strange or even bad")

    content: List[str] = []
    banner = f" {max_columns} char/line, {max_lines} lines/page "
    narrow = max_columns - len(banner) < MIN_GAP

    if narrow:
        content.extend(_narrow_banner(max_columns, max_lines))
        show_info = max_lines >= MIN_INFO_LINES and max_columns >= MIN_INFO_COLS
        labels = ("MO: ", "FO: ", "Ft: ", "St: ", "Si: ", "* NO FIXED PITCH *")
    else:
        content.append(_wide_banner(max_columns, banner))
        show_info = max_lines >= MIN_INFO_LINES
        labels = ("Margin Opt: ", "Font Opt  : ", "Used Font : ", "Used Style: ",
                  "Used Size : ", "*** FONT HAS NO FIXED PITCH ***")

    if show_info:
        values = [
            margins_option,
            font_option,
            font.family,
            font.style,
            str(font.size),
        ]
        for label, value in zip(labels, values):
            if value is None:
                continue
            content.append(f"  {len(content) + 1}  {label}{value}")
        if not font.fixed_pitch:
            content.append(f"  {len(content) + 1}  {labels[-1]}")
    else:
        log.warning("Note: Print area limited, skip font/option info")

    # Zeilennummern auffüllen, die letzte Zeile markiert das Seitenende
    n = len(content) + 1
    while n < max_lines:
        content.append(f"  {n}")
        n += 1

    if n == max_lines:
        marker = f"< {max_lines}"
        width = max_columns - len(marker)
        content.append(marker + _right("last line >", width).rjust(width))

    return [line[:max_columns] for line in content]
