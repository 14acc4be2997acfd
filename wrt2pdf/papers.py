#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
wrt2pdf/papers.py
-----------------
Papierformat-Katalog auf Basis von ``reportlab.lib.pagesizes``.

- Schlüssel (z. B. "A4", "Letter") werden bei --page-size exakt, aber ohne
  Beachtung der Groß-/Kleinschreibung verglichen.
- --list-mo-keys filtert über Schlüssel + Beschreibung (Teilstring, ebenfalls
  case-insensitiv).
- Maße in PostScript-Punkten, so wie ReportLab sie definiert; Querformat
  vertauscht Breite und Höhe.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple

from reportlab.lib import pagesizes
from reportlab.lib.units import mm

DEFAULT_PAGE_SIZE = "A4"


@dataclass(frozen=True)
class PageSize:
    key: str
    name: str
    width: float
    height: float

    @property
    def description(self) -> str:
        return f"{self.name} ({round(self.width / mm)} x {round(self.height / mm)} mm)"

    def oriented(self, landscape: bool) -> Tuple[float, float]:
        if landscape:
            return self.height, self.width
        return self.width, self.height


def _iso_series(prefix: str, label: str) -> List[PageSize]:
    out = []
    for n in range(11):
        w, h = getattr(pagesizes, f"{prefix}{n}")
        key = f"{prefix}{n}" if not label else f"Env{prefix}{n}"
        name = f"{prefix}{n}" if not label else f"{prefix}{n} {label}"
        out.append(PageSize(key, name, w, h))
    return out


# Reihenfolge = Ausgabe von --list-mo-keys
_CATALOG: List[PageSize] = (
    _iso_series("A", "")
    + _iso_series("B", "")
    + _iso_series("C", "Envelope")
    + [
        PageSize("Letter",      "US Letter",               *pagesizes.LETTER),
        PageSize("Legal",       "US Legal",                *pagesizes.LEGAL),
        PageSize("Statement",   "Statement (Half Letter)", *pagesizes.HALF_LETTER),
        PageSize("JuniorLegal", "Junior Legal",            *pagesizes.JUNIOR_LEGAL),
        PageSize("GovLetter",   "Government Letter",       *pagesizes.GOV_LETTER),
        PageSize("GovLegal",    "Government Legal",        *pagesizes.GOV_LEGAL),
        PageSize("Tabloid",     "Tabloid (11 x 17 in)",    *pagesizes.TABLOID),
        PageSize("Ledger",      "Ledger (17 x 11 in)",     *pagesizes.LEDGER),
    ]
)


def page_sizes() -> List[PageSize]:
    return list(_CATALOG)


def find_page_size(key: str) -> Optional[PageSize]:
    """Exakter Schlüsselvergleich ohne Groß-/Kleinschreibung; None wenn unbekannt."""
    wanted = (key or "").casefold()
    for entry in _CATALOG:
        if entry.key.casefold() == wanted:
            return entry
    return None


def filter_page_sizes(text: str) -> List[PageSize]:
    needle = (text or "").casefold()
    return [e for e in _CATALOG if needle in (e.key + e.description).casefold()]


def default_page_size() -> PageSize:
    found = find_page_size(DEFAULT_PAGE_SIZE)
    assert found is not None
    return found
