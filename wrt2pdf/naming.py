#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
wrt2pdf/naming.py
-----------------
Zentrale Namenslogik für die PDF-Ausgabe.

Regeln:
- Endet ein Name bereits auf ".pdf", bleibt er wie er ist.
- Sonst wird die letzte Endung (falls vorhanden) durch ".pdf" ersetzt;
  Verzeichnis und Basisname bleiben erhalten, der Pfad wird absolut.
- Bei --in-file wird die Ausgabe neben die (kanonische) Eingabedatei gelegt.
"""

from __future__ import annotations

import tempfile
from pathlib import Path

from . import PROG_NAME

PDF_EXT = ".pdf"
TEST_PAGE_NAME = f"{PROG_NAME}-test-page{PDF_EXT}"


# ----- Ausgabe-Namen -----
def output_pdf_path(name: str) -> str:
    """Positionsargument [pdf-to-create] → Pfad mit Endung '.pdf'."""
    if name.endswith(PDF_EXT):
        return name
    p = Path(name).absolute()
    return str(p.parent / (p.stem + PDF_EXT))


def pdf_path_for_input(input_path: Path) -> str:
    """Ausgabe für --in-file: gleiches Verzeichnis, gleicher Stem, '.pdf'."""
    src = Path(input_path).resolve()
    return str(src.parent / (src.stem + PDF_EXT))


def testpage_pdf_path() -> str:
    """Feste Ausgabe der Testseite im temporären Verzeichnis."""
    return str(Path(tempfile.gettempdir()) / TEST_PAGE_NAME)
