"""Bausteine für wrt2pdf – Klartext als PDF mit vorhersagbarer Seitengeometrie.

Das Paket enthält die einzelnen Stufen der Pipeline:

- options   : Kommandozeile → Configuration
- fonts     : Font-Katalog, Registrierung bei ReportLab, Font-Auflösung
- papers    : Papierformat-Katalog
- geometry  : Seitenkapazität (Zeilen × Spalten)
- testpage  : Inhalt der Testseite
- content   : Einlesen der Textzeilen
- render    : Übergabe an ReportLab (platypus)
- cli       : Modus-Auswahl und Einstiegspunkt
"""
from __future__ import annotations

PROG_NAME = "wrt2pdf"
__version__ = "0.6.0"

__all__ = ["PROG_NAME", "__version__"]
