"""Fehlerklassen für wrt2pdf.

Alle Fehler tragen die fertige Meldung für stderr. Gefangen wird nur in
``wrt2pdf.cli.main`` (→ Exit-Status 1).
"""
from __future__ import annotations


class Wrt2PdfError(Exception):
    """Basisklasse; ``str(exc)`` ist die Meldung für den Benutzer."""

    exit_code = 1


class OptionError(Wrt2PdfError):
    """Fehlerhafte Option (Font, Ränder, Papierformat, Aufruf)."""


class UsageError(OptionError):
    """Zu wenige Argumente – statt einer Meldung wird die Hilfe gezeigt."""


class InputFileError(Wrt2PdfError):
    """Dateisystem: Eingabe fehlt/unlesbar oder Ausgabe existiert schon."""


class GeometryError(Wrt2PdfError):
    """Keine bedruckbare Fläche."""
