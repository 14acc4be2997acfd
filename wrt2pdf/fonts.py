#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
wrt2pdf/fonts.py
----------------
Font-Katalog, Registrierung und Metriken auf Basis von ReportLab.

Ziele:
- Die 14 PDF-Standardschriften sind immer verfügbar (ohne Datei).
- TrueType-Dateien aus ``rl_config.TTFSearchPath`` werden erst gescannt, wenn
  eine Familie nicht unter den Standardschriften ist oder -L gelistet wird.
- Registrierung bei ReportLab **einmalig** und nur bei Bedarf.
- Unbekannte Familie/Stil → Ersatz + Warnung (wie eine Font-Datenbank es tut);
  die Geometrie rechnet mit dem, was tatsächlich verwendet wird.

Öffentliche API:
- FontCatalog(search_path=None)
    .families() -> dict[str, dict[str, FontFace]]
    .fixed_pitch_families() -> list[str]
    .resolve(family, style, size) -> ResolvedFont
- char_advance(font_name, size, char="X") -> float
- line_height(font_name, size) -> float
- make_text_style(font: ResolvedFont, leading) -> ParagraphStyle
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, List, Optional

from reportlab import rl_config
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.ttfonts import FF_FIXED, TTFError, TTFont, TTFontFile

log = logging.getLogger(__name__)

# ========================== Modulzustand / Defaults ==========================

DEFAULT_FAMILY = "Courier"
DEFAULT_SIZE = 10

# Standardschriften: Familie → {Stil: Name im ReportLab-Register}
STANDARD_FAMILIES: Dict[str, Dict[str, str]] = {
    "Courier": {
        "Regular": "Courier",
        "Bold": "Courier-Bold",
        "Oblique": "Courier-Oblique",
        "Bold Oblique": "Courier-BoldOblique",
    },
    "Helvetica": {
        "Regular": "Helvetica",
        "Bold": "Helvetica-Bold",
        "Oblique": "Helvetica-Oblique",
        "Bold Oblique": "Helvetica-BoldOblique",
    },
    "Times": {
        "Roman": "Times-Roman",
        "Bold": "Times-Bold",
        "Italic": "Times-Italic",
        "Bold Italic": "Times-BoldItalic",
    },
    "Symbol": {"Regular": "Symbol"},
    "ZapfDingbats": {"Regular": "ZapfDingbats"},
}
FIXED_PITCH_STANDARD = {"Courier"}

# Skalierbare Schriften kennen keine festen Größen; gelistet wird die übliche Reihe
STANDARD_SIZES = (6, 7, 8, 9, 10, 11, 12, 14, 16, 18, 20, 22, 24, 26, 28, 36, 48, 72)

# Bevorzugte Stile, wenn keiner (oder ein unbekannter) angefragt ist
REGULAR_STYLES = ("Regular", "Roman", "Book", "Normal", "Medium")

TTF_SUFFIXES = {".ttf"}


@dataclass(frozen=True)
class FontFace:
    family: str
    style: str
    font_name: str                 # Name im ReportLab-Register
    path: Optional[str] = None     # None → PDF-Standardschrift
    fixed_pitch: bool = False


@dataclass(frozen=True)
class ResolvedFont:
    """Angefragter Font und tatsächlich verwendetes Gesicht."""
    requested_family: str
    requested_style: str
    requested_size: int
    face: FontFace
    size: int

    @property
    def family(self) -> str:
        return self.face.family

    @property
    def style(self) -> str:
        return self.face.style

    @property
    def font_name(self) -> str:
        return self.face.font_name

    @property
    def fixed_pitch(self) -> bool:
        return self.face.fixed_pitch


# =============================== Helper =====================================

def _is_registered(font_name: str) -> bool:
    try:
        pdfmetrics.getFont(font_name)
        return True
    except Exception:
        return False


def _text(value) -> str:
    """TTF-Namen kommen je nach ReportLab-Version als bytes oder str."""
    if value is None:
        return ""
    ustr = getattr(value, "ustr", None)
    if isinstance(ustr, str):
        return ustr
    if isinstance(value, bytes):
        return value.decode("latin-1")
    return str(value)


def _search_dirs(search_path: Optional[Iterable[str]]) -> List[Path]:
    dirs = rl_config.TTFSearchPath if search_path is None else search_path
    out: List[Path] = []
    for d in dirs:
        p = Path(os.path.expanduser(str(d)))
        if p.is_dir() and p not in out:
            out.append(p)
    return out


def _iter_ttf_files(dirs: Iterable[Path]) -> Iterable[Path]:
    seen = set()
    for d in dirs:
        for root, _subdirs, files in os.walk(d):
            for name in sorted(files):
                p = Path(root) / name
                if p.suffix.lower() not in TTF_SUFFIXES:
                    continue
                key = p.resolve()
                if key in seen:
                    continue
                seen.add(key)
                yield p


def _read_ttf_face(path: Path) -> Optional[FontFace]:
    try:
        info = TTFontFile(str(path), charInfo=0)
    except (TTFError, OSError, ValueError) as e:
        log.debug("Skip font file %s: %s", path, e)
        return None
    ps_name = _text(info.name)
    family = _text(info.familyName).strip() or ps_name
    style = _text(info.styleName).strip() or "Regular"
    if not ps_name or not family:
        return None
    return FontFace(
        family=family,
        style=style,
        font_name=ps_name,
        path=str(path),
        fixed_pitch=bool(info.flags & FF_FIXED),
    )


# =============================== Public API =================================

class FontCatalog:
    """Alle Familien, die ReportLab setzen kann."""

    def __init__(self, search_path: Optional[Iterable[str]] = None) -> None:
        self._search_path = list(search_path) if search_path is not None else None
        self._families: Dict[str, Dict[str, FontFace]] = {}
        for family, styles in STANDARD_FAMILIES.items():
            self._families[family] = {
                style: FontFace(family, style, name, None, family in FIXED_PITCH_STANDARD)
                for style, name in styles.items()
            }
        self._scanned = False

    def _scan(self) -> None:
        if self._scanned:
            return
        self._scanned = True
        count = 0
        for path in _iter_ttf_files(_search_dirs(self._search_path)):
            face = _read_ttf_face(path)
            if face is None:
                continue
            styles = self._families.setdefault(face.family, {})
            # erste Datei gewinnt
            if face.style not in styles:
                styles[face.style] = face
                count += 1
        log.debug("Font scan: %d TrueType faces found", count)

    def families(self) -> Dict[str, Dict[str, FontFace]]:
        self._scan()
        return self._families

    def fixed_pitch_families(self) -> List[str]:
        fams = self.families()
        return sorted(
            (f for f, styles in fams.items() if any(s.fixed_pitch for s in styles.values())),
            key=str.casefold,
        )

    def find_family(self, name: str) -> Optional[str]:
        wanted = (name or "").strip().casefold()
        for fam in self._families:
            if fam.casefold() == wanted:
                return fam
        if not self._scanned:
            self._scan()
            return self.find_family(name)
        return None

    def resolve(self, family: str, style: str = "", size: int = DEFAULT_SIZE) -> ResolvedFont:
        fam = self.find_family(family)
        if fam is None:
            log.warning("Font not found: %s, using %s", family, DEFAULT_FAMILY)
            fam = DEFAULT_FAMILY
        faces = self._families[fam]

        face = None
        if style:
            for name, candidate in faces.items():
                if name.casefold() == style.strip().casefold():
                    face = candidate
                    break
        if face is None:
            face = _regular_face(faces)
            if style:
                log.warning("Style not found: %s %s, using %s", fam, style, face.style)

        ensure_registered(face)
        if not face.fixed_pitch:
            log.warning("Font has no fixed pitch: %s %s", face.family, face.style)
        return ResolvedFont(
            requested_family=family,
            requested_style=style or "",
            requested_size=size,
            face=face,
            size=size,
        )


def _regular_face(faces: Dict[str, FontFace]) -> FontFace:
    for name in REGULAR_STYLES:
        if name in faces:
            return faces[name]
    return faces[sorted(faces)[0]]


def ensure_registered(face: FontFace) -> str:
    """Registriert eine TrueType-Schrift bei ReportLab (einmalig)."""
    if face.path is not None and not _is_registered(face.font_name):
        pdfmetrics.registerFont(TTFont(face.font_name, face.path))
    return face.font_name


def char_advance(font_name: str, size: float, char: str = "X") -> float:
    return pdfmetrics.stringWidth(char, font_name, size)


def line_height(font_name: str, size: float) -> float:
    ascent, descent = pdfmetrics.getAscentDescent(font_name, size)
    return ascent - descent


def make_text_style(font: ResolvedFont, leading: float) -> ParagraphStyle:
    """Schlanker Stil für den Fließtext; keine Abstände, kein Einzug."""
    base = getSampleStyleSheet()["Code"]
    return ParagraphStyle(
        name="PlainText",
        parent=base,
        fontName=font.font_name,
        fontSize=float(font.size),
        leading=float(leading),
        leftIndent=0,
        rightIndent=0,
        firstLineIndent=0,
        spaceBefore=0,
        spaceAfter=0,
    )
