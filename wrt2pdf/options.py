#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
wrt2pdf/options.py
------------------
Kommandozeile → Configuration.

- build_parser()            : argparse-Definition (Hilfe kommt von uns, nicht von argparse)
- parse_font_option(value)  : "Familie,Stil,Größe" in beliebiger Reihenfolge
- parse_margins_option(value): "l,r,t,b" in Millimeter, fehlende Werte = 5.0
- resolve_page_size(key)    : Schlüssel aus dem Papierformat-Katalog
- normalize(args)           : prüft Ein-/Ausgabedateien und baut die Configuration

Fehler werden als OptionError / InputFileError geworfen; beendet wird erst in
wrt2pdf.cli.main.
"""

from __future__ import annotations

import argparse
import logging
import math
import re
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

from . import PROG_NAME, __version__
from .errors import InputFileError, OptionError, UsageError
from .fonts import DEFAULT_FAMILY, DEFAULT_SIZE
from .naming import output_pdf_path, pdf_path_for_input, testpage_pdf_path
from .papers import PageSize, default_page_size, find_page_size

log = logging.getLogger(__name__)

# ----------------------- Defaults -----------------------
DEFAULT_MARGIN_MM = 5.0
MARGIN_COUNT = 4                  # links, rechts, oben, unten
DEFAULT_MARGINS_OPTION = "5.0,5.0,5.0,5.0"

NOT_YET_SET = "[not yet set]"
TEST_PAGE_LABEL = "[-> Test Page <-]"

_UINT_RE = re.compile(r"\s*\+?\d+\s*")


class Orientation(Enum):
    PORTRAIT = "Portrait"
    LANDSCAPE = "Landscape"


class Mode(Enum):
    INFO = "info"
    TEST_PAGE = "test-page"
    CONVERT = "convert"


@dataclass(frozen=True)
class Configuration:
    """Ergebnis der Normalisierung; nach dem Parsen unveränderlich."""
    output_path: Optional[str]
    input_path: Optional[str]
    input_label: str
    read_stdin: bool
    font_family: str
    font_style: str
    font_size: int
    margins: Tuple[float, float, float, float]
    page_size: PageSize
    orientation: Orientation
    mode: Mode
    force: bool = False
    margins_option: Optional[str] = None
    font_option: Optional[str] = None
    doc_name: Optional[str] = None

    @property
    def landscape(self) -> bool:
        return self.orientation is Orientation.LANDSCAPE


# ----------------------- argparse -----------------------

class _Parser(argparse.ArgumentParser):
    """argparse beendet sonst mit Status 2; wir wollen überall 1."""

    def error(self, message):
        raise OptionError(f"{self.prog}: {message}\n{self.format_usage().rstrip()}")


def build_parser() -> argparse.ArgumentParser:
    ap = _Parser(
        prog=PROG_NAME,
        description="Create a PDF out of a plain text file",
        add_help=False,
    )
    ap.add_argument("pdf_to_create", metavar="pdf-to-create", nargs="?",
                    help="The suffix .pdf will be added automatically when missing")
    ap.add_argument("text_file", metavar="text-file", nargs="?",
                    help="File to be converted. When not given stdin is used")
    ap.add_argument("-F", "--force", action="store_true",
                    help="Overwrite existing file [pdf-to-create]")
    ap.add_argument("-i", "--in-file", dest="in_file", metavar="file-name",
                    help="File to be converted. When no [pdf-to-create] is given "
                         "<file-name> is used with .pdf suffix")
    ap.add_argument("-f", "--font", dest="font", metavar="font-desc",
                    help="Set the font to use by description")
    ap.add_argument("-L", "--list-fonts", dest="list_fonts", action="store_true",
                    help="List available fixed pitch fonts")
    ap.add_argument("-m", "--margins", dest="margins", metavar="l,r,t,b",
                    help="Set the page margins in millimeter as string "
                         "'left,right,top,bottom' (default: %s)" % DEFAULT_MARGINS_OPTION)
    ap.add_argument("-p", "--page-size", dest="page_size", metavar="mok",
                    help="Set the paper size by media option keyword")
    ap.add_argument("-P", "--list-mo-keys", dest="list_mo_keys", metavar="key-filter",
                    help="List media option keywords (mok) and description")
    ap.add_argument("-l", "--landscape", action="store_true",
                    help="Use page in landscape orientation")
    ap.add_argument("-I", "--info", action="store_true",
                    help="Like a dry-run, shows settings and resulting page size in rows/cols")
    ap.add_argument("-T", "--test-page", dest="test_page", action="store_true",
                    help="Generate a test page to verify intended settings, similar to -I")
    ap.add_argument("-d", "--debug", action="store_true",
                    help="Print debug messages to stderr")
    ap.add_argument("-v", "--version", action="version",
                    version=f"{PROG_NAME} {__version__}",
                    help="Displays version information")
    ap.add_argument("-h", "-?", dest="short_help", action="store_true",
                    help="Show usage")
    ap.add_argument("-H", "--help", dest="long_help", action="store_true",
                    help="Show usage, examples and some more hints")
    return ap


def long_help_text(ap: argparse.ArgumentParser) -> str:
    me = PROG_NAME
    return "\n".join([
        f"This is {PROG_NAME} v{__version__}",
        "Create a PDF out of a plain text file",
        "",
        ap.format_help().rstrip(),
        "",
        "Examples:",
        "  Create ./foo.pdf out of /some/where/bar on US Letter",
        f"      {me} -p letter foo /some/where/bar",
        "",
        "  Make a PDF from this help text",
        f"      {me} --help | {me} {me}-help",
        "",
        "  Create /some/where/bar.pdf out of /some/where/bar.txt with a custom 10.5mm",
        "  left margin and 20mm top margin",
        f"      {me} --margins 10.5,,20  -i /some/where/bar.txt",
        "",
        "Note: You can omit margins, then is the default of 5mm used",
        "",
        "  Use custom font and size by --font option",
        f"      {me} -f 'DejaVu Sans Mono,Bold,11' -i foo.txt",
        f"      {me} -f 'Courier,9' -i foo.txt",
        f"      {me} -i foo.txt -f '9,Courier'",
        "",
        "Note: The first requests the font in style Bold and size 11 points. The",
        "      latter two are equal and demonstrate that options may appear anywhere.",
        "",
        "Miscellaneous:",
        "  - The hard coded default paper is A4",
        f"  - The hard coded default font is {DEFAULT_FAMILY} in size {DEFAULT_SIZE} points",
        "  - When using -i without [pdf-to-create] there is no override check done",
        "  - Fonts displayed by -L come from the TrueType search path of ReportLab.",
        "    Unknown fonts are replaced by the default font, fonts without fixed",
        "    pitch give incorrect calculations of maximum rows and cols",
        "  - The key given by --page-size must match exactly but is case insensitive",
        "",
    ])


# ----------------------- Einzelne Optionen -----------------------

def _as_uint(token: str) -> Optional[int]:
    if _UINT_RE.fullmatch(token):
        return int(token)
    return None


def parse_font_option(value: str) -> Tuple[str, str, int]:
    """
    Akzeptiert z. B.:  10 // Mono // Mono,10 // Mono,Bold // Mono,Bold,10 // 10,Mono,Bold
    Rückgabe: (Familie, Stil, Größe); fehlende Teile → Defaults.
    """
    family = ""
    style = ""
    size = 0
    for part in value.split(","):
        if not part.strip():
            continue
        number = _as_uint(part)
        if number is not None:
            if number and not size:
                size = number
                continue
        elif not family:
            family = part.strip()
            continue
        elif not style:
            style = part.strip()
            continue
        raise OptionError(f"Too much set: {value}")

    return family or DEFAULT_FAMILY, style, size or DEFAULT_SIZE


def parse_margins_option(value: Optional[str]) -> Tuple[float, float, float, float]:
    """'l,r,t,b' → immer genau vier Werte (mm); leere/fehlende → 5.0.

    Ein Wert aus Leerzeichen ist nicht leer und damit "Bad margin value".
    """
    if value is None:
        value = DEFAULT_MARGINS_OPTION
    margins: List[float] = []
    for token in value.split(","):
        if not token:
            margins.append(DEFAULT_MARGIN_MM)
            continue
        try:
            margin = float(token)
        except ValueError:
            raise OptionError(f"Bad margin value: {token}") from None
        if not math.isfinite(margin) or margin < 0:
            raise OptionError(f"Bad margin value: {token}")
        margins.append(margin)

    if len(margins) > MARGIN_COUNT:
        log.warning("Note: Only %d margins are used, ignore: %s",
                    MARGIN_COUNT, ",".join(value.split(",")[MARGIN_COUNT:]))
        margins = margins[:MARGIN_COUNT]
    while len(margins) < MARGIN_COUNT:
        margins.append(DEFAULT_MARGIN_MM)
    return tuple(margins)


def resolve_page_size(key: Optional[str]) -> PageSize:
    if key is None:
        return default_page_size()
    found = find_page_size(key)
    if found is None:
        raise OptionError(f"Key not found: {key}")
    return found


# ----------------------- Ein-/Ausgabe -----------------------

def _checked_output(name: str, force: bool) -> str:
    pdf = output_pdf_path(name)
    # Nur explizit genannte Ausgaben prüfen, nicht die von -i abgeleitete
    if Path(pdf).exists() and not force:
        raise InputFileError(f"File already exist: {pdf}\nUse --force if you don't care")
    return pdf


def normalize(args: argparse.Namespace) -> Configuration:
    """Baut die Configuration; wirft bei jedem Fehler sofort (fail fast)."""
    page_size = resolve_page_size(args.page_size)
    orientation = Orientation.LANDSCAPE if args.landscape else Orientation.PORTRAIT

    if args.font is not None:
        family, style, size = parse_font_option(args.font)
    else:
        family, style, size = DEFAULT_FAMILY, "", DEFAULT_SIZE

    margins = parse_margins_option(args.margins)

    positionals = [a for a in (args.pdf_to_create, args.text_file) if a is not None]

    settings = dict(
        font_family=family,
        font_style=style,
        font_size=size,
        margins=margins,
        page_size=page_size,
        orientation=orientation,
        force=args.force,
        margins_option=args.margins,
        font_option=args.font,
    )

    if args.info:
        mode = Mode.INFO
    elif args.test_page:
        mode = Mode.TEST_PAGE
    else:
        mode = Mode.CONVERT

    # (a) Testseite: keine Ein-/Ausgabe vom Benutzer nötig
    if args.test_page:
        return Configuration(
            output_path=testpage_pdf_path(),
            input_path=None,
            input_label=TEST_PAGE_LABEL,
            read_stdin=False,
            mode=mode,
            **settings,
        )

    input_path: Optional[str] = None
    doc_name: Optional[str] = None
    output_path: Optional[str] = NOT_YET_SET if args.info else None
    needed = 0 if args.info else 1

    # (b) -i bestimmt Eingabe und (ohne Positionsargument) Ausgabe
    if args.in_file is not None:
        src = Path(args.in_file)
        if not src.exists():
            raise InputFileError(f"File not found: '{args.in_file}'")
        input_path = str(src.resolve())
        doc_name = src.name
        output_path = pdf_path_for_input(src)
        needed = 0

    if len(positionals) < needed:
        raise UsageError("Missing argument [pdf-to-create]")

    if positionals:
        output_path = _checked_output(positionals[0], args.force)

    # (c) zweites Positionsargument = Textdatei
    if input_path is None and len(positionals) == 2:
        src = Path(positionals[1])
        if not src.exists():
            raise InputFileError(f"TXT file not found: {positionals[1]}")
        input_path = str(src.resolve())
        doc_name = src.name

    # (d) sonst stdin, wenn genau die Ausgabe genannt wurde
    read_stdin = input_path is None and len(positionals) == 1

    return Configuration(
        output_path=output_path,
        input_path=input_path,
        input_label=input_path or "<stdin>",
        read_stdin=read_stdin,
        mode=mode,
        doc_name=doc_name,
        **settings,
    )


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    return build_parser().parse_args(argv)
