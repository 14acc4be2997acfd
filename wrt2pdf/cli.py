#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
wrt2pdf/cli.py
--------------
Einstiegspunkt und Modus-Auswahl.

Reihenfolge (genau eine Aktion pro Aufruf):
    Hilfe → -L Fonts → -P Papierformate → Configuration normalisieren
    → Font + Geometrie (einmal) → -I Info → -T Testseite → Konvertieren

Fehler (Wrt2PdfError, OSError beim Schreiben) landen einmal auf stderr, der
Exit-Status ist dann 1.
"""

from __future__ import annotations

import logging
import sys
from typing import List, Optional, Sequence, TextIO

from .content import load_content
from .errors import UsageError, Wrt2PdfError
from .fonts import STANDARD_SIZES, FontCatalog, ResolvedFont
from .geometry import PageGeometry, resolve_geometry
from .logs import LOGGER_NAME, setup_logging
from .options import Configuration, Mode, build_parser, long_help_text, normalize
from .papers import filter_page_sizes
from .render import render_pdf
from .testpage import build_test_page

log = logging.getLogger(LOGGER_NAME)


# =============================== Listen =====================================

def list_fonts(catalog: FontCatalog, out: TextIO) -> None:
    """Nur skalierbare Familien mit fester Zeichenbreite."""
    sizes = " ".join(str(s) for s in STANDARD_SIZES)
    families = catalog.families()
    for family in catalog.fixed_pitch_families():
        print(family, file=out)
        for style in families[family]:
            print(f"  {style} : {sizes}", file=out)


def list_page_keys(key_filter: str, out: TextIO) -> None:
    for entry in filter_page_sizes(key_filter):
        print(f"{entry.key:<18} : {entry.description}", file=out)


# =============================== Info =======================================

def report_lines(config: Configuration, font: ResolvedFont, geo: PageGeometry) -> List[str]:
    lines = [
        f"Requested Font   : {font.requested_family}",
        f"Req Font Style   : {font.requested_style}",
        f"Req Font Size    : {font.requested_size}",
        f"Used Font        : {font.family}",
        f"Used Style       : {font.style}",
        f"Used Size        : {font.size}",
        f"Has Fixed Pitch  : {'yes' if font.fixed_pitch else 'NO'}",
        f"Page Size        : {config.page_size.name}",
        f"Page Orientation : {config.orientation.value}",
        f"Max Lines        : {geo.max_lines}",
        f"Max Columns      : {geo.max_columns}",
    ]
    if config.mode is Mode.INFO:
        lines += [
            f"In-File          : {config.input_label}",
            f"Out-File         : {config.output_path}",
        ]
    return lines


# =============================== Modi =======================================

def run_test_page(config: Configuration, font: ResolvedFont, geo: PageGeometry, out: TextIO) -> None:
    lines = build_test_page(
        geo.max_columns,
        geo.max_lines,
        font,
        margins_option=config.margins_option,
        font_option=config.font_option,
    )
    render_pdf(lines, config.output_path, font, geo)
    print(f"Test page written to: {config.output_path}", file=out)


def run_convert(config: Configuration, font: ResolvedFont, geo: PageGeometry,
                stdin: Optional[TextIO] = None) -> None:
    lines = load_content(config, stdin=stdin)
    render_pdf(lines, config.output_path, font, geo, doc_name=config.doc_name)
    log.debug("PDF written to: %s", config.output_path)


def dispatch(argv: Optional[Sequence[str]], out: TextIO, stdin: Optional[TextIO],
             catalog: FontCatalog) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.debug:
        setup_logging(debug=True)

    if args.long_help:
        print(long_help_text(parser), file=out)
        return 0
    if args.short_help:
        print(parser.format_help(), file=out)
        return 0
    if args.list_fonts:
        list_fonts(catalog, out)
        return 0
    if args.list_mo_keys is not None:
        list_page_keys(args.list_mo_keys, out)
        return 0

    try:
        config = normalize(args)
    except UsageError:
        print(parser.format_help(), file=sys.stderr)
        return 1

    font = catalog.resolve(config.font_family, config.font_style, config.font_size)
    geo = resolve_geometry(config, font)

    if config.mode in (Mode.INFO, Mode.TEST_PAGE):
        for line in report_lines(config, font, geo):
            print(line, file=out)
        if config.mode is Mode.INFO:
            return 0

    geo.require_print_area()

    if config.mode is Mode.TEST_PAGE:
        run_test_page(config, font, geo, out)
    else:
        run_convert(config, font, geo, stdin=stdin)
    return 0


def main(argv: Optional[Sequence[str]] = None, *, out: Optional[TextIO] = None,
         stdin: Optional[TextIO] = None, catalog: Optional[FontCatalog] = None) -> int:
    """Konsolen-Einstieg; gibt den Exit-Status zurück."""
    out = out if out is not None else sys.stdout
    catalog = catalog if catalog is not None else FontCatalog()
    setup_logging()
    try:
        return dispatch(argv, out, stdin, catalog)
    except Wrt2PdfError as e:
        log.error("%s", e)
        return e.exit_code
    except OSError as e:
        log.error("%s", e)
        return 1


if __name__ == "__main__":
    sys.exit(main())
