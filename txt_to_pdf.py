#!/usr/bin/env python3
"""
Plain Text to PDF Converter
===========================
Dünner Aufruf von wrt2pdf aus dem Projekt-Root, ohne Installation.
Alle Optionen: ``python txt_to_pdf.py --help``

Usage:
    python txt_to_pdf.py [options] [pdf-to-create] [text-file]
    python txt_to_pdf.py -i input.txt
    some_command | python txt_to_pdf.py output.pdf
"""

import sys

from wrt2pdf.cli import main


if __name__ == "__main__":
    sys.exit(main())
