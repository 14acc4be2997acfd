#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
wrt2pdf/content.py
------------------
Einlesen des Textes – Zeile für Zeile, Reihenfolge bleibt erhalten.

Datei und stdin werden gleich dekodiert: UTF-8, nicht dekodierbare Bytes
werden ersetzt.
"""

from __future__ import annotations

import io
import logging
import sys
from typing import Iterable, List, Optional, TextIO

from .errors import InputFileError
from .options import Configuration

log = logging.getLogger(__name__)

ENCODING = "utf-8"


def read_lines(stream: Iterable[str]) -> List[str]:
    """Zeilenenden (\\n, \\r\\n) werden entfernt, sonst nichts verändert."""
    return [line.rstrip("\r\n") for line in stream]


def load_file(path: str) -> List[str]:
    try:
        with open(path, "r", encoding=ENCODING, errors="replace", newline="") as fh:
            lines = read_lines(fh)
    except OSError as e:
        raise InputFileError(e.strerror or str(e)) from e
    log.debug("Read %d lines from %s", len(lines), path)
    return lines


def read_stream(stream: TextIO) -> List[str]:
    """stdin lesen; hat der Stream Rohbytes, wird selbst dekodiert."""
    buffer = getattr(stream, "buffer", None)
    if buffer is not None:
        text = buffer.read().decode(ENCODING, errors="replace")
        return read_lines(io.StringIO(text, newline=""))
    try:
        return read_lines(stream)
    except UnicodeDecodeError as e:
        raise InputFileError(f"<stdin>: {e.reason}") from e


def load_content(config: Configuration, stdin: Optional[TextIO] = None) -> List[str]:
    """Liest die aufgelöste Eingabedatei oder (nur mit genau einer Ausgabe) stdin."""
    if config.input_path is not None:
        return load_file(config.input_path)
    if config.read_stdin:
        lines = read_stream(stdin if stdin is not None else sys.stdin)
        log.debug("Read %d lines from <stdin>", len(lines))
        return lines
    return []
