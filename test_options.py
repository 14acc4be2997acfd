#!/usr/bin/env python3
"""
Tests für die Optionsauswertung: Font-Beschreibung, Ränder, Papierformat und
die Auflösung von Ein-/Ausgabedateien.
"""
import itertools

import pytest

from wrt2pdf.errors import InputFileError, OptionError, UsageError
from wrt2pdf.fonts import DEFAULT_FAMILY, DEFAULT_SIZE
from wrt2pdf.options import (
    DEFAULT_MARGIN_MM,
    NOT_YET_SET,
    TEST_PAGE_LABEL,
    Mode,
    Orientation,
    normalize,
    parse_args,
    parse_font_option,
    parse_margins_option,
    resolve_page_size,
)


# ----------------------- Font -----------------------

@pytest.mark.parametrize("parts", list(itertools.permutations(["Mono", "Bold", "11"])))
def test_font_option_any_order(parts):
    """Familie vor Stil, die Zahl darf überall stehen."""
    family, style, size = parse_font_option(",".join(parts))
    non_numeric = [p for p in parts if not p.isdigit()]
    assert family == non_numeric[0]
    assert style == non_numeric[1]
    assert size == 11


def test_font_option_partial():
    assert parse_font_option("12") == (DEFAULT_FAMILY, "", 12)
    assert parse_font_option("Mono") == ("Mono", "", DEFAULT_SIZE)
    assert parse_font_option("Source Code Pro , Light") == ("Source Code Pro", "Light", DEFAULT_SIZE)


@pytest.mark.parametrize("value", ["10,12", "Mono,Bold,Extra", "10,Mono,11", "a,b,c,10", "0"])
def test_font_option_too_much(value):
    with pytest.raises(OptionError) as exc:
        parse_font_option(value)
    assert str(exc.value) == f"Too much set: {value}"


# ----------------------- Ränder -----------------------

@pytest.mark.parametrize("count", range(0, 5))
def test_margins_always_four(count):
    """0–4 Werte, numerisch oder leer → immer genau vier Ränder."""
    for tokens in itertools.product(["", "7.5"], repeat=count):
        margins = parse_margins_option(",".join(tokens))
        assert len(margins) == 4
        expected = [7.5 if t else DEFAULT_MARGIN_MM for t in tokens]
        expected += [DEFAULT_MARGIN_MM] * (4 - len(expected))
        assert list(margins) == expected


def test_margins_default_and_gaps():
    assert parse_margins_option(None) == (5.0, 5.0, 5.0, 5.0)
    assert parse_margins_option("10.5,,20") == (10.5, 5.0, 20.0, 5.0)


@pytest.mark.parametrize("bad", ["abc", "-1", "nan", "1.2.3", " ", "  "])
def test_margins_bad_value(bad):
    with pytest.raises(OptionError) as exc:
        parse_margins_option(f"1,{bad}")
    assert str(exc.value) == f"Bad margin value: {bad}"


def test_margins_surplus_ignored(capsys):
    assert parse_margins_option("1,2,3,4,5") == (1.0, 2.0, 3.0, 4.0)
    assert "ignore: 5" in capsys.readouterr().err


# ----------------------- Papierformat -----------------------

def test_page_size_case_insensitive():
    assert resolve_page_size("letter").key == "Letter"
    assert resolve_page_size("a5").key == "A5"
    assert resolve_page_size(None).key == "A4"


def test_page_size_unknown():
    with pytest.raises(OptionError) as exc:
        resolve_page_size("A44")
    assert str(exc.value) == "Key not found: A44"


# ----------------------- Ein-/Ausgabe -----------------------

def test_output_gets_pdf_suffix(tmp_path):
    src = tmp_path / "bar.txt"
    src.write_text("x\n")
    cfg = normalize(parse_args([str(tmp_path / "foo.txt"), str(src)]))
    assert cfg.output_path == str(tmp_path / "foo.pdf")
    assert cfg.input_path == str(src.resolve())
    assert cfg.mode is Mode.CONVERT
    assert not cfg.read_stdin


def test_output_kept_when_pdf(tmp_path):
    cfg = normalize(parse_args([str(tmp_path / "out.pdf")]))
    assert cfg.output_path == str(tmp_path / "out.pdf")
    assert cfg.read_stdin
    assert cfg.input_label == "<stdin>"


def test_existing_output_needs_force(tmp_path):
    out = tmp_path / "out.pdf"
    out.write_bytes(b"old")
    with pytest.raises(InputFileError) as exc:
        normalize(parse_args([str(out)]))
    assert "File already exist" in str(exc.value)
    assert "--force" in str(exc.value)

    cfg = normalize(parse_args(["--force", str(out)]))
    assert cfg.output_path == str(out)


def test_in_file_derives_output_without_check(tmp_path):
    src = tmp_path / "notes.txt"
    src.write_text("x\n")
    (tmp_path / "notes.pdf").write_bytes(b"old")
    cfg = normalize(parse_args(["-i", str(src)]))
    assert cfg.output_path == str(tmp_path.resolve() / "notes.pdf")
    assert cfg.input_path == str(src.resolve())
    assert cfg.doc_name == "notes.txt"


def test_in_file_missing(tmp_path):
    with pytest.raises(InputFileError) as exc:
        normalize(parse_args(["-i", str(tmp_path / "nope.txt")]))
    assert "File not found" in str(exc.value)


def test_text_file_missing(tmp_path):
    with pytest.raises(InputFileError) as exc:
        normalize(parse_args([str(tmp_path / "a.pdf"), str(tmp_path / "nope.txt")]))
    assert str(exc.value) == f"TXT file not found: {tmp_path / 'nope.txt'}"


def test_missing_output_is_usage_error():
    with pytest.raises(UsageError):
        normalize(parse_args([]))


def test_info_needs_no_arguments():
    cfg = normalize(parse_args(["-I"]))
    assert cfg.mode is Mode.INFO
    assert cfg.output_path == NOT_YET_SET
    assert cfg.input_label == "<stdin>"


def test_test_page_ignores_files(tmp_path):
    cfg = normalize(parse_args(["-T", "-i", str(tmp_path / "missing.txt"), "-l"]))
    assert cfg.mode is Mode.TEST_PAGE
    assert cfg.input_label == TEST_PAGE_LABEL
    assert cfg.output_path.endswith("wrt2pdf-test-page.pdf")
    assert cfg.orientation is Orientation.LANDSCAPE


def test_raw_options_are_kept():
    cfg = normalize(parse_args(["-I", "-m", "1,2", "-f", "Courier,Bold,9"]))
    assert cfg.margins_option == "1,2"
    assert cfg.font_option == "Courier,Bold,9"
    assert (cfg.font_family, cfg.font_style, cfg.font_size) == ("Courier", "Bold", 9)
    assert cfg.margins == (1.0, 2.0, 5.0, 5.0)

    plain = normalize(parse_args(["-I"]))
    assert plain.margins_option is None
    assert plain.font_option is None


def test_unknown_option_is_option_error():
    with pytest.raises(OptionError):
        parse_args(["--no-such-option"])
    with pytest.raises(OptionError):
        parse_args(["a", "b", "c"])


def test_margins_blank_slot_is_bad():
    """Nur Leerzeichen zählt nicht als leerer Rand."""
    with pytest.raises(OptionError) as exc:
        parse_margins_option(" ,1")
    assert str(exc.value) == "Bad margin value:  "
