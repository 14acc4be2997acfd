"""Gemeinsame Fixtures für die wrt2pdf-Tests."""
import pytest

from wrt2pdf.fonts import FontCatalog, FontFace, ResolvedFont
from wrt2pdf.logs import setup_logging


@pytest.fixture(autouse=True)
def _stderr_logging(capsys):
    # Handler an das stderr von capsys binden
    setup_logging()
    yield


@pytest.hookimpl(wrapper=True, trylast=True)
def pytest_runtest_call(item):
    # Der Stream aus der Setup-Phase ist im Testaufruf geschlossen,
    # daher den Handler im Call-Phase-stderr von capsys neu binden
    setup_logging()
    return (yield)


@pytest.fixture
def catalog():
    """Nur die PDF-Standardschriften, kein Scan des Systems."""
    return FontCatalog(search_path=[])


@pytest.fixture
def courier():
    face = FontFace("Courier", "Regular", "Courier", None, True)
    return ResolvedFont("Courier", "", 10, face, 10)


@pytest.fixture
def helvetica():
    face = FontFace("Helvetica", "Regular", "Helvetica", None, False)
    return ResolvedFont("Helvetica", "", 10, face, 10)
