"""Pytest configuration and shared fixtures.

This module contains pytest configuration and shared fixtures used
across all test files.
"""

import base64
import json
import sys
import types
from pathlib import Path
from typing import Any, Callable
from unittest.mock import MagicMock, patch

import pytest

from kra_docgen.config import Config

from tests.fixtures.sample_data import sample_p9_data, sample_statement_data

FAKE_PDF_BYTES = b"%PDF-1.7\n% fake document\n%%EOF\n"

P9_TEMPLATE = (
    "<html><body><h1>P9 {{YEAR}}</h1>"
    "<p>{{EMPLOYER_NAME}} / {{EMPLOYER_PIN}}</p>"
    "<p>{{EMPLOYEE_LASTNAME}}, {{EMPLOYEE_FIRSTNAME}} ({{EMPLOYEE_PIN}})</p>"
    "<table>{{MONTHLY_DATA_ROWS}}</table>"
    "<p>{{TOTAL_CHARGEABLE_PAY}} {{TOTAL_TAX}}</p></body></html>"
)

STATEMENT_TEMPLATE = (
    "<html><body><img src=\"assets/ukulima-sacco-logo.png\" />"
    "<p>{{DATE_ISSUED}} {{CUSTOMER_NAME}} {{CUSTOMER_PHONE}}</p>"
    "<p>{{STATEMENT_PERIOD}} {{ACCOUNT_NUMBER}}</p>"
    "<p>{{OPENING_BALANCE}} {{TOTAL_CREDITS}} {{TOTAL_DEBITS}} {{CLOSING_BALANCE}}</p>"
    "<table>{{TRANSACTIONS}}</table><p>Page {{PAGE_NUMBER}}</p></body></html>"
)

# 1x1 PNG
PNG_BYTES = base64.b64decode(
    "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAQAAAC1HAwCAAAAC0lEQVR42mNkYAAAAAYAAjCB0C8AAAAASUVORK5CYII="
)


@pytest.fixture
def fake_weasyprint() -> MagicMock:
    """Replace the weasyprint module with a fake HTML class.

    Yields the fake ``HTML`` class; ``HTML(...).render()`` returns a
    document whose ``write_pdf()`` produces FAKE_PDF_BYTES.
    """
    module = types.ModuleType("weasyprint")
    html_cls = MagicMock(name="HTML")
    html_cls.return_value.render.return_value.write_pdf.return_value = FAKE_PDF_BYTES
    module.HTML = html_cls  # type: ignore[attr-defined]
    with patch.dict(sys.modules, {"weasyprint": module}):
        yield html_cls


@pytest.fixture
def write_json(tmp_path: Path) -> Callable[[str, Any], Path]:
    """Return a helper that writes JSON content into tmp_path."""
    def _write(name: str, content: Any) -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(content), encoding="utf-8")
        return path
    return _write


@pytest.fixture
def p9_files(tmp_path: Path, write_json: Callable[[str, Any], Path]) -> tuple[Path, Path]:
    """Write a P9 template and data file; return (template, data)."""
    template = tmp_path / "p9.html"
    template.write_text(P9_TEMPLATE, encoding="utf-8")
    return template, write_json("p9.json", sample_p9_data())


@pytest.fixture
def statement_files(
    tmp_path: Path, write_json: Callable[[str, Any], Path]
) -> tuple[Path, Path]:
    """Write a statement template and data file; return (template, data)."""
    template = tmp_path / "statement.html"
    template.write_text(STATEMENT_TEMPLATE, encoding="utf-8")
    return template, write_json("statement.json", sample_statement_data())


@pytest.fixture
def logo_file(tmp_path: Path) -> Path:
    """Write a tiny PNG logo into tmp_path."""
    path = tmp_path / "logo.png"
    path.write_bytes(PNG_BYTES)
    return path


@pytest.fixture
def test_config(tmp_path: Path) -> Config:
    """Create a Config writing into tmp_path, ignoring any .env file."""
    return Config(
        _env_file=None,
        output_dir=tmp_path / "out",
        statement_logo_path=tmp_path / "missing-logo.png",
    )
