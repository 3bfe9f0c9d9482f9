"""P9 annual tax deduction card generator.

The P9 report lists an employee's monthly pay, pension, relief and PAYE
figures for one year, closed by a totals row.
"""

import logging
from pathlib import Path
from typing import Any, Callable

from kra_docgen.config import Config, get_config
from kra_docgen.template.rows import render_monthly_rows
from kra_docgen.template.template_engine import DocumentTemplateEngine
from kra_docgen.template.tokens import TokenBinding, currency_value

logger = logging.getLogger(__name__)

P9_TOKEN_BINDINGS: list[TokenBinding] = [
    TokenBinding("YEAR", "year"),
    TokenBinding("EMPLOYER_NAME", "employer.name"),
    TokenBinding("EMPLOYER_PIN", "employer.pin"),
    TokenBinding("EMPLOYEE_LASTNAME", "employee.lastName"),
    TokenBinding("EMPLOYEE_FIRSTNAME", "employee.firstName"),
    TokenBinding("EMPLOYEE_PIN", "employee.pin"),
    TokenBinding("TOTAL_CHARGEABLE_PAY", "totals.chargeablePay", currency_value),
    TokenBinding("TOTAL_TAX", "totals.payeTax", currency_value),
]


class P9ReportEngine(DocumentTemplateEngine):
    """Template engine for the P9 report."""

    filename_prefix = "P9_Report"

    def token_bindings(self) -> list[TokenBinding]:
        return P9_TOKEN_BINDINGS

    def row_tokens(self) -> dict[str, tuple[str, Callable[[Any], str]]]:
        return {"MONTHLY_DATA_ROWS": ("monthlyData", render_monthly_rows)}


def generate_p9_pdf(
    template_path: Path | str,
    data_path: Path | str,
    config: Config | None = None,
) -> Path:
    """Generate a P9 report PDF.

    Args:
        template_path: P9 HTML template
        data_path: P9 JSON data
        config: Optional Config instance. If not provided, loads from environment

    Returns:
        Path to the generated PDF
    """
    config = config or get_config()
    logger.debug(f"Generating P9 report from {template_path} and {data_path}")
    engine = P9ReportEngine(
        output_dir=config.output_dir,
        producer=config.pdf_producer,
    )
    return engine.generate(Path(template_path), Path(data_path))
