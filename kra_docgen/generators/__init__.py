"""Concrete document generators.

- P9ReportEngine / generate_p9_pdf: P9 annual tax deduction card
- AccountStatementEngine / generate_account_statement_pdf: bank statement
"""

from kra_docgen.generators.account_statement import (
    AccountStatementEngine,
    generate_account_statement_pdf,
)
from kra_docgen.generators.p9_report import P9ReportEngine, generate_p9_pdf

__all__ = [
    "AccountStatementEngine",
    "P9ReportEngine",
    "generate_account_statement_pdf",
    "generate_p9_pdf",
]
