"""Account statement generator.

An account statement shows customer and account details, the opening and
closing balances and one line per transaction. The bank logo referenced by
the template is inlined before rendering.
"""

import logging
from pathlib import Path
from typing import Any, Callable

from kra_docgen.config import Config, get_config
from kra_docgen.template.assets import embed_asset
from kra_docgen.template.rows import render_transaction_rows
from kra_docgen.template.template_engine import DocumentTemplateEngine
from kra_docgen.template.tokens import TokenBinding

logger = logging.getLogger(__name__)

STATEMENT_TOKEN_BINDINGS: list[TokenBinding] = [
    TokenBinding("DATE_ISSUED", "dateIssued"),
    TokenBinding("CUSTOMER_NAME", "customer.name"),
    TokenBinding("CUSTOMER_PHONE", "customer.phone"),
    TokenBinding("STATEMENT_PERIOD", "statementPeriod"),
    TokenBinding("ACCOUNT_NUMBER", "account.number"),
    TokenBinding("OPENING_BALANCE", "balances.opening"),
    TokenBinding("TOTAL_CREDITS", "balances.totalCredits"),
    TokenBinding("TOTAL_DEBITS", "balances.totalDebits"),
    TokenBinding("CLOSING_BALANCE", "balances.closing"),
    TokenBinding("PAGE_NUMBER", "pageNumber"),
]


class AccountStatementEngine(DocumentTemplateEngine):
    """Template engine for account statements.

    Attributes:
        logo_path: Logo image to inline
        logo_reference: Literal asset path used by the template's ``<img>``
    """

    filename_prefix = "Account_Statement"

    def __init__(
        self,
        logo_path: Path,
        logo_reference: str,
        **kwargs: Any,
    ) -> None:
        super().__init__(**kwargs)
        self.logo_path = Path(logo_path)
        self.logo_reference = logo_reference

    def token_bindings(self) -> list[TokenBinding]:
        return STATEMENT_TOKEN_BINDINGS

    def row_tokens(self) -> dict[str, tuple[str, Callable[[Any], str]]]:
        return {"TRANSACTIONS": ("transactions", render_transaction_rows)}

    def embed_assets(self, html: str) -> str:
        return embed_asset(html, self.logo_path, self.logo_reference)


def generate_account_statement_pdf(
    template_path: Path | str,
    data_path: Path | str,
    config: Config | None = None,
) -> Path:
    """Generate an account statement PDF.

    Args:
        template_path: Statement HTML template
        data_path: Statement JSON data
        config: Optional Config instance. If not provided, loads from environment

    Returns:
        Path to the generated PDF
    """
    config = config or get_config()
    logger.debug(f"Generating account statement from {template_path} and {data_path}")
    engine = AccountStatementEngine(
        logo_path=config.statement_logo_path,
        logo_reference=config.statement_logo_reference,
        output_dir=config.output_dir,
        producer=config.pdf_producer,
    )
    return engine.generate(Path(template_path), Path(data_path))
