"""HTML template utilities for PDF document generation.

This package contains the building blocks shared by every document type:
- DocumentTemplateEngine: Abstract base class running a generation request
- substitute_tokens / resolve_tokens: Literal ``{{TOKEN}}`` replacement
- render_monthly_rows / render_transaction_rows: Table row generation
- embed_asset: Inline images as data URIs
- export_to_pdf: WeasyPrint rendering
"""

from kra_docgen.template.assets import embed_asset
from kra_docgen.template.formatting import format_currency
from kra_docgen.template.pdf_generator import export_to_pdf, generate_output_path
from kra_docgen.template.rows import render_monthly_rows, render_transaction_rows
from kra_docgen.template.template_engine import DocumentTemplateEngine
from kra_docgen.template.tokens import TokenBinding, resolve_tokens, substitute_tokens

__all__ = [
    "DocumentTemplateEngine",
    "TokenBinding",
    "embed_asset",
    "export_to_pdf",
    "format_currency",
    "generate_output_path",
    "render_monthly_rows",
    "render_transaction_rows",
    "resolve_tokens",
    "substitute_tokens",
]
