"""Document template engine shared by all generated document types.

This module implements the DocumentTemplateEngine abstract base class. It
fixes the order of a generation request: load the template, load the data,
substitute tokens, insert table rows, embed assets, then render the PDF.
Concrete engines only describe what differs between document types.

Example:
    ```python
    from kra_docgen.generators.p9_report import P9ReportEngine

    engine = P9ReportEngine(output_dir=Path("out"))
    pdf_path = engine.generate(
        Path("p-nine-report.html"),
        Path("p9-data.json"),
    )
    ```
"""

import logging
from abc import ABC, abstractmethod
from datetime import datetime
from pathlib import Path
from typing import Any, Callable

from kra_docgen.config import APPLICATION_NAME
from kra_docgen.template.loader import load_data, read_template
from kra_docgen.template.pdf_generator import export_to_pdf, generate_output_path
from kra_docgen.template.tokens import (
    TokenBinding,
    lookup,
    resolve_tokens,
    substitute_tokens,
)

logger = logging.getLogger(__name__)


class DocumentTemplateEngine(ABC):
    """Abstract base class for HTML-to-PDF document engines.

    This class follows the Template Method pattern: ``generate`` runs the
    fixed sequence of steps and subclasses supply the document-specific
    parts.

    Attributes:
        filename_prefix: Prefix of generated file names (set by subclasses)
        output_dir: Directory where PDFs are written
        producer: Application name recorded in the PDF metadata
        clock: Returns the timestamp used in output file names
    """

    filename_prefix: str = ""

    def __init__(
        self,
        output_dir: Path = Path("out"),
        producer: str = APPLICATION_NAME,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        """Initialize template engine with output settings.

        Args:
            output_dir: Directory where PDFs are written
            producer: Application name recorded in the PDF metadata
            clock: Returns the timestamp used in output file names
        """
        self.output_dir = Path(output_dir)
        self.producer = producer
        self.clock = clock

    @abstractmethod
    def token_bindings(self) -> list[TokenBinding]:
        """Return the scalar token bindings for this document type.

        Raises:
            NotImplementedError: Must be implemented by subclasses
        """
        raise NotImplementedError("Subclasses must implement token_bindings")

    @abstractmethod
    def row_tokens(self) -> dict[str, tuple[str, Callable[[Any], str]]]:
        """Return table tokens as ``{token: (data path, row renderer)}``.

        Raises:
            NotImplementedError: Must be implemented by subclasses
        """
        raise NotImplementedError("Subclasses must implement row_tokens")

    def embed_assets(self, html: str) -> str:
        """Inline images into the HTML. No-op unless overridden."""
        return html

    def populate(self, html: str, data: dict[str, Any]) -> str:
        """Fill a template with scalar tokens and generated rows.

        Args:
            html: Template content
            data: Parsed JSON data

        Returns:
            Populated HTML

        Raises:
            MalformedInputError: If a required field is missing or invalid
        """
        values = resolve_tokens(data, self.token_bindings())
        for token, (path, render) in self.row_tokens().items():
            values[token] = render(lookup(data, path))
        return substitute_tokens(html, values)

    def generate(self, template_path: Path, data_path: Path) -> Path:
        """Generate one PDF document.

        Steps run in order and any failure aborts the rest; in particular a
        missing template stops the request before the data file is read.

        Args:
            template_path: HTML template file
            data_path: JSON data file

        Returns:
            Path to the generated PDF

        Raises:
            MissingFileError: If the template or data file is absent
            MalformedInputError: If the data is invalid or incomplete
            RenderError: If PDF rendering fails
        """
        html = read_template(template_path)
        data = load_data(data_path)

        html = self.populate(html, data)
        html = self.embed_assets(html)

        output_path = generate_output_path(
            self.filename_prefix, self.output_dir, now=self.clock()
        )
        export_to_pdf(html, output_path, self.producer)

        logger.info(f"{self.filename_prefix} generated: {output_path}")
        return output_path
