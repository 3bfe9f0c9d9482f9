"""PDF generator for turning populated HTML into PDF files.

This module wraps the WeasyPrint backend: it builds timestamped output
paths, renders HTML strings to PDF bytes, stamps the application name into
the PDF Producer and Creator entries and writes the result to disk.
"""

import logging
from datetime import datetime
from pathlib import Path

from kra_docgen.exceptions.render_error import RenderError

logger = logging.getLogger(__name__)

TIMESTAMP_FORMAT = "%Y%m%d_%H%M%S"

# Backend loggers that are noisy at INFO/DEBUG
_BACKEND_LOGGERS = ("weasyprint", "weasyprint.progress", "fontTools")


def generate_output_path(
    prefix: str,
    output_dir: Path,
    now: datetime | None = None,
) -> Path:
    """Build ``{output_dir}/{prefix}_{yyyyMMdd_HHmmss}.pdf``.

    The timestamp has second resolution; two documents with the same prefix
    generated within the same second share a path and the later one wins.

    Args:
        prefix: Document-type file name prefix (e.g. ``"P9_Report"``)
        output_dir: Directory for the generated file
        now: Timestamp to use (defaults to the current local time)

    Returns:
        Output file path
    """
    timestamp = (now or datetime.now()).strftime(TIMESTAMP_FORMAT)
    return Path(output_dir) / f"{prefix}_{timestamp}.pdf"


def _quiet_backend_logging() -> None:
    for name in _BACKEND_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def export_to_pdf(html_content: str, output_path: Path, producer: str) -> Path:
    """Render HTML to a PDF file.

    The output directory is created when missing. The document is rendered
    fully in memory before anything is written, so a rendering failure
    leaves no file at ``output_path``.

    Args:
        html_content: Fully populated HTML document
        output_path: Destination PDF path
        producer: Application name written as the PDF Producer and Creator

    Returns:
        Path to the generated PDF file

    Raises:
        RenderError: If WeasyPrint is unavailable, rendering fails, or the
            file cannot be written
    """
    output_path = Path(output_path)

    try:
        import pydyf
        from weasyprint import HTML
    except (ImportError, OSError) as e:
        raise RenderError(
            "weasyprint library is required for PDF generation. "
            "Please install it: pip install weasyprint",
            context={"error": str(e)}
        ) from e

    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        _quiet_backend_logging()

        document = HTML(string=html_content).render()
        document.metadata.generator = producer

        def stamp_producer(_document, pdf) -> None:
            pdf.info["Producer"] = pydyf.String(producer)

        pdf_bytes = document.write_pdf(finisher=stamp_producer)

        output_path.write_bytes(pdf_bytes)
        logger.debug(f"Wrote {len(pdf_bytes)} bytes to {output_path}")
        return output_path

    except Exception as e:
        logger.error(f"Failed to generate PDF: {e}", exc_info=True)
        raise RenderError(
            f"PDF generation failed: {e}",
            context={"error": str(e), "output_path": str(output_path)}
        ) from e
