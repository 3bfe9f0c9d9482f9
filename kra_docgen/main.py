"""Main entry point for the KRA Document Generator.

This module runs the P9 report and account statement generators one after
the other and prints the paths of the generated PDFs. A failure in one
document is reported and does not prevent the other from being attempted.

Example:
    ```bash
    python -m kra_docgen.main
    python -m kra_docgen.main --only p9 --p9-data ./my-p9.json
    ```
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Any, Callable

from kra_docgen.config import Config, get_config
from kra_docgen.generators.account_statement import generate_account_statement_pdf
from kra_docgen.generators.p9_report import generate_p9_pdf

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

DOCUMENTS = ("p9", "statement")


def _run_document(
    label: str,
    generate: Callable[..., Path],
    template_path: Path,
    data_path: Path,
    config: Config,
) -> Path | None:
    """Run one generator, reporting instead of raising on failure."""
    try:
        output_path = generate(template_path, data_path, config=config)
    except Exception as e:
        logger.error(f"{label} generation failed: {e}", exc_info=True)
        print(f"Error: {label}: {e}", file=sys.stderr)
        return None

    print(f"{label} PDF generated: {output_path}")
    return output_path


def run_all(
    config: Config | None = None,
    only: str | None = None,
) -> dict[str, Path | None]:
    """Generate the configured documents.

    Args:
        config: Optional Config instance. If not provided, loads from environment
        only: Restrict generation to ``"p9"`` or ``"statement"``

    Returns:
        Mapping of document key to output path (None for a failed document)
    """
    config = config or get_config()
    selected = [only] if only else list(DOCUMENTS)
    results: dict[str, Path | None] = {}

    if "p9" in selected:
        results["p9"] = _run_document(
            "P9",
            generate_p9_pdf,
            config.p9_template_path,
            config.p9_data_path,
            config,
        )

    if "statement" in selected:
        results["statement"] = _run_document(
            "Account Statement",
            generate_account_statement_pdf,
            config.statement_template_path,
            config.statement_data_path,
            config,
        )

    return results


def _build_config(args: argparse.Namespace) -> Config:
    """Apply command-line overrides on top of the loaded configuration."""
    overrides: dict[str, Any] = {
        "p9_template_path": args.p9_template,
        "p9_data_path": args.p9_data,
        "statement_template_path": args.statement_template,
        "statement_data_path": args.statement_data,
        "output_dir": args.output_dir,
    }
    overrides = {key: value for key, value in overrides.items() if value is not None}
    config = get_config()
    if overrides:
        config = config.model_copy(update=overrides)
    return config


def main(argv: list[str] | None = None) -> int:
    """Main entry point for command-line usage.

    Returns:
        Exit code (0 when every document succeeded, 1 otherwise)
    """
    parser = argparse.ArgumentParser(
        description="Generate P9 report and account statement PDFs from HTML templates",
    )
    parser.add_argument("--p9-template", type=Path, help="P9 HTML template")
    parser.add_argument("--p9-data", type=Path, help="P9 JSON data file")
    parser.add_argument(
        "--statement-template", type=Path, help="Account statement HTML template"
    )
    parser.add_argument(
        "--statement-data", type=Path, help="Account statement JSON data file"
    )
    parser.add_argument("--output-dir", type=Path, help="Directory for generated PDFs")
    parser.add_argument(
        "--only",
        choices=DOCUMENTS,
        help="Generate a single document type",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging (DEBUG level)",
    )

    args = parser.parse_args(argv)

    try:
        config = _build_config(args)
    except Exception as e:
        logger.error(f"Failed to load configuration: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 1

    logging.getLogger().setLevel(
        logging.DEBUG if args.verbose else config.log_level
    )
    if args.verbose:
        logger.debug("Verbose logging enabled")

    try:
        results = run_all(config, only=args.only)
    except KeyboardInterrupt:
        logger.info("Generation interrupted by user")
        print("\nGeneration interrupted by user.", file=sys.stderr)
        return 130

    return 0 if all(path is not None for path in results.values()) else 1


if __name__ == "__main__":
    sys.exit(main())
