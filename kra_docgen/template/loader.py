"""Template and data loading.

This module reads HTML templates and JSON data files from disk, turning
missing files and unparseable JSON into the generator's own exceptions.
"""

import json
import logging
from pathlib import Path
from typing import Any

from kra_docgen.exceptions.malformed_input_error import MalformedInputError
from kra_docgen.exceptions.missing_file_error import MissingFileError

logger = logging.getLogger(__name__)


def read_template(template_path: Path | str) -> str:
    """Read an HTML template into a string.

    Args:
        template_path: Path to the HTML template file

    Returns:
        Template content

    Raises:
        MissingFileError: If the template does not exist
    """
    path = Path(template_path)
    if not path.is_file():
        raise MissingFileError(
            f"Template not found: {path}",
            context={"template_path": str(path)},
        )

    content = path.read_text(encoding="utf-8")
    logger.debug(f"Loaded template {path} ({len(content)} characters)")
    return content


def load_data(data_path: Path | str) -> dict[str, Any]:
    """Parse a JSON data file into a dictionary tree.

    Args:
        data_path: Path to the JSON data file

    Returns:
        Parsed JSON object

    Raises:
        MissingFileError: If the data file does not exist
        MalformedInputError: If the file is not valid JSON or its top level
            is not an object
    """
    path = Path(data_path)
    if not path.is_file():
        raise MissingFileError(
            f"Data file not found: {path}",
            context={"data_path": str(path)},
        )

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise MalformedInputError(
            f"Invalid JSON in {path}: {e.msg} (line {e.lineno}, column {e.colno})",
            context={"data_path": str(path)},
        ) from e

    if not isinstance(data, dict):
        raise MalformedInputError(
            f"Expected a JSON object at the top level of {path}",
            context={"data_path": str(path), "type": type(data).__name__},
        )

    logger.debug(f"Loaded data {path} ({len(data)} top-level fields)")
    return data
