"""Image asset embedding.

The PDF renderer is given an HTML string without a base URL, so relative
image paths in a template cannot be resolved. This module inlines such
images as base64 data URIs.
"""

import base64
import logging
from pathlib import Path

logger = logging.getLogger(__name__)

MIME_TYPES: dict[str, str] = {
    "png": "image/png",
    "jpg": "image/jpeg",
    "jpeg": "image/jpeg",
    "gif": "image/gif",
    "svg": "image/svg+xml",
}
DEFAULT_MIME_TYPE = "image/png"


def mime_type_for(path: Path | str) -> str:
    """Return the image MIME type for a file extension, defaulting to PNG."""
    extension = Path(path).suffix.lstrip(".").lower()
    return MIME_TYPES.get(extension, DEFAULT_MIME_TYPE)


def to_data_uri(asset_path: Path | str) -> str | None:
    """Read an image and encode it as a data URI.

    Args:
        asset_path: Path to the image file

    Returns:
        ``data:<mime>;base64,<payload>`` string, or None when the file is
        missing or unreadable
    """
    path = Path(asset_path)
    if not path.is_file():
        logger.warning(
            f"Asset file not found: {path}. PDF will be generated without it."
        )
        return None

    try:
        payload = base64.b64encode(path.read_bytes()).decode("ascii")
    except OSError as e:
        logger.error(f"Error reading asset file {path}: {e}")
        return None

    return f"data:{mime_type_for(path)};base64,{payload}"


def embed_asset(html: str, asset_path: Path | str, reference: str) -> str:
    """Replace a relative asset reference in the HTML with an inline data URI.

    A missing asset leaves the HTML untouched so generation can continue.

    Args:
        html: HTML content
        asset_path: Image file to embed
        reference: Literal path string used in the template
            (e.g. ``"assets/ukulima-sacco-logo.png"``)

    Returns:
        HTML with every occurrence of ``reference`` replaced
    """
    data_uri = to_data_uri(asset_path)
    if data_uri is None:
        return html

    logger.debug(f"Embedded {asset_path} in place of '{reference}'")
    return html.replace(reference, data_uri)
