"""Token substitution engine.

This module replaces literal ``{{NAME}}`` markers in an HTML template.
Substitution is plain text replacement driven by an explicit mapping, so
the full set of tokens a document uses can be inspected and tested on its
own.

Example:
    ```python
    from kra_docgen.template.tokens import (
        TokenBinding,
        resolve_tokens,
        substitute_tokens,
    )

    bindings = [TokenBinding("EMPLOYER_NAME", "employer.name")]
    values = resolve_tokens(data, bindings)
    html = substitute_tokens(html, values)
    ```
"""

import logging
from typing import Any, Callable, Iterable, Mapping, NamedTuple

from kra_docgen.exceptions.malformed_input_error import MalformedInputError
from kra_docgen.template.formatting import as_number, as_text, format_currency

logger = logging.getLogger(__name__)


def token_marker(name: str) -> str:
    """Return the literal marker for a token name (``YEAR`` -> ``{{YEAR}}``)."""
    return "{{" + name + "}}"


def currency_value(value: Any) -> str:
    return format_currency(as_number(value))


class TokenBinding(NamedTuple):
    """Binds a token name to a dotted path in the data tree.

    Attributes:
        name: Token name without braces (e.g. ``"EMPLOYER_PIN"``)
        path: Dotted path into the JSON data (e.g. ``"employer.pin"``)
        formatter: Converts the raw JSON value into replacement text
    """

    name: str
    path: str
    formatter: Callable[[Any], str] = as_text


def lookup(data: Mapping[str, Any], path: str) -> Any:
    """Fetch a value from nested JSON objects by dotted path.

    Args:
        data: Parsed JSON object
        path: Dotted path such as ``"balances.closing"``

    Returns:
        Value found at the path

    Raises:
        MalformedInputError: If any segment of the path is missing
    """
    node: Any = data
    walked: list[str] = []
    for key in path.split("."):
        walked.append(key)
        if not isinstance(node, Mapping) or key not in node:
            raise MalformedInputError(
                f"Missing field '{'.'.join(walked)}' in input data",
                context={"path": path},
            )
        node = node[key]
    return node


def resolve_tokens(
    data: Mapping[str, Any], bindings: Iterable[TokenBinding]
) -> dict[str, str]:
    """Resolve every binding against the data tree.

    Lookups are eager: the first missing or unformattable field aborts
    resolution.

    Args:
        data: Parsed JSON object
        bindings: Token bindings for one document type

    Returns:
        Mapping of token name to replacement text

    Raises:
        MalformedInputError: If a bound field is missing or cannot be formatted
    """
    values: dict[str, str] = {}
    for binding in bindings:
        raw = lookup(data, binding.path)
        try:
            values[binding.name] = binding.formatter(raw)
        except (TypeError, ValueError) as e:
            raise MalformedInputError(
                f"Field '{binding.path}' has an unusable value: {raw!r}",
                context={"path": binding.path, "token": binding.name},
            ) from e
    return values


def substitute_tokens(html: str, values: Mapping[str, str]) -> str:
    """Replace each ``{{NAME}}`` marker with its value.

    Every occurrence of a marker is replaced. Markers absent from the
    template are ignored, and values are inserted without HTML escaping.

    Args:
        html: Template content
        values: Mapping of token name to replacement text

    Returns:
        HTML with the markers replaced
    """
    for name, value in values.items():
        marker = token_marker(name)
        count = html.count(marker)
        if count:
            html = html.replace(marker, value)
        logger.debug(f"Token {marker}: {count} occurrence(s) replaced")
    return html
