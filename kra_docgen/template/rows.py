"""Table row generation for P9 monthly figures and statement transactions.

This module turns JSON arrays into HTML ``<tr>`` markup. Each table is
described by a fixed column schema; every record becomes one row by
applying the column formatters in order. The P9 table additionally ends with
a totals row computed as a fold over the monthly entries.
"""

import logging
from typing import Any, Callable, Iterable, NamedTuple, Sequence, TypeVar

from pydantic import ValidationError

from kra_docgen.exceptions.malformed_input_error import MalformedInputError
from kra_docgen.models.p9_models import P9_AMOUNT_FIELDS, MonthlyEntry
from kra_docgen.models.statement_models import Credit, Debit, Transaction
from kra_docgen.template.formatting import format_currency

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT")

TOTALS_ROW_STYLE = "font-weight: bold; background-color: #f0f0f0;"


class Column(NamedTuple):
    """A table column: optional CSS class plus a cell formatter.

    Attributes:
        render: Produces the cell text for a record
        css_class: Value of the ``class`` attribute, or None for a bare cell
    """

    render: Callable[[Any], str]
    css_class: str | None = None


def _cell(text: str, css_class: str | None = None) -> str:
    if css_class:
        return f"<td class='{css_class}'>{text}</td>"
    return f"<td>{text}</td>"


def render_row(
    record: RecordT,
    columns: Sequence[Column],
    style: str | None = None,
) -> str:
    """Render one record as a table row.

    Args:
        record: Record to render
        columns: Column schema applied in order
        style: Optional inline style for the ``<tr>`` element

    Returns:
        ``<tr>`` markup for the record
    """
    opening = f"<tr style='{style}'>" if style else "<tr>"
    cells = "".join(_cell(col.render(record), col.css_class) for col in columns)
    return f"{opening}{cells}</tr>"


def render_rows(
    records: Iterable[RecordT], columns: Sequence[Column]
) -> str:
    """Render every record with the same column schema."""
    return "".join(render_row(record, columns) for record in records)


def _parse_records(
    raw_records: Any,
    parse: Callable[[dict[str, Any]], RecordT],
    field_name: str,
) -> list[RecordT]:
    """Validate a JSON array of objects into typed records.

    Raises:
        MalformedInputError: If the value is not an array or an entry is invalid
    """
    if not isinstance(raw_records, list):
        raise MalformedInputError(
            f"Field '{field_name}' must be an array",
            context={"path": field_name, "type": type(raw_records).__name__},
        )

    records: list[RecordT] = []
    for index, raw in enumerate(raw_records):
        if not isinstance(raw, dict):
            raise MalformedInputError(
                f"Entry {index} of '{field_name}' must be an object",
                context={"path": field_name, "index": index},
            )
        try:
            records.append(parse(raw))
        except ValidationError as e:
            raise MalformedInputError(
                f"Invalid entry {index} of '{field_name}': "
                f"{e.error_count()} field error(s)",
                context={"path": field_name, "index": index, "errors": e.errors()},
            ) from e
    return records


# ---------------------------------------------------------------------------
# P9 monthly rows
# ---------------------------------------------------------------------------


def _amount_column(field: str) -> Column:
    return Column(render=lambda entry: format_currency(getattr(entry, field)))


P9_COLUMNS: tuple[Column, ...] = (
    Column(render=lambda entry: entry.month),
    *(_amount_column(field) for field in P9_AMOUNT_FIELDS),
)


def compute_totals(entries: Iterable[MonthlyEntry]) -> dict[str, float]:
    """Sum every amount column across the monthly entries.

    Args:
        entries: Monthly entries in table order

    Returns:
        Mapping of amount field name to its column total; all zero when
        there are no entries
    """
    totals = dict.fromkeys(P9_AMOUNT_FIELDS, 0.0)
    for entry in entries:
        totals = {
            field: total + getattr(entry, field)
            for field, total in totals.items()
        }
    return totals


def render_totals_row(totals: dict[str, float]) -> str:
    """Render the bold totals row closing the P9 table."""
    cells = [_cell("TOTAL")]
    cells.extend(_cell(format_currency(totals[field])) for field in P9_AMOUNT_FIELDS)
    return f"<tr style='{TOTALS_ROW_STYLE}'>{''.join(cells)}</tr>"


def render_monthly_rows(monthly_data: Any) -> str:
    """Render P9 monthly rows followed by the totals row.

    Args:
        monthly_data: The ``monthlyData`` array from the P9 JSON

    Returns:
        Concatenated ``<tr>`` markup

    Raises:
        MalformedInputError: If an entry is missing a field or has a
            non-numeric amount
    """
    entries = _parse_records(
        monthly_data, MonthlyEntry.model_validate, "monthlyData"
    )
    rows = render_rows(entries, P9_COLUMNS)
    totals_row = render_totals_row(compute_totals(entries))
    logger.debug(f"Rendered {len(entries)} monthly rows plus totals")
    return rows + totals_row


# ---------------------------------------------------------------------------
# Statement transaction rows
# ---------------------------------------------------------------------------


def _credit_text(txn: Transaction) -> str:
    return txn.movement.amount if isinstance(txn.movement, Credit) else ""


def _debit_text(txn: Transaction) -> str:
    return txn.movement.amount if isinstance(txn.movement, Debit) else ""


def render_transaction_row(txn: Transaction) -> str:
    """Render one statement line.

    Only the cell matching the movement carries the amount class and value;
    the opposite cell is a plain empty ``amount-col``.
    """
    credit_class = "amount-col table-credit" if isinstance(txn.movement, Credit) else "amount-col"
    debit_class = "amount-col table-debit" if isinstance(txn.movement, Debit) else "amount-col"
    columns: tuple[Column, ...] = (
        Column(lambda t: t.date, "date-col"),
        Column(lambda t: t.doc_no, "doc-col"),
        Column(lambda t: t.description, "description-col"),
        Column(_credit_text, credit_class),
        Column(_debit_text, debit_class),
        Column(lambda t: t.balance, "balance-col balance-amount"),
    )
    return render_row(txn, columns)


def render_transaction_rows(transactions: Any) -> str:
    """Render every statement transaction.

    Args:
        transactions: The ``transactions`` array from the statement JSON

    Returns:
        Concatenated ``<tr>`` markup

    Raises:
        MalformedInputError: If a transaction is missing a required field
    """
    parsed = _parse_records(transactions, Transaction.from_record, "transactions")
    logger.debug(f"Rendered {len(parsed)} transaction rows")
    return "".join(render_transaction_row(txn) for txn in parsed)
