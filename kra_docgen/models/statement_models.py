"""Account statement transaction models.

This module defines the Transaction Pydantic model and the tagged movement
types that replace a pair of nullable credit/debit strings. A transaction
carries either a Credit, a Debit, or no movement at all, so a row with both
amounts populated cannot be represented.

Example:
    ```python
    from kra_docgen.models.statement_models import Credit, Transaction

    txn = Transaction.from_record({
        "date": "01/03/2024",
        "docNo": "DEP-001",
        "description": "Cash deposit",
        "credit": "5,000.00",
        "debit": "",
        "balance": "12,500.00",
    })
    assert txn.movement == Credit(amount="5,000.00")
    ```
"""

from typing import Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class Credit(BaseModel):
    """Money paid into the account."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["credit"] = "credit"
    amount: str = Field(..., min_length=1)


class Debit(BaseModel):
    """Money paid out of the account."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["debit"] = "debit"
    amount: str = Field(..., min_length=1)


Movement = Union[Credit, Debit, None]


def _amount_text(value: Any) -> str:
    # null and absent amounts both read as empty
    if value is None:
        return ""
    return str(value)


class Transaction(BaseModel):
    """A single account statement line.

    Attributes:
        date: Transaction date as printed on the statement
        doc_no: Document or reference number
        description: Free-text narration
        movement: Credit, Debit, or None when neither amount is present
        balance: Running balance after the transaction (pre-computed)
    """

    model_config = ConfigDict(
        populate_by_name=True,
        coerce_numbers_to_str=True,
        frozen=True,
    )

    date: str
    doc_no: str = Field(..., alias="docNo")
    description: str
    movement: Movement = None
    balance: str

    @classmethod
    def from_record(cls, record: dict[str, Any]) -> "Transaction":
        """Build a transaction from a raw JSON record.

        A non-empty credit takes precedence; a non-empty debit is used
        otherwise. When both are empty the transaction has no movement.

        Args:
            record: Transaction object from the statement JSON

        Returns:
            Validated Transaction instance

        Raises:
            pydantic.ValidationError: If a required field is missing
        """
        credit = _amount_text(record.get("credit"))
        debit = _amount_text(record.get("debit"))

        movement: Movement
        if credit:
            movement = Credit(amount=credit)
        elif debit:
            movement = Debit(amount=debit)
        else:
            movement = None

        fields = {k: v for k, v in record.items() if k not in ("credit", "debit")}
        return cls.model_validate({**fields, "movement": movement})
