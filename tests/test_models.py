"""Tests for data models."""

import pytest
from pydantic import ValidationError

from kra_docgen.models.p9_models import P9_AMOUNT_FIELDS, MonthlyEntry
from kra_docgen.models.statement_models import Credit, Debit, Transaction
from tests.fixtures.sample_data import sample_monthly_entry


class TestMonthlyEntry:
    """Tests for MonthlyEntry."""
    
    def test_reads_camel_case_keys(self) -> None:
        """Test JSON keys map onto snake_case fields."""
        entry = MonthlyEntry.model_validate(
            sample_monthly_entry(
                "March",
                retirementContribution30Percent=300,
                payeTax="12.5",
            )
        )
        assert entry.month == "March"
        assert entry.retirement_contribution_30_percent == 300.0
        assert entry.paye_tax == 12.5
    
    def test_amounts_in_column_order(self) -> None:
        """Test amounts() follows the table column order."""
        raw = sample_monthly_entry(basicSalary=1, payeTax=14)
        amounts = MonthlyEntry.model_validate(raw).amounts()
        
        assert len(amounts) == len(P9_AMOUNT_FIELDS) == 14
        assert amounts[0] == 1
        assert amounts[-1] == 14
    
    def test_numeric_month_label_is_text(self) -> None:
        """Test a numeric month label is accepted as text."""
        entry = MonthlyEntry.model_validate(sample_monthly_entry(month=1))
        assert entry.month == "1"
    
    def test_non_numeric_amount_rejected(self) -> None:
        """Test text amounts are rejected."""
        with pytest.raises(ValidationError):
            MonthlyEntry.model_validate(sample_monthly_entry(basicSalary="lots"))


class TestTransaction:
    """Tests for Transaction and its movement variants."""
    
    BASE = {"date": "01/01/2024", "docNo": "D1", "description": "x", "balance": "5"}
    
    def test_credit_movement(self) -> None:
        """Test a non-empty credit becomes a Credit."""
        txn = Transaction.from_record({**self.BASE, "credit": "5", "debit": ""})
        assert txn.movement == Credit(amount="5")
    
    def test_debit_movement(self) -> None:
        """Test an empty credit with a debit becomes a Debit."""
        txn = Transaction.from_record({**self.BASE, "credit": "", "debit": "7"})
        assert txn.movement == Debit(amount="7")
    
    @pytest.mark.parametrize(
        "amounts",
        [{"credit": "", "debit": ""}, {}, {"credit": None, "debit": None}],
    )
    def test_no_movement(self, amounts: dict) -> None:
        """Test empty, absent or null amounts give no movement."""
        txn = Transaction.from_record({**self.BASE, **amounts})
        assert txn.movement is None
    
    def test_numeric_fields_are_text(self) -> None:
        """Test numeric JSON values are kept as text."""
        txn = Transaction.from_record({**self.BASE, "docNo": 1001, "debit": 250})
        assert txn.doc_no == "1001"
        assert txn.movement == Debit(amount="250")
    
    def test_empty_amount_variant_rejected(self) -> None:
        """Test a Credit cannot hold an empty amount."""
        with pytest.raises(ValidationError):
            Credit(amount="")
