"""P9 monthly entry model.

This module defines the MonthlyEntry Pydantic model that represents one row
of the P9 annual tax deduction card, together with the ordered list of
amount columns shared by the row generator and the totals fold.

Example:
    ```python
    from kra_docgen.models.p9_models import MonthlyEntry

    data = json.loads(Path("p9-data.json").read_text())
    entries = [MonthlyEntry.model_validate(m) for m in data["monthlyData"]]
    print(entries[0].basic_salary)
    ```
"""

from pydantic import BaseModel, ConfigDict, Field

# Column order of the P9 table, after the leading month column.
P9_AMOUNT_FIELDS: tuple[str, ...] = (
    "basic_salary",
    "benefits_non_cash",
    "value_of_quarters",
    "total_gross_pay",
    "retirement_contribution_30_percent",
    "retirement_contribution_actual",
    "retirement_contribution_fixed",
    "owner_occupied_interest",
    "total_retirement_and_interest",
    "chargeable_pay",
    "tax_charged",
    "personal_relief",
    "insurance_relief",
    "paye_tax",
)


class MonthlyEntry(BaseModel):
    """A single month of salary, benefit, contribution and tax figures.

    Field names follow Python conventions; the JSON keys are accepted
    through camelCase aliases. All amounts are required: an entry lacking
    one of them is rejected rather than rendered with a silent zero, and
    so is an infinite or NaN amount.

    Attributes:
        month: Month label shown in the first column
        basic_salary: Basic salary (column A)
        benefits_non_cash: Non-cash benefits (column B)
        value_of_quarters: Value of housing quarters (column C)
        total_gross_pay: Total gross pay (column D)
        retirement_contribution_30_percent: 30% of column A (column E1)
        retirement_contribution_actual: Actual contribution (column E2)
        retirement_contribution_fixed: Fixed contribution limit (column E3)
        owner_occupied_interest: Owner-occupied interest (column F)
        total_retirement_and_interest: Retirement plus interest (column G)
        chargeable_pay: Chargeable pay (column H)
        tax_charged: Tax charged (column J)
        personal_relief: Personal relief (column K)
        insurance_relief: Insurance relief (column K)
        paye_tax: PAYE tax deducted (column L)
    """

    model_config = ConfigDict(
        populate_by_name=True,
        coerce_numbers_to_str=True,
        allow_inf_nan=False,
        frozen=True,
    )

    month: str = Field(..., description="Month label")
    basic_salary: float = Field(..., alias="basicSalary")
    benefits_non_cash: float = Field(..., alias="benefitsNonCash")
    value_of_quarters: float = Field(..., alias="valueOfQuarters")
    total_gross_pay: float = Field(..., alias="totalGrossPay")
    retirement_contribution_30_percent: float = Field(
        ..., alias="retirementContribution30Percent"
    )
    retirement_contribution_actual: float = Field(
        ..., alias="retirementContributionActual"
    )
    retirement_contribution_fixed: float = Field(
        ..., alias="retirementContributionFixed"
    )
    owner_occupied_interest: float = Field(..., alias="ownerOccupiedInterest")
    total_retirement_and_interest: float = Field(
        ..., alias="totalRetirementAndInterest"
    )
    chargeable_pay: float = Field(..., alias="chargeablePay")
    tax_charged: float = Field(..., alias="taxCharged")
    personal_relief: float = Field(..., alias="personalRelief")
    insurance_relief: float = Field(..., alias="insuranceRelief")
    paye_tax: float = Field(..., alias="payeTax")

    def amounts(self) -> tuple[float, ...]:
        """Return the 14 amount values in table column order."""
        return tuple(getattr(self, name) for name in P9_AMOUNT_FIELDS)
