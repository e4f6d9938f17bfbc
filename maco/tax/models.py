"""Models for the UK tax estimator.

Hierarchy:
    EmploymentType      -- how the income is earned; selects the NI class
    TaxYear             -- published HMRC thresholds and rates for one year
    TaxEstimateRequest  -- user input, validated
    BandCharge          -- income tax charged within a single band
    TaxCalculation      -- the derived, transient result
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class EmploymentType(str, Enum):
    """How the estimated income is earned."""

    employed = "employed"
    self_employed = "self-employed"
    company = "company"


@dataclass(frozen=True)
class TaxYear:
    """rUK (England, Wales, Northern Ireland) thresholds for one tax year.

    All amounts are annual and in pounds.  Rates are fractions.
    """

    label: str

    personal_allowance: float
    taper_threshold: float
    basic_rate_band: float
    additional_rate_threshold: float
    basic_rate: float
    higher_rate: float
    additional_rate: float

    # Class 1 (employee) and Class 4 (self-employed) share the same limits.
    ni_lower_limit: float
    ni_upper_limit: float
    class1_main_rate: float
    class1_upper_rate: float
    class4_main_rate: float
    class4_upper_rate: float

    # Flat annual Class 2 charge and the profit level it starts at.
    class2_annual: float = 0.0
    class2_threshold: float = 0.0


class TaxEstimateRequest(BaseModel):
    """Input to :func:`maco.tax.calculator.calculate_tax`."""

    model_config = ConfigDict(extra="ignore")

    income: float = Field(ge=0, description="Annual gross income before tax and deductions.")
    employment_type: EmploymentType = Field(
        default=EmploymentType.employed,
        description="Selects which National Insurance class applies.",
    )
    pension_contributions: float = Field(
        default=0,
        ge=0,
        description="Annual personal pension contributions, deducted before income tax.",
    )
    expenses: float = Field(
        default=0,
        ge=0,
        description="Allowable business expenses.  Only reduces income for the self-employed.",
    )


class BandCharge(BaseModel):
    """Income tax charged on the slice of taxable income within one band."""

    model_config = ConfigDict(extra="ignore")

    name: str = Field(description="'basic', 'higher' or 'additional'.")
    rate: float
    taxable_amount: float
    tax: float


class TaxCalculation(BaseModel):
    """The estimator's output.  Recomputed per request, never stored."""

    model_config = ConfigDict(extra="ignore")

    tax_year: str
    employment_type: EmploymentType
    gross_income: float
    personal_allowance: float
    taxable_income: float
    income_tax: float
    national_insurance: float
    total_tax: float
    net_income: float
    effective_rate: float = Field(description="Total tax as a percentage of gross income.")
    monthly_gross: float = Field(description="Gross income spread over twelve months.")
    monthly_net: float = Field(description="Take-home pay spread over twelve months.")
    bands: list[BandCharge] = Field(default_factory=list)
