"""UK income tax and National Insurance estimate.

Usage::

    from maco.tax import TaxEstimateRequest, calculate_tax

    result = calculate_tax(TaxEstimateRequest(income=50_000))
    result.net_income   # 39_519.6 for 2024/25
"""

from __future__ import annotations

import logging
from typing import Optional

from maco.tax.models import (
    BandCharge,
    EmploymentType,
    TaxCalculation,
    TaxEstimateRequest,
    TaxYear,
)

logger = logging.getLogger(__name__)

__all__ = [
    "DEFAULT_TAX_YEAR",
    "TAX_YEARS",
    "UnknownTaxYearError",
    "calculate_tax",
    "format_gbp",
    "get_tax_year",
    "national_insurance",
    "personal_allowance",
]


class UnknownTaxYearError(KeyError):
    """Raised when a tax year label has no published rates in :data:`TAX_YEARS`."""


# ---------------------------------------------------------------------------
# Published HMRC rates
# ---------------------------------------------------------------------------

TAX_YEARS: dict[str, TaxYear] = {
    "2024/25": TaxYear(
        label="2024/25",
        personal_allowance=12_570,
        taper_threshold=100_000,
        basic_rate_band=37_700,
        additional_rate_threshold=125_140,
        basic_rate=0.20,
        higher_rate=0.40,
        additional_rate=0.45,
        ni_lower_limit=12_570,
        ni_upper_limit=50_270,
        class1_main_rate=0.08,
        class1_upper_rate=0.02,
        class4_main_rate=0.06,
        class4_upper_rate=0.02,
    ),
    "2025/26": TaxYear(
        label="2025/26",
        personal_allowance=12_570,
        taper_threshold=100_000,
        basic_rate_band=37_700,
        additional_rate_threshold=125_140,
        basic_rate=0.20,
        higher_rate=0.40,
        additional_rate=0.45,
        ni_lower_limit=12_570,
        ni_upper_limit=50_270,
        class1_main_rate=0.08,
        class1_upper_rate=0.02,
        class4_main_rate=0.06,
        class4_upper_rate=0.02,
    ),
}

DEFAULT_TAX_YEAR = "2024/25"


def get_tax_year(label: Optional[str] = None) -> TaxYear:
    """Look up the rates for *label* (e.g. ``"2024/25"``).

    Raises:
        UnknownTaxYearError: If no rates are published for that year.
    """
    label = label or DEFAULT_TAX_YEAR
    try:
        return TAX_YEARS[label]
    except KeyError:
        raise UnknownTaxYearError(
            f"No rates for tax year '{label}'. Available: {sorted(TAX_YEARS)}"
        ) from None


# ---------------------------------------------------------------------------
# Components
# ---------------------------------------------------------------------------


def personal_allowance(adjusted_income: float, year: TaxYear) -> float:
    """Personal allowance after the £1-for-£2 taper above the taper threshold."""
    if adjusted_income <= year.taper_threshold:
        return year.personal_allowance
    reduction = (adjusted_income - year.taper_threshold) / 2
    return max(0.0, year.personal_allowance - reduction)


def _band_charges(taxable_income: float, year: TaxYear) -> list[BandCharge]:
    limits = (
        ("basic", year.basic_rate, 0.0, year.basic_rate_band),
        ("higher", year.higher_rate, year.basic_rate_band, year.additional_rate_threshold),
        ("additional", year.additional_rate, year.additional_rate_threshold, None),
    )
    charges: list[BandCharge] = []
    for name, rate, lower, upper in limits:
        top = taxable_income if upper is None else min(taxable_income, upper)
        amount = max(0.0, top - lower)
        if amount <= 0:
            continue
        charges.append(BandCharge(name=name, rate=rate, taxable_amount=amount, tax=amount * rate))
    return charges


def national_insurance(
    earnings: float,
    employment_type: EmploymentType,
    year: TaxYear,
) -> float:
    """Annual NI on *earnings* (salary for employees, profit for the self-employed).

    Directors paid through a company are not modelled and pay nothing here.
    """
    if employment_type is EmploymentType.company:
        return 0.0

    if employment_type is EmploymentType.employed:
        main_rate, upper_rate = year.class1_main_rate, year.class1_upper_rate
    else:
        main_rate, upper_rate = year.class4_main_rate, year.class4_upper_rate

    main = max(0.0, min(earnings, year.ni_upper_limit) - year.ni_lower_limit)
    above = max(0.0, earnings - year.ni_upper_limit)
    ni = main * main_rate + above * upper_rate

    if (
        employment_type is EmploymentType.self_employed
        and year.class2_annual
        and earnings >= year.class2_threshold
    ):
        ni += year.class2_annual
    return ni


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def calculate_tax(
    request: TaxEstimateRequest,
    tax_year: Optional[str] = None,
) -> TaxCalculation:
    """Estimate income tax and National Insurance for one tax year.

    Args:
        request:  Validated estimator input.
        tax_year: Label such as ``"2024/25"``.  Defaults to
            :data:`DEFAULT_TAX_YEAR`.

    Returns:
        A :class:`~maco.tax.models.TaxCalculation` with amounts rounded to
        the penny.

    Raises:
        UnknownTaxYearError: If *tax_year* has no published rates.
    """
    year = get_tax_year(tax_year)
    gross = request.income

    if request.employment_type is EmploymentType.self_employed:
        earnings = max(0.0, gross - request.expenses)
    else:
        earnings = gross

    adjusted = max(0.0, earnings - request.pension_contributions)
    allowance = personal_allowance(adjusted, year)
    taxable = max(0.0, adjusted - allowance)

    bands = _band_charges(taxable, year)
    income_tax = sum(band.tax for band in bands)
    ni = national_insurance(earnings, request.employment_type, year)

    total = income_tax + ni
    effective_rate = (total / gross) * 100 if gross > 0 else 0.0

    logger.debug(
        "Tax estimate %s: gross=%.2f type=%s total=%.2f",
        year.label, gross, request.employment_type.value, total,
    )

    return TaxCalculation(
        tax_year=year.label,
        employment_type=request.employment_type,
        gross_income=round(gross, 2),
        personal_allowance=round(allowance, 2),
        taxable_income=round(taxable, 2),
        income_tax=round(income_tax, 2),
        national_insurance=round(ni, 2),
        total_tax=round(total, 2),
        net_income=round(gross - total, 2),
        effective_rate=round(effective_rate, 2),
        monthly_gross=round(gross / 12, 2),
        monthly_net=round((gross - total) / 12, 2),
        bands=[
            band.model_copy(update={
                "taxable_amount": round(band.taxable_amount, 2),
                "tax": round(band.tax, 2),
            })
            for band in bands
        ],
    )


def format_gbp(amount: float) -> str:
    """Format *amount* as whole pounds, e.g. ``12570`` → ``"£12,570"``."""
    sign = "-" if amount < 0 else ""
    return f"{sign}£{abs(amount):,.0f}"
