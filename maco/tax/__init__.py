"""UK income tax and National Insurance estimator."""

from maco.tax.calculator import (
    DEFAULT_TAX_YEAR,
    TAX_YEARS,
    UnknownTaxYearError,
    calculate_tax,
    format_gbp,
    get_tax_year,
)
from maco.tax.models import EmploymentType, TaxCalculation, TaxEstimateRequest, TaxYear

__all__ = [
    "DEFAULT_TAX_YEAR",
    "EmploymentType",
    "TAX_YEARS",
    "TaxCalculation",
    "TaxEstimateRequest",
    "TaxYear",
    "UnknownTaxYearError",
    "calculate_tax",
    "format_gbp",
    "get_tax_year",
]
