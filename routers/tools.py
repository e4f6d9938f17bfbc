import logging

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse
from pydantic import ValidationError

from maco.config import get_settings
from maco.tax import EmploymentType, TaxEstimateRequest, calculate_tax
from pages.renderer import render

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/tools", tags=["tools"])


def _estimator_context(**extra) -> dict:
    return {
        "tax_year": get_settings().default_tax_year,
        "employment_types": list(EmploymentType),
        **extra,
    }


def _first_error(exc: ValidationError) -> str:
    error = exc.errors()[0]
    field = ".".join(str(part) for part in error["loc"]) or "input"
    return f"{field.replace('_', ' ').capitalize()}: {error['msg']}"


@router.get("/tax-estimator", response_class=HTMLResponse)
def tax_estimator(request: Request):
    return render(request, "tax_estimator.html", _estimator_context())


@router.post("/tax-estimator", response_class=HTMLResponse)
async def tax_estimator_submit(request: Request):
    form = {k: v for k, v in (await request.form()).items() if v != ""}
    try:
        body = TaxEstimateRequest.model_validate(form)
    except ValidationError as exc:
        error = _first_error(exc)
        logger.info("Rejected tax estimator input: %s", error)
        return render(
            request,
            "tax_estimator.html",
            _estimator_context(form=form, error=error),
            status_code=400,
        )

    result = calculate_tax(body, get_settings().default_tax_year)
    return render(request, "tax_estimator.html", _estimator_context(form=body, result=result))
