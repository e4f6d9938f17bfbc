import logging

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse, JSONResponse

from data.services import SERVICES
from maco.contact import ContactError, ContactSubmission, record_submission
from pages.renderer import render

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/contact", tags=["contact"])

SUCCESS_MESSAGE = "Thank you for your message. We'll get back to you within 24 hours."


def _client_ip(request: Request) -> str | None:
    forwarded = request.headers.get("x-forwarded-for")
    if forwarded:
        return forwarded.split(",")[0].strip()
    return request.client.host if request.client else None


def _page(request: Request, status_code: int = 200, **context) -> HTMLResponse:
    context.setdefault("services", SERVICES)
    return render(request, "contact.html", context, status_code=status_code)


@router.get("", response_class=HTMLResponse)
def contact_form(request: Request, service: str | None = None):
    return _page(request, selected_service=service)


@router.post("")
async def submit_contact(request: Request):
    """Accept a submission as a form post (HTML reply) or JSON body (JSON reply)."""
    wants_json = request.headers.get("content-type", "").startswith("application/json")
    payload: dict = {}
    try:
        body = await request.json() if wants_json else dict(await request.form())
        if not isinstance(body, dict):
            raise ContactError("Expected a JSON object")
        payload = body
        submission = ContactSubmission.model_validate(payload)
        record_submission(
            submission,
            user_agent=request.headers.get("user-agent"),
            ip_address=_client_ip(request),
        )
    except ContactError as exc:
        message = str(exc)
    except ValueError:
        # Malformed JSON body or a field of the wrong type.
        message = "Invalid submission"
    else:
        if wants_json:
            return {"message": SUCCESS_MESSAGE}
        return _page(request, success=SUCCESS_MESSAGE)

    logger.info("Rejected contact submission: %s", message)
    if wants_json:
        return JSONResponse({"error": message}, status_code=400)
    return _page(
        request,
        status_code=400,
        error=message,
        form=payload,
        selected_service=payload.get("service"),
    )
