"""Contact form submissions.

Submissions are validated, logged and discarded.  Nothing is stored or
e-mailed; the firm picks enquiries up from the application log.
"""

from __future__ import annotations

import logging
import re
from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

logger = logging.getLogger(__name__)

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

REQUIRED_FIELDS = ("name", "email", "message")


class ContactError(ValueError):
    """Raised when a submission is missing fields or has a malformed e-mail."""


class ContactSubmission(BaseModel):
    """One enquiry from the contact form.  Unknown form fields are dropped."""

    model_config = ConfigDict(extra="ignore", str_strip_whitespace=True)

    name: str = ""
    email: str = ""
    phone: Optional[str] = None
    company: Optional[str] = None
    service: Optional[str] = Field(default=None, description="Service slug the enquiry is about.")
    message: str = ""
    consent: bool = False


def validate_submission(submission: ContactSubmission) -> None:
    """Raise :class:`ContactError` unless *submission* can be accepted."""
    missing = [f for f in REQUIRED_FIELDS if not getattr(submission, f)]
    if missing:
        raise ContactError("Missing required fields: " + ", ".join(missing))
    if not EMAIL_PATTERN.match(submission.email):
        raise ContactError("Invalid email address")


def record_submission(
    submission: ContactSubmission,
    *,
    user_agent: Optional[str] = None,
    ip_address: Optional[str] = None,
) -> dict:
    """Validate and log *submission*; return the log entry that was written."""
    validate_submission(submission)
    entry = {
        **submission.model_dump(),
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "user_agent": user_agent or "unknown",
        "ip": ip_address or "unknown",
    }
    logger.info("Contact form submission: %s", entry)
    return entry
