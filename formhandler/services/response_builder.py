"""Builds the HTTP response for a submission"""
from typing import Dict, List, Optional

import httpx
from pydantic import BaseModel, ConfigDict

from formhandler.config import Settings
from formhandler.models.events import ResponseOutcome
from formhandler.models.forms import SubmissionResponse
from formhandler.services.payload import FORM_CONTENT_TYPE
from formhandler.services.resolver import FormResolution, ResolutionStatus
from formhandler.templating import render_minified

JSON_MEDIA_TYPE = "application/json"
HTML_MEDIA_TYPE = "text/html"

SUCCESS_HEADING = "Form Submitted!"
PROBLEM_HEADING = "Uh oh! There was a problem with the form."
PROBLEMS_HEADING = "Uh oh! There were problems with the form."


class SubmissionState(BaseModel):
    """Everything the response depends on, gathered over one request"""
    model_config = ConfigDict(arbitrary_types_allowed=True)

    resolution: FormResolution
    has_payload: bool
    errors: Dict[str, List[str]] = {}
    did_send: bool = False
    redirect: Optional[str] = None

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)

    @property
    def failed_send(self) -> bool:
        return not self.did_send

    @property
    def invalid_form_id(self) -> bool:
        return self.resolution.status is ResolutionStatus.INVALID_ID

    @property
    def missing_form_id(self) -> bool:
        return not self.resolution.has_form_id and self.has_payload

    @property
    def empty_post(self) -> bool:
        return not self.resolution.has_form_id and not self.has_payload

    def get_status_code(self) -> int:
        if self.empty_post:
            return 302
        if self.has_errors or self.failed_send or self.invalid_form_id or self.missing_form_id:
            return 400
        if self.redirect:
            return 302
        return 200

    def get_reasons(self) -> List[str]:
        reasons = []
        if self.has_errors:
            reasons.append("Form has errors.")
        if self.failed_send:
            reasons.append("Failed to send.")
        if self.invalid_form_id:
            reasons.append("Invalid form ID.")
        if self.missing_form_id:
            reasons.append("Missing form ID.")
        return reasons


def get_cors_headers(settings: Settings, request_headers: httpx.Headers) -> Dict[str, str]:
    """Echo the request origin back when it's on the allow-list"""
    origin = request_headers.get("origin")
    if origin and origin in settings.allowed_origin_list:
        return {"Access-Control-Allow-Origin": origin}
    return {}


def wants_html(request_headers: httpx.Headers) -> bool:
    """Form posts get an HTML page, everything else gets JSON"""
    return request_headers.get("content-type") == FORM_CONTENT_TYPE


def render_json(state: SubmissionState, success: bool) -> str:
    body = SubmissionResponse(
        success=success,
        reason=state.get_reasons() or None,
        errors=state.errors or None
    )
    return body.model_dump_json(exclude_none=True)


def render_html(state: SubmissionState, success: bool) -> str:
    if success:
        return render_minified("response.html", heading=SUCCESS_HEADING, messages=[], show_back=False)

    messages = [message for field_errors in state.errors.values() for message in field_errors]
    if not messages:
        messages = state.get_reasons()

    heading = PROBLEM_HEADING if len(messages) == 1 else PROBLEMS_HEADING
    return render_minified("response.html", heading=heading, messages=messages, show_back=True)


def build_response(
    state: SubmissionState,
    settings: Settings,
    request_headers: httpx.Headers
) -> ResponseOutcome:
    """Derive status code, headers and body for a finished submission"""
    status_code = state.get_status_code()
    html = wants_html(request_headers)

    headers = {"Content-Type": HTML_MEDIA_TYPE if html else JSON_MEDIA_TYPE}
    headers.update(get_cors_headers(settings, request_headers))

    if status_code == 302:
        location = settings.root_redirect if state.empty_post else state.redirect
        if location:
            headers["Location"] = location

    success = status_code in (200, 302)
    body = render_html(state, success) if html else render_json(state, success)

    return ResponseOutcome(status_code=status_code, headers=headers, body=body)


def fallback_response() -> ResponseOutcome:
    """Well-formed failure response for requests that couldn't be processed"""
    return ResponseOutcome(
        status_code=400,
        headers={"Content-Type": JSON_MEDIA_TYPE},
        body=SubmissionResponse(success=False).model_dump_json(exclude_none=True)
    )
